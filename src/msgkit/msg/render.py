# msgkit:header:start
#
#   project      : MsgKit
#   file         : render.py
#   file_relpath : src/msgkit/msg/render.py
#   license      : MIT
#   copyright    : (c) 2025 MsgKit contributors
#
# msgkit:header:end

"""Text rendering for messages.

Two renderings are provided:

* `yaml_string`: block-style YAML used by ``str()`` on messages, collections and
  grouped views. It never raises: a marshalling failure becomes a one-line
  fallback string naming the failed context.
* `render_msg_line`: a compact ``[kind] description`` line for terminals,
  optionally colored with the kind's `yachalk` color.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import yaml

from msgkit.config.logging import get_logger

if TYPE_CHECKING:
    from msgkit.config.logging import MsgkitLogger
    from msgkit.msg.model import Msg


logger: MsgkitLogger = get_logger(__name__)


def yaml_string(ctx: str, obj: object) -> str:
    """Return ``obj`` as a YAML formatted string prefixed with a newline.

    Args:
        ctx (str): Context label used in the fallback text (e.g. ``"msg"``, ``"msgs"``).
        obj (object): Plain data (mappings, lists, scalars) to marshal.

    Returns:
        str: ``""`` when ``obj`` is None, the YAML text prefixed with ``"\\n"`` on
            success, or ``"<error>: failed to format '<ctx>' as yaml string"`` when
            marshalling fails.
    """
    if obj is None:
        return ""
    try:
        text: str = yaml.safe_dump(
            obj,
            default_flow_style=False,
            sort_keys=True,
            allow_unicode=True,
        )
    except (yaml.YAMLError, TypeError, ValueError) as exc:
        logger.debug("Could not marshal %r as yaml: %s", ctx, exc)
        return f"{exc}: failed to format '{ctx}' as yaml string"
    return f"\n{text}"


def safe_text(value: object, *, as_repr: bool = False) -> str:
    """Return ``str(value)`` (or ``repr(value)``) without letting the conversion raise.

    Causes are caller-supplied objects whose ``__str__`` or ``__repr__`` may fail;
    in that case the type name in angle brackets is returned instead.

    Args:
        value (object): The object to convert.
        as_repr (bool): Use ``repr()`` instead of ``str()``.

    Returns:
        str: The converted text, or ``"<TypeName>"`` when conversion fails.
    """
    try:
        return repr(value) if as_repr else str(value)
    except Exception as exc:  # noqa: BLE001
        logger.debug("Could not convert %s to text: %r", type(value).__name__, type(exc))
        return f"<{type(value).__name__}>"


def render_msg_line(msg: Msg, *, color: bool = False) -> str:
    """Render a message as a single ``[kind] description`` line.

    Args:
        msg (Msg): The message to render.
        color (bool): If True, apply the kind's terminal color.

    Returns:
        str: The rendered line (without trailing newline).
    """
    line: str = f"[{msg.kind.value}] {msg.desc}"
    return msg.kind.color(line) if color else line
