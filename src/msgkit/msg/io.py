# msgkit:header:start
#
#   project      : MsgKit
#   file         : io.py
#   file_relpath : src/msgkit/msg/io.py
#   license      : MIT
#   copyright    : (c) 2025 MsgKit contributors
#
# msgkit:header:end

"""Load message collections back from their serialized form.

Accepted document shapes (after YAML parsing):

* ``{"items": [entry, ...]}``: the form produced by ``str(Msgs)``;
* ``{"error": {...}, "warn": {...}, ...}``: the form produced by ``str(AllMsgs)``,
  loaded in error, warn, info, skip order. Each bucket is itself a collection
  (``{}``, ``{"items": [...]}`` or a list) whose entries must match its kind;
* ``[entry, ...]``: a bare list of entries;
* an empty document or ``{}``: an empty collection.

Each entry is a mapping with a ``type`` (``info``, ``warn``, ``skip`` or ``error``)
and a non-empty ``desc``. The original exception behind an ``error`` entry is not
recoverable, so it is rebuilt as a `ReportedError` carrying the description.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, cast

import yaml

from msgkit.config.logging import get_logger
from msgkit.msg.model import Msgs, MsgType

if TYPE_CHECKING:
    from msgkit.config.logging import MsgkitLogger


logger: MsgkitLogger = get_logger(__name__)

_GROUPED_ORDER: tuple[MsgType, ...] = (
    MsgType.ERROR,
    MsgType.WARN,
    MsgType.INFO,
    MsgType.SKIP,
)


class MsgFormatError(ValueError):
    """Raised when a document cannot be interpreted as a message collection."""


class ReportedError(Exception):
    """Cause of an ``error`` message rebuilt from its serialized description."""


def _add_entry(msgs: Msgs, index: int, entry: object, bucket: MsgType | None = None) -> None:
    if not isinstance(entry, Mapping):
        raise MsgFormatError(f"entry #{index}: expected a mapping, got {type(entry).__name__}")
    data: Mapping[str, Any] = cast("Mapping[str, Any]", entry)

    raw_type: object = data.get("type")
    try:
        kind = MsgType(raw_type)
    except ValueError as exc:
        raise MsgFormatError(f"entry #{index}: unknown message type {raw_type!r}") from exc
    if bucket is not None and kind is not bucket:
        raise MsgFormatError(
            f"entry #{index}: {kind.value!r} message listed under {bucket.value!r}"
        )

    desc: object = data.get("desc")
    if not isinstance(desc, str) or not desc:
        raise MsgFormatError(f"entry #{index}: 'desc' must be a non-empty string")

    if kind is MsgType.INFO:
        msgs.add_info(desc)
    elif kind is MsgType.WARN:
        msgs.add_warn(desc)
    elif kind is MsgType.SKIP:
        msgs.add_skip(desc)
    else:
        msgs.add_error(ReportedError(desc))


def _items(data: object, where: str) -> list[object]:
    # A collection: None, a bare list, ``{}`` or ``{"items": [...]}``.
    if data is None:
        return []
    if isinstance(data, list):
        return cast("list[object]", data)
    if not isinstance(data, Mapping):
        raise MsgFormatError(f"{where}: expected a mapping or a list, got {type(data).__name__}")
    mapping: Mapping[str, Any] = cast("Mapping[str, Any]", data)
    if not mapping:
        return []
    if set(mapping) != {"items"}:
        unexpected: list[str] = sorted(str(k) for k in mapping if k != "items")
        raise MsgFormatError(f"{where}: unexpected keys: {', '.join(unexpected)}")
    items: object = mapping["items"]
    if not isinstance(items, list):
        raise MsgFormatError(f"{where}: 'items' must be a list")
    return cast("list[object]", items)


def _entries(data: object) -> list[tuple[MsgType | None, object]]:
    if not isinstance(data, Mapping) or "items" in data or not data:
        return [(None, entry) for entry in _items(data, "document")]

    mapping: Mapping[str, Any] = cast("Mapping[str, Any]", data)
    kinds: set[str] = {kind.value for kind in MsgType}
    unknown: list[str] = sorted(str(k) for k in mapping if k not in kinds)
    if unknown:
        raise MsgFormatError(f"unexpected keys: {', '.join(unknown)}")

    entries: list[tuple[MsgType | None, object]] = []
    for kind in _GROUPED_ORDER:
        bucket: list[object] = _items(mapping.get(kind.value), repr(kind.value))
        entries.extend((kind, entry) for entry in bucket)
    return entries


def msgs_from_dict(data: object) -> Msgs:
    """Rebuild a message collection from its plain (parsed) form.

    Args:
        data (object): Parsed document, see the module docstring for accepted shapes.

    Returns:
        Msgs: The rebuilt collection.

    Raises:
        MsgFormatError: If the document shape or an entry is invalid.
    """
    msgs = Msgs()
    for index, (bucket, entry) in enumerate(_entries(data)):
        _add_entry(msgs, index, entry, bucket)
    logger.debug("Loaded %d message(s)", len(msgs))
    return msgs


def load_msgs(text: str) -> Msgs:
    """Parse a YAML document into a message collection.

    Args:
        text (str): YAML text, typically the output of ``str(Msgs)``.

    Returns:
        Msgs: The rebuilt collection.

    Raises:
        MsgFormatError: If the text is not valid YAML or not a message document.
    """
    try:
        data: object = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise MsgFormatError(f"invalid YAML: {exc}") from exc
    return msgs_from_dict(data)
