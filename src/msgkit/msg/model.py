# msgkit:header:start
#
#   project      : MsgKit
#   file         : model.py
#   file_relpath : src/msgkit/msg/model.py
#   license      : MIT
#   copyright    : (c) 2025 MsgKit contributors
#
# msgkit:header:end

"""Core message types and helpers for MsgKit.

Sections:
    * MsgType: closed set of message kinds with associated terminal colors.
    * Msg: immutable message payload (kind + description + optional cause).
    * Predicates: ``is_info``, ``is_warn``, ``is_skip``, ``is_err`` and negations.
    * MsgStats: aggregated per-kind counts.
    * Msgs: mutable, ordered collection with typed add/filter/log helpers.
    * AllMsgs: per-kind grouped snapshot of a collection.

A collection is not safe for concurrent mutation. Use one collection per worker and
`Msgs.merge` the results afterward.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, cast

from yachalk import chalk

from msgkit.config.logging import get_logger
from msgkit.msg.render import safe_text, yaml_string

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator

    from msgkit.config.logging import MsgkitLogger
    from msgkit.msg.types import MsgPredicate, MsgSink


logger: MsgkitLogger = get_logger(__name__)


class MsgType(Enum):
    """Kind of a message.

    The value is the serialized form used in the ``type`` field of a message.
    """

    INFO = "info"
    WARN = "warn"
    SKIP = "skip"
    ERROR = "error"

    @property
    def color(self) -> Callable[[str], str]:
        """Return the `yachalk` color function associated with this kind.

        Intended for human-readable output only.

        Returns:
            Callable[[str], str]: The `yachalk` color function for this kind.
        """
        return cast(
            "Callable[[str], str]",
            {
                MsgType.INFO: chalk.blue,
                MsgType.WARN: chalk.yellow,
                MsgType.SKIP: chalk.gray,
                MsgType.ERROR: chalk.red_bright,
            }[self],
        )


@dataclass(frozen=True)
class Msg:
    """A single diagnostic message.

    Only ``ERROR`` messages carry a cause in ``err``.

    Raises:
        ValueError: If ``err`` is set on a message whose kind is not ``ERROR``.
    """

    kind: MsgType
    desc: str
    err: BaseException | None = None

    def __post_init__(self) -> None:
        if self.err is not None and self.kind is not MsgType.ERROR:
            raise ValueError(f"A {self.kind.value!r} message cannot carry a cause")

    def to_dict(self) -> dict[str, str]:
        """Return the plain mapping used for YAML output.

        Returns:
            dict[str, str]: ``type`` and ``desc`` keys, plus ``err`` (the cause's
                ``repr``, or ``"<TypeName>"`` if that fails) when a cause is present.
        """
        data: dict[str, str] = {"type": self.kind.value, "desc": self.desc}
        if self.err is not None:
            data["err"] = safe_text(self.err, as_repr=True)
        return data

    def __str__(self) -> str:
        return yaml_string("msg", self.to_dict())


def is_info(given: Msg | None) -> bool:
    """Return True if the given message is an ``INFO`` message."""
    return given is not None and given.kind is MsgType.INFO


def is_warn(given: Msg | None) -> bool:
    """Return True if the given message is a ``WARN`` message."""
    return given is not None and given.kind is MsgType.WARN


def is_skip(given: Msg | None) -> bool:
    """Return True if the given message is a ``SKIP`` message."""
    return given is not None and given.kind is MsgType.SKIP


def is_err(given: Msg | None) -> bool:
    """Return True if the given message is an ``ERROR`` message."""
    return given is not None and given.kind is MsgType.ERROR


def is_not_info(given: Msg | None) -> bool:
    """Return True unless the given message is an ``INFO`` message."""
    return not is_info(given)


def is_not_err(given: Msg | None) -> bool:
    """Return True unless the given message is an ``ERROR`` message."""
    return not is_err(given)


@dataclass(frozen=True)
class MsgStats:
    """Aggregated counts for messages by kind."""

    n_info: int
    n_warn: int
    n_skip: int
    n_error: int

    @property
    def total(self) -> int:
        """Return the total count of messages."""
        return self.n_info + self.n_warn + self.n_skip + self.n_error

    def to_dict(self) -> dict[str, int]:
        """Return a JSON-friendly mapping of counts keyed by kind value."""
        return {
            MsgType.INFO.value: self.n_info,
            MsgType.WARN.value: self.n_warn,
            MsgType.SKIP.value: self.n_skip,
            MsgType.ERROR.value: self.n_error,
        }


def compute_msg_stats(msgs: Iterable[Msg]) -> MsgStats:
    """Return per-kind counts for a sequence of messages.

    Args:
        msgs (Iterable[Msg]): The messages to count.

    Returns:
        MsgStats: Per-kind counts.
    """
    items: list[Msg] = list(msgs)
    return MsgStats(
        n_info=sum(1 for m in items if is_info(m)),
        n_warn=sum(1 for m in items if is_warn(m)),
        n_skip=sum(1 for m in items if is_skip(m)),
        n_error=sum(1 for m in items if is_err(m)),
    )


@dataclass
class Msgs:
    """Mutable, ordered collection of messages.

    Messages keep their insertion order, which defines the "first error" of a run.
    Duplicates are allowed. The ``add_*``, `merge` and `reset` methods mutate the
    collection in place and return it to allow chained calls::

        msgs = Msgs().add_info("volume created").add_warn("quota not set")
    """

    items: list[Msg] = field(default_factory=lambda: [])

    @classmethod
    def from_iterable(cls, msgs: Iterable[Msg]) -> Msgs:
        """Create a collection from an iterable of messages.

        Args:
            msgs (Iterable[Msg]): Existing messages, in order.

        Returns:
            Msgs: A new collection holding the provided messages.
        """
        return cls(items=list(msgs))

    def _add(self, msg: Msg) -> Msgs:
        self.items.append(msg)
        logger.trace("Adding [%s]: %r", msg.kind.value, msg.desc)
        return self

    def add_info(self, text: str) -> Msgs:
        """Append an ``INFO`` message. Empty text is ignored.

        Args:
            text (str): The message description.

        Returns:
            Msgs: This collection.
        """
        if not text:
            return self
        return self._add(Msg(MsgType.INFO, text))

    def add_warn(self, text: str) -> Msgs:
        """Append a ``WARN`` message. Empty text is ignored.

        Args:
            text (str): The message description.

        Returns:
            Msgs: This collection.
        """
        if not text:
            return self
        return self._add(Msg(MsgType.WARN, text))

    def add_skip(self, text: str) -> Msgs:
        """Append a ``SKIP`` message about a skipped operation. Empty text is ignored.

        Args:
            text (str): The message description.

        Returns:
            Msgs: This collection.
        """
        if not text:
            return self
        return self._add(Msg(MsgType.SKIP, text))

    def add_error(self, err: BaseException | None) -> Msgs:
        """Append an ``ERROR`` message for ``err``. None is ignored.

        The description is ``str(err)`` and the cause is ``err`` itself. A cause whose
        ``__str__`` fails is described by its type name.

        Args:
            err (BaseException | None): The failure to record.

        Returns:
            Msgs: This collection.
        """
        if err is None:
            return self
        return self._add(Msg(MsgType.ERROR, safe_text(err), err))

    def merge(self, other: Msgs | None) -> Msgs:
        """Append all messages of ``other``, in order, without deduplication.

        Args:
            other (Msgs | None): The collection to append. None is ignored.

        Returns:
            Msgs: This collection.
        """
        if other is None:
            return self
        self.items.extend(other.items)
        return self

    def reset(self) -> Msgs:
        """Remove all messages.

        Returns:
            Msgs: This (now empty) collection.
        """
        self.items = []
        return self

    def filter(self, predicate: MsgPredicate) -> Msgs:
        """Return a new collection with the messages matching ``predicate``.

        Args:
            predicate (MsgPredicate): Function evaluated against each message.

        Returns:
            Msgs: Matching messages in their original order.
        """
        return Msgs(items=[m for m in self.items if m is not None and predicate(m)])

    def infos(self) -> Msgs:
        """Return the ``INFO`` messages."""
        return self.filter(is_info)

    def non_infos(self) -> Msgs:
        """Return all messages except ``INFO`` ones."""
        return self.filter(is_not_info)

    def warns(self) -> Msgs:
        """Return the ``WARN`` messages."""
        return self.filter(is_warn)

    def skips(self) -> Msgs:
        """Return the ``SKIP`` messages."""
        return self.filter(is_skip)

    def errors(self) -> Msgs:
        """Return the ``ERROR`` messages."""
        return self.filter(is_err)

    def non_errors(self) -> Msgs:
        """Return all messages except ``ERROR`` ones."""
        return self.filter(is_not_err)

    def has_warn(self) -> bool:
        """Return True if at least one ``WARN`` message is present."""
        return len(self.warns()) != 0

    def log(self, sink: MsgSink) -> None:
        """Emit every message, in order, as its YAML text.

        Args:
            sink (MsgSink): Text consumer, e.g. ``logger.info`` or ``print``.
        """
        for msg in self.items:
            if msg is None:
                continue
            sink(str(msg))

    def log_non_infos(self, sink: MsgSink) -> None:
        """Emit all messages except ``INFO`` ones."""
        self.non_infos().log(sink)

    def log_non_errors(self, sink: MsgSink) -> None:
        """Emit all messages except ``ERROR`` ones."""
        self.non_errors().log(sink)

    def log_errors(self, sink: MsgSink) -> None:
        """Emit the ``ERROR`` messages."""
        self.errors().log(sink)

    def group_by_kind(self) -> AllMsgs:
        """Return a per-kind snapshot of this collection.

        All four kinds are present in the result, empty ones as empty collections.
        """
        return AllMsgs(
            infos=tuple(self.infos()),
            warns=tuple(self.warns()),
            skips=tuple(self.skips()),
            errors=tuple(self.errors()),
        )

    def stats(self) -> MsgStats:
        """Return per-kind counts for this collection."""
        return compute_msg_stats(self.items)

    def to_dict(self) -> dict[str, list[dict[str, str]]]:
        """Return the plain mapping used for YAML output.

        Returns:
            dict[str, list[dict[str, str]]]: ``{"items": [...]}``, or ``{}`` when empty.
                None entries are skipped.
        """
        entries: list[dict[str, str]] = [m.to_dict() for m in self.items if m is not None]
        if not entries:
            return {}
        return {"items": entries}

    def __str__(self) -> str:
        return yaml_string("msgs", self.to_dict())

    def __iter__(self) -> Iterator[Msg]:
        """Iterate over the messages in insertion order."""
        return iter(self.items)

    def __len__(self) -> int:
        """Return the number of messages."""
        return len(self.items)


@dataclass(frozen=True)
class AllMsgs:
    """Messages of a collection grouped per kind.

    Each bucket is a tuple keeping the insertion order of its source collection, so
    the view cannot be changed after it is built. It is a snapshot: later changes to
    the source are not reflected. Indexing by `MsgType` returns a fresh `Msgs` copy of
    the bucket.
    """

    infos: tuple[Msg, ...] = ()
    warns: tuple[Msg, ...] = ()
    skips: tuple[Msg, ...] = ()
    errors: tuple[Msg, ...] = ()

    def _bucket(self, kind: MsgType) -> tuple[Msg, ...]:
        return {
            MsgType.INFO: self.infos,
            MsgType.WARN: self.warns,
            MsgType.SKIP: self.skips,
            MsgType.ERROR: self.errors,
        }[kind]

    def __getitem__(self, kind: MsgType) -> Msgs:
        return Msgs.from_iterable(self._bucket(kind))

    def error(self) -> BaseException | None:
        """Return the cause of the first recorded error, or None."""
        if not self.has_error():
            return None
        return self.errors[0].err

    def has_error(self) -> bool:
        """Return True if at least one ``ERROR`` message is present."""
        return len(self.errors) != 0

    def has_warn(self) -> bool:
        """Return True if at least one ``WARN`` message is present."""
        return len(self.warns) != 0

    def has_skip(self) -> bool:
        """Return True if at least one ``SKIP`` message is present."""
        return len(self.skips) != 0

    def has_info(self) -> bool:
        """Return True if at least one ``INFO`` message is present."""
        return len(self.infos) != 0

    def is_empty(self) -> bool:
        """Return True if no bucket holds a message."""
        return not (self.has_error() or self.has_warn() or self.has_info() or self.has_skip())

    def to_msgs(self) -> Msgs:
        """Flatten the view into one collection.

        Errors come first, then warnings, infos and skips. Within a kind the source
        insertion order is kept; across kinds it is not.

        Returns:
            Msgs: A new collection.
        """
        return Msgs(items=[*self.errors, *self.warns, *self.infos, *self.skips])

    def to_dict(self) -> dict[str, dict[str, list[dict[str, str]]]]:
        """Return the plain mapping used for YAML output, keyed by kind value."""
        return {kind.value: self[kind].to_dict() for kind in MsgType}

    def __str__(self) -> str:
        return yaml_string("allmsgs", self.to_dict())
