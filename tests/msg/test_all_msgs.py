# msgkit:header:start
#
#   project      : MsgKit
#   file         : test_all_msgs.py
#   file_relpath : tests/msg/test_all_msgs.py
#   license      : MIT
#   copyright    : (c) 2025 MsgKit contributors
#
# msgkit:header:end

"""Tests for the per-kind grouped view (`AllMsgs`)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from msgkit.msg import AllMsgs, Msgs, MsgType
from tests.conftest import Boom, parametrize

if TYPE_CHECKING:
    from collections.abc import Callable


def test_group_by_kind_always_has_four_buckets() -> None:
    """Kinds without messages map to empty collections, never to a missing bucket."""
    grouped: AllMsgs = Msgs().add_warn("only").group_by_kind()

    for kind in MsgType:
        assert isinstance(grouped[kind], Msgs)
    assert len(grouped[MsgType.WARN]) == 1
    assert len(grouped.infos) == len(grouped.skips) == len(grouped.errors) == 0


def test_group_by_kind_is_a_snapshot() -> None:
    """Later additions to the source are not reflected in an earlier view."""
    msgs: Msgs = Msgs().add_info("a")
    grouped: AllMsgs = msgs.group_by_kind()

    msgs.add_error(Boom("late"))

    assert not grouped.has_error()
    assert len(grouped.infos) == 1


def test_grouped_view_cannot_be_mutated_through_indexing() -> None:
    """Changing a collection returned by indexing leaves the view unchanged."""
    grouped: AllMsgs = Msgs().add_error(Boom("E1")).group_by_kind()

    grouped[MsgType.ERROR].reset()
    grouped[MsgType.INFO].add_info("sneaky")

    assert isinstance(grouped.errors, tuple)
    assert grouped.has_error()
    assert not grouped.has_info()
    assert grouped.to_msgs().items[0].desc == "E1"


def test_to_msgs_orders_errors_warns_infos_skips() -> None:
    """Flattening emits error, warn, info, skip blocks with insertion order inside each."""
    e1, e2 = Boom("E1"), Boom("E2")
    msgs: Msgs = Msgs().add_info("a").add_error(e1).add_warn("b").add_error(e2)

    flat: Msgs = msgs.group_by_kind().to_msgs()

    assert [(m.kind, m.desc) for m in flat] == [
        (MsgType.ERROR, "E1"),
        (MsgType.ERROR, "E2"),
        (MsgType.WARN, "b"),
        (MsgType.INFO, "a"),
    ]
    assert flat.items[0].err is e1
    assert flat.items[1].err is e2


def test_to_msgs_places_skips_last(mixed_msgs: Msgs) -> None:
    """Skips come after infos in the flattened view."""
    flat: Msgs = mixed_msgs.group_by_kind().to_msgs()

    assert [m.desc for m in flat] == ["E1", "E2", "b", "a", "d", "c"]


def test_to_msgs_of_empty_view_is_empty() -> None:
    """An empty view flattens to an empty collection."""
    assert len(AllMsgs().to_msgs()) == 0
    assert len(Msgs().group_by_kind().to_msgs()) == 0


def test_error_returns_first_cause_in_insertion_order() -> None:
    """`error()` returns the cause of the earliest error message."""
    e1, e2 = Boom("E1"), Boom("E2")
    msgs: Msgs = Msgs().add_warn("x").add_error(e1).add_error(e2)

    assert msgs.group_by_kind().error() is e1


def test_error_is_none_without_errors() -> None:
    """`error()` returns None when no error was recorded."""
    msgs: Msgs = Msgs().add_warn("x").add_skip("y")

    assert msgs.group_by_kind().error() is None


@parametrize(
    "build, expected",
    [
        (lambda m: m.add_info("i"), (False, False, False, True)),
        (lambda m: m.add_warn("w"), (False, True, False, False)),
        (lambda m: m.add_skip("s"), (False, False, True, False)),
        (lambda m: m.add_error(Boom("e")), (True, False, False, False)),
    ],
)
def test_has_kind_flags(
    build: Callable[[Msgs], Msgs], expected: tuple[bool, bool, bool, bool]
) -> None:
    """Each ``has_*`` flag reflects exactly its own bucket."""
    grouped: AllMsgs = build(Msgs()).group_by_kind()

    assert (
        grouped.has_error(),
        grouped.has_warn(),
        grouped.has_skip(),
        grouped.has_info(),
    ) == expected
    assert not grouped.is_empty()


def test_is_empty_only_without_messages(mixed_msgs: Msgs) -> None:
    """`is_empty` is True exactly for a collection with no messages."""
    assert Msgs().group_by_kind().is_empty()
    assert not mixed_msgs.group_by_kind().is_empty()
    assert mixed_msgs.reset().group_by_kind().is_empty()


def test_str_renders_every_bucket() -> None:
    """The YAML form lists every kind, with empty buckets rendered as ``{}``."""
    text: str = str(Msgs().add_warn("careful").group_by_kind())

    assert text.startswith("\n")
    assert "error: {}" in text
    assert "info: {}" in text
    assert "skip: {}" in text
    assert "desc: careful" in text
    assert "allmsgs" not in text
