"""Tests for roving focus navigation."""

from __future__ import annotations

import pytest

from pyaccordion.models.item import AccordionItem
from pyaccordion.state.actions import FocusIntent
from pyaccordion.state.focus import focus_at, index_of, navigate


def _items(*focused: bool) -> tuple[AccordionItem, ...]:
    uuids = ("foo", "bar", "baz", "qux")
    return tuple(AccordionItem(uuid=uuids[i], focus=flag) for i, flag in enumerate(focused))


def _focus(items: tuple[AccordionItem, ...]) -> list[bool]:
    return [item.focus for item in items]


class TestIndexOf:
    def test_found(self) -> None:
        assert index_of(_items(False, False, False), "baz") == 2

    def test_missing(self) -> None:
        assert index_of(_items(False), "nope") is None

    def test_int_and_str_uuids_are_distinct(self) -> None:
        items = (AccordionItem(uuid="1"), AccordionItem(uuid=1))
        assert index_of(items, 1) == 1


class TestNavigate:
    def test_head(self) -> None:
        assert _focus(navigate(_items(False, True, False), FocusIntent.HEAD)) == [True, False, False]

    def test_tail(self) -> None:
        assert _focus(navigate(_items(True, False, False), FocusIntent.TAIL)) == [False, False, True]

    def test_previous(self) -> None:
        result = navigate(_items(False, True, False), FocusIntent.PREVIOUS, "bar")
        assert _focus(result) == [True, False, False]

    def test_next(self) -> None:
        result = navigate(_items(False, True, False), FocusIntent.NEXT, "bar")
        assert _focus(result) == [False, False, True]

    @pytest.mark.parametrize(
        ("intent", "reference"),
        [
            (FocusIntent.PREVIOUS, "foo"),
            (FocusIntent.NEXT, "baz"),
            (FocusIntent.PREVIOUS, "missing"),
            (FocusIntent.NEXT, "missing"),
            (FocusIntent.NEXT, None),
        ],
    )
    def test_no_movement_returns_input(self, intent: FocusIntent, reference: str | None) -> None:
        items = _items(False, True, False)
        assert navigate(items, intent, reference) is items

    @pytest.mark.parametrize("intent", list(FocusIntent))
    def test_empty_sequence(self, intent: FocusIntent) -> None:
        assert navigate((), intent, "foo") == ()

    def test_reference_need_not_hold_focus(self) -> None:
        result = navigate(_items(True, False, False), FocusIntent.NEXT, "bar")
        assert _focus(result) == [False, False, True]

    def test_clears_every_other_focus(self) -> None:
        result = navigate(_items(True, True, True, True), FocusIntent.HEAD)
        assert _focus(result) == [True, False, False, False]

    def test_head_twice_is_stable(self) -> None:
        once = navigate(_items(False, True), FocusIntent.HEAD)
        twice = navigate(once, FocusIntent.HEAD)
        assert twice == once

    def test_does_not_touch_other_fields(self) -> None:
        items = (AccordionItem(uuid="a", expanded=True, disabled=True), AccordionItem(uuid="b"))
        result = navigate(items, FocusIntent.TAIL)
        assert result[0] == AccordionItem(uuid="a", expanded=True, disabled=True)
        assert result[1] == AccordionItem(uuid="b", focus=True)


def test_focus_at_reuses_unchanged_items() -> None:
    items = _items(False, True)
    result = focus_at(items, 1)
    assert result[0] is items[0]
    assert result[1] is items[1]
