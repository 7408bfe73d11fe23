"""Tests for the bounded context window extractor."""

import pytest

from app.services.context import (
    CONTEXT_SAFETY_LIMIT,
    ContextBlock,
    Cursor,
    ElementType,
    Position,
    RangeElement,
    Selection,
    extract_context,
)


def paragraphs(*texts: str) -> list[ContextBlock]:
    return [ContextBlock(text=t) for t in texts]


def at(index: int | None) -> Position:
    return Position(cursor=Cursor(index))


class TestCursorContext:
    """Tests for a bare cursor."""

    def test_limit_zero_returns_only_current_block(self):
        blocks = paragraphs("before", "Gandalf rode on", "after")

        assert extract_context(blocks, at(1)) == " Gandalf rode on "

    def test_includes_one_neighbour_each_side(self):
        blocks = paragraphs("a", "b", "c", "d", "e")

        assert extract_context(blocks, at(2), 1) == "b  c  d"

    def test_neighbours_are_in_document_order(self):
        blocks = paragraphs("a", "b", "c", "d", "e")

        assert extract_context(blocks, at(2), 2) == "a b  c  d e"

    def test_empty_neighbours_are_skipped_without_counting(self):
        blocks = paragraphs("hello", "", "   ", "core", "", "world")

        assert extract_context(blocks, at(3), 1) == "hello  core  world"

    def test_stops_at_document_edges(self):
        blocks = paragraphs("only")

        assert extract_context(blocks, at(0), 5) == " only "

    def test_limit_larger_than_available_neighbours(self):
        blocks = paragraphs("a", "b", "c")

        assert extract_context(blocks, at(0), 10) == " a  b c"

    def test_safety_bound_stops_walk_over_long_empty_runs(self):
        blocks = paragraphs("far", *[""] * CONTEXT_SAFETY_LIMIT, "core")

        assert extract_context(blocks, at(len(blocks) - 1), 1) == " core "

    def test_safety_bound_allows_neighbour_within_reach(self):
        blocks = paragraphs("near", *[""] * (CONTEXT_SAFETY_LIMIT - 1), "core")

        assert extract_context(blocks, at(len(blocks) - 1), 1) == "near  core "

    def test_non_text_neighbours_read_as_empty(self):
        blocks = [
            ContextBlock(text="a"),
            ContextBlock(text="cell text", element_type=ElementType.TABLE),
            ContextBlock(text="core"),
        ]

        assert extract_context(blocks, at(2), 1) == "a  core "

    def test_list_item_is_a_container(self):
        blocks = [
            ContextBlock(text="intro"),
            ContextBlock(text="first item", element_type=ElementType.LIST_ITEM),
        ]

        assert extract_context(blocks, at(1), 1) == "intro  first item "

    def test_cursor_outside_any_block_returns_empty(self):
        assert extract_context(paragraphs("a"), at(None), 3) == ""

    def test_cursor_in_table_returns_empty(self):
        blocks = [ContextBlock(text="", element_type=ElementType.TABLE)]

        assert extract_context(blocks, at(0), 1) == ""

    def test_cursor_index_out_of_range_returns_empty(self):
        assert extract_context(paragraphs("a"), at(4)) == ""

    def test_no_position_returns_empty(self):
        assert extract_context(paragraphs("a"), Position(), 1) == ""

    @pytest.mark.parametrize("limit", [0, -1])
    def test_non_positive_limit_has_no_neighbours(self, limit):
        blocks = paragraphs("a", "b", "c")

        assert extract_context(blocks, at(1), limit) == " b "


class TestSelectionContext:
    """Tests for selection ranges."""

    def test_selection_text_is_space_separated(self):
        blocks = paragraphs("before", "Hello there", "General Kenobi", "after")
        selection = Selection(
            elements=[
                RangeElement(1, ElementType.TEXT, "there"),
                RangeElement(2, ElementType.PARAGRAPH),
            ]
        )

        result = extract_context(blocks, Position(selection=selection))

        assert result == " there General Kenobi  "

    def test_neighbours_are_taken_outside_the_selection(self):
        blocks = paragraphs("a", "b", "c", "d", "e")
        selection = Selection(
            elements=[
                RangeElement(1, ElementType.PARAGRAPH),
                RangeElement(2, ElementType.PARAGRAPH),
                RangeElement(3, ElementType.PARAGRAPH),
            ]
        )

        result = extract_context(blocks, Position(selection=selection), 1)

        assert result == "a  b c d   e"

    def test_list_item_elements_contribute_full_text(self):
        blocks = [ContextBlock(text="- item", element_type=ElementType.LIST_ITEM)]
        selection = Selection(elements=[RangeElement(0, ElementType.LIST_ITEM)])

        assert extract_context(blocks, Position(selection=selection)) == " - item  "

    def test_other_element_kinds_contribute_nothing(self):
        blocks = paragraphs("a", "b")
        selection = Selection(
            elements=[
                RangeElement(0, ElementType.UNSUPPORTED, "ignored"),
                RangeElement(1, ElementType.TEXT, "b"),
            ]
        )

        assert extract_context(blocks, Position(selection=selection)) == " b  "

    def test_selection_outside_blocks_returns_empty(self):
        selection = Selection(elements=[RangeElement(None, ElementType.TEXT, "x")])

        assert extract_context(paragraphs("a"), Position(selection=selection), 2) == ""

    def test_empty_selection_returns_empty(self):
        position = Position(selection=Selection(elements=[]))

        assert extract_context(paragraphs("a"), position, 1) == ""

    def test_end_without_container_falls_back_to_start(self):
        blocks = paragraphs("a", "b", "c")
        selection = Selection(
            elements=[
                RangeElement(1, ElementType.TEXT, "b"),
                RangeElement(None, ElementType.TEXT, "x"),
            ]
        )

        assert extract_context(blocks, Position(selection=selection), 1) == "a  b x   c"

    def test_selection_wins_over_cursor(self):
        blocks = paragraphs("a", "b", "c")
        position = Position(
            cursor=Cursor(0),
            selection=Selection(elements=[RangeElement(2, ElementType.TEXT, "c")]),
        )

        assert extract_context(blocks, position) == " c  "
