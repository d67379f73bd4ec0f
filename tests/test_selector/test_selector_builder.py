"""Tests for the fluent CSS selector builder."""

import pytest

from objtasks.selector import (
    Combinator,
    DuplicateSingletonError,
    FragmentKind,
    OutOfOrderError,
    Selector,
    SelectorError,
    css_selector_builder as builder,
)
from objtasks.selector.builder import is_duplicate_singleton, is_out_of_order


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


class TestSingleFragments:
    def test_element(self) -> None:
        assert builder.element("div").stringify() == "div"

    def test_id(self) -> None:
        assert builder.id("main").stringify() == "#main"

    def test_class(self) -> None:
        assert builder.class_("container").stringify() == ".container"

    def test_attr(self) -> None:
        assert builder.attr("target").stringify() == "[target]"

    def test_pseudo_class(self) -> None:
        assert builder.pseudo_class("focus").stringify() == ":focus"

    def test_pseudo_element(self) -> None:
        assert builder.pseudo_element("before").stringify() == "::before"

    def test_values_are_not_validated(self) -> None:
        assert builder.element("not a tag!").stringify() == "not a tag!"


class TestChains:
    def test_id_and_classes(self) -> None:
        selector = builder.id("main").class_("container").class_("editable")
        assert selector.stringify() == "#main.container.editable"

    def test_element_attr_pseudo_class(self) -> None:
        selector = builder.element("a").attr('href$=".png"').pseudo_class("focus")
        assert selector.stringify() == 'a[href$=".png"]:focus'

    def test_every_kind_in_order(self) -> None:
        selector = (
            builder.element("input")
            .id("email")
            .class_("field")
            .attr("required")
            .pseudo_class("invalid")
            .pseudo_element("placeholder")
        )
        assert selector.stringify() == "input#email.field[required]:invalid::placeholder"

    def test_repeatable_kinds_in_non_decreasing_order(self) -> None:
        selector = builder.class_("a").class_("b").attr("x").pseudo_class("hover")
        assert selector.stringify() == ".a.b[x]:hover"

    def test_repeated_attrs_and_pseudo_classes(self) -> None:
        selector = builder.attr("a").attr("b").pseudo_class("first-child").pseudo_class("hover")
        assert selector.stringify() == "[a][b]:first-child:hover"

    def test_chain_returns_same_instance(self) -> None:
        selector = Selector()
        assert selector.element("div") is selector
        assert selector.class_("x") is selector

    def test_stringify_is_idempotent(self) -> None:
        selector = builder.element("p").class_("lead")
        assert selector.stringify() == selector.stringify() == "p.lead"

    def test_str(self) -> None:
        assert str(builder.element("p").class_("lead")) == "p.lead"

    def test_empty_selector(self) -> None:
        selector = Selector()
        assert selector.stringify() == ""
        assert selector.last_kind is None

    def test_last_kind_tracks_appends(self) -> None:
        selector = builder.element("a").attr("href")
        assert selector.last_kind is FragmentKind.ATTRIBUTE


class TestFacadeIndependence:
    def test_each_call_starts_fresh(self) -> None:
        first = builder.element("div")
        second = builder.element("span")
        assert first is not second
        first.class_("a")
        assert second.stringify() == "span"

    def test_same_kind_on_separate_chains(self) -> None:
        builder.id("one")
        assert builder.id("two").stringify() == "#two"


# ---------------------------------------------------------------------------
# Rule violations
# ---------------------------------------------------------------------------


class TestDuplicateSingletons:
    def test_element_twice(self) -> None:
        with pytest.raises(DuplicateSingletonError):
            builder.element("div").element("span")

    def test_id_twice(self) -> None:
        with pytest.raises(DuplicateSingletonError):
            builder.id("a").id("b")

    def test_pseudo_element_twice(self) -> None:
        with pytest.raises(DuplicateSingletonError):
            builder.pseudo_element("before").pseudo_element("after")

    def test_message(self) -> None:
        with pytest.raises(DuplicateSingletonError, match="should not occur more than one time"):
            builder.element("div").element("span")

    def test_error_carries_kinds(self) -> None:
        with pytest.raises(DuplicateSingletonError) as exc_info:
            builder.element("a").id("x").id("y")
        assert exc_info.value.kind is FragmentKind.ID
        assert exc_info.value.last_kind is FragmentKind.ID


class TestOutOfOrder:
    def test_id_then_element(self) -> None:
        with pytest.raises(OutOfOrderError):
            builder.id("main").element("div")

    def test_class_then_id(self) -> None:
        with pytest.raises(OutOfOrderError):
            builder.class_("a").id("b")

    def test_pseudo_element_then_pseudo_class(self) -> None:
        with pytest.raises(OutOfOrderError):
            builder.pseudo_element("after").pseudo_class("hover")

    def test_attr_then_class(self) -> None:
        with pytest.raises(OutOfOrderError):
            builder.attr("href").class_("link")

    def test_message(self) -> None:
        with pytest.raises(OutOfOrderError, match="should be arranged in the following order"):
            builder.id("main").element("div")

    def test_error_carries_kinds(self) -> None:
        with pytest.raises(OutOfOrderError) as exc_info:
            builder.pseudo_class("hover").attr("x")
        assert exc_info.value.kind is FragmentKind.ATTRIBUTE
        assert exc_info.value.last_kind is FragmentKind.PSEUDO_CLASS

    def test_element_after_id_after_element(self) -> None:
        with pytest.raises(OutOfOrderError):
            builder.element("div").id("a").element("span")


class TestErrorHierarchy:
    def test_both_are_selector_errors(self) -> None:
        assert issubclass(OutOfOrderError, SelectorError)
        assert issubclass(DuplicateSingletonError, SelectorError)

    def test_rejected_append_writes_nothing(self) -> None:
        selector = builder.id("main")
        with pytest.raises(OutOfOrderError):
            selector.element("div")
        assert selector.stringify() == "#main"
        assert selector.last_kind is FragmentKind.ID


# ---------------------------------------------------------------------------
# Combine
# ---------------------------------------------------------------------------


class TestCombine:
    def test_adjacent_sibling(self) -> None:
        combined = builder.combine(builder.element("h1"), "+", builder.element("p"))
        assert combined.stringify() == "h1 + p"

    def test_descendant_has_three_spaces(self) -> None:
        combined = builder.combine(builder.element("ul"), " ", builder.element("li"))
        assert combined.stringify() == "ul   li"

    def test_combinator_enum(self) -> None:
        combined = Selector.combine(builder.element("ul"), Combinator.CHILD, builder.element("li"))
        assert combined.stringify() == "ul > li"

    def test_nested_combine(self) -> None:
        a, b, c = builder.element("a"), builder.element("b"), builder.element("c")
        combined = builder.combine(builder.combine(a, "+", b), "~", c)
        assert combined.stringify() == "a + b ~ c"

    def test_deeply_nested_example(self) -> None:
        combined = builder.combine(
            builder.element("div").id("main").class_("container").class_("draggable"),
            "+",
            builder.combine(
                builder.element("table").id("data"),
                "~",
                builder.combine(
                    builder.element("tr").pseudo_class("nth-of-type(even)"),
                    " ",
                    builder.element("td").pseudo_class("nth-of-type(even)"),
                ),
            ),
        )
        assert combined.stringify() == (
            "div#main.container.draggable + table#data ~ "
            "tr:nth-of-type(even)   td:nth-of-type(even)"
        )

    def test_returns_new_selector(self) -> None:
        left, right = builder.element("a"), builder.element("b")
        combined = builder.combine(left, ">", right)
        assert combined is not left and combined is not right
        assert left.stringify() == "a"
        assert right.stringify() == "b"

    def test_token_is_not_validated(self) -> None:
        combined = builder.combine(builder.element("a"), "||", builder.element("b"))
        assert combined.stringify() == "a || b"

    def test_combined_has_no_last_kind(self) -> None:
        combined = builder.combine(builder.id("a"), "+", builder.id("b"))
        assert combined.last_kind is None


class TestAppendAfterCombine:
    def test_starts_fresh_run(self) -> None:
        combined = builder.combine(builder.id("a"), ">", builder.pseudo_element("before"))
        combined.element("span").class_("x")
        assert combined.stringify() == "#a > ::beforespan.x"

    def test_run_is_still_validated(self) -> None:
        combined = builder.combine(builder.element("a"), "+", builder.element("b"))
        combined.id("x")
        with pytest.raises(OutOfOrderError):
            combined.element("div")


# ---------------------------------------------------------------------------
# Rule predicates
# ---------------------------------------------------------------------------


class TestRulePredicates:
    def test_nothing_rejected_on_empty_selector(self) -> None:
        for kind in FragmentKind:
            assert not is_duplicate_singleton(kind, None)
            assert not is_out_of_order(kind, None)

    def test_duplicate_only_for_singletons(self) -> None:
        assert is_duplicate_singleton(FragmentKind.ELEMENT, FragmentKind.ELEMENT)
        assert is_duplicate_singleton(FragmentKind.PSEUDO_ELEMENT, FragmentKind.PSEUDO_ELEMENT)
        assert not is_duplicate_singleton(FragmentKind.CLASS, FragmentKind.CLASS)

    def test_duplicate_ignores_rank_order(self) -> None:
        assert not is_duplicate_singleton(FragmentKind.ID, FragmentKind.ELEMENT)

    def test_out_of_order_is_strictly_lower_rank(self) -> None:
        assert is_out_of_order(FragmentKind.ELEMENT, FragmentKind.ID)
        assert not is_out_of_order(FragmentKind.ID, FragmentKind.ID)
        assert not is_out_of_order(FragmentKind.PSEUDO_ELEMENT, FragmentKind.CLASS)
