from twsort.tailwind.string_literal import write_string_literal
from .conftest import emitted


def test_direct_attribute_value_is_registered_verbatim(registry, out):
    write_string_literal("  a b  ", is_direct_attribute_value=True, registry=registry, out=out)
    assert registry.entries() == ["  a b  "]
    assert emitted(out, registry) == [("class", "  a b  ")]


def test_nested_literal_keeps_outer_whitespace(registry, out):
    write_string_literal("  a b  ", is_direct_attribute_value=False, registry=registry, out=out)
    assert registry.entries() == ["a b"]
    assert emitted(out, registry) == [("text", "  "), ("class", "a b"), ("text", "  ")]


def test_nested_literal_without_outer_whitespace(registry, out):
    write_string_literal("p-4 flex", is_direct_attribute_value=False, registry=registry, out=out)
    assert emitted(out, registry) == [("class", "p-4 flex")]


def test_nested_whitespace_only_literal_registers_nothing(registry, out):
    write_string_literal(" \n ", is_direct_attribute_value=False, registry=registry, out=out)
    assert len(registry) == 0
    assert emitted(out, registry) == [("text", " \n ")]


def test_nested_empty_literal_emits_nothing(registry, out):
    write_string_literal("", is_direct_attribute_value=False, registry=registry, out=out)
    assert len(registry) == 0
    assert len(out) == 0


def test_direct_empty_literal_is_still_registered(registry, out):
    write_string_literal("", is_direct_attribute_value=True, registry=registry, out=out)
    assert registry.entries() == [""]


def test_nested_literal_renders_back_to_original(registry, out):
    content = "\t flex  p-4 \n"
    write_string_literal(content, is_direct_attribute_value=False, registry=registry, out=out)
    assert out.render(registry.entries()) == content


def test_collapse_leading_drops_leading_whitespace(registry, out):
    write_string_literal(" active ", is_direct_attribute_value=False, registry=registry, out=out,
                         collapse_leading=True)
    assert emitted(out, registry) == [("class", "active"), ("text", " ")]


def test_collapse_trailing_drops_trailing_whitespace(registry, out):
    write_string_literal(" active ", is_direct_attribute_value=False, registry=registry, out=out,
                         collapse_trailing=True)
    assert emitted(out, registry) == [("text", " "), ("class", "active")]


def test_collapse_does_not_touch_whitespace_only_literal(registry, out):
    write_string_literal("  ", is_direct_attribute_value=False, registry=registry, out=out,
                         collapse_leading=True, collapse_trailing=True)
    assert emitted(out, registry) == [("text", "  ")]
