from twsort.adapters import FormatContext, TailwindPrinter, document_for
from twsort.adapters.printer import ISOLATED, Adjacency, interpolation_adjacency
from twsort.config import TwsortCfg
from twsort.tailwind.position import FragmentPosition


def collect(text: str, ext: str = "tsx", **options):
    ctx = FormatContext(document_for(ext, text), TwsortCfg(**options))
    edits = TailwindPrinter(ctx).collect()
    return ctx, edits


def classes(text: str, ext: str = "tsx", **options):
    ctx, _ = collect(text, ext, **options)
    return ctx.registry.entries()


def test_class_attribute_string():
    ctx, edits = collect('const a = <div className="p-4 flex" id="x y" />;')
    assert ctx.registry.entries() == ["p-4 flex"]
    assert len(edits) == 1
    edit = edits[0]
    assert edit.kind == "string"
    assert ctx.doc.get_byte_text(edit.start_byte, edit.end_byte) == "p-4 flex"
    assert ctx.metrics.get("tailwind.sites.attribute") == 1


def test_direct_attribute_value_keeps_whitespace():
    assert classes('<div class="  a  b " />', "jsx") == ["  a  b "]


def test_custom_attribute():
    text = '<Box tw="m-2 p-1" other="q r" />'
    assert classes(text) == []
    assert classes(text, tailwind_attributes=["tw"]) == ["m-2 p-1"]


def test_attribute_names_are_case_sensitive():
    assert classes('<div ClassName="a b" />') == []


def test_namespaced_attribute_is_ignored():
    assert classes('<svg xlink:class="a b" />', tailwind_attributes=["class"]) == []


def test_expression_value_is_nested():
    assert classes('<div className={"  x y  "} />') == ["x y"]


def test_ternary_and_logical_operands():
    text = '<div className={on ? "a b" : ok && "c" || (x ?? "d e")} />'
    assert classes(text) == ["a b", "c", "d e"]


def test_template_literal_fragments_then_interpolations():
    text = '<div className={`a ${big ? "c d" : "e"} f`} />'
    ctx, edits = collect(text)
    assert ctx.registry.entries() == ["a", "f", "c d", "e"]
    assert [e.kind for e in edits] == ["template_fragment", "template_fragment", "string", "string"]


def test_function_call_arguments():
    text = 'const c = clsx("b a", [x && "d c"], { "not": true }, other("z y"));'
    assert classes(text, "ts") == []
    assert classes(text, "ts", tailwind_functions=["clsx"]) == ["b a", "d c"]


def test_member_and_computed_callees_are_ignored():
    text = 'utils.clsx("a b"); obj["clsx"]("c d");'
    assert classes(text, "js", tailwind_functions=["clsx"]) == []


def test_tagged_template():
    ctx, edits = collect("const s = tw`p-4 ${x} flex`;", "ts", tailwind_functions=["tw"])
    assert ctx.registry.entries() == ["p-4", "flex"]
    assert ctx.metrics.get("tailwind.sites.call") == 1
    assert ctx.metrics.get("tailwind.literals.template_fragment") == 2


def test_glued_fragment_is_not_registered():
    ctx, edits = collect("const s = tw`p-4${x}flex`;", "ts", tailwind_functions=["tw"])
    assert ctx.registry.entries() == []
    assert len(edits) == 2


def test_call_inside_attribute_is_collected_once():
    text = '<div className={cn("b a")} />'
    assert classes(text, tailwind_functions=["cn"]) == ["b a"]


def test_untracked_strings_are_left_alone():
    assert classes('const s = "p-4 flex"; f("a b");', "js") == []


class TestInterpolationAdjacency:

    def test_whitespace_on_both_sides(self):
        adj = interpolation_adjacency("header ", " suffix", 0, 1)
        assert adj == Adjacency(spaced_before=True, spaced_after=True)

    def test_glued_text_on_both_sides(self):
        adj = interpolation_adjacency("prefix", "suffix", 0, 1)
        assert adj == Adjacency(joined_before=True, joined_after=True)

    def test_template_edges_touch_nothing(self):
        assert interpolation_adjacency("", "", 0, 1) == ISOLATED

    def test_empty_fragment_between_interpolations_glues(self):
        # `${a}${b}`: b follows a directly
        assert interpolation_adjacency("", "", 1, 2) == Adjacency(joined_before=True)
        assert interpolation_adjacency("", "", 0, 2) == Adjacency(joined_after=True)


def test_glued_neighbours_shift_fragment_position():
    shifted = Adjacency(joined_before=True, joined_after=True).shift(FragmentPosition(0, 0))
    assert shifted == FragmentPosition(1, 2)
    assert not shifted.is_first and not shifted.is_last
    assert ISOLATED.shift(FragmentPosition(1, 2)) == FragmentPosition(1, 2)


def test_concatenated_operands_are_followed():
    text = '<div className={a + "b a" + ` d c ` + 1} />'
    assert classes(text) == ["b a", "d c"]


def test_other_binary_operators_are_ignored():
    assert classes('<div className={a - "b a"} />') == []
