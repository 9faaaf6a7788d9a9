from pympc.Ast import AstNode, make_node, render_contents
from pympc.Char import digit
from pympc.Combinators import and_, many1, root, tag
from pympc.Eval import run_parser
from pympc.Fold import ast_fold, lst
from pympc.Input import Position
from pympc.Prim import char, lift_val


def run(parser, input_str):
    return run_parser(parser, input_str)


def test_tag_wraps_value():
    res, _ = run(tag(char('a'), "letter"), "a")
    assert (res.tag, res.contents, res.position, res.children) == ("letter", "a", Position(0, 0, 0), ())


def test_tag_records_start_position():
    res, _ = run(and_([char('\n'), char('x'), tag(char('a'), "letter")], lst), "\nxa")
    assert res.position == Position(2, 1, 1)


def test_tag_renders_non_string_values():
    res, _ = run(tag(lift_val(42), "answer"), "")
    assert res.contents == "42"
    res, _ = run(tag(and_([char('a'), char('b')]), "pair"), "ab")
    assert res.contents == "ab"


def test_tag_nests_tree_values():
    inner = tag(char('a'), "letter")
    res, _ = run(tag(inner, "wrapper"), "a")
    assert res.contents == ""
    assert [c.tag for c in res.children] == ["letter"]

    res, _ = run(tag(many1(tag(digit(), "digit")), "number"), "12")
    assert [c.contents for c in res.children] == ["1", "2"]


def test_root_renames_tag():
    res, _ = run(root(tag(char('a'), "letter")), "a")
    assert res.tag == "root"
    assert res.contents == "a"


def test_root_passes_through_plain_values():
    assert run(root(char('a')), "a")[0] == "a"


def test_root_propagates_failure():
    _, err = run(root(tag(char('a'), "letter")), "b")
    assert err.expected == {"a"}


def test_render():
    p = root(tag(many1(tag(digit(), "digit")), "number"))
    res, _ = run(p, "12")
    assert res.render() == "root\n  digit '1'\n  digit '2'"
    assert str(res) == res.render()


def test_render_skips_empty_contents():
    node = AstNode("expr", "", Position(), (AstNode("op", "+"), AstNode("args", "", Position(), (AstNode("n", "1"),))))
    assert node.render() == "expr\n  op '+'\n  args\n    n '1'"


def test_walk_is_depth_first():
    node = AstNode("a", children=(AstNode("b", children=(AstNode("c"),)), AstNode("d")))
    assert [n.tag for n in node.walk()] == ["a", "b", "c", "d"]


def test_ast_fold_gathers_children():
    p = and_([tag(char('a'), "lhs"), char('+'), tag(char('b'), "rhs")], ast_fold)
    res, _ = run(p, "a+b")
    assert [(c.tag, c.contents) for c in res.children] == [("lhs", "a"), ("", "+"), ("rhs", "b")]
    assert res.position == Position(0, 0, 0)


def test_ast_fold_flattens_untagged_nodes():
    inner = and_([tag(char('a'), "x"), tag(char('b'), "y")], ast_fold)
    res, _ = run(and_([inner, tag(char('c'), "z")], ast_fold), "abc")
    assert [c.tag for c in res.children] == ["x", "y", "z"]


def test_make_node_with_list_of_nodes():
    children = [AstNode("x"), AstNode("y")]
    node = make_node("pair", children, Position(3, 0, 3))
    assert node.children == tuple(children)
    assert node.position.offset == 3


def test_tag_keeps_tree_and_plain_values_as_children():
    res, _ = run(tag(and_([tag(char('a'), "x"), char('+')]), "e"), "a+")
    assert res.tag == "e"
    assert res.contents == ""
    assert [(c.tag, c.contents) for c in res.children] == [("x", "a"), ("", "+")]
    assert res.children[1].children == ()


def test_make_node_drops_none_and_flattens_nested_lists():
    node = make_node("e", [None, [AstNode("x", "1"), "2"], AstNode("", "", Position(), (AstNode("y"),))],
                     Position())
    assert [(c.tag, c.contents) for c in node.children] == [("x", "1"), ("", "2"), ("y", "")]


def test_render_contents_uses_node_text():
    node = AstNode("e", "", Position(), (AstNode("x", "a"), AstNode("", "+")))
    assert render_contents([node, "b"]) == "a+b"
    assert render_contents(node) == "a+"
