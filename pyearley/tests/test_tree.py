import pytest
from deepdiff import DeepDiff
from pyearley.chart import Chart, Edge, Item, ItemRef
from pyearley.errors import ChartInvariantError, InputError
from pyearley.grammar import Grammar
from pyearley.parser import EarleyParser
from pyearley.tree import Leaf, Node, buildNode, buildTree, derive
from .grammars import G_AMB, G_CYCLE, G_EPS, G_EXPR, G_LATE_EPS

def validate_tree(expected, tree):
    diff = DeepDiff(expected, tree.todict())
    if len(diff) != 0:
        raise ValueError(f"Tree does not match expected tree:\n{expected}\n{tree.todict()}\n{diff.pretty()}")

def node(label, *children):
    return { "label": label, "children": list(children) }

def leaf(label):
    return { "label": label }

def test_expression_tree():
    tree = derive(G_EXPR, "E", "id + id * id".split())
    assert tree.label == "E"
    validate_tree(node("E",
                       node("E", node("T", node("F", leaf("id")))),
                       leaf("+"),
                       node("T",
                            node("T", node("F", leaf("id"))),
                            leaf("*"),
                            node("F", leaf("id")))),
                  tree)

def test_parenthesized_tree():
    tree = derive(G_EXPR, "E", "( id )".split())
    validate_tree(node("E", node("T", node("F", leaf("("), node("E", node("T", node("F", leaf("id")))), leaf(")")))),
                  tree)

def test_rejected_has_no_derivation():
    tokens = "id +".split()
    chart = EarleyParser(G_EXPR, "E").parse(tokens)
    assert buildTree(chart, tokens, "E") is None
    assert derive(G_EXPR, "E", tokens) is None

def test_epsilon_tree():
    tree = derive(G_EPS, "S", ["b"])
    assert tree == Node("S", (Node("A", ()), Leaf("b")))
    assert tree.todict() == node("S", node("A"), leaf("b"))

def test_late_nullable_tree():
    tree = derive(G_LATE_EPS, "S", ["b"])
    assert tree == Node("S", (Node("A"), Node("A"), Leaf("b")))

def test_empty_input_tree():
    g = Grammar([ ("S", ()) ])
    assert derive(g, "S", []) == Node("S")

def test_cyclic_grammar_tree():
    assert derive(G_CYCLE, "A", ["a"]) == Node("A", (Leaf("a"),))

def test_ambiguous_tree_is_deterministic():
    tokens = "a a a".split()
    chart = EarleyParser(G_AMB, "S").parse(tokens)
    tree = buildTree(chart, tokens, "S")
    assert tree is not None
    assert tree.label == "S"
    assert list(tree.leaves()) == tokens
    for _ in range(5):
        assert buildTree(chart, tokens, "S") == tree

@pytest.mark.parametrize("grammar,start,rawInput", [
    (G_EXPR, "E", "( id + id ) * id + id"),
    (G_AMB,  "S", "a a a a"),
    (G_EPS,  "S", "b"),
])
def test_pipeline_idempotent(grammar, start, rawInput):
    trees = [ derive(grammar, start, rawInput.split()) for _ in range(3) ]
    assert trees[0] is not None
    for t in trees[1:]:
        assert len(DeepDiff(trees[0].todict(), t.todict())) == 0
    assert list(trees[0].leaves()) == rawInput.split()

def test_tokens_must_match_chart():
    chart = EarleyParser(G_EXPR, "E").parse(["id"])
    with pytest.raises(InputError):
        buildTree(chart, ["id", "+", "id"], "E")

def test_missing_edge_is_invariant_violation():
    chart = EarleyParser(G_EPS, "S").parse(["b"])
    broken = Item(G_EPS.rulesFor("S")[0], 2, 0)
    with pytest.raises(ChartInvariantError):
        buildNode(chart, broken)

def test_ambiguous_tree_follows_first_edge():
    tree = derive(G_AMB, "S", "a a a".split())
    validate_tree(node("S",
                       node("S", node("S", leaf("a")), node("S", leaf("a"))),
                       node("S", leaf("a"))),
                  tree)

def test_predecessor_mismatch_is_invariant_violation():
    single, pair = G_AMB.rulesFor("S")[1], G_AMB.rulesFor("S")[0]
    chart = Chart(["a"])
    chart.addItem(0, Item(single, 0, 0))
    wrong, _ = chart.addItem(1, Item(pair, 1, 0, [Edge(ItemRef(0, 0), "a")]))
    with pytest.raises(ChartInvariantError):
        buildNode(chart, wrong)

def depth(tree):
    res, stack = 0, [ (tree, 1) ]
    while stack:
        n, d = stack.pop()
        res = max(res, d)
        stack.extend((c, d + 1) for c in n.children if isinstance(c, Node))
    return res

@pytest.mark.parametrize("grammar,start,tokens", [
    (G_EXPR,                                    "E", ("id + " * 1000 + "id").split()),
    (Grammar([ ("S", ("a", "S")), ("S", ()) ]), "S", ["a"] * 1100),
])
def test_deep_derivation(grammar, start, tokens):
    tree = derive(grammar, start, tokens)
    assert tree is not None
    assert depth(tree) > 1000
    assert list(tree.leaves()) == tokens
    assert tree.todict()["label"] == start
