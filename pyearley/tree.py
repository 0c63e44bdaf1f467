#!/usr/bin/env python3

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from .chart import Chart, Item
from .errors import ChartInvariantError, InputError
from .grammar import Grammar, Symbol
from .parser import EarleyParser

log = logging.getLogger(__name__)

# Derivation Trees
# ################

@dataclass(frozen=True)
class Leaf:
    label: Symbol

    def todict(self):
        return { "label": self.label }

@dataclass(frozen=True)
class Node:
    label: Symbol
    children: tuple["Node | Leaf", ...] = ()

    def todict(self):
        res = { "label": self.label, "children": [] }
        stack = [ (self, res) ]
        while stack:
            node, d = stack.pop()
            for c in node.children:
                if isinstance(c, Leaf):
                    d["children"].append(c.todict())
                else:
                    cd = { "label": c.label, "children": [] }
                    d["children"].append(cd)
                    stack.append((c, cd))
        return res

    def leaves(self):
        stack = list(reversed(self.children))
        while stack:
            c = stack.pop()
            if isinstance(c, Leaf): yield c.label
            else:                   stack.extend(reversed(c.children))

# Derivation Extraction
# #####################

def buildNode(chart: Chart, item: Item) -> Node:
    """Render one item as a tree node by following first edges back to dot 0.

    The first edge of an item is the first derivation discovered for it, so
    ambiguous inputs always render the same way for a given chart. Nested
    items are walked with an explicit stack of [item, current, children]
    frames, so derivation depth is not bounded by the interpreter stack.
    """
    stack = [ [item, item, []] ]
    while True:
        frame = stack[-1]
        top, current, children = frame

        if current.dot == 0:
            children.reverse()
            node = Node(top.rule.lhs, tuple(children))
            stack.pop()
            if not stack: return node
            stack[-1][2].append(node)
            continue

        if not current.edges:
            raise ChartInvariantError(f"item {current!r} has no derivation edge")
        edge = current.edges[0]
        pred = chart.resolve(edge.predecessor)
        if pred.rule is not current.rule or pred.dot != current.dot - 1:
            raise ChartInvariantError(f"edge predecessor {pred!r} does not precede {current!r}")
        frame[1] = pred

        if edge.isScan():
            children.append(Leaf(edge.matched))
        else:
            child = chart.resolve(edge.matched)
            stack.append([child, child, []])

def buildTree(chart: Chart, tokens: Iterable[Symbol], start: Symbol) -> Node | None:
    if list(tokens) != chart.tokens:
        raise InputError("token sequence does not match the chart it was parsed into")
    root = chart.accepting(start)
    if root is None:
        log.info("no derivation of %r spans the input", start)
        return None
    return buildNode(chart, root)

def derive(grammar: Grammar, start: Symbol, tokens: Iterable[Symbol]) -> Node | None:
    tokens = list(tokens)
    chart = EarleyParser(grammar, start).parse(tokens)
    return buildTree(chart, tokens, start)
