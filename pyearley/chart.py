#!/usr/bin/env python3

from dataclasses import dataclass, field
from .errors import ChartInvariantError
from .grammar import Rule, Symbol

MDOT = " • "

# Chart Data Structure
# ####################

@dataclass(frozen=True)
class ItemRef:
    position: int
    slot: int

    def __post_init__(self):
        if self.position < 0 or self.slot < 0:
            raise ValueError("ItemRef indices must be non-negative")

@dataclass(frozen=True)
class Edge:
    predecessor: ItemRef
    matched: Symbol | ItemRef

    def isScan(self):
        return not isinstance(self.matched, ItemRef)

    def astuple(self):
        pred = (self.predecessor.position, self.predecessor.slot)
        if self.isScan(): return (pred, self.matched)
        return (pred, (self.matched.position, self.matched.slot))

@dataclass(eq=False)
class Item:
    rule: Rule
    dot: int
    origin: int
    edges: list[Edge] = field(default_factory=list)
    comment: str = ""
    ref: ItemRef | None = None

    def __post_init__(self):
        if self.dot < 0:              raise ValueError("Item dot must be non-negative")
        if self.dot > len(self.rule): raise ValueError("Item dot must be less than or equal to the rule RHS symbols")
        if self.origin < 0:           raise ValueError("Item origin must be non-negative")

    def __repr__(self):
        res = self.rule.lhs + " ->"
        for i, s in enumerate(self.rule.rhs):
            sep = MDOT if i == self.dot else ' '
            res += sep + s
        if self.isComplete(): res += MDOT
        return f"{res.rstrip()} ({self.origin})"

    def key(self):
        return (self.rule, self.dot, self.origin)

    def isComplete(self):
        return self.dot == len(self.rule)

    def nextSymbol(self):
        return None if self.isComplete() else self.rule.rhs[self.dot]

    def advance(self, edge, comment=""):
        return Item(self.rule, self.dot + 1, self.origin, [edge], comment)

class Chart:
    tokens: list[Symbol]
    positions: list[list[Item]]
    index: list[dict[tuple[Rule, int, int], Item]]
    waiting: list[dict[Symbol, list[Item]]]
    nulled: list[dict[Symbol, list[Item]]]

    def __init__(self, tokens):
        self.tokens    = list(tokens)
        self.positions = [ [] for _ in range(len(self.tokens) + 1) ]
        self.index     = [ {} for _ in range(len(self.tokens) + 1) ]
        self.waiting   = [ {} for _ in range(len(self.tokens) + 1) ]
        self.nulled    = [ {} for _ in range(len(self.tokens) + 1) ]

    def __len__(self):
        return len(self.positions)

    def __getitem__(self, k):
        return self.positions[k]

    def __iter__(self):
        return iter(self.positions)

    def addItem(self, k, item):
        existing = self.index[k].get(item.key())
        if existing is None:
            item.ref = ItemRef(k, len(self.positions[k]))
            self.positions[k].append(item)
            self.index[k][item.key()] = item
            if not item.isComplete():
                self.waiting[k].setdefault(item.nextSymbol(), []).append(item)
            elif item.origin == k:
                self.nulled[k].setdefault(item.rule.lhs, []).append(item)
            return item, True
        for edge in item.edges:
            if edge not in existing.edges:
                existing.edges.append(edge)
        return existing, False

    def waitingFor(self, k, symbol):
        return self.waiting[k].get(symbol, [])

    def nulledAt(self, k, symbol):
        return self.nulled[k].get(symbol, [])

    def resolve(self, ref):
        if not (0 <= ref.position < len(self.positions)) or ref.slot >= len(self.positions[ref.position]):
            raise ChartInvariantError(f"edge references an item outside the chart: {ref}")
        return self.positions[ref.position][ref.slot]

    def accepting(self, start):
        for item in self.positions[-1]:
            if item.isComplete() and item.origin == 0 and item.rule.lhs == start:
                return item
        return None

    def itemCount(self):
        return sum(len(items) for items in self.positions)

    def todict(self):
        return { "tokens":    list(self.tokens),
                 "positions": [ [ { "item":  repr(item),
                                    "edges": [ edge.astuple() for edge in item.edges ] }
                                  for item in items ]
                                for items in self.positions ]
               }
