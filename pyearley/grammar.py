#!/usr/bin/env python3

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

Symbol = str

# Grammar Representation
# ######################

# eq=False: two textually identical rules are still distinct alternatives
@dataclass(frozen=True, eq=False)
class Rule:
    lhs: Symbol
    rhs: tuple[Symbol, ...]

    def __repr__(self):
        return f"{self.lhs} -> {' '.join(self.rhs) if self.rhs else 'ε'}"

    def __len__(self):
        return len(self.rhs)

class Grammar:
    ruleList: list[Rule]
    ruleDict: dict[Symbol, tuple[Rule, ...]]

    def __init__(self, productions: Iterable[tuple[Symbol, Iterable[Symbol]]] = ()):
        ruleDict = {}
        self.ruleList = []
        for lhs, rhs in productions:
            rule = Rule(lhs, tuple(rhs))
            self.ruleList.append(rule)
            ruleDict.setdefault(lhs, []).append(rule)
        self.ruleDict = { n : tuple(rules) for n, rules in ruleDict.items() }

    def __repr__(self):
        res = "Grammar(\n"
        for rule in self.rules():
            res += "  " + repr(rule) + "\n"
        res += ")"
        return res

    def __len__(self):
        return len(self.ruleList)

    def __contains__(self, symbol):
        return symbol in self.ruleDict

    def rulesFor(self, symbol: Symbol) -> tuple[Rule, ...]:
        return self.ruleDict.get(symbol, ())

    def isNonTerminal(self, symbol: Symbol) -> bool:
        return symbol in self.ruleDict

    def rules(self) -> Iterator[Rule]:
        yield from self.ruleList

    def nonterminals(self) -> list[Symbol]:
        return list(self.ruleDict)

    def terminals(self) -> list[Symbol]:
        res = []
        for rule in self.rules():
            for s in rule.rhs:
                if not self.isNonTerminal(s) and s not in res:
                    res.append(s)
        return res
