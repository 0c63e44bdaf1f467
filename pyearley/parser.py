#!/usr/bin/env python3

import logging
from collections.abc import Iterable
from .chart import Chart, Edge, Item
from .grammar import Grammar, Symbol

log = logging.getLogger(__name__)

# Earley Parser
# #############

class EarleyParser:
    grammar: Grammar
    start: Symbol

    def __init__(self, grammar, start):
        self.grammar = grammar
        self.start   = start

    def parse(self, tokens: Iterable[Symbol]) -> Chart:
        chart = Chart(tokens)
        log.info("parsing %d token(s) from start symbol %r", len(chart.tokens), self.start)

        for rule in self.grammar.rulesFor(self.start):
            chart.addItem(0, Item(rule, 0, 0, comment="start"))

        for k in range(len(chart)):
            self.closePosition(chart, k)
            log.debug("position %d: %d item(s)", k, len(chart[k]))

        if chart.accepting(self.start) is None:
            log.info("no parse: input rejected after %d item(s)", chart.itemCount())
        else:
            log.info("input accepted after %d item(s)", chart.itemCount())
        return chart

    def accepts(self, tokens: Iterable[Symbol]) -> bool:
        return self.parse(tokens).accepting(self.start) is not None

    def closePosition(self, chart, k):
        # position k grows while it is walked; the bound is re-read every pass
        i = 0
        while i < len(chart[k]):
            item = chart[k][i]
            sym  = item.nextSymbol()

            if item.isComplete():                 found = self.complete(chart, k, item)
            elif self.grammar.isNonTerminal(sym): found = self.predict(chart, k, item)
            else:                                 found = self.scan(chart, k, item)

            for pos, new in found:
                chart.addItem(pos, new)
            i += 1

    def predict(self, chart, k, item):
        sym = item.nextSymbol()
        found = [ (k, Item(rule, 0, k, comment="predictor")) for rule in self.grammar.rulesFor(sym) ]

        # sym may already have completed empty at k, before this item asked for it
        for done in chart.nulledAt(k, sym):
            found.append((k, item.advance(Edge(item.ref, done.ref), "completer")))
        return found

    def scan(self, chart, k, item):
        sym = item.nextSymbol()
        if k < len(chart.tokens) and chart.tokens[k] == sym:
            return [ (k + 1, item.advance(Edge(item.ref, sym), "scanner")) ]
        return []

    def complete(self, chart, k, item):
        return [ (k, waiting.advance(Edge(waiting.ref, item.ref), "completer"))
                 for waiting in chart.waitingFor(item.origin, item.rule.lhs) ]
