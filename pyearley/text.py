#!/usr/bin/env python3

import logging
from .errors import GrammarSyntaxError, InputError
from .grammar import Grammar, Symbol
from .parser import EarleyParser
from .tree import buildTree

log = logging.getLogger(__name__)

ARROW = "->"
EMPTY_MARKERS = ("ε", '""', "''")

# Grammar Text
# ############

def parseGrammarText(text: str) -> list[tuple[Symbol, tuple[Symbol, ...]]]:
    """Read ``LHS -> RHS1 | RHS2 | ...`` lines into ordered (lhs, rhs) pairs.

    Lines that do not split into exactly two parts on the arrow are skipped.
    A right-hand side that is empty or a lone ``ε``, ``""`` or ``''`` is the
    empty production.
    """
    if not text or not text.strip():
        raise InputError("grammar text is empty")

    productions = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        line = line.strip()
        if not line: continue
        parts = line.split(ARROW)
        if len(parts) != 2:
            log.debug("skipping line %d: %r", lineno, line)
            continue

        lhs = parts[0].split()
        if len(lhs) == 0: raise GrammarSyntaxError(lineno, line, "missing left-hand side")
        if len(lhs) > 1:  raise GrammarSyntaxError(lineno, line, "left-hand side must be a single symbol")

        for alt in parts[1].split("|"):
            rhs = alt.split()
            if len(rhs) == 1 and rhs[0] in EMPTY_MARKERS:
                rhs = []
            productions.append((lhs[0], tuple(rhs)))

    if not productions:
        raise InputError("grammar text contains no rules")
    return productions

def loadGrammar(text: str) -> Grammar:
    return Grammar(parseGrammarText(text))

def tokenize(text: str) -> list[Symbol]:
    return text.split()

# Text Pipeline
# #############

def parseText(grammarText, sentence, start=None):
    grammar = loadGrammar(grammarText)
    if start is None:
        start = grammar.ruleList[0].lhs
    elif not start.strip():
        raise InputError("start symbol is empty")
    else:
        start = start.strip()

    tokens = tokenize(sentence)
    chart = EarleyParser(grammar, start).parse(tokens)
    return chart, buildTree(chart, tokens, start)
