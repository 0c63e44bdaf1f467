#!/usr/bin/env python3

import argparse
import json
import logging
import sys
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree
from .errors import InputError
from .text import parseText
from .tree import Leaf

# Rendering
# #########

def richTree(node, parent=None):
    label = escape(node.label)
    branch = Tree(label) if parent is None else parent.add(label)
    for c in node.children:
        if isinstance(c, Leaf): branch.add(f"[bold]{escape(c.label)}[/bold]")
        else:                   richTree(c, branch)
    return branch

def chartTables(chart):
    tables = []
    for k, items in enumerate(chart):
        title = f"S({k}): {' '.join(chart.tokens[:k])} • {' '.join(chart.tokens[k:])}"
        table = Table(title=escape(title.strip()))
        table.add_column("Item")
        table.add_column("Origin")
        table.add_column("Edges")
        table.add_column("Comment")
        for item in items:
            table.add_row(escape(repr(item).rsplit(" (", 1)[0]), str(item.origin), str(len(item.edges)), item.comment)
        tables.append(table)
    return tables

# Entry Point
# ###########

def buildArgParser():
    p = argparse.ArgumentParser(prog="pyearley", description="Parse a sentence with an Earley chart parser and show one derivation tree.")
    p.add_argument("grammar", help="grammar file of 'LHS -> RHS | ...' lines, or - for stdin")
    p.add_argument("-s", "--start", default=None, help="start symbol (default: left-hand side of the first rule)")
    p.add_argument("-i", "--input", default="", help="whitespace separated sentence to parse")
    p.add_argument("--json", action="store_true", help="print the derivation tree as JSON")
    p.add_argument("--chart", action="store_true", help="also print every chart position")
    p.add_argument("-v", "--verbose", action="count", default=0, help="log progress (repeat for more detail)")
    return p

def readGrammar(path):
    if path == "-": return sys.stdin.read()
    with open(path, encoding="utf-8") as f:
        return f.read()

def main(argv=None) -> int:
    args = buildArgParser().parse_args(argv)
    level = [logging.WARNING, logging.INFO, logging.DEBUG][min(args.verbose, 2)]
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    out, err = Console(), Console(stderr=True)
    try:
        chart, tree = parseText(readGrammar(args.grammar), args.input, args.start)
    except (InputError, OSError) as e:
        err.print(f"[red]error:[/red] {escape(str(e))}")
        return 2

    if args.chart:
        for table in chartTables(chart):
            out.print(table)

    if tree is None:
        err.print("no parse: the sentence is not derivable from the grammar")
        return 1

    if args.json: print(json.dumps(tree.todict(), indent=2, ensure_ascii=False))
    else:         out.print(richTree(tree))
    return 0
