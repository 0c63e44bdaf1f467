from .chart import Chart, Edge, Item, ItemRef
from .errors import ChartInvariantError, GrammarSyntaxError, InputError, PyEarleyError
from .grammar import Grammar, Rule
from .parser import EarleyParser
from .text import loadGrammar, parseGrammarText, parseText, tokenize
from .tree import Leaf, Node, buildTree, derive
