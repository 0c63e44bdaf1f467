#!/usr/bin/env python3

class PyEarleyError(Exception): pass

class InputError(PyEarleyError, ValueError): pass

class GrammarSyntaxError(InputError):
    def __init__(self, lineno, line, reason):
        super().__init__(f"line {lineno}: {reason}: {line!r}")
        self.lineno, self.line, self.reason = lineno, line, reason

class ChartInvariantError(PyEarleyError, RuntimeError): pass
