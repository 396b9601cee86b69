"""
  Lispy Reader

- pyparsing grammar for the surface syntax:

    number : /-?[0-9]+/
    symbol : /[a-zA-Z0-9_+\\-*\\/\\\\=<>!&|%^]+/
    sexpr  : '(' <expr>* ')'
    qexpr  : '{' <expr>* '}'
    expr   : <number> | <symbol> | <sexpr> | <qexpr>
    lispy  : /^/ <expr>* /$/

- Emits runtime values directly:

    - numbers -> int (out of 64-bit range -> Error value "Invalid number.")
    - symbols -> Symbol
    - (...)   -> active ExprList
    - {...}   -> quoted ExprList
    - the whole input -> active ExprList of its top-level expressions

Punctuation never reaches the evaluator. `;` starts a comment to end of line.
"""

from __future__ import annotations

from pyparsing import (
    Forward,
    Group,
    ParseBaseException,
    Regex,
    StringEnd,
    Suppress,
    ZeroOrMore,
)

from lispy import LispValue
from lispy.errors import LispySyntaxError
from lispy.types.symbol import Symbol
from lispy.types.values import (
    INT64_MAX,
    INT64_MIN,
    ErrorKind,
    ExprList,
    LispError,
    qexpr,
    sexpr,
)

SYMBOL_CHARS = r"a-zA-Z0-9_+\-*/\\=<>!&|%^"


def read_number(token: str) -> LispValue:
    value = int(token)
    if not INT64_MIN <= value <= INT64_MAX:
        return LispError(ErrorKind.BAD_NUMBER, "Invalid number.")
    return value


class LispyGrammar:
    """Grammar for Lispy source text, built once per instance."""

    def __init__(self):
        expr = Forward()

        # Tried before symbol, so "-5" is a number and "-" a symbol
        self.number = Regex(r"-?[0-9]+").set_name("number")
        self.symbol = Regex(rf"[{SYMBOL_CHARS}]+").set_name("symbol")
        self.sexpr = Group(
            Suppress("(") + ZeroOrMore(expr) + Suppress(")")
        ).set_name("sexpr")
        self.qexpr = Group(
            Suppress("{") + ZeroOrMore(expr) + Suppress("}")
        ).set_name("qexpr")
        expr <<= self.number | self.symbol | self.sexpr | self.qexpr
        self.program = ZeroOrMore(expr) + StringEnd()
        self.program.ignore(Regex(r";[^\n]*"))

        self.number.set_parse_action(lambda t: read_number(t[0]))
        self.symbol.set_parse_action(lambda t: Symbol(t[0]))
        # Lists are wrapped so pyparsing keeps each one as a single token
        self.sexpr.set_parse_action(lambda t: [sexpr(t[0].as_list())])
        self.qexpr.set_parse_action(lambda t: [qexpr(t[0].as_list())])

    def parse(self, source: str) -> ExprList:
        try:
            result = self.program.parse_string(source, parse_all=True)
        except ParseBaseException as ex:
            raise LispySyntaxError(ex.msg, ex.lineno, ex.col) from ex
        return sexpr(result.as_list())


_GRAMMAR: LispyGrammar | None = None


def read(source: str) -> ExprList:
    """Parse `source` into an active ExprList of its top-level expressions.

    Raises LispySyntaxError if the text does not parse.
    """
    global _GRAMMAR
    if _GRAMMAR is None:
        _GRAMMAR = LispyGrammar()
    return _GRAMMAR.parse(source)
