"""
  Jam Reader: Lexer and Parser

- Streaming lexer over a compiled regular expression
- Recursive-descent parser producing the nodes of jam.reader.ast

   Exp    ::= if Exp then Exp else Exp
            | let Def+ in Exp
            | map Ids to Exp
            | Binary
   Binary ::= Term { Binop Term }      (precedence climbing, left associative;
                                        an if/let/map operand ends the chain)
   Term   ::= Unop Term | Factor { ( Args ) } | Int | true | false | empty
   Factor ::= ( Exp ) | Prim | Id
   Def    ::= Id := Exp ;

- Binary operator precedence, lowest first: |  &  = != < > <= >=  + -  * /
- Every occurrence of a name is represented by the same Variable object.
"""

from __future__ import annotations

import re
from typing import Iterator, Optional

from jam import Expression
from jam.errors import JamSyntaxError
from jam.reader.ast import (
    EMPTY, App, BinOp, BinOpApp, BoolConstant, Def, If, IntConstant, Let, Map,
    PrimFun, UnOp, UnOpApp,
)
from jam.reader.checker import check
from jam.types.values import Primitive, to_int64
from jam.types.variable import Variable


TOKEN_RE = re.compile(
    r"\s*("
    r"(?P<comment>//[^\n]*)"  # line comment
    r"|(?P<int>\d+)"  # unsigned integer literal
    r"|(?P<word>[A-Za-z_][A-Za-z0-9_]*\??)"  # names, keywords, primitives
    r"|(?P<op>:=|!=|<=|>=|[-+*/=<>&|~])"  # operators
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<comma>,)"  # ,
    r"|(?P<semicolon>;)"  # ;
    r")",
)

KEYWORDS = frozenset({"if", "then", "else", "let", "in", "map", "to"})
PRIMITIVES = {p.value: p for p in Primitive}

UNARY_OPS = {op.value: op for op in UnOp}
BINARY_OPS = {op.value: op for op in BinOp}

BINOP_PRECEDENCE: dict[BinOp, int] = {
    BinOp.OR: 1,
    BinOp.AND: 2,
    BinOp.EQUALS: 3,
    BinOp.NOT_EQUALS: 3,
    BinOp.LESS_THAN: 3,
    BinOp.GREATER_THAN: 3,
    BinOp.LESS_THAN_EQUALS: 3,
    BinOp.GREATER_THAN_EQUALS: 3,
    BinOp.PLUS: 4,
    BinOp.MINUS: 4,
    BinOp.TIMES: 5,
    BinOp.DIVIDE: 5,
}


def _classify(word: str) -> str:
    if word in KEYWORDS:
        return "keyword"
    if word in ("true", "false"):
        return "bool"
    if word == "empty":
        return "empty"
    if word in PRIMITIVES:
        return "prim"
    if word.endswith("?"):
        raise JamSyntaxError(f"Unknown primitive {word!r}")
    return "name"


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if not m:
            if source[pos:].isspace():
                break
            bad = pos + len(source[pos:]) - len(source[pos:].lstrip())
            raise JamSyntaxError(f"Unexpected char at {bad}: {source[bad]!r}")
        pos = m.end()
        if m.group("comment"):
            continue
        for nm in TOKEN_RE.groupindex:
            text = m.group(nm)
            if text:
                yield (_classify(text) if nm == "word" else nm), text
                break


class TokenStream:
    def __init__(self, token_iter: Iterator[tuple[str, str]]):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str]] = []
        # One Variable per name: variables compare by identity
        self.variables: dict[str, Variable] = {}

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def expect(self, tok_type: str, tok_val: str | None = None) -> str:
        actual_type, actual_val = self.advance()
        if actual_type != tok_type or (tok_val is not None and actual_val != tok_val):
            wanted = tok_val if tok_val is not None else tok_type
            found = actual_val if actual_val is not None else "end of input"
            raise JamSyntaxError(f"Expected {wanted!r} but found {found!r}")
        return actual_val

    def variable(self, name: str) -> Variable:
        var = self.variables.get(name)
        if var is None:
            var = self.variables[name] = Variable(name)
        return var

    def parse_program(self) -> Expression:
        expr = self.parse_exp()
        tok_type, tok_val = self.peek()
        if tok_type is not None:
            raise JamSyntaxError(f"Unexpected trailing token {tok_val!r}")
        return expr

    def parse_exp(self) -> Expression:
        tok_type, tok_val = self.peek()
        if tok_type == "keyword":
            if tok_val == "if":
                self.advance()
                test = self.parse_exp()
                self.expect("keyword", "then")
                conseq = self.parse_exp()
                self.expect("keyword", "else")
                alt = self.parse_exp()
                return If(test, conseq, alt)
            if tok_val == "let":
                self.advance()
                defs = [self.parse_def()]
                while self.peek()[0] == "name":
                    defs.append(self.parse_def())
                self.expect("keyword", "in")
                return Let(tuple(defs), self.parse_exp())
            if tok_val == "map":
                self.advance()
                params = self.parse_ids()
                self.expect("keyword", "to")
                return Map(params, self.parse_exp())
            raise JamSyntaxError(f"Unexpected keyword {tok_val!r}")
        return self.parse_binary(1)

    def parse_binary(self, min_prec: int) -> Expression:
        left = self.parse_term()
        while True:
            tok_type, tok_val = self.peek()
            if tok_type != "op" or tok_val not in BINARY_OPS:
                return left
            op = BINARY_OPS[tok_val]
            prec = BINOP_PRECEDENCE[op]
            if prec < min_prec:
                return left
            self.advance()
            if self.peek()[0] == "keyword":
                # if/let/map extends as far right as possible
                right = self.parse_exp()
            else:
                right = self.parse_binary(prec + 1)
            left = BinOpApp(op, left, right)

    def parse_term(self) -> Expression:
        tok_type, tok_val = self.peek()
        if tok_type is None:
            raise JamSyntaxError("Unexpected end of input")
        if tok_type == "op" and tok_val in UNARY_OPS:
            self.advance()
            return UnOpApp(UNARY_OPS[tok_val], self.parse_term())
        if tok_type == "int":
            self.advance()
            return IntConstant(to_int64(int(tok_val)))
        if tok_type == "bool":
            self.advance()
            return BoolConstant(tok_val == "true")
        if tok_type == "empty":
            self.advance()
            return EMPTY
        expr = self.parse_factor()
        while self.peek()[0] == "lparen":
            self.advance()
            expr = App(expr, self.parse_args())
        return expr

    def parse_factor(self) -> Expression:
        tok_type, tok_val = self.advance()
        if tok_type == "lparen":
            expr = self.parse_exp()
            self.expect("rparen")
            return expr
        if tok_type == "prim":
            return PrimFun(PRIMITIVES[tok_val])
        if tok_type == "name":
            return self.variable(tok_val)
        raise JamSyntaxError(f"Unexpected token {tok_val!r}")

    def parse_args(self) -> tuple[Expression, ...]:
        """Comma-separated expressions; the opening '(' is already consumed."""
        if self.peek()[0] == "rparen":
            self.advance()
            return ()
        args = [self.parse_exp()]
        while self.peek()[0] == "comma":
            self.advance()
            args.append(self.parse_exp())
        self.expect("rparen")
        return tuple(args)

    def parse_ids(self) -> tuple[Variable, ...]:
        if self.peek() == ("keyword", "to"):
            return ()
        ids = [self.variable(self.expect("name"))]
        while self.peek()[0] == "comma":
            self.advance()
            ids.append(self.variable(self.expect("name")))
        return tuple(ids)

    def parse_def(self) -> Def:
        var = self.variable(self.expect("name"))
        self.expect("op", ":=")
        exp = self.parse_exp()
        self.expect("semicolon")
        return Def(var, exp)


def parse(source: str) -> Expression:
    """Parse Jam source text without context-sensitive checking."""
    return TokenStream(lex(source)).parse_program()


def read(source: str) -> Expression:
    """Parse and check Jam source text, returning the program's syntax tree."""
    program = parse(source)
    check(program)
    return program
