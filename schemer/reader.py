##
## schemer - an interactive continuation-passing scheme evaluator
## Copyright (C) 2025  Mark Hays (github:minmus-9)
##
## This program is free software: you can redistribute it and/or modify
## it under the terms of the GNU General Public License as published by
## the Free Software Foundation, either version 3 of the License, or
## (at your option) any later version.
##
## This program is distributed in the hope that it will be useful,
## but WITHOUT ANY WARRANTY; without even the implied warranty of
## MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
## GNU General Public License for more details.
##
## You should have received a copy of the GNU General Public License
## along with this program.  If not, see <https://www.gnu.org/licenses/>.

"""
reader.py - text to expressions

the tokenizer hands out one token at a time as (type, value) and can take
exactly one back with unget(). read() turns tokens into expressions. it
keeps its own stack of half-built lists instead of recursing, so deeply
nested input doesn't touch the python stack.
"""

## pylint: disable=invalid-name

import re

from .data import EL, F, MAX_INT, T, ListBuilder, Pair, symbol
from .errors import IncompleteInputError, LispSyntaxError

__all__ = ("EOF", "MAX_INT", "Tokenizer", "read", "read_all", "parse")


class EOF_:
    ## pylint: disable=too-few-public-methods

    def __repr__(self):
        return "EOF"


EOF = EOF_()
del EOF_


## {{{ tokenizer


class Tokenizer:
    T_NUM = "number"
    T_BOOL = "boolean"
    T_SYM = "symbol"
    T_LPAR = "("
    T_RPAR = ")"
    T_TICK = "'"
    T_EOF = "eof"

    ## printable ascii except space, quote, parens and semicolon
    ATOM = re.compile(r"[!-&*-:<-~]+")
    INTEGER = re.compile(r"-?[0-9]+\Z")
    NEWLINES = re.compile(r"\r\n|\n\r|\r")

    PUNCT = {"(": T_LPAR, ")": T_RPAR, "'": T_TICK}

    def __init__(self, text):
        self.text = self.NEWLINES.sub("\n", text)
        self.pos = 0
        self.line = 1  ## after get(), the line the token was on
        self.prev = None
        self.ungotten = False

    def error(self, msg):
        raise LispSyntaxError(msg, self.line)

    def skip_whitespace(self):
        text, pos = self.text, self.pos
        n = len(text)
        while pos < n:
            ch = text[pos]
            if ch == "\n":
                self.line += 1
                pos += 1
            elif ch in " \t":
                pos += 1
            elif ch == ";":
                ## comment runs up to (not past) the newline
                end = text.find("\n", pos)
                pos = n if end < 0 else end
            else:
                break
        self.pos = pos

    def atom(self, token):
        if token == "#t":
            return self.T_BOOL, T
        if token == "#f":
            return self.T_BOOL, F
        if not self.INTEGER.match(token):
            return self.T_SYM, symbol(token)
        ## don't hand int() thousands of digits; anything this long is
        ## out of range anyway
        value = int(token, 10) if len(token.lstrip("-")) <= 16 else None
        ## the number must print back as exactly the token: no leading
        ## zeros, no -0
        if value is None or abs(value) > MAX_INT or str(value) != token:
            if token.startswith("-"):
                self.error(
                    f"number {token} too low "
                    f"(should be no lower than -{MAX_INT})"
                )
            self.error(
                f"number {token} too high "
                f"(should be no higher than {MAX_INT})"
            )
        return self.T_NUM, value

    def scan(self):
        self.skip_whitespace()
        if self.pos >= len(self.text):
            return self.T_EOF, None
        ch = self.text[self.pos]
        ttype = self.PUNCT.get(ch)
        if ttype is not None:
            self.pos += 1
            return ttype, ch
        m = self.ATOM.match(self.text, self.pos)
        if not m:
            self.error(f"unexpected character {ch!r}")
        self.pos = m.end()
        return self.atom(m.group())

    def get(self):
        if self.ungotten:
            self.ungotten = False
        else:
            self.prev = self.scan()
        return self.prev

    def unget(self):
        if self.prev is None:
            raise RuntimeError("not your fault: unget before get")
        if self.ungotten:
            raise RuntimeError("not your fault: multi-level unget")
        self.ungotten = True

    def peek(self):
        token = self.get()
        self.unget()
        return token


## }}}
## {{{ reader


QUOTE = symbol("quote")
TICK = object()  ## marks a pending ' on the reader stack


def read(tokenizer, require=False):
    """
    return the next expression from tokenizer. at the end of input return
    EOF, unless require is set or we're in the middle of something, in
    which case it's an error.
    """
    pending = []
    while True:
        ttype, value = tokenizer.get()
        if ttype == Tokenizer.T_EOF:
            if pending or require:
                raise IncompleteInputError(
                    "unexpected end of input", tokenizer.line
                )
            return EOF
        if ttype == Tokenizer.T_LPAR:
            pending.append(ListBuilder())
            continue
        if ttype == Tokenizer.T_TICK:
            pending.append(TICK)
            continue
        if ttype == Tokenizer.T_RPAR:
            if not pending or pending[-1] is TICK:
                tokenizer.error('unexpected ")"')
            x = pending.pop().get()
        else:
            x = value
        while pending and pending[-1] is TICK:
            pending.pop()
            x = Pair(QUOTE, Pair(x, EL))
        if not pending:
            return x
        pending[-1].append(x)


def read_all(text):
    "generate every top-level expression in text"
    tokenizer = Tokenizer(text)
    while True:
        x = read(tokenizer)
        if x is EOF:
            return
        yield x


def parse(text):
    "exactly one expression, nothing else"
    tokenizer = Tokenizer(text)
    x = read(tokenizer, require=True)
    if tokenizer.peek()[0] != Tokenizer.T_EOF:
        tokenizer.error("extra input after expression")
    return x


## }}}

## EOF
