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

"""Tests for stringify."""

import sys

import pytest

from schemer import (
    EL,
    F,
    T,
    Pair,
    Undefined,
    execute,
    parse,
    py_list_to_lisp_list,
    stringify,
    symbol,
)


@pytest.mark.parametrize(
    "value,text",
    [
        (T, "#t"),
        (F, "#f"),
        (EL, "()"),
        (42, "42"),
        (-7, "-7"),
        (symbol("foo!"), "foo!"),
    ],
)
def test_atoms(value, text):
    assert stringify(value) == text


@pytest.mark.parametrize(
    "text", ["(1 2 3)", "(a (b (c)) ())", "(() ())", "((((x))))"]
)
def test_round_trip(text):
    assert stringify(parse(text)) == text


def test_procedures():
    closure, builtin, continuation = execute(
        "(lambda (x) x) car (letcc k k)"
    )
    assert stringify(closure) == "#closure"
    assert stringify(builtin) == "#<car>"
    assert stringify(continuation) == "#continuation"


def test_procedures_in_lists():
    (value,) = execute("(list car (lambda () 1) 3)")
    assert stringify(value) == "(#<car> #closure 3)"


def test_undefined_has_a_repr():
    assert "define" in stringify(Undefined("define"))


def test_repr_matches():
    x = parse("(a (1 #t))")
    assert repr(x) == "(a (1 #t))"
    assert repr(symbol("a")) == "a"


def test_long_list():
    x = py_list_to_lisp_list(list(range(100000)))
    s = stringify(x)
    assert s.startswith("(0 1 2 ")
    assert s.endswith(" 99998 99999)")


def test_deep_list():
    n = sys.getrecursionlimit() * 5
    x = EL
    for _ in range(n):
        x = Pair(x, EL)
    s = stringify(x)
    assert s == "(" * n + "()" + ")" * n
