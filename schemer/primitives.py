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
primitives.py - procedures that live in the global frame

a builtin gets the whole evaluated arg list and computes its value right
away. none of these recurse deeper than their arg list is long.
"""

## pylint: disable=invalid-name

from .data import (
    EL,
    F,
    MAX_INT,
    Environment,
    boolean,
    car,
    cdr,
    cons,
    is_atom,
    is_number,
    symbol,
    unpack,
)
from .errors import LispTypeError
from .evaluator import Builtin

BUILTINS = {}


def glbl(name):
    def wrap(func):
        BUILTINS[symbol(name)] = Builtin(name, func)
        return func

    return wrap


def make_global_env():
    "a fresh root frame with all the builtins in it"
    genv = Environment()
    genv.d.update(BUILTINS)
    return genv


## {{{ helpers


def numcheck(x, who):
    if not is_number(x):
        raise LispTypeError(f"{who}: expected number, got {x!r}")
    return x


def rangecheck(n, who):
    if abs(n) > MAX_INT:
        raise LispTypeError(f"{who}: integer overflow")
    return n


def unary(args, who, func):
    (x,) = unpack(args, 1, who)
    return func(x)


def binary(args, who, func):
    x, y = unpack(args, 2, who)
    return func(x, y)


def arith(args, who, func):
    x, y = unpack(args, 2, who)
    return func(numcheck(x, who), numcheck(y, who))


## }}}
## {{{ arithmetic


@glbl("+")
def op_add(args):
    total = 0
    while args is not EL:
        total = rangecheck(total + numcheck(args.car, "+"), "+")
        args = args.cdr
    return total


@glbl("*")
def op_mul(args):
    total = 1
    while args is not EL:
        total = rangecheck(total * numcheck(args.car, "*"), "*")
        args = args.cdr
    return total


@glbl("-")
def op_sub(args):
    return rangecheck(arith(args, "-", lambda x, y: x - y), "-")


@glbl("<")
def op_lt(args):
    return arith(args, "<", lambda x, y: boolean(x < y))


@glbl(">")
def op_gt(args):
    return arith(args, ">", lambda x, y: boolean(x > y))


@glbl("add1")
def op_add1(args):
    (x,) = unpack(args, 1, "add1")
    return rangecheck(numcheck(x, "add1") + 1, "add1")


@glbl("sub1")
def op_sub1(args):
    (x,) = unpack(args, 1, "sub1")
    return rangecheck(numcheck(x, "sub1") - 1, "sub1")


## }}}
## {{{ predicates


@glbl("not")
def op_not(args):
    return unary(args, "not", lambda x: boolean(x is F))


def eq(x, y):
    ## numbers are compared by value, everything else is the same object
    ## or it isn't. symbols are interned so this works for them too.
    if is_number(x) and is_number(y):
        return x == y
    return x is y


@glbl("eq?")
def op_eq(args):
    return binary(args, "eq?", lambda x, y: boolean(eq(x, y)))


@glbl("null?")
def op_null(args):
    return unary(args, "null?", lambda x: boolean(x is EL))


@glbl("atom?")
def op_atom(args):
    return unary(args, "atom?", lambda x: boolean(is_atom(x)))


## }}}
## {{{ lists


@glbl("list")
def op_list(args):
    return args


@glbl("cons")
def op_cons(args):
    return binary(args, "cons", cons)


@glbl("car")
def op_car(args):
    return unary(args, "car", car)


@glbl("cdr")
def op_cdr(args):
    return unary(args, "cdr", cdr)


## }}}

## EOF
