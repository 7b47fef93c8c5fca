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
data.py - the value domain: symbols, booleans, pairs, the empty list, the
undefined marker, environments, and the evaluator's frame stack.

numbers are plain python ints. booleans are NOT python bools: True == 1
and isinstance(True, int) would make #t look like a number, so T and F
are their own singletons.
"""

## pylint: disable=invalid-name,too-few-public-methods

from .errors import (
    ArityError,
    LispTypeError,
    UnboundError,
    UndefinedValueError,
)


## {{{ atoms


class EL_:
    def __repr__(self):
        return "()"


EL = EL_()
del EL_


class T_:
    def __repr__(self):
        return "#t"


T = T_()
del T_


class F_:
    def __repr__(self):
        return "#f"


F = F_()
del F_


SENTINEL = object()

## biggest integer a double holds exactly. the language promises no more.
MAX_INT = 2**53


class Symbol(str):
    __repr__ = str.__str__


SYMBOLS = {}  ## global symbol table


def symbol(s):
    assert s and type(s) is str  ## pylint: disable=unidiomatic-typecheck
    return SYMBOLS.setdefault(s, Symbol(s))


def boolean(x):
    return T if x else F


def is_number(x):
    return isinstance(x, int)


## }}}
## {{{ undefined marker


class Undefined:
    "what define and set! hand back. never a legitimate value."

    __slots__ = ["form"]

    def __init__(self, form):
        self.form = form

    def __repr__(self):
        return f"#undefined<{self.form}>"


def usable(value):
    if isinstance(value, Undefined):
        raise UndefinedValueError(
            f"the value of {value.form} is undefined and cannot be used"
        )
    return value


## }}}
## {{{ pair


class Pair:
    __slots__ = ["car", "cdr"]

    def __init__(self, car, cdr):
        self.car = car
        self.cdr = cdr

    def __repr__(self):
        ## pylint: disable=import-outside-toplevel,cyclic-import
        from .printer import stringify

        return stringify(self)


def is_list(x):
    ## every pair we ever build has a list for its cdr, so checking
    ## the head is enough
    return x is EL or isinstance(x, Pair)


def is_atom(x):
    return not is_list(x)


def cons(x, y):
    if not is_list(y):
        raise LispTypeError(f"cons: expected list, got {y!r}")
    return Pair(x, y)


def car(x):
    if not isinstance(x, Pair):
        raise LispTypeError(f"car: expected pair, got {x!r}")
    return x.car


def cdr(x):
    if not isinstance(x, Pair):
        raise LispTypeError(f"cdr: expected pair, got {x!r}")
    return x.cdr


class ListBuilder:
    "collects items, then conses them up right to left in get()"

    def __init__(self):
        self.items = []

    def append(self, x):
        self.items.append(x)

    def get(self):
        return py_list_to_lisp_list(self.items)


def py_list_to_lisp_list(lst):
    ret = EL
    for x in reversed(lst):
        ret = Pair(x, ret)
    return ret


def lisp_list_to_py_list(lst):
    ret = []
    while lst is not EL:
        ret.append(lst.car)
        lst = lst.cdr
    return ret


def length(lst):
    n = 0
    while lst is not EL:
        n += 1
        lst = lst.cdr
    return n


def unpack(lst, n, who):
    "split exactly n items off the front of lst or complain about arity"
    ret = []
    for _ in range(n):
        if lst is EL:
            raise ArityError(
                f"{who}: expected {n} argument{'s' * (n != 1)}, "
                f"got {len(ret)}"
            )
        ret.append(lst.car)
        lst = lst.cdr
    if lst is not EL:
        raise ArityError(
            f"{who}: expected {n} argument{'s' * (n != 1)}, "
            f"got {n + length(lst)}"
        )
    return ret


## }}}
## {{{ stack


class Stack:
    "a stack made of pairs so a continuation can grab it for free"

    __slots__ = ["s"]

    def __init__(self):
        self.s = EL

    def __bool__(self):
        return self.s is not EL

    def push(self, thing):
        self.s = Pair(thing, self.s)

    def pop(self):
        if self.s is EL:
            raise RuntimeError("not your fault: frame stack underflow")
        ret, self.s = self.s.car, self.s.cdr
        return ret

    ## for continuations and the scheduler

    def get(self):
        return self.s

    def set(self, value):
        self.s = value


class Frame:
    "x: expression or payload, c: continuation, e: environment"

    __slots__ = ["x", "c", "e"]

    def __init__(self, f=None, x=None, c=None, e=None):
        self.x = f.x if x is None else x
        self.c = f.c if c is None else c
        self.e = f.e if e is None else e

    def __repr__(self):
        return f"{self.__class__.__name__}({self.x!r}, {self.c!r}, {self.e!r})"


class FrameStack(Stack):
    def push(self, thing, **kw):
        super().push(Frame(thing, **kw))


stack = FrameStack()


## }}}
## {{{ environment


class Environment:
    """
    one frame of the environment chain. every frame but the root points at
    its parent; the root is the global frame.
    """

    __slots__ = ["p", "d"]

    def __init__(self, params=EL, args=EL, parent=None):
        self.p = parent
        self.d = {}
        self.bind(params, args)

    def __repr__(self):
        return f"<{self.__class__.__name__} {len(self.d)} names>"

    def bind(self, params, args):
        ## params were checked by lambda, so they're a list of symbols
        while params is not EL:
            if args is EL:
                raise ArityError("not enough arguments")
            self.d[params.car] = args.car
            params, args = params.cdr, args.cdr
        if args is not EL:
            raise ArityError("too many arguments")

    def find(self, sym):
        e = self
        while e is not None:
            if sym in e.d:
                return e
            e = e.p
        return None

    def lookup(self, sym):
        e = self.find(sym)
        if e is None:
            raise UnboundError(f"{sym} is undefined")
        return e.d[sym]

    def is_bound(self, sym):
        return self.find(sym) is not None

    def assign(self, sym, value):
        "set! semantics: the innermost frame that already has sym"
        e = self.find(sym)
        if e is None:
            raise UnboundError(f"cannot assign {sym}: not bound")
        e.d[sym] = value

    def root(self):
        e = self
        while e.p is not None:
            e = e.p
        return e

    def define_global(self, sym, value):
        "define semantics: always the global frame, wherever we are"
        self.root().d[sym] = value


## }}}

## EOF
