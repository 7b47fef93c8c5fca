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
evaluator.py - continuation-passing eval on top of the trampoline

nothing in here ever calls eval recursively. each function does one bit
of work and returns bounce(next, ...). a continuation is any callable
that takes a value and returns the next step.

state that a continuation needs later goes on the frame stack (data.py)
rather than into a python closure: the stack is made of pairs, so a
continuation captures it by just holding on to the head. frames are never
mutated after they're pushed.

every op gets a Frame: x is the expression (or the unevaluated args for a
special form), c is where the value goes, e is the environment.
"""

## pylint: disable=invalid-name

from .data import (
    EL,
    F,
    SENTINEL,
    T,
    Environment,
    Frame,
    Pair,
    Symbol,
    Undefined,
    is_list,
    is_number,
    stack,
    symbol,
    unpack,
    usable,
)
from .errors import ArityError, LispTypeError, UnboundError
from .trampoline import bounce, land, trampoline


## {{{ procedures


class Closure:
    ## pylint: disable=too-few-public-methods

    __slots__ = ["formals", "body", "env"]

    def __init__(self, formals, body, env):
        self.formals, self.body, self.env = formals, body, env

    def __repr__(self):
        return "#closure"

    def __call__(self, frame):
        e = Environment(self.formals, frame.x, self.env)
        return bounce(leval_, Frame(frame, x=self.body, e=e))


class Continuation:
    ## pylint: disable=too-few-public-methods

    __slots__ = ["continuation", "stack"]

    def __init__(self, continuation):
        self.continuation = continuation  ## a python func
        self.stack = stack.get()

    def __repr__(self):
        return "#continuation"

    def __call__(self, frame):
        (x,) = unpack(frame.x, 1, "continuation")
        ## frame.c is dropped on the floor. that's the escape.
        stack.set(self.stack)
        return bounce(self.continuation, x)


class Builtin:
    "a python function from the evaluated arg list to a value"

    ## pylint: disable=too-few-public-methods

    __slots__ = ["name", "func"]

    def __init__(self, name, func):
        self.name, self.func = name, func

    def __repr__(self):
        return f"#<{self.name}>"

    def __call__(self, frame):
        return bounce(frame.c, self.func(frame.x))


PROCEDURES = (Closure, Continuation, Builtin)


def proccheck(x):
    if not isinstance(usable(x), PROCEDURES):
        raise LispTypeError(f"cannot apply {x!r}")
    return x


def symcheck(x, who):
    if not isinstance(x, Symbol):
        raise LispTypeError(f"{who}: expected symbol, got {x!r}")
    return x


## }}}
## {{{ eval


def evaluate(x, env, c=land):
    "the first step of evaluating x in env. hand it to a trampoline."
    return bounce(leval_, Frame(x=x, c=c, e=env))


def leval(x, env):
    "evaluate x to completion right here, no step budget"
    saved = stack.get()
    try:
        func, args = evaluate(x, env)
        return trampoline(func, *args)
    finally:
        stack.set(saved)


def leval_(frame):
    x = frame.x
    if isinstance(x, Symbol):
        return bounce(frame.c, frame.e.lookup(x))
    if isinstance(x, Pair):
        op, args = x.car, x.cdr
        if isinstance(op, Symbol):
            special = SPECIALS.get(op)
            if special is not None:
                return bounce(special, Frame(frame, x=args))
        stack.push(frame, x=args)
        return bounce(leval_, Frame(frame, x=op, c=eval_proc_done))
    if x is EL or x is T or x is F or is_number(x):
        return bounce(frame.c, x)
    raise LispTypeError(f"cannot evaluate {x!r}")


def eval_proc_done(proc):
    frame = stack.pop()
    args = frame.x

    ## shortcut the no-args case
    if args is EL:
        return apply_(proc, Frame(frame, x=EL))

    stack.push(frame, x=proc)
    return bounce(evlis_, Frame(frame, x=args, c=eval_args_done))


def eval_args_done(args):
    frame = stack.pop()
    return apply_(frame.x, Frame(frame, x=args))


def apply_(proc, frame):
    "frame.x holds the already evaluated args, frame.c gets the result"
    return bounce(proccheck(proc), frame)


## }}}
## {{{ evlis


def evlis_(frame):
    "evaluate the list frame.x left to right, deliver the list of values"
    args = frame.x
    if args is EL:
        return bounce(frame.c, EL)

    stack.push(frame, x=SENTINEL)
    return evlis_setup(frame, args)


def evlis_setup(frame, args):
    stack.push(frame, x=args.cdr)
    return bounce(leval_, Frame(frame, x=args.car, c=evlis_next_arg))


def evlis_next_arg(value):
    frame = stack.pop()
    args = frame.x

    usable(value)

    if args is EL:
        ret = Pair(value, EL)
        while True:
            f = stack.pop()
            if f.x is SENTINEL:
                break
            ret = Pair(f.x, ret)
        return bounce(frame.c, ret)

    stack.push(frame, x=value)
    return evlis_setup(frame, args)


## }}}
## {{{ special forms

SPECIALS = {}


def spcl(name):
    def wrap(func):
        SPECIALS[symbol(name)] = func
        return func

    return wrap


def formalscheck(formals):
    x = formals
    while isinstance(x, Pair):
        if not isinstance(x.car, Symbol):
            break
        x = x.cdr
    if x is not EL:
        raise LispTypeError(
            f"lambda: formals must be a list of symbols, got {formals!r}"
        )
    return formals


@spcl("quote")
def op_quote(frame):
    (x,) = unpack(frame.x, 1, "quote")
    return bounce(frame.c, x)


def op_if_cont(value):
    frame = stack.pop()
    branches = frame.x

    ## anything but #f is true
    if usable(value) is F:
        return bounce(leval_, Frame(frame, x=branches.cdr.car))
    return bounce(leval_, Frame(frame, x=branches.car))


@spcl("if")
def op_if(frame):
    test, _, _ = unpack(frame.x, 3, "if")

    stack.push(frame, x=frame.x.cdr)
    return bounce(leval_, Frame(frame, x=test, c=op_if_cont))


@spcl("lambda")
def op_lambda(frame):
    formals, body = unpack(frame.x, 2, "lambda")
    return bounce(frame.c, Closure(formalscheck(formals), body, frame.e))


@spcl("letcc")
def op_letcc(frame):
    "(letcc k body)"
    sym, body = unpack(frame.x, 2, "letcc")

    e = Environment(parent=frame.e)
    ## this is really all there is to it
    e.d[symcheck(sym, "letcc")] = Continuation(frame.c)
    return bounce(leval_, Frame(frame, x=body, e=e))


def op_define_cont(value):
    frame = stack.pop()
    frame.e.define_global(frame.x, usable(value))
    return bounce(frame.c, Undefined("define"))


@spcl("define")
def op_define(frame):
    sym, defn = unpack(frame.x, 2, "define")

    stack.push(frame, x=symcheck(sym, "define"))
    return bounce(leval_, Frame(frame, x=defn, c=op_define_cont))


def op_setbang_cont(value):
    frame = stack.pop()
    frame.e.assign(frame.x, usable(value))
    return bounce(frame.c, Undefined("set!"))


@spcl("set!")
def op_setbang(frame):
    sym, defn = unpack(frame.x, 2, "set!")

    if not frame.e.is_bound(symcheck(sym, "set!")):
        raise UnboundError(f"cannot assign {sym}: not bound")
    stack.push(frame, x=sym)
    return bounce(leval_, Frame(frame, x=defn, c=op_setbang_cont))


def op_begin_setup(frame, body):
    if body.cdr is EL:
        ## last one is in tail position: no frame, caller's continuation
        return bounce(leval_, Frame(frame, x=body.car))
    stack.push(frame, x=body.cdr)
    return bounce(leval_, Frame(frame, x=body.car, c=op_begin_cont))


def op_begin_cont(_):
    frame = stack.pop()
    return op_begin_setup(frame, frame.x)


@spcl("begin")
def op_begin(frame):
    body = frame.x
    if body is EL:
        raise ArityError("begin: expected at least 1 argument, got 0")
    return op_begin_setup(frame, body)


def op_apply_args_done(args):
    frame = stack.pop()
    if not is_list(usable(args)):
        raise LispTypeError(f"apply: expected list, got {args!r}")
    return apply_(frame.x, Frame(frame, x=args))


def op_apply_proc_done(proc):
    frame = stack.pop()
    lst = frame.x

    stack.push(frame, x=proccheck(proc))
    return bounce(leval_, Frame(frame, x=lst, c=op_apply_args_done))


@spcl("apply")
def op_apply(frame):
    "(apply proc list) - a special form so it costs no python stack"
    proc, lst = unpack(frame.x, 2, "apply")

    stack.push(frame, x=lst)
    return bounce(leval_, Frame(frame, x=proc, c=op_apply_proc_done))


## }}}

## EOF
