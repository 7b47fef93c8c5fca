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
printer.py - values back to text

lists are walked on the frame stack with the trampoline, same as eval, so
a long or deeply nested result can't blow the python stack on its way out.
everything that isn't a pair knows how to print itself via repr().
"""

## pylint: disable=invalid-name

from .data import SENTINEL, EL, Frame, Pair, stack
from .trampoline import bounce, land, trampoline


def stringify(x):
    saved = stack.get()
    try:
        return trampoline(stringify_, Frame(x=x, c=land, e=EL))
    finally:
        stack.set(saved)


def stringify_setup(frame, args):
    stack.push(frame, x=args.cdr)
    return bounce(stringify_, Frame(frame, x=args.car, c=stringify_cont))


def stringify_cont(value):
    frame = stack.pop()
    args = frame.x

    if args is EL:
        parts = [value]
        while True:
            f = stack.pop()
            if f.x is SENTINEL:
                break
            parts.append(f.x)
        parts.reverse()
        return bounce(frame.c, "(" + " ".join(parts) + ")")

    stack.push(frame, x=value)
    return stringify_setup(frame, args)


def stringify_(frame):
    x = frame.x
    if not isinstance(x, Pair):
        ## #t #f () numbers symbols #closure #<name> #continuation
        return bounce(frame.c, repr(x))

    stack.push(frame, x=SENTINEL)  ## sentinel

    return stringify_setup(frame, x)


## EOF
