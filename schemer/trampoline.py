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
trampoline.py - the suspended-step protocol everything else is built on

a step is what bounce() returns: the next function and its args, not yet
called. whoever drives the trampoline calls it, gets the next step back,
and repeats. a step that has nothing left to do returns land(value)
instead. so instead of
    return f(x)
everybody writes
    return bounce(f, x)
and python's stack never gets deeper than one call.

trampoline() below drives a chain of steps to the end in one go. the
scheduler (scheduler.py) does the same thing but in bounded turns.
"""

## pylint: disable=invalid-name


def trampoline(func, *args):
    """
    main entry for an unbounded trampoline. func(*args) should return either
        - bounce(f, ...) which will be executed next
        - land(value) and value will be returned by trampoline()
    """
    while True:
        result = func(*args)
        assert isinstance(result, tuple) and result, result
        if len(result) == 1:
            return result[0]
        assert len(result) == 2, result
        func, args = result


def bounce(func, *args):
    "keep bouncing by returning the next func and args"
    return func, args


def land(value):
    "finish up and return the result to the trampoline() caller"
    return (value,)


def landed(result):
    "true if a step result is land(value) rather than another bounce()"
    return len(result) == 1


## EOF
