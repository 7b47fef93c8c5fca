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
schemer - an interactive evaluator for a small scheme

    >>> from schemer import execute, stringify
    >>> [stringify(x) for x in execute("(define x 5) (set! x (add1 x)) x")[2:]]
    ['6']

the reader turns text into expressions, the evaluator turns an expression
into a chain of suspended steps in continuation-passing style, and a
trampoline (or the budgeted Scheduler) runs the chain. Session glues all
of that to a view and a host that can call things back later.
"""

from .primitives import BUILTINS, glbl, make_global_env
from .data import (
    EL,
    F,
    MAX_INT,
    T,
    Environment,
    Pair,
    Symbol,
    Undefined,
    cons,
    lisp_list_to_py_list,
    py_list_to_lisp_list,
    symbol,
)
from .errors import (
    ArityError,
    IncompleteInputError,
    InterruptError,
    LispError,
    LispSyntaxError,
    LispTypeError,
    UnboundError,
    UndefinedValueError,
)
from .evaluator import (
    SPECIALS,
    Builtin,
    Closure,
    Continuation,
    evaluate,
    leval,
)
from .host import EventLoop
from .printer import stringify
from .reader import EOF, Tokenizer, parse, read, read_all
from .scheduler import STEP_BUDGET, Scheduler
from .session import Session, execute
from .trampoline import bounce, land, trampoline
from .view import BufferView, ConsoleView, View

__version__ = "0.1.0"

## EOF
