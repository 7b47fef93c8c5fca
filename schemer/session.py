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
session.py - ties reader, evaluator, scheduler, printer and view together

submit() takes a whole program. top-level expressions are read and run one
at a time, each starting in a fresh host turn. every result that isn't the
undefined marker gets printed. the first error is printed and ends the
submission; whatever got defined before it stays defined.
"""

## pylint: disable=invalid-name

from .primitives import make_global_env
from .data import Undefined
from .errors import InterruptError, LispError
from .evaluator import evaluate, leval
from .printer import stringify
from .reader import EOF, Tokenizer, read, read_all
from .scheduler import STEP_BUDGET, Scheduler


class Session:
    ## pylint: disable=too-many-instance-attributes

    def __init__(self, view, host, budget=STEP_BUDGET, genv=None):
        self.view = view
        self.host = host
        self.genv = make_global_env() if genv is None else genv
        self.scheduler = Scheduler(host, budget)
        self.tokenizer = None
        self.line = None  ## where the current top-level expression starts
        self.interrupted = False
        self.errors = 0

    @property
    def busy(self):
        return self.tokenizer is not None

    def submit(self, text):
        if self.busy:
            raise RuntimeError("not your fault: session is busy")
        self.view.clear()
        self.view.disable()
        self.tokenizer = Tokenizer(text)
        self.interrupted = False
        self.next_expression()

    def interrupt(self):
        if not self.busy:
            return
        if self.scheduler.busy:
            self.scheduler.interrupt()
        else:
            ## between expressions; next_expression() will see it
            self.interrupted = True

    def reset(self):
        "abandon whatever was going on, e.g. after a python exception"
        self.scheduler.reset()
        self.tokenizer = None
        self.interrupted = False
        self.view.enable()

    def next_expression(self):
        if not self.busy:
            return
        if self.interrupted:
            self.failed(InterruptError("interrupted"))
            return
        tokenizer = self.tokenizer
        try:
            tokenizer.peek()
            self.line = tokenizer.line
            x = read(tokenizer)
        except LispError as exc:
            self.failed(exc)
            return
        if x is EOF:
            self.finish()
            return
        self.scheduler.run(evaluate(x, self.genv), self.succeeded, self.failed)

    def succeeded(self, value):
        if not isinstance(value, Undefined):
            self.view.print(stringify(value))
        self.host.schedule_soon(self.next_expression)

    def failed(self, exc):
        self.errors += 1
        if isinstance(exc, InterruptError):
            self.view.print(str(exc))
        else:
            if exc.line is None:
                exc.line = self.line
            self.view.print(f"{exc.__class__.__name__}: {exc}")
        self.finish()

    def finish(self):
        self.tokenizer = None
        self.view.enable()


def execute(text, genv=None):
    "evaluate every expression in text right now, return the values"
    genv = make_global_env() if genv is None else genv
    return [leval(x, genv) for x in read_all(text)]


## EOF
