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
scheduler.py - a trampoline that takes turns

trampoline() in trampoline.py runs until the work is done. that's no good
for an interactive host that must keep breathing, so the scheduler runs at
most `budget` steps per turn. if work is left, it asks the host to call it
again soon and returns. however deep the lisp recursion, the python stack
here stays at one loop plus one step.

between steps is also the only place an interrupt is noticed.

the frame stack is global (data.stack). a run swaps its own stack in at
the start of each turn and back out at the end, so nothing else running
on the host between turns can trample it.
"""

## pylint: disable=invalid-name

from .data import EL, stack
from .errors import InterruptError, LispError
from .trampoline import landed

STEP_BUDGET = 500


class Scheduler:
    def __init__(self, host, budget=STEP_BUDGET):
        if budget < 1:
            raise ValueError(f"budget must be positive, got {budget}")
        self.host = host
        self.budget = budget
        self.step = None  ## (func, args) of the next step
        self.stack = EL  ## frame stack of the run while it's swapped out
        self.on_value = self.on_error = None
        self.interrupted = False

    @property
    def busy(self):
        return self.step is not None

    def run(self, step, on_value, on_error):
        """
        drive step to completion. on_value(value) or on_error(exc) gets
        called exactly once, maybe from this call, maybe from a later turn.
        """
        if self.busy:
            raise RuntimeError("not your fault: scheduler is busy")
        self.step, self.stack = step, EL
        self.on_value, self.on_error = on_value, on_error
        self.interrupted = False
        self.turn()

    def interrupt(self):
        if self.busy:
            self.interrupted = True

    def reset(self):
        "forget the current run and return its callbacks"
        ret = self.on_value, self.on_error
        self.step, self.stack = None, EL
        self.on_value = self.on_error = None
        self.interrupted = False
        return ret

    def steps(self):
        func, args = self.step
        for _ in range(self.budget):
            if self.interrupted:
                raise InterruptError("interrupted")
            result = func(*args)
            if landed(result):
                return True, result[0]
            func, args = result
        self.step = func, args
        return False, None

    def turn(self):
        if self.step is None:
            return
        saved = stack.get()
        stack.set(self.stack)
        error = None
        try:
            done, value = self.steps()
        except LispError as exc:
            done, value, error = True, None, exc
        except BaseException:
            ## no clue what just happened; drop the run and let it fly
            stack.set(saved)
            self.reset()
            raise
        self.stack = stack.get()
        stack.set(saved)

        if not done:
            self.host.schedule_soon(self.turn)
            return
        on_value, on_error = self.reset()
        if error is None:
            on_value(value)
        else:
            on_error(error)


## EOF
