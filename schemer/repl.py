#!/usr/bin/env python3
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
repl.py - command line front end

    python -m schemer [file ...] [-]

loads each file in order. with no files, or with "-" after them, drops
into an interactive loop afterwards. ^C while something is running
interrupts it; ^C at the prompt throws away the pending input.
"""

## pylint: disable=invalid-name

import locale
import signal
import sys
import traceback

from .errors import IncompleteInputError, LispSyntaxError
from .host import EventLoop
from .reader import read_all
from .session import Session
from .view import ConsoleView

PROMPT = "schemer> "
PROMPT2 = "...... "


def incomplete(text):
    "true if text stops in the middle of an expression"
    try:
        for _ in read_all(text):
            pass
    except IncompleteInputError:
        return True
    except LispSyntaxError:
        return False
    return False


def run(session, host, text):
    "submit text and pump the host until the session goes idle"

    def on_sigint(_signum, _frame):
        session.interrupt()

    old = signal.signal(signal.SIGINT, on_sigint)
    try:
        session.submit(text)
        host.run()
    except Exception:  ## pylint: disable=broad-except
        ## a python-level bug, not a lisp error. we have no clue
        ## what state things are in, so start clean.
        host.clear()
        session.reset()
        traceback.print_exception(*sys.exc_info())
    finally:
        signal.signal(signal.SIGINT, old)


def repl(session, host):
    try:
        import readline as _  ## pylint: disable=import-outside-toplevel
    except ImportError:
        pass

    pending = ""
    while True:
        try:
            line = input(PROMPT2 if pending else PROMPT)
        except EOFError:
            break
        except KeyboardInterrupt:
            pending = ""
            print()
            continue
        pending += line + "\n"
        if incomplete(pending):
            continue
        text, pending = pending, ""
        run(session, host, text)
    print("\nbye")
    return 0


def load(session, host, filename):
    with open(filename, "r", encoding=locale.getpreferredencoding()) as fp:
        run(session, host, fp.read())


def main(argv=None):
    args = sys.argv[1:] if argv is None else argv
    host = EventLoop()
    session = Session(ConsoleView(), host)

    interactive = not args
    for filename in args:
        if filename == "-":
            interactive = True
            break
        load(session, host, filename)
    if interactive:
        return repl(session, host)
    return 1 if session.errors else 0


if __name__ == "__main__":
    raise SystemExit(main())


## EOF
