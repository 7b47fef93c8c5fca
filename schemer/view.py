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
view.py - where results go

a view is anything with clear(), print(text), disable() and enable(). the
session clears and disables it before a run, prints one string per result
or error, and enables it again when it's done.
"""

import sys


class View:
    "does nothing; subclass and override"

    def clear(self):
        ...

    def print(self, text):
        ...

    def disable(self):
        ...

    def enable(self):
        ...


class BufferView(View):
    "keeps everything it's told; handy for tests and embedding"

    def __init__(self):
        self.outputs = []
        self.enabled = True
        self.cleared = 0

    def clear(self):
        self.outputs = []
        self.cleared += 1

    def print(self, text):
        self.outputs.append(text)

    def disable(self):
        self.enabled = False

    def enable(self):
        self.enabled = True


class ConsoleView(View):
    "one result per line on a stream"

    def __init__(self, fp=None):
        self.fp = sys.stdout if fp is None else fp
        self.busy = False

    def print(self, text):
        self.fp.write(text + "\n")
        self.fp.flush()

    def disable(self):
        self.busy = True

    def enable(self):
        self.busy = False


## EOF
