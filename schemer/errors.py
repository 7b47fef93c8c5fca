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

"error taxonomy. everything the evaluator raises on purpose is a LispError."

## pylint: disable=invalid-name


class LispError(Exception):
    "base class; line is the source line when known"

    def __init__(self, message, line=None):
        super().__init__(message)
        self.message = message
        self.line = line

    def __str__(self):
        if self.line is None:
            return self.message
        return f"{self.message} at line {self.line}"


class LispSyntaxError(LispError):
    "malformed token, unbalanced parens, number out of range"


class IncompleteInputError(LispSyntaxError):
    "input ran out in the middle of an expression"


class ArityError(LispError):
    "wrong number of arguments to a special form or procedure"


class UnboundError(LispError):
    "lookup or set! of a name with no binding"


class LispTypeError(LispError):
    "wrong kind of value"


class UndefinedValueError(LispError):
    "the value of define or set! was used"


class InterruptError(LispError):
    "the run was abandoned by interrupt()"


## EOF
