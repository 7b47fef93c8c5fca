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

"shared fixtures for the schemer tests"

import pytest

from schemer import BufferView, EventLoop, Session, execute, stringify


@pytest.fixture
def view():
    return BufferView()


@pytest.fixture
def host():
    return EventLoop()


@pytest.fixture
def session(view, host):
    return Session(view, host)


@pytest.fixture
def run(session, host):
    """submit text, pump the host dry, return what got printed"""

    def run_(text):
        session.submit(text)
        host.run()
        return session.view.outputs

    return run_


@pytest.fixture
def ev():
    """printed form of the last value of text, evaluated without a budget"""

    def ev_(text):
        return stringify(execute(text)[-1])

    return ev_
