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
host.py - a deferred-callback facility for when there's no gui around

schedule_soon() queues a callback and returns right away; run() calls
queued callbacks in order until there are none left.
"""

import collections


class EventLoop:
    def __init__(self):
        self.queue = collections.deque()

    def __bool__(self):
        return bool(self.queue)

    def __len__(self):
        return len(self.queue)

    def schedule_soon(self, callback):
        self.queue.append(callback)

    def clear(self):
        self.queue.clear()

    def run_once(self):
        if not self.queue:
            raise ValueError("queue is empty")
        callback = self.queue.popleft()
        callback()

    def run(self):
        while self.queue:
            self.run_once()


## EOF
