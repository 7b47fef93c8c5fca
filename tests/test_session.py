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

"""Tests for Session: the interactive run loop against a view and a host."""

import pytest

from schemer import BufferView, EventLoop, Session


def test_define_set_value(run, view):
    assert run("(define x 5) (set! x (+ x 1)) x") == ["6"]
    assert view.enabled


def test_results_in_order(run):
    assert run("1 '(a b) #f car (lambda (x) x)") == [
        "1",
        "(a b)",
        "#f",
        "#<car>",
        "#closure",
    ]


def test_view_cleared_and_disabled(session, host, view):
    view.print("stale")
    session.submit("1 2")
    assert view.outputs == ["1"]
    assert not view.enabled
    assert session.busy
    ## each top-level expression starts in its own turn
    assert len(host) == 1
    host.run()
    assert view.outputs == ["1", "2"]
    assert view.enabled
    assert not session.busy
    assert view.cleared == 1


def test_empty_program(run, view):
    assert run("  ; just a comment\n") == []
    assert view.enabled


def test_error_ends_submission(run):
    out = run("(define a 1)\n(car a)\n(define b 2)")
    assert out == ["LispTypeError: car: expected pair, got 1 at line 2"]


def test_bindings_survive_errors(run, session):
    run("(define a 1) (car a) (define b 2)")
    assert session.errors == 1
    assert run("a") == ["1"]
    assert run("b") == ["UnboundError: b is undefined at line 1"]


def test_syntax_error_after_good_expressions(run):
    out = run("1\n2\n(3")
    assert out == [
        "1",
        "2",
        "IncompleteInputError: unexpected end of input at line 3",
    ]


def test_stray_paren(run):
    assert run("\n)") == ['LispSyntaxError: unexpected ")" at line 2']


def test_number_out_of_range(run):
    (out,) = run("9007199254740993")
    assert out.startswith("LispSyntaxError: number 9007199254740993 too high")


def test_runtime_error_line(run):
    assert run("1\n\n  (set! never-defined 1)") == [
        "1",
        "UnboundError: cannot assign never-defined: not bound at line 3",
    ]


def test_arity_error_message(run):
    assert run("((lambda (x) x))") == [
        "ArityError: not enough arguments at line 1"
    ]


def test_arguments_run_before_operator_check(run):
    assert run("(1 (define y 2))") == [
        "UndefinedValueError: the value of define is undefined "
        "and cannot be used at line 1"
    ]
    assert run("y") == ["2"]
    assert run("(1 nope)") == ["UnboundError: nope is undefined at line 1"]


def test_letcc(run):
    assert run("(letcc k (+ 1 (k 42)))") == ["42"]


def test_continuation_across_submissions(run):
    assert run("(define k 0) (+ 1 (letcc c (begin (set! k c) 1)))") == ["2"]
    assert run("(k 10)") == ["11"]


def test_undefined_never_printed(run):
    assert run("(define f (lambda () (define g 1))) (f) (set! g 2)") == []


def test_busy(session):
    session.submit("1 2")
    with pytest.raises(RuntimeError, match="busy"):
        session.submit("3")


def test_deep_recursion_through_scheduler(run):
    out = run(
        """
(define count (lambda (n) (if (< n 1) 0 (count (sub1 n)))))
(count 20000)
"""
    )
    assert out == ["0"]


def test_small_budget_same_answer():
    view, host = BufferView(), EventLoop()
    session = Session(view, host, budget=1)
    session.submit("(define sq (lambda (x) (* x x))) (sq (sq 3))")
    host.run()
    assert view.outputs == ["81"]


class TestInterrupt:
    LOOP = "(define loop (lambda () (loop))) (loop) (define never 1)"

    def test_interrupt_running(self):
        view, host = BufferView(), EventLoop()
        session = Session(view, host, budget=10)
        session.submit(self.LOOP)
        for _ in range(5):
            host.run_once()
        assert session.busy
        session.interrupt()
        host.run()
        assert view.outputs == ["interrupted"]
        assert view.enabled
        assert not session.busy

        ## everything defined before the interrupt is still there
        session.submit("loop never")
        host.run()
        assert view.outputs == [
            "#closure",
            "UnboundError: never is undefined at line 1",
        ]

    def test_interrupt_between_expressions(self, session, host, view):
        session.submit("1 2 3")
        session.interrupt()
        host.run()
        assert view.outputs == ["1", "interrupted"]
        assert view.enabled

    def test_interrupt_idle(self, session, run):
        session.interrupt()
        assert run("5") == ["5"]


def test_sessions_interleave_on_one_host():
    host = EventLoop()
    program = """
(define sum (lambda (n) (if (< n 1) 0 (+ n (sum (sub1 n))))))
(sum {})
"""
    va, vb = BufferView(), BufferView()
    a = Session(va, host, budget=7)
    b = Session(vb, host, budget=11)
    a.submit(program.format(2000))
    b.submit(program.format(1000))
    host.run()
    assert va.outputs == ["2001000"]
    assert vb.outputs == ["500500"]


def test_sessions_have_their_own_globals(run):
    run("(define only-here 1)")
    view, host = BufferView(), EventLoop()
    other = Session(view, host)
    other.submit("only-here")
    host.run()
    assert view.outputs == ["UnboundError: only-here is undefined at line 1"]
