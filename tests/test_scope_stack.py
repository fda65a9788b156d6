"""Tests for the per-context scope stack and context propagation."""

import asyncio
import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from scoped_progress.exceptions import ScopeStackError
from scoped_progress.progress.core.scope import Scope
from scoped_progress.progress.core.stack import ScopeStack, bind_context, submit_in_context


def make_scope(name: str) -> Scope:
    return Scope(name=name, start_time=0.0, clock=lambda: 0.0)


class TestScopeStack:
    def test_push_peek_pop_is_lifo(self):
        outer, inner = make_scope("outer"), make_scope("inner")
        ScopeStack.push(outer)
        ScopeStack.push(inner)

        assert ScopeStack.depth() == 2
        assert ScopeStack.peek() is inner
        assert ScopeStack.snapshot() == (outer, inner)

        assert ScopeStack.pop() is inner
        assert ScopeStack.peek() is outer
        assert ScopeStack.pop() is outer
        assert ScopeStack.depth() == 0

    def test_peek_on_empty_stack_fails_fast(self):
        with pytest.raises(ScopeStackError):
            ScopeStack.peek()

    def test_pop_on_empty_stack_fails_fast(self):
        with pytest.raises(ScopeStackError):
            ScopeStack.pop()

    def test_pop_with_wrong_expected_scope_leaves_stack_untouched(self):
        outer, inner = make_scope("outer"), make_scope("inner")
        ScopeStack.push(outer)
        ScopeStack.push(inner)

        with pytest.raises(ScopeStackError, match="out of order"):
            ScopeStack.pop(expected=outer)

        assert ScopeStack.snapshot() == (outer, inner)
        ScopeStack.pop(expected=inner)
        ScopeStack.pop(expected=outer)

    def test_scopes_with_equal_names_are_distinct(self):
        first, second = make_scope("same"), make_scope("same")
        ScopeStack.push(first)
        ScopeStack.push(second)

        with pytest.raises(ScopeStackError):
            ScopeStack.pop(expected=first)

        ScopeStack.pop(expected=second)
        ScopeStack.pop(expected=first)


class TestBindContext:
    def test_thread_sees_parent_snapshot_but_parent_never_sees_child(self):
        parent = make_scope("parent")
        ScopeStack.push(parent)
        seen = {}

        def child():
            seen["inherited"] = ScopeStack.snapshot()
            ScopeStack.push(make_scope("child"))
            seen["depth"] = ScopeStack.depth()

        thread = threading.Thread(target=bind_context(child))
        thread.start()
        thread.join()

        assert seen["inherited"] == (parent,)
        assert seen["depth"] == 2
        assert ScopeStack.snapshot() == (parent,)
        ScopeStack.pop(expected=parent)

    def test_snapshot_is_taken_at_bind_time(self):
        first = make_scope("first")
        ScopeStack.push(first)
        runner = bind_context(ScopeStack.snapshot)
        ScopeStack.push(make_scope("later"))

        assert runner() == (first,)

        ScopeStack.pop()
        ScopeStack.pop()

    def test_siblings_do_not_observe_each_other(self):
        barrier = threading.Barrier(2)
        seen = {}

        def sibling(name):
            ScopeStack.push(make_scope(name))
            barrier.wait()
            seen[name] = [scope.name for scope in ScopeStack.snapshot()]
            barrier.wait()
            ScopeStack.pop()

        with ThreadPoolExecutor(max_workers=2) as executor:
            futures = [submit_in_context(executor, sibling, name) for name in ("a", "b")]
            for future in futures:
                future.result()

        assert seen == {"a": ["a"], "b": ["b"]}
        assert ScopeStack.depth() == 0

    def test_same_bound_callable_can_run_twice(self):
        runner = bind_context(lambda: ScopeStack.push(make_scope("x")) or ScopeStack.depth())
        assert runner() == 1
        assert runner() == 1
        assert ScopeStack.depth() == 0


def test_asyncio_tasks_fork_the_stack():
    parent = make_scope("parent")
    ScopeStack.push(parent)

    async def task(name):
        ScopeStack.push(make_scope(name))
        await asyncio.sleep(0)
        names = [scope.name for scope in ScopeStack.snapshot()]
        ScopeStack.pop()
        return names

    async def run_all():
        return await asyncio.gather(task("a"), task("b"))

    results = asyncio.run(run_all())

    assert results == [["parent", "a"], ["parent", "b"]]
    assert ScopeStack.snapshot() == (parent,)
    ScopeStack.pop(expected=parent)
