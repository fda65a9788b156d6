"""
Core Scope Stack Module

Execution-context-local stack of active progress scopes.

The stack is an immutable tuple held in a ContextVar. Push and pop replace
the value for the current context only, so a forked context (an asyncio task,
or a thread started through bind_context) works on a snapshot of its parent's
stack and never leaks its own scopes back to the parent or to siblings.
"""

import contextvars
import functools
import logging
from concurrent.futures import Executor, Future
from typing import Any, Callable, Optional, Tuple, TypeVar

from scoped_progress.exceptions import ScopeStackError
from scoped_progress.progress.core.scope import Scope

logger = logging.getLogger(__name__)

T = TypeVar("T")

_scopes: contextvars.ContextVar[Tuple[Scope, ...]] = contextvars.ContextVar(
    "scoped_progress_scopes", default=()
)


class ScopeStack:
    """Accessors for the scope stack of the current execution context."""

    @staticmethod
    def snapshot() -> Tuple[Scope, ...]:
        """Return the current context's stack, bottom first."""
        return _scopes.get()

    @staticmethod
    def depth() -> int:
        return len(_scopes.get())

    @staticmethod
    def push(scope: Scope) -> None:
        """
        Push a scope onto the current context's stack.

        Args:
            scope: Scope to make the innermost active scope
        """
        _scopes.set(_scopes.get() + (scope,))
        logger.debug(f"Pushed scope '{scope.name}' (depth {ScopeStack.depth()})")

    @staticmethod
    def peek() -> Scope:
        """
        Return the innermost scope of the current context.

        Raises:
            ScopeStackError: If no scope is active in this context
        """
        stack = _scopes.get()
        if not stack:
            raise ScopeStackError("No active progress scope in the current context")
        return stack[-1]

    @staticmethod
    def pop(expected: Optional[Scope] = None) -> Scope:
        """
        Remove and return the innermost scope of the current context.

        Args:
            expected: When given, the scope the caller believes is on top

        Returns:
            The removed scope

        Raises:
            ScopeStackError: If the stack is empty or its top is not `expected`
        """
        stack = _scopes.get()
        if not stack:
            raise ScopeStackError("Cannot pop a progress scope from an empty stack")

        top = stack[-1]
        if expected is not None and top is not expected:
            raise ScopeStackError(
                f"Progress scope '{expected.name}' disposed out of order; "
                f"innermost active scope is '{top.name}'"
            )

        _scopes.set(stack[:-1])
        logger.debug(f"Popped scope '{top.name}' (depth {len(stack) - 1})")
        return top


def bind_context(fn: Callable[..., T]) -> Callable[..., T]:
    """
    Bind a callable to a snapshot of the caller's current context.

    Threads and executors start from an empty context; wrapping the target
    with bind_context lets the new thread see the scopes active at the point
    of the fork while keeping its own pushes and pops private.

    Args:
        fn: Callable to run in the copied context

    Returns:
        Wrapper that runs `fn` inside the copied context
    """
    ctx = contextvars.copy_context()

    @functools.wraps(fn)
    def runner(*args: Any, **kwargs: Any) -> T:
        # A Context can only be entered by one thread at a time
        return ctx.copy().run(fn, *args, **kwargs)

    return runner


def submit_in_context(executor: Executor, fn: Callable[..., T], *args: Any, **kwargs: Any) -> "Future[T]":
    """Submit `fn` to an executor so it runs in a snapshot of the caller's context."""
    return executor.submit(bind_context(fn), *args, **kwargs)
