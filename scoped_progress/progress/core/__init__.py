"""
Core Progress Components

Contains the scope record, the per-context scope stack and the reporter.
"""

from scoped_progress.progress.core.scope import Scope
from scoped_progress.progress.core.stack import ScopeStack, bind_context, submit_in_context
from scoped_progress.progress.core.reporter import ProgressReporter, ProgressScope

__all__ = [
    'Scope',
    'ScopeStack',
    'bind_context',
    'submit_in_context',
    'ProgressReporter',
    'ProgressScope',
]
