"""
Core Progress Scope Module

Defines the Scope record tracked for each active operation.
"""

import time
from dataclasses import dataclass, field
from typing import Callable

Clock = Callable[[], float]


@dataclass(eq=False)
class Scope:
    """
    Progress state for one tracked operation.

    Scopes are compared by identity: two operations with the same name are
    still distinct entries on a scope stack.
    """
    name: str
    start_time: float
    last_reported_elapsed_ms: int = 0
    clock: Clock = field(default=time.monotonic, repr=False)

    def elapsed_ms(self) -> int:
        """Whole milliseconds since the scope was created."""
        return int((self.clock() - self.start_time) * 1000)

    def elapsed_seconds(self) -> float:
        return self.clock() - self.start_time
