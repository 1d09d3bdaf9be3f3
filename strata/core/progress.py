from __future__ import annotations

"""Progress reporting primitives.

Use-cases may optionally accept a progress callback to report long-running
operations (one step per model x fold during a comparison). Scripts and
notebooks can adapt their own progress bars to this protocol.
"""

from typing import Protocol, Optional


class ProgressCallback(Protocol):
    """A minimal progress reporting interface."""

    def init(self, *, total: int, label: Optional[str] = None) -> None:  # pragma: no cover
        ...

    def update(self, *, current: int, label: Optional[str] = None) -> None:  # pragma: no cover
        ...

    def finalize(self, *, label: Optional[str] = None) -> None:  # pragma: no cover
        ...
