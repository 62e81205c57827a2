from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class NameSourcePort(Protocol):
    def read_lines(self) -> list[str]:
        """Return the raw lines of the name list."""
