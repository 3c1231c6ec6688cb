"""Diff models"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ChangeMarker(Enum):
    """How a diff line changed"""
    UNCHANGED = "unchanged"
    ADDED = "added"
    REMOVED = "removed"

    @classmethod
    def from_state(cls, state: Optional[str]) -> 'ChangeMarker':
        """Map a record store change state ("added", "removed" or None)"""
        if not state:
            return cls.UNCHANGED
        return cls(state)


@dataclass(frozen=True)
class DiffLine:
    """One line of the manifest diff"""
    text: str
    marker: ChangeMarker = ChangeMarker.UNCHANGED

    @property
    def is_added(self) -> bool:
        return self.marker == ChangeMarker.ADDED
