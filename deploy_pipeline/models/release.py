# deploy_pipeline/models/release.py
"""Release models for the update pipeline"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from ..constants import VERSION_QUALIFIER_SEPARATOR, VERSION_SEGMENT_SEPARATOR


def _segment_key(segment: str) -> Tuple[Tuple[int, int, str], ...]:
    keys = []
    for component in segment.split(VERSION_SEGMENT_SEPARATOR):
        if component.isdecimal():
            keys.append((0, int(component), ''))
        else:
            keys.append((1, 0, component))
    return tuple(keys)


@dataclass(frozen=True)
class ParsedVersion:
    """Release version split into base and optional qualifier

    Numeric components compare numerically and sort before alphanumeric
    ones; a version without qualifier sorts before the same base with one.
    """
    base: str
    qualifier: Optional[str] = None

    def sort_key(self) -> Tuple[Any, ...]:
        """Key used for ordering"""
        if self.qualifier is None:
            return _segment_key(self.base), 0, ()
        return _segment_key(self.base), 1, _segment_key(self.qualifier)

    def __lt__(self, other: 'ParsedVersion') -> bool:
        if not isinstance(other, ParsedVersion):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __le__(self, other: 'ParsedVersion') -> bool:
        if not isinstance(other, ParsedVersion):
            return NotImplemented
        return self.sort_key() <= other.sort_key()

    def __gt__(self, other: 'ParsedVersion') -> bool:
        if not isinstance(other, ParsedVersion):
            return NotImplemented
        return self.sort_key() > other.sort_key()

    def __ge__(self, other: 'ParsedVersion') -> bool:
        if not isinstance(other, ParsedVersion):
            return NotImplemented
        return self.sort_key() >= other.sort_key()

    def __str__(self) -> str:
        if self.qualifier is None:
            return self.base
        return f"{self.base}{VERSION_QUALIFIER_SEPARATOR}{self.qualifier}"


@dataclass(frozen=True)
class UploadReleaseOpts:
    """Everything the uploader needs to fetch and register one release"""
    name: str
    url: str
    sha1: Optional[str]
    version: ParsedVersion

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            'name': self.name,
            'url': self.url,
            'sha1': self.sha1,
            'version': str(self.version)
        }
