"""Variable models"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, List, Optional, Tuple

if TYPE_CHECKING:
    from ..core.interfaces import VariableSource


@dataclass(frozen=True)
class VarKV:
    """Directly supplied variable (name=value)"""
    name: str
    value: Any

    @classmethod
    def from_string(cls, text: str) -> 'VarKV':
        """Create from 'name=value' text"""
        name, sep, value = text.partition('=')
        if not sep or not name:
            raise ValueError(f"Expected variable '{text}' to be in format 'name=value'")
        return cls(name=name, value=value)


@dataclass
class VariableSet:
    """Ordered variable sources for one interpolation run

    Direct pairs are consulted before any source; sources are consulted
    in the order they are listed.
    """
    kvs: List[VarKV] = field(default_factory=list)
    sources: List['VariableSource'] = field(default_factory=list)

    def add_kv(self, name: str, value: Any) -> None:
        """Append a direct pair"""
        self.kvs.append(VarKV(name=name, value=value))

    def add_source(self, source: 'VariableSource') -> None:
        """Append a lower-priority source"""
        self.sources.append(source)

    def find_kv(self, name: str) -> Tuple[bool, Optional[Any]]:
        """Find a direct pair by name (first match wins)"""
        for kv in self.kvs:
            if kv.name == name:
                return True, kv.value
        return False, None
