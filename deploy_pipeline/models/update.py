"""Update request models"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

from .variables import VariableSet


@dataclass(frozen=True)
class SkipDrain:
    """Which instance groups skip their drain scripts

    ``SkipDrain()`` drains everything, ``SkipDrain(all=True)`` skips every
    group and ``SkipDrain(instance_groups=("db",))`` skips only the listed ones.
    """
    all: bool = False
    instance_groups: Tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def for_groups(cls, groups: List[str]) -> 'SkipDrain':
        """Create an allow-list directive"""
        return cls(instance_groups=tuple(groups))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            'all': self.all,
            'instance_groups': list(self.instance_groups)
        }

    def describe(self) -> str:
        """Human-readable description"""
        if self.all:
            return "all instance groups"
        if self.instance_groups:
            return ", ".join(self.instance_groups)
        return "none"


@dataclass(frozen=True)
class UpdateRequest:
    """Final artifact handed to the record store"""
    manifest: bytes
    recreate: bool = False
    skip_drain: SkipDrain = field(default_factory=SkipDrain)


@dataclass
class DeployRequest:
    """Inputs assembled by the caller for one pipeline run"""
    manifest: bytes
    variables: VariableSet = field(default_factory=VariableSet)
    recreate: bool = False
    skip_drain: SkipDrain = field(default_factory=SkipDrain)
