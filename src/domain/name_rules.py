"""Name-based selection rules: exclusions and explicit display priority."""

from typing import Dict, FrozenSet, Iterable, Optional

from src.domain.repository import normalize_name


class ExclusionSet:
    """Read-only set of repository names, matched case-insensitively."""

    def __init__(self, names: Iterable[str] = ()):
        self._names: FrozenSet[str] = frozenset(
            normalize_name(name) for name in names if name.strip()
        )

    def __contains__(self, name: str) -> bool:
        return normalize_name(name) in self._names

    def __len__(self) -> int:
        return len(self._names)

    def __repr__(self) -> str:
        return f"ExclusionSet({sorted(self._names)!r})"


class PriorityOrder:
    """Read-only ordered list of repository names shown before all others."""

    def __init__(self, names: Iterable[str] = ()):
        self._positions: Dict[str, int] = {}
        for name in names:
            key = normalize_name(name)
            if key and key not in self._positions:
                # First occurrence wins
                self._positions[key] = len(self._positions)

    def index_of(self, name: str) -> Optional[int]:
        """Return the priority position of ``name``, or None if not listed."""
        return self._positions.get(normalize_name(name))

    def __contains__(self, name: str) -> bool:
        return normalize_name(name) in self._positions

    def __len__(self) -> int:
        return len(self._positions)

    def __repr__(self) -> str:
        ordered = sorted(self._positions, key=self._positions.__getitem__)
        return f"PriorityOrder({ordered!r})"
