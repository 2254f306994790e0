"""
Core data models for weighted graphs.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Sequence, Tuple


@dataclass(frozen=True)
class Edge:
    """Represents an undirected weighted edge."""
    u: str
    v: str
    weight: int

    def endpoints(self) -> Tuple[str, str]:
        return self.u, self.v

    def __str__(self) -> str:
        return f"{self.u} - {self.v} ({self.weight})"


def iter_pairs(flat: Sequence[str]) -> Iterator[Tuple[str, str]]:
    """
    Iterate a flattened edge sequence as vertex pairs.
    
    Elements ``2i`` and ``2i + 1`` form pair ``i``. A trailing unpaired
    element is ignored; callers that care must check the length first.
    
    Args:
        flat: Flattened sequence of vertex identifiers
        
    Returns:
        Iterator over ``(u, v)`` tuples
    """
    for i in range(0, len(flat) - 1, 2):
        yield flat[i], flat[i + 1]


def flatten_pairs(pairs: Iterable[Tuple[str, str]]) -> List[str]:
    """Flatten ``(u, v)`` pairs into ``[u0, v0, u1, v1, ...]``."""
    flat: List[str] = []
    for u, v in pairs:
        flat.append(u)
        flat.append(v)
    return flat
