"""Atom grid abstraction - the read-only contract the ray simulator needs.

An atom grid is an interior of ``size`` x ``size`` cells surrounded by a
one-cell inert border. Any object providing this contract can be probed;
the concrete immutable implementation lives in ``blackbox.core.board``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from blackbox.core.geometry import Position
from blackbox.utils.consts import padded_size


class AtomGrid(ABC):
    """Base class for boards that can be probed by rays.

    Implementations must never report an atom on the border ring, and
    ``has_atom`` must return False for coordinates outside the padded grid
    instead of raising.
    """

    @property
    @abstractmethod
    def size(self) -> int:
        """Interior side length (8 for the classic game)."""
        ...

    @abstractmethod
    def has_atom(self, position: Position) -> bool:
        """Whether an atom occupies ``position``; False outside the grid."""
        ...

    @property
    def padded_size(self) -> int:
        """Side length including the border ring."""
        return padded_size(self.size)

    def is_border(self, position: Position) -> bool:
        """Whether ``position`` lies on the border ring."""
        edge = self.size + 1
        return position.x in (0, edge) or position.y in (0, edge)

    def is_interior(self, position: Position) -> bool:
        return 1 <= position.x <= self.size and 1 <= position.y <= self.size
