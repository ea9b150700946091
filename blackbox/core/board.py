"""Immutable board value and the board-provider helpers.

A Board is created once per game round and shared read-only by every ray
fired during that round. Nothing in this module mutates an existing board;
``with_atom`` and the builders return new instances.
"""

from __future__ import annotations

import random
from collections.abc import Iterable, Sequence
from typing import Optional

from blackbox.core.exceptions import BoardError
from blackbox.core.geometry import Position
from blackbox.interfaces.board import AtomGrid
from blackbox.utils.consts import ConstUtils, padded_size


class Board(AtomGrid):
    """Padded square grid holding a fixed set of atoms.

    Atoms may only occupy interior cells ``1..size`` on both axes; the
    border ring is always empty.
    """

    def __init__(self, size: int = ConstUtils.GRID_SIZE, atoms: Iterable[tuple[int, int]] = ()):
        if size < 1:
            raise BoardError(f"Board size must be positive, got {size}")
        self._size = size
        cells = frozenset(Position(*atom) for atom in atoms)
        for cell in cells:
            if not (1 <= cell.x <= size and 1 <= cell.y <= size):
                raise BoardError(
                    f"Atom at ({cell.x}, {cell.y}) is outside the {size}x{size} interior",
                    position=(cell.x, cell.y),
                )
        self._atoms = cells

    @classmethod
    def from_atoms(cls, atoms: Iterable[tuple[int, int]], size: int = ConstUtils.GRID_SIZE) -> Board:
        return cls(size=size, atoms=atoms)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int | bool]]) -> Board:
        """Build a board from a padded grid given row by row (``rows[y][x]``).

        Cells are truthy for an atom. The grid must be square with a side of
        at least 3 and an empty border.
        """
        side = len(rows)
        if side < 3:
            raise BoardError(f"Padded grid must be at least 3x3, got {side} rows")
        for y, row in enumerate(rows):
            if len(row) != side:
                raise BoardError(
                    f"Row {y} has {len(row)} cells, expected {side}",
                    details={"row": y},
                )

        size = side - 2
        atoms = []
        for y, row in enumerate(rows):
            for x, cell in enumerate(row):
                if not cell:
                    continue
                if x in (0, side - 1) or y in (0, side - 1):
                    raise BoardError(f"Atom on border cell ({x}, {y})", position=(x, y))
                atoms.append(Position(x, y))
        return cls(size=size, atoms=atoms)

    @property
    def size(self) -> int:
        return self._size

    @property
    def atoms(self) -> tuple[Position, ...]:
        """Atom positions sorted by row, then column."""
        return tuple(sorted(self._atoms, key=lambda p: (p.y, p.x)))

    @property
    def atom_count(self) -> int:
        return len(self._atoms)

    def has_atom(self, position: Position) -> bool:
        # Out-of-grid reads are plain set misses.
        return position in self._atoms

    def with_atom(self, position: tuple[int, int]) -> Board:
        """Return a new board with an extra atom at ``position``."""
        return Board(size=self._size, atoms=self._atoms | {Position(*position)})

    def to_rows(self) -> list[list[bool]]:
        """Padded grid as nested lists, indexed ``rows[y][x]``."""
        side = padded_size(self._size)
        return [[Position(x, y) in self._atoms for x in range(side)] for y in range(side)]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._size == other._size and self._atoms == other._atoms

    def __hash__(self) -> int:
        return hash((self._size, self._atoms))

    def __repr__(self) -> str:
        return f"Board(size={self._size}, atoms={list(self.atoms)})"


def create_empty_board(size: int = ConstUtils.GRID_SIZE) -> Board:
    """Board with no atoms."""
    return Board(size=size)


def place_atoms(
    count: int = ConstUtils.DEFAULT_ATOM_COUNT,
    size: int = ConstUtils.GRID_SIZE,
    rng: Optional[random.Random] = None,
) -> Board:
    """Hide ``count`` atoms on distinct random interior cells.

    Args:
        count: Number of atoms to place
        size: Interior side length
        rng: Random source; pass a seeded ``random.Random`` for repeatable boards

    Raises:
        BoardError: If count is negative or exceeds the interior cell count
    """
    cells = size * size
    if count < 0 or count > cells:
        raise BoardError(
            f"Cannot place {count} atoms on a {size}x{size} interior",
            details={"count": count, "cells": cells},
        )

    rng = rng or random.Random()
    interior = [Position(x, y) for y in range(1, size + 1) for x in range(1, size + 1)]
    return Board(size=size, atoms=rng.sample(interior, count))
