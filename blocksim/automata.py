"""Toroidal 3D cell grid for cellular automata.

The grid stores one unsigned integer state per cell in a flat list. The
meaning of a state (alive/dead, material id, ...) belongs to the caller.

Addressing
----------
Cells are laid out so that x varies fastest, then z, then y:

    index = x + y * (x_len * z_len) + z * x_len

Every traversal (``iter_states``, ``iter_cells``, ``iter_coords``) follows
this order, so the n-th item of one traversal is the n-th item of the
others. Consumers rely on this to correlate sequence position with
coordinate.

Wrapping
--------
Neighborhood queries treat opposite faces of the grid as adjacent: every
neighbor coordinate is reduced modulo the extents before it is returned.
Direct reads and writes are not wrapped. A read past the end of the grid
returns the default state; a write past the end raises ``GridIndexError``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple

from blocksim.exceptions import CellStateError, ConfigurationError, GridIndexError


Coord = Tuple[int, int, int]

DEFAULT_STATE = 0

_MOORE_OFFSETS: Tuple[Coord, ...] = tuple(
    (dx, dy, dz) for dx in (-1, 0, 1) for dy in (-1, 0, 1) for dz in (-1, 0, 1)
)

_VON_NEUMANN_OFFSETS: Tuple[Coord, ...] = (
    (-1, 0, 0),
    (1, 0, 0),
    (0, -1, 0),
    (0, 1, 0),
    (0, 0, -1),
    (0, 0, 1),
)


def checked_state(state) -> int:
    """Return ``state`` as an int, rejecting negative and fractional values.

    Raises:
        CellStateError: If the value is not a non-negative integer
    """
    try:
        value = int(state)
    except (TypeError, ValueError, OverflowError) as e:
        raise CellStateError(f"Cell state must be a non-negative integer, got {state!r}") from e
    if value != state or value < 0:
        raise CellStateError(f"Cell state must be a non-negative integer, got {state!r}")
    return value


@dataclass(frozen=True)
class GridSize:
    """Extents of a grid along each axis."""

    x_len: int
    y_len: int
    z_len: int

    def __post_init__(self) -> None:
        for name in ("x_len", "y_len", "z_len"):
            value = getattr(self, name)
            if int(value) != value or value <= 0:
                raise ConfigurationError(f"GridSize.{name} must be a positive integer, got {value!r}")

    @classmethod
    def from_sequence(cls, values: Sequence[int]) -> "GridSize":
        if len(values) != 3:
            raise ConfigurationError(f"GridSize needs three extents, got {len(values)}")
        return cls(int(values[0]), int(values[1]), int(values[2]))

    @property
    def volume(self) -> int:
        return self.x_len * self.y_len * self.z_len

    def as_tuple(self) -> Coord:
        return (self.x_len, self.y_len, self.z_len)


class Automata:
    """Flat grid of discrete cell states over a fixed 3D extent.

    Example:
        grid = Automata(GridSize(3, 3, 3))
        grid[(1, 1, 1)] = 1
        alive = sum(grid[n] for n in grid.moore_neighborhood((0, 0, 0)))
    """

    __slots__ = ("size", "cells")

    def __init__(self, size, cells: Optional[Sequence[int]] = None) -> None:
        """Initialize a grid.

        Args:
            size: GridSize or a (x_len, y_len, z_len) sequence
            cells: Optional initial states in index order (defaults to all zero)
        """
        if not isinstance(size, GridSize):
            size = GridSize.from_sequence(size)
        self.size: GridSize = size

        if cells is None:
            self.cells: List[int] = [DEFAULT_STATE] * size.volume
        else:
            if len(cells) != size.volume:
                raise ConfigurationError(
                    f"Expected {size.volume} initial cells for {size.as_tuple()}, got {len(cells)}"
                )
            self.cells = [checked_state(c) for c in cells]

    def __len__(self) -> int:
        return len(self.cells)

    def __repr__(self) -> str:
        return f"Automata(size={self.size.as_tuple()})"

    # --- Addressing ---

    def index_of(self, coord: Sequence[int]) -> int:
        """Flat index of a coordinate (no wrapping, no bounds check)."""
        size = self.size
        return coord[0] + coord[1] * size.x_len * size.z_len + coord[2] * size.x_len

    def coord_of(self, index: int) -> Coord:
        """Decode a flat index back into its (x, y, z) coordinate."""
        size = self.size
        layer = size.x_len * size.z_len
        y = index // layer
        remainder = index - y * layer
        return (remainder % size.x_len, y, remainder // size.x_len)

    def wrap_coord(self, coord: Sequence[int]) -> Coord:
        """Reduce each axis modulo its extent (true modulo, never negative)."""
        size = self.size
        # Python's % already floors toward negative infinity for positive moduli
        return (coord[0] % size.x_len, coord[1] % size.y_len, coord[2] % size.z_len)

    # --- Cell access ---

    def get(self, coord: Sequence[int]) -> int:
        """Read a cell state.

        Reads past the end of the grid return the default state. Wrapped
        neighborhood coordinates never take this path.
        """
        index = self.index_of(coord)
        if 0 <= index < len(self.cells):
            return self.cells[index]
        return DEFAULT_STATE

    def set(self, coord: Sequence[int], state: int) -> None:
        """Write a cell state.

        Raises:
            GridIndexError: If the coordinate addresses no cell of this grid
            CellStateError: If ``state`` is negative or not an integer
        """
        index = self.index_of(coord)
        if not 0 <= index < len(self.cells):
            raise GridIndexError(
                f"Cell {tuple(coord)} (index {index}) is outside grid {self.size.as_tuple()}"
            )
        self.cells[index] = checked_state(state)

    def __getitem__(self, coord: Sequence[int]) -> int:
        return self.get(coord)

    def __setitem__(self, coord: Sequence[int], state: int) -> None:
        self.set(coord, state)

    # --- Neighborhoods ---

    def moore_neighborhood(self, coord: Sequence[int]) -> List[Coord]:
        """The 26 surrounding cells (Chebyshev distance 1), wrapped.

        Offsets are visited x-major, then y, then z. Any offset that wraps
        back onto ``coord`` itself is dropped, which on an axis of extent 1
        removes more than the zero offset. Offsets that coincide with each
        other (extent 2) are kept as duplicates.
        """
        center = (coord[0], coord[1], coord[2])
        neighbors = []
        for dx, dy, dz in _MOORE_OFFSETS:
            target = self.wrap_coord((center[0] + dx, center[1] + dy, center[2] + dz))
            if target != center:
                neighbors.append(target)
        return neighbors

    def von_neumann_neighborhood(self, coord: Sequence[int]) -> List[Coord]:
        """The 6 face-adjacent cells, wrapped, in -x, +x, -y, +y, -z, +z order."""
        return [
            self.wrap_coord((coord[0] + dx, coord[1] + dy, coord[2] + dz))
            for dx, dy, dz in _VON_NEUMANN_OFFSETS
        ]

    # --- Traversal ---

    def iter_states(self) -> Iterator[int]:
        """Yield every cell state in index order."""
        return iter(list(self.cells))

    def iter_coords(self) -> Iterator[Coord]:
        """Yield every coordinate in index order."""
        for index in range(self.size.volume):
            yield self.coord_of(index)

    def iter_cells(self) -> Iterator[Tuple[Coord, int]]:
        """Yield ``(coord, state)`` pairs in index order."""
        for index, state in enumerate(list(self.cells)):
            yield self.coord_of(index), state

    def __iter__(self) -> Iterator[int]:
        return self.iter_states()

    # --- Helpers ---

    def count(self, state: int) -> int:
        """Number of cells currently holding ``state``."""
        return self.cells.count(state)

    def copy(self) -> "Automata":
        return Automata(self.size, self.cells)
