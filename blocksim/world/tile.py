"""The Tile protocol: static occupants of one integer coordinate."""

from typing import Protocol, Tuple, runtime_checkable

from blocksim.config.simulation import TILE_COORD_MAX, TILE_COORD_MIN
from blocksim.exceptions import ConfigurationError
from blocksim.world.drawable import Drawable

TileCoord = Tuple[int, int, int]


@runtime_checkable
class Tile(Drawable, Protocol):
    """A static world object bound to exactly one tile coordinate.

    Tiles are keyed by ``position`` in the SpatialRegistry. Their mesh is
    built once at insertion and cached, so a tile must not change its
    geometry after it has been inserted.
    """

    position: TileCoord


def validate_tile_coord(position) -> TileCoord:
    """Normalize a tile position to an int triple within the 16-bit range.

    Raises:
        ConfigurationError: If the position is not three integers in range
    """
    if len(position) != 3:
        raise ConfigurationError(f"Tile position needs three components, got {position!r}")
    coord = tuple(int(c) for c in position)
    if coord != tuple(position):
        raise ConfigurationError(f"Tile position must be integral, got {position!r}")
    for value in coord:
        if not TILE_COORD_MIN <= value <= TILE_COORD_MAX:
            raise ConfigurationError(f"Tile position {coord} exceeds the 16-bit coordinate range")
    return coord
