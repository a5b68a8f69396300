"""Color conversion utilities.

Vertex colors are RGB floats in 0.0-1.0, light colors are RGBA floats in
0.0-1.0. The preview converts both to 0-255 integers for pygame.

Design Note:
    These are pure functions with no simulation dependencies.
    They can be tested in isolation and used by any module.
"""

from typing import Sequence, Tuple

RGBA = Tuple[float, float, float, float]


def to_rgba(color: Sequence[float], alpha: float = 1.0) -> RGBA:
    """Pad an RGB color to RGBA, or validate an RGBA one.

    Args:
        color: Three (RGB) or four (RGBA) float components
        alpha: Alpha used when ``color`` has three components

    Returns:
        Tuple of (R, G, B, A) floats

    Raises:
        ValueError: If ``color`` has neither three nor four components
    """
    if len(color) == 3:
        return (float(color[0]), float(color[1]), float(color[2]), float(alpha))
    if len(color) == 4:
        return (float(color[0]), float(color[1]), float(color[2]), float(color[3]))
    raise ValueError(f"Expected 3 or 4 color components, got {len(color)}")


def to_rgb255(color: Sequence[float]) -> Tuple[int, int, int]:
    """Convert a 0.0-1.0 float color to 0-255 integers (for pygame)."""
    return tuple(max(0, min(255, int(round(c * 255)))) for c in color[:3])
