"""Flat face shading from the frame's light buffer."""

from typing import Sequence

from blocksim.config.display import AMBIENT_LIGHT
from blocksim.math_utils import Vector3
from blocksim.world.light import Light

# Fixed key light so unlit worlds still show their shape
KEY_LIGHT_DIRECTION = Vector3(0.4, 1.0, 0.3).normalize()
KEY_LIGHT_STRENGTH = 0.5

# Point light attenuation: 1 / (1 + k * d^2)
POINT_LIGHT_FALLOFF = 0.15


def shade_face(
    color: Sequence[float],
    normal: Sequence[float],
    centroid: Sequence[float],
    lights: Sequence[Light],
    ambient: float = AMBIENT_LIGHT,
) -> tuple:
    """Lit RGB color (0.0-1.0) of a face."""
    n = Vector3(*normal)
    c = Vector3(*centroid)

    key = max(0.0, n.dot(KEY_LIGHT_DIRECTION)) * KEY_LIGHT_STRENGTH
    r = g = b = ambient + key

    for light in lights:
        to_light = Vector3(*light.position[:3]) - c
        distance_sq = to_light.length_squared()
        if distance_sq == 0:
            diffuse = 1.0
        else:
            diffuse = max(0.0, n.dot(to_light.normalize()))
        strength = diffuse / (1.0 + POINT_LIGHT_FALLOFF * distance_sq)
        r += light.color[0] * strength
        g += light.color[1] * strength
        b += light.color[2] * strength

    return (
        min(1.0, color[0] * r),
        min(1.0, color[1] * g),
        min(1.0, color[2] * b),
    )
