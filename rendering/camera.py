"""Orbiting perspective camera for the preview window.

Projects world-space points to screen pixels. Pure Python, no pygame.
"""

import math
from typing import Optional, Sequence, Tuple

from blocksim.config.display import CAMERA_FOV_DEGREES
from blocksim.math_utils import Vector3

WORLD_UP = Vector3(0.0, 1.0, 0.0)


class Camera:
    """A look-at camera orbiting a target point.

    Attributes:
        target: Point the camera looks at
        distance: Orbit radius
        yaw: Rotation around the world up axis, in radians
        pitch: Elevation above the horizontal plane, in radians
    """

    def __init__(
        self,
        width: int,
        height: int,
        target: Optional[Vector3] = None,
        distance: float = 30.0,
        yaw: float = 0.6,
        pitch: float = 0.5,
        fov_degrees: float = CAMERA_FOV_DEGREES,
        near: float = 0.1,
    ) -> None:
        self.width = width
        self.height = height
        self.target = target.copy() if target is not None else Vector3()
        self.distance = distance
        self.yaw = yaw
        self.pitch = pitch
        self.fov_degrees = fov_degrees
        self.near = near

    @classmethod
    def framing_grid(cls, size: Sequence[int], width: int, height: int) -> "Camera":
        """A camera looking at the middle of a grid from far enough to see all of it."""
        x_len, y_len, z_len = size
        target = Vector3((x_len - 1) / 2, (y_len - 1) / 2, (z_len - 1) / 2)
        return cls(width, height, target=target, distance=1.8 * max(x_len, y_len, z_len))

    @property
    def eye(self) -> Vector3:
        offset = Vector3(
            math.cos(self.pitch) * math.sin(self.yaw),
            math.sin(self.pitch),
            math.cos(self.pitch) * math.cos(self.yaw),
        )
        return self.target + offset * self.distance

    def orbit(self, d_yaw: float, d_pitch: float) -> None:
        """Rotate around the target; pitch stays short of the poles."""
        limit = math.pi / 2 - 0.01
        self.yaw = (self.yaw + d_yaw) % (2 * math.pi)
        self.pitch = max(-limit, min(limit, self.pitch + d_pitch))

    def zoom(self, factor: float) -> None:
        self.distance = max(1.0, self.distance * factor)

    def basis(self) -> Tuple[Vector3, Vector3, Vector3]:
        """(right, up, forward) unit vectors of the view."""
        forward = (self.target - self.eye).normalize()
        right = forward.cross(WORLD_UP).normalize()
        up = right.cross(forward)
        return right, up, forward

    def project(self, point: Sequence[float]) -> Optional[Tuple[float, float, float]]:
        """Screen position and view depth of a world point.

        Returns:
            (screen_x, screen_y, depth), or None for points behind the near plane
        """
        right, up, forward = self.basis()
        relative = Vector3(*point) - self.eye
        depth = relative.dot(forward)
        if depth <= self.near:
            return None

        focal = 1.0 / math.tan(math.radians(self.fov_degrees) / 2)
        half_h = self.height / 2
        x = relative.dot(right) * focal / depth
        y = relative.dot(up) * focal / depth
        return (self.width / 2 + x * half_h, half_h - y * half_h, depth)
