"""A mouse-look camera that moves in the horizontal plane."""

from __future__ import annotations

from dataclasses import dataclass

from .quaternion import Quaternion

MOUSE_SENSITIVITY = 0.1


@dataclass
class Camera:
    """Camera position, look angles and the direction vectors derived from them."""

    x: float = 0.0
    z: float = 0.0
    pitch: float = 0.0
    heading: float = 0.0
    cx: int = 0
    cy: int = 0
    dirx: float = 0.0
    diry: float = 0.0
    dirz: float = 0.0
    dirLx: float = 0.0
    dirLz: float = 0.0

    def set_center(self, x: int, y: int) -> None:
        """Set the point the pointer is returned to after each look update."""
        self.cx = x
        self.cy = y

    def check_mouse(self, x: int, y: int) -> bool:
        """Turn the camera by the pointer's offset from the centre.

        Returns True when the pointer is away from the centre and should be
        moved back to it.
        """
        self.heading -= MOUSE_SENSITIVITY * (self.cx - x)
        self.pitch -= MOUSE_SENSITIVITY * (self.cy - y)
        return x != self.cx or y != self.cy

    def orientation_matrix(self) -> tuple[float, ...]:
        """Return the view rotation matrix and refresh the direction vectors."""
        q_pitch = Quaternion.from_axis_angle(1.0, 0.0, 0.0, self.pitch)
        q_heading = Quaternion.from_axis_angle(0.0, 1.0, 0.0, self.heading)

        view = (q_pitch * q_heading).matrix()

        self.diry = q_pitch.matrix()[9]

        walk = (q_heading * q_pitch).matrix()
        self.dirx = walk[8]
        self.dirz = walk[10]

        self.dirLx = -self.dirz
        self.dirLz = self.dirx
        return view

    def move_forward(self) -> None:
        self.z += self.dirz
        self.x -= self.dirx

    def move_backward(self) -> None:
        self.z -= self.dirz
        self.x += self.dirx

    def strafe_left(self) -> None:
        self.z += self.dirLz
        self.x -= self.dirLx

    def strafe_right(self) -> None:
        self.z -= self.dirLz
        self.x += self.dirLx