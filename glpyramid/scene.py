"""Scene geometry: points, triangles and the drawable grid object."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class Point3D:
    x: float
    y: float
    z: float


@dataclass(frozen=True)
class Triangle:
    p1: Point3D
    p2: Point3D
    p3: Point3D

    def __iter__(self):
        return iter((self.p1, self.p2, self.p3))


class Drawable(ABC):
    """Anything the engine can draw."""

    @abstractmethod
    def draw(self) -> None:
        """Issue the drawing calls for this object."""


class SceneObject(Drawable):
    """A 9x9 grid of small green triangles."""

    GRID_RANGE = range(1, 10)

    def __init__(self) -> None:
        self.triangles: tuple[Triangle, ...] = tuple(
            Triangle(
                Point3D(0.0 + i, 0.5, 0.0 + j),
                Point3D(-0.5 + i, -0.5, 0.5 + j),
                Point3D(0.5 + i, -0.5, 0.5 + j),
            )
            for i in self.GRID_RANGE
            for j in self.GRID_RANGE
        )
        self._vertex_buffer = None

    def vertices(self) -> list[float]:
        """Return the flat x, y, z coordinates of every triangle corner."""
        return [c for tri in self.triangles for p in tri for c in (p.x, p.y, p.z)]

    def draw(self) -> None:
        """Draw the triangles from a client-side vertex array in green."""
        from pyglet.gl import gl_compat as gl

        if self._vertex_buffer is None:
            coords = self.vertices()
            self._vertex_buffer = (gl.GLfloat * len(coords))(*coords)
        gl.glEnableClientState(gl.GL_VERTEX_ARRAY)
        gl.glVertexPointer(3, gl.GL_FLOAT, 0, self._vertex_buffer)
        gl.glColor3ub(0, 255, 0)
        gl.glDrawArrays(gl.GL_TRIANGLES, 0, len(self.triangles) * 3)


class ViewManager:
    """Factory for scene objects."""

    def create_object(self) -> SceneObject:
        return SceneObject()


def create_manager() -> ViewManager:
    """Return a new view manager."""
    return ViewManager()