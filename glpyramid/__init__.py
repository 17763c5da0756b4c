"""Spinning-pyramid OpenGL scene with a quaternion mouse-look camera."""

__version__ = "0.1.0"
__all__ = ["camera", "engine", "quaternion", "scene"]