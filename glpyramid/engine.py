"""The rendering engine: window set-up, the frame loop and input handling."""

from __future__ import annotations

import argparse
import logging
import math
import time
from enum import IntEnum
from typing import Any, Callable, Sequence

from .camera import Camera
from .scene import Drawable, ViewManager, create_manager

logger = logging.getLogger(__name__)

WINDOW_TITLE = "OpenGL"
WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
DEPTH_BITS = 16
FIELD_OF_VIEW = 45.0
NEAR_PLANE = 0.1
FAR_PLANE = 100.0
FRAME_DELAY = 0.02
LOG_FILE = "log.txt"

# A 2x2 RGBA texture: red, green, yellow, blue.
TEXTURE_PIXELS = (
    255, 0, 0, 255,
    0, 255, 0, 255,
    255, 255, 0, 255,
    0, 0, 255, 255,
)

# (texture coordinate, vertex) pairs for the three faces of the textured pyramid.
PYRAMID_FACES = (
    ((1.0, 0.0), (0.0, 1.0, 0.0)),
    ((1.0, 1.0), (1.0, -1.0, 1.0)),
    ((0.0, 0.0), (1.0, -1.0, -1.0)),
    ((0.0, 1.0), (0.0, 1.0, 0.0)),
    ((0.0, 0.0), (1.0, -1.0, -1.0)),
    ((1.0, 1.0), (-1.0, -1.0, -1.0)),
    ((1.0, 1.0), (0.0, 1.0, 0.0)),
    ((0.0, 1.0), (-1.0, -1.0, -1.0)),
    ((0.0, 0.0), (-1.0, -1.0, 1.0)),
)

BACKDROP_QUAD = (
    (-2.0, 2.0, -2.0),
    (2.0, 2.0, -2.0),
    (2.0, -2.0, -2.0),
    (-2.0, -2.0, -2.0),
)


class ArrowKey(IntEnum):
    """Arrow key symbols, with the same values as pyglet's key constants."""

    LEFT = 0xFF51
    UP = 0xFF52
    RIGHT = 0xFF53
    DOWN = 0xFF54


def _perspective_matrix(fovy: float, aspect: float, near: float, far: float) -> tuple[float, ...]:
    f = 1.0 / math.tan(math.radians(fovy) / 2.0)
    depth = near - far
    return (
        f / aspect, 0.0, 0.0, 0.0,
        0.0, f, 0.0, 0.0,
        0.0, 0.0, (far + near) / depth, -1.0,
        0.0, 0.0, 2.0 * far * near / depth, 0.0,
    )


def _gl_array(gl: Any, type_name: str, values: Sequence[Any]) -> Any:
    """Build an array of the GL element type, or a list where the GL binding has none."""
    element_type = getattr(gl, type_name, None)
    if element_type is None:
        return list(values)
    return (element_type * len(values))(*values)


class GLEngine:
    """Owns the camera, the scene object and the fixed-function drawing of a frame."""

    def __init__(
        self,
        gl: Any = None,
        view_manager_factory: Callable[[], ViewManager] = create_manager,
        log_file: str | None = LOG_FILE,
    ) -> None:
        self._gl = gl
        self._view_manager_factory = view_manager_factory
        self._log_file = log_file
        self._log_handler: logging.Handler | None = None
        self.camera = Camera()
        self.window: Any = None
        self.view_manager: ViewManager | None = None
        self.object: Drawable | None = None
        self.texture = 0
        self.angle = 0.0
        self.pointer = (0, 0)

    @property
    def gl(self) -> Any:
        if self._gl is None:
            from pyglet.gl import gl_compat

            self._gl = gl_compat
        return self._gl

    def _require_window(self) -> Any:
        if self.window is None:
            raise RuntimeError("engine is not initialised")
        return self.window

    def init(self, window: Any) -> None:
        """Attach to a window, create the scene and set up the GL state."""
        if self._log_file is not None and self._log_handler is None:
            self._log_handler = logging.FileHandler(self._log_file)
            logger.addHandler(self._log_handler)

        self.window = window
        self.view_manager = self._view_manager_factory()
        self.object = self.view_manager.create_object()

        self.camera.set_center(window.width // 2, window.height // 2)
        self.pointer = (self.camera.cx, self.camera.cy)

        if getattr(window, "context", None) is None:
            logger.error("Error creating rendering context")
        else:
            window.switch_to()

        self.resize_scene(WINDOW_WIDTH, WINDOW_HEIGHT)
        self.init_gl()
        self.init_textures()

    def init_textures(self) -> None:
        """Create and upload the small four-colour texture."""
        gl = self.gl
        texture_ids = _gl_array(gl, "GLuint", [0])
        gl.glGenTextures(1, texture_ids)
        self.texture = int(texture_ids[0])
        gl.glBindTexture(gl.GL_TEXTURE_2D, self.texture)
        pixels = _gl_array(gl, "GLubyte", TEXTURE_PIXELS)
        gl.glTexImage2D(
            gl.GL_TEXTURE_2D, 0, 3, 2, 2, 0, gl.GL_RGBA, gl.GL_UNSIGNED_BYTE, pixels
        )
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_MIN_FILTER, gl.GL_LINEAR)
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_MAG_FILTER, gl.GL_LINEAR)

    def shutdown(self) -> None:
        """Detach from the window and stop logging to the log file."""
        self.window = None
        if self._log_handler is not None:
            logger.removeHandler(self._log_handler)
            self._log_handler.close()
            self._log_handler = None

    def resize_scene(self, width: int, height: int) -> None:
        """Reset the viewport and the perspective projection."""
        if width <= 0 or height <= 0:
            raise ValueError(f"invalid viewport size {width}x{height}")
        gl = self.gl
        gl.glViewport(0, 0, width, height)
        gl.glMatrixMode(gl.GL_PROJECTION)
        gl.glLoadIdentity()
        projection = _perspective_matrix(FIELD_OF_VIEW, width / height, NEAR_PLANE, FAR_PLANE)
        gl.glMultMatrixf(_gl_array(gl, "GLfloat", projection))
        gl.glMatrixMode(gl.GL_MODELVIEW)
        gl.glLoadIdentity()

    def init_gl(self) -> None:
        """Set the fixed GL state: smooth shading, depth test, black background."""
        gl = self.gl
        gl.glEnable(gl.GL_TEXTURE_2D)
        gl.glShadeModel(gl.GL_SMOOTH)
        gl.glClearColor(0.0, 0.0, 0.0, 0.5)
        gl.glClearDepth(1.0)
        gl.glEnable(gl.GL_DEPTH_TEST)
        gl.glDepthFunc(gl.GL_LEQUAL)
        gl.glHint(gl.GL_PERSPECTIVE_CORRECTION_HINT, gl.GL_NICEST)

    def move_pointer(self, dx: int, dy: int) -> None:
        """Record relative pointer motion; ``dy`` is positive upwards."""
        px, py = self.pointer
        self.pointer = (px + dx, py - dy)

    def _update_look(self) -> None:
        if self.camera.check_mouse(*self.pointer):
            self.pointer = (self.camera.cx, self.camera.cy)

    def set_perspective(self) -> None:
        """Multiply the camera's view rotation onto the current matrix."""
        gl = self.gl
        gl.glMultMatrixf(_gl_array(gl, "GLfloat", self.camera.orientation_matrix()))

    def draw(self) -> None:
        """Render one frame and present it."""
        window = self._require_window()
        gl = self.gl
        gl.glClear(gl.GL_COLOR_BUFFER_BIT | gl.GL_DEPTH_BUFFER_BIT)
        gl.glLoadIdentity()

        self._update_look()
        self.set_perspective()
        gl.glTranslatef(self.camera.x, 0.0, self.camera.z)

        gl.glRotatef(self.angle, 1.0, 1.0, 1.0)
        self.angle += 1.0
        gl.glEnable(gl.GL_TEXTURE_2D)
        gl.glBindTexture(gl.GL_TEXTURE_2D, self.texture)
        gl.glBegin(gl.GL_TRIANGLES)
        gl.glColor3f(1.0, 1.0, 1.0)
        for tex_coord, vertex in PYRAMID_FACES:
            gl.glTexCoord2f(*tex_coord)
            gl.glVertex3f(*vertex)
        gl.glEnd()
        gl.glDisable(gl.GL_TEXTURE_2D)

        gl.glRotatef(-self.angle, 1.0, 1.0, 1.0)
        gl.glBegin(gl.GL_QUADS)
        gl.glColor3f(1.0, 0.0, 0.0)
        for vertex in BACKDROP_QUAD:
            gl.glVertex3f(*vertex)
        gl.glEnd()

        if self.object is not None:
            self.object.draw()
        window.flip()

    def run(self) -> None:
        """Make the window's context current, draw a frame and pause briefly."""
        window = self._require_window()
        if getattr(window, "context", None) is not None:
            window.switch_to()
        self.draw()
        time.sleep(FRAME_DELAY)

    def process_key(self, key: int) -> None:
        """Move the camera for an arrow key; other keys are ignored."""
        moves = {
            ArrowKey.DOWN: self.camera.move_backward,
            ArrowKey.UP: self.camera.move_forward,
            ArrowKey.LEFT: self.camera.strafe_left,
            ArrowKey.RIGHT: self.camera.strafe_right,
        }
        move = moves.get(key)
        if move is not None:
            move()


def main(argv: Sequence[str] | None = None) -> int:
    """Open a window and run the render loop until it is closed."""
    parser = argparse.ArgumentParser(description="Render a rotating textured pyramid.")
    parser.parse_args(argv)

    import pyglet

    config = pyglet.gl.Config(double_buffer=True, depth_size=DEPTH_BITS)
    window = pyglet.window.Window(
        WINDOW_WIDTH, WINDOW_HEIGHT, caption=WINDOW_TITLE, config=config
    )
    engine = GLEngine()
    engine.init(window)
    window.set_exclusive_mouse(True)

    @window.event
    def on_key_press(symbol, modifiers):
        engine.process_key(symbol)

    @window.event
    def on_mouse_motion(x, y, dx, dy):
        engine.move_pointer(dx, dy)

    try:
        while True:
            window.dispatch_events()
            if window.has_exit:
                break
            engine.run()
    finally:
        engine.shutdown()
    return 0