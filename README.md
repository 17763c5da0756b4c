# glpyramid

A small interactive OpenGL scene. A pyramid with a four-colour texture (red,
green, yellow, blue) spins in the middle of the view. Behind it sit a red
square and a green grid of 81 small triangles. The mouse turns the camera, and
the arrow keys move it.

## Installing

```
pip install .
```

The window and the drawing use `pyglet`. You need a display that supports
legacy (compatibility-profile) OpenGL.

## Running

```
glpyramid
```

This opens an 800×600 window titled "OpenGL" and captures the mouse. The
command takes no options except `--help`.

- Moving the mouse changes the camera's heading and pitch by 0.1 degree per
  pixel. After each frame the pointer is treated as being back at the centre
  of the window.
- Up and Down move the camera along the direction it faces.
- Left and Right move it sideways.
- Closing the window ends the program.

Errors are logged to `log.txt` in the current directory. At present the only
one is a missing rendering context.

## Using the pieces

You can use the maths and the scene data without a window:

```python
from glpyramid.quaternion import Quaternion
from glpyramid.camera import Camera
from glpyramid.scene import create_manager

q = Quaternion.from_axis_angle(0.0, 1.0, 0.0, 90.0)
m = q.matrix()            # 16 floats, column-major, ready for glMultMatrixf
r = q * q                 # quaternion product

camera = Camera()
camera.set_center(400, 300)
camera.check_mouse(410, 300)   # True: the pointer is off-centre; heading grows by 1.0
camera.orientation_matrix()    # view rotation; also updates the direction vectors
camera.move_forward()          # also move_backward, strafe_left, strafe_right

obj = create_manager().create_object()
len(obj.triangles)        # 81
len(obj.vertices())       # 81 triangles * 3 vertices * 3 coordinates = 729
```

`Point3D` and `Triangle` in `glpyramid.scene` are frozen dataclasses.
`SceneObject.draw()` draws the grid through a GL vertex array.

`GLEngine` in `glpyramid.engine` brings these pieces together:

- `init(window)` attaches to a window and sets up the projection, the GL state
  and the texture. It reads the window's `width`, `height` and `context`, and
  calls its `switch_to()`.
- `run()` draws one frame, presents it with the window's `flip()`, and then
  sleeps for 20 ms.
- `process_key(key)` moves the camera for arrow-key symbols. The values are
  those of pyglet's key constants, also available as `ArrowKey`.
- `move_pointer(dx, dy)` records mouse motion.
- `shutdown()` detaches the engine and closes the log file.

You can pass another GL module to `GLEngine(gl=...)`. The default is pyglet's
compatibility GL bindings.

## Limits

- The projection is a fixed 45° perspective for an 800×600 viewport. The engine
  does not adjust it when the window is resized.
- The scene is built in. There is no loading of models or textures from files,
  and there are no settings to configure.

## Tests

```
pip install .[test]
pytest
```