[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "glpyramid"
version = "0.1.0"
description = "A small OpenGL scene: a spinning textured pyramid, a grid of triangles and a mouse-look camera driven by quaternions."
requires-python = ">=3.10"
keywords = ["opengl", "pyglet", "quaternion", "camera", "3d"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Environment :: X11 Applications",
    "Environment :: Win32 (MS Windows)",
    "Environment :: MacOS X",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]
dependencies = [
    "pyglet",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
glpyramid = "glpyramid.engine:main"

[tool.hatch.build.targets.wheel]
packages = ["glpyramid"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
