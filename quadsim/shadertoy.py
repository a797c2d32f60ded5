"""State of a live shader editor: uniforms, a colour picker and shader sources."""

from __future__ import annotations

import colorsys
from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from .particle_config import Color

DEFAULT_FRAGMENT_SHADER = """#version 100
precision lowp float;

varying vec2 uv;

uniform sampler2D Texture;

void main() {
    gl_FragColor = texture2D(Texture, uv);
}
"""

DEFAULT_VERTEX_SHADER = """#version 100
precision lowp float;

attribute vec3 position;
attribute vec2 texcoord;

varying vec2 uv;

uniform mat4 Model;
uniform mat4 Projection;

void main() {
    gl_Position = Projection * Model * vec4(position, 1);
    uv = texcoord;
}
"""

UNIFORM_KINDS = ("Float1", "Float2", "Float3", "Color")


class UniformType(Enum):
    FLOAT1 = "float1"
    FLOAT2 = "float2"
    FLOAT3 = "float3"


def _parse_float(text: str) -> float | None:
    """Parse a number strictly: no surrounding spaces, no digit separators."""
    if not text or text != text.strip() or "_" in text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


@dataclass
class Float1Uniform:
    """A single float typed in as text."""

    x: str = "0"

    uniform_type = UniformType.FLOAT1

    def value(self) -> float | None:
        """The parsed value, or None while the text is not a number."""
        return _parse_float(self.x)


@dataclass
class Float2Uniform:
    """Two floats typed in as text."""

    x: str = "0"
    y: str = "0"

    uniform_type = UniformType.FLOAT2

    def value(self) -> tuple[float, float] | None:
        x, y = _parse_float(self.x), _parse_float(self.y)
        if x is None or y is None:
            return None
        return (x, y)


@dataclass
class Float3Uniform:
    """Three floats typed in as text."""

    x: str = "0"
    y: str = "0"
    z: str = "0"

    uniform_type = UniformType.FLOAT3

    def value(self) -> tuple[float, float, float] | None:
        parsed = (_parse_float(self.x), _parse_float(self.y), _parse_float(self.z))
        if any(part is None for part in parsed):
            return None
        return parsed  # type: ignore[return-value]


@dataclass
class ColorUniform:
    """An RGB colour chosen with the picker."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0

    uniform_type = UniformType.FLOAT3

    def value(self) -> tuple[float, float, float]:
        return (self.r, self.g, self.b)


Uniform = Union[Float1Uniform, Float2Uniform, Float3Uniform, ColorUniform]


@dataclass(frozen=True)
class PickerImage:
    """A row-major grid of colours."""

    width: int
    height: int
    pixels: tuple[Color, ...]

    def get_pixel(self, x: int, y: int) -> Color:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside the image")
        return self.pixels[y * self.width + x]


def color_picker_image(width: int, height: int) -> PickerImage:
    """Hue down the rows, lightness falling from white across the columns."""
    if width <= 0 or height <= 0:
        raise ValueError("image dimensions must be positive")
    ratio = 1.0 / height
    pixels = []
    for j in range(height):
        hue = j * ratio
        for i in range(width):
            lightness = 1.0 - i * ratio
            r, g, b = colorsys.hls_to_rgb(hue, lightness, 1.0)
            pixels.append(Color(r, g, b, 1.0))
    return PickerImage(width, height, tuple(pixels))


def pick_color(image: PickerImage, x: int, y: int) -> Color:
    """The colour under (x, y), clamped to the image edges."""
    cx = min(max(x, 0), image.width - 1)
    cy = min(max(y, 0), image.height - 1)
    return image.get_pixel(cx, cy)


def _new_uniform(kind: str | int) -> Uniform:
    if isinstance(kind, int):
        if not 0 <= kind < len(UNIFORM_KINDS):
            raise ValueError(f"unknown uniform kind index {kind}")
        kind = UNIFORM_KINDS[kind]
    factories = {
        "Float1": Float1Uniform,
        "Float2": Float2Uniform,
        "Float3": Float3Uniform,
        "Color": ColorUniform,
    }
    try:
        return factories[kind]()
    except KeyError:
        raise ValueError(f"unknown uniform kind {kind!r}") from None


@dataclass
class ShaderEditor:
    """Shader sources and the user-defined uniforms fed to them."""

    vertex: str = DEFAULT_VERTEX_SHADER
    fragment: str = DEFAULT_FRAGMENT_SHADER
    uniforms: list[tuple[str, Uniform]] = field(default_factory=list)
    needs_rebuild: bool = False

    def __init__(self) -> None:
        self.vertex = DEFAULT_VERTEX_SHADER
        self.fragment = DEFAULT_FRAGMENT_SHADER
        self.uniforms = []
        self.needs_rebuild = False

    def add_uniform(self, name: str, kind: str | int) -> Uniform | None:
        """Add a uniform of the given kind; an empty name adds nothing."""
        uniform = _new_uniform(kind)
        if not name:
            return None
        self.uniforms.append((name, uniform))
        self.needs_rebuild = True
        return uniform

    def set_color(self, name: str, color: Color) -> None:
        """Replace the named uniform with a colour picked for it."""
        for index, (uniform_name, _) in enumerate(self.uniforms):
            if uniform_name == name:
                self.uniforms[index] = (name, ColorUniform(color.r, color.g, color.b))
                return
        raise KeyError(f"no uniform named {name!r}")

    def uniform_layout(self) -> list[tuple[str, UniformType]]:
        """Names and GPU types of the uniforms, in the order they were added."""
        return [(name, uniform.uniform_type) for name, uniform in self.uniforms]

    def uniform_values(self) -> dict[str, object]:
        """Current values of the uniforms whose text parses."""
        values: dict[str, object] = {}
        for name, uniform in self.uniforms:
            value = uniform.value()
            if value is not None:
                values[name] = value
        return values