"""Configuration types for particle emitters: curves, colours, shapes and atlases."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from .geometry import Vec2


class Interpolation(Enum):
    LINEAR = "linear"
    BEZIER = "bezier"


@dataclass(frozen=True)
class BatchedCurve:
    """A curve sampled at even steps, ready for fast lookup."""

    points: tuple[float, ...]

    def get(self, t: float) -> float:
        """Value of the curve at ``t`` in 0..1, interpolated between samples."""
        if not self.points:
            raise ValueError("cannot sample an empty curve")
        last = len(self.points) - 1
        t_scaled = t * len(self.points)
        previous_ix = min(max(int(t_scaled), 0), last)
        next_ix = min(previous_ix + 1, last)
        previous = self.points[previous_ix]
        following = self.points[next_ix]
        return previous + (following - previous) * (t_scaled - previous_ix)


@dataclass
class Curve:
    """Key points of a curve over 0..1 and how to sample it."""

    points: list[tuple[float, float]] = field(default_factory=list)
    interpolation: Interpolation = Interpolation.LINEAR
    resolution: int = 20

    def batch(self) -> BatchedCurve:
        """Sample the curve at ``1 / resolution`` steps."""
        if self.interpolation is Interpolation.BEZIER:
            raise ValueError("bezier interpolation is not supported")
        step = 1.0 / self.resolution
        x = 0.0
        samples: list[float] = []
        for start, end in zip(self.points, self.points[1:]):
            while x <= end[0]:
                t = (x - start[0]) / (end[0] - start[0])
                samples.append(start[1] + (end[1] - start[1]) * t)
                x += step
        return BatchedCurve(tuple(samples))


@dataclass(frozen=True)
class Color:
    """An RGBA colour with components in 0..1."""

    r: float
    g: float
    b: float
    a: float = 1.0

    def to_tuple(self) -> tuple[float, float, float, float]:
        return (self.r, self.g, self.b, self.a)

    def _mix(self, other: Color, t: float) -> Color:
        return Color(
            self.r * (1.0 - t) + other.r * t,
            self.g * (1.0 - t) + other.g * t,
            self.b * (1.0 - t) + other.b * t,
            self.a * (1.0 - t) + other.a * t,
        )


WHITE = Color(1.0, 1.0, 1.0, 1.0)


@dataclass(frozen=True)
class ColorCurve:
    """Colour over a particle's life: start, middle and end."""

    start: Color = WHITE
    mid: Color = WHITE
    end: Color = WHITE

    def at(self, t: float) -> Color:
        """Colour at life fraction ``t``, blending through the middle colour."""
        if t < 0.5:
            return self.start._mix(self.mid, t * 2.0)
        return self.mid._mix(self.end, (t - 0.5) * 2.0)


@dataclass(frozen=True)
class EmissionPoint:
    """Particles spawn exactly at the emitter position."""

    def random_point(self, rng: random.Random) -> Vec2:
        return Vec2(0.0, 0.0)


@dataclass(frozen=True)
class EmissionRect:
    """Particles spawn anywhere in a rectangle centred on the emitter."""

    width: float
    height: float

    def random_point(self, rng: random.Random) -> Vec2:
        return Vec2(
            rng.uniform(-self.width / 2.0, self.width / 2.0),
            rng.uniform(-self.height / 2.0, self.height / 2.0),
        )


@dataclass(frozen=True)
class EmissionSphere:
    """Particles spawn uniformly inside a disc centred on the emitter."""

    radius: float

    def random_point(self, rng: random.Random) -> Vec2:
        ro = math.sqrt(rng.uniform(0.0, self.radius * self.radius))
        phi = rng.uniform(0.0, math.pi * 2.0)
        return Vec2(ro * math.cos(phi), ro * math.sin(phi))


EmissionShape = Union[EmissionPoint, EmissionRect, EmissionSphere]

Mesh = tuple[tuple[float, ...], tuple[int, ...]]

# Each vertex: position (3), uv (2), colour (4).
_WHITE_RGBA = (1.0, 1.0, 1.0, 1.0)


@dataclass(frozen=True)
class RectangleShape:
    """A quad particle, stretched horizontally by ``aspect_ratio``."""

    aspect_ratio: float = 1.0

    def mesh(self) -> Mesh:
        ar = self.aspect_ratio
        corners = ((-ar, -1.0, 0.0, 0.0), (ar, -1.0, 1.0, 0.0), (ar, 1.0, 1.0, 1.0), (-ar, 1.0, 0.0, 1.0))
        vertices: list[float] = []
        for x, y, u, v in corners:
            vertices.extend((x, y, 0.0, u, v, *_WHITE_RGBA))
        return tuple(vertices), (0, 1, 2, 0, 2, 3)


@dataclass(frozen=True)
class CircleShape:
    """A disc particle built as a fan of ``subdivisions`` triangles."""

    subdivisions: int

    def mesh(self) -> Mesh:
        if self.subdivisions < 1:
            raise ValueError("a circle needs at least one subdivision")
        vertices: list[float] = [0.0, 0.0, 0.0, 0.0, 0.0, *_WHITE_RGBA]
        indices: list[int] = []
        for i in range(self.subdivisions + 1):
            angle = i / self.subdivisions * math.pi * 2.0
            rx, ry = math.cos(angle), math.sin(angle)
            vertices.extend((rx, ry, 0.0, rx, ry, *_WHITE_RGBA))
            if i != self.subdivisions:
                indices.extend((0, i + 1, i + 2))
        return tuple(vertices), tuple(indices)


@dataclass(frozen=True)
class CustomMeshShape:
    """A particle with caller-supplied geometry."""

    vertices: tuple[float, ...]
    indices: tuple[int, ...]

    def mesh(self) -> Mesh:
        return tuple(self.vertices), tuple(self.indices)


ParticleShape = Union[RectangleShape, CircleShape, CustomMeshShape]


@dataclass(frozen=True)
class BlendState:
    """How a particle's colour is combined with what is already drawn."""

    equation: str
    source: str
    destination: str


class BlendMode(Enum):
    ALPHA = "alpha"
    ADDITIVE = "additive"

    def blend_state(self) -> BlendState:
        if self is BlendMode.ALPHA:
            return BlendState("add", "source_alpha", "one_minus_source_alpha")
        return BlendState("add", "source_alpha", "one")


@dataclass(frozen=True)
class AtlasConfig:
    """Sprite-sheet layout of ``n`` columns by ``m`` rows and the frames used."""

    n: int
    m: int
    start_index: int
    end_index: int

    @classmethod
    def from_range(
        cls, n: int, m: int, start: int | None = None, stop: int | None = None
    ) -> AtlasConfig:
        """Use frames ``start`` up to (not including) ``stop``; open ends span the sheet."""
        return cls(n, m, 0 if start is None else start, n * m if stop is None else stop)

    def frame_uv(self, frame: int) -> tuple[float, float, float, float]:
        """Texture rectangle (u, v, width, height) of the given frame."""
        x = frame % self.n
        y = frame // self.n
        return (x / self.n, y / self.m, 1.0 / self.n, 1.0 / self.m)


@dataclass(frozen=True)
class ParticleMaterial:
    """Custom vertex and fragment shader sources for particles."""

    vertex: str
    fragment: str


@dataclass(frozen=True)
class PostProcessing:
    """Marker: render particles to an offscreen target first."""


@dataclass
class EmitterConfig:
    """Everything that controls how an emitter spawns and evolves particles."""

    local_coords: bool = False
    emission_shape: EmissionShape = field(default_factory=EmissionPoint)
    one_shot: bool = False
    lifetime: float = 1.0
    lifetime_randomness: float = 0.0
    explosiveness: float = 0.0
    amount: int = 8
    shape: ParticleShape = field(default_factory=lambda: RectangleShape(1.0))
    emitting: bool = True
    initial_direction: Vec2 = field(default_factory=lambda: Vec2(0.0, -1.0))
    initial_direction_spread: float = 0.0
    initial_velocity: float = 50.0
    initial_velocity_randomness: float = 0.0
    linear_accel: float = 0.0
    initial_rotation: float = 0.0
    initial_rotation_randomness: float = 0.0
    initial_angular_velocity: float = 0.0
    initial_angular_velocity_randomness: float = 0.0
    angular_accel: float = 0.0
    angular_damping: float = 0.0
    size: float = 10.0
    size_randomness: float = 0.0
    size_curve: Curve | None = None
    blend_mode: BlendMode = BlendMode.ALPHA
    colors_curve: ColorCurve = field(default_factory=ColorCurve)
    gravity: Vec2 = field(default_factory=lambda: Vec2(0.0, 0.0))
    texture: object | None = None
    atlas: AtlasConfig | None = None
    material: ParticleMaterial | None = None
    post_processing: PostProcessing | None = None