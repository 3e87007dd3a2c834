"""Geometric primitives used throughout the generator."""

from __future__ import annotations
import math
from pydantic import BaseModel, ConfigDict


EPSILON = 1e-12


class Point2D(BaseModel):
    """Point in the frame plane (x across the span, y = elevation)."""
    model_config = ConfigDict(frozen=True)

    x: float
    y: float

    def polar(self, angle: float, distance: float) -> Point2D:
        """Return the point `distance` away along `angle` (radians)."""
        return Point2D(
            x=self.x + math.cos(angle) * distance,
            y=self.y + math.sin(angle) * distance,
        )

    def distance_to(self, other: Point2D) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def __add__(self, other: Point2D) -> Point2D:
        return Point2D(x=self.x + other.x, y=self.y + other.y)



class Point3D(BaseModel):
    """Point (or vector) in 3D space, Z up."""
    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    z: float

    def distance_to(self, other: Point3D) -> float:
        return (self - other).length()

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> Point3D:
        ln = self.length()
        if ln < EPSILON:
            return Point3D(x=0.0, y=0.0, z=0.0)
        return self * (1.0 / ln)

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def __add__(self, other: Point3D) -> Point3D:
        return Point3D(x=self.x + other.x, y=self.y + other.y, z=self.z + other.z)

    def __sub__(self, other: Point3D) -> Point3D:
        return Point3D(x=self.x - other.x, y=self.y - other.y, z=self.z - other.z)

    def __mul__(self, scalar: float) -> Point3D:
        return Point3D(x=self.x * scalar, y=self.y * scalar, z=self.z * scalar)


class Line3D(BaseModel):
    """Straight segment between two 3D points."""
    model_config = ConfigDict(frozen=True)

    start: Point3D
    end: Point3D

    def delta(self) -> Point3D:
        return self.end - self.start

    def length(self) -> float:
        return self.start.distance_to(self.end)

    def direction(self) -> Point3D:
        """Unit vector from start to end."""
        return self.delta().normalized()

    def reversed(self) -> Line3D:
        return Line3D(start=self.end, end=self.start)


def _cross(
    a: tuple[float, float, float], b: tuple[float, float, float],
) -> tuple[float, float, float]:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def intersect_lines(
    a1: Point2D,
    a2: Point2D,
    b1: Point2D,
    b2: Point2D,
    infinite: bool = False,
) -> Point2D | None:
    """
    Intersect line a1-a2 with line b1-b2.

    Each line is lifted to homogeneous coordinates (cross product of its
    endpoints with z=1) and the two lines are crossed to get the point.
    Returns None for a zero-length input, for parallel lines, or (unless
    `infinite`) when the point lies outside the first segment.
    """
    if a1 == a2 or b1 == b2:
        return None

    la = _cross((a1.x, a1.y, 1.0), (a2.x, a2.y, 1.0))
    lb = _cross((b1.x, b1.y, 1.0), (b2.x, b2.y, 1.0))
    px, py, pw = _cross(la, lb)
    # w scales with the product of the two direction lengths
    if abs(pw) <= EPSILON * math.hypot(la[0], la[1]) * math.hypot(lb[0], lb[1]):
        return None

    point = Point2D(x=px / pw, y=py / pw)
    if infinite:
        return point

    # Parameter of the point along the first segment
    dx, dy = a2.x - a1.x, a2.y - a1.y
    t = ((point.x - a1.x) * dx + (point.y - a1.y) * dy) / (dx * dx + dy * dy)
    if t < 0.0 or t > 1.0:
        return None
    return point


Matrix3 = tuple[
    tuple[float, float, float],
    tuple[float, float, float],
    tuple[float, float, float],
]

_IDENTITY: Matrix3 = ((1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0))
_ORIGIN = Point3D(x=0.0, y=0.0, z=0.0)


class Transform3D(BaseModel):
    """
    Rigid affine transform: a 3x3 rotation followed by a translation.

    Transforms compose by matrix multiplication; `a.multiply(b)` applies
    `b` first, then `a`.
    """
    model_config = ConfigDict(frozen=True)

    rotation: Matrix3 = _IDENTITY
    translation: Point3D = _ORIGIN

    @classmethod
    def identity(cls) -> Transform3D:
        return cls()

    @classmethod
    def rotation_about(cls, axis: Point3D, angle: float) -> Transform3D:
        """Rotation by `angle` radians about `axis` through the origin (Rodrigues)."""
        u = axis.normalized()
        if u.length() < EPSILON:
            raise ValueError("rotation axis must be non-zero")
        c, s = math.cos(angle), math.sin(angle)
        k = 1.0 - c
        x, y, z = u.x, u.y, u.z
        return cls(rotation=(
            (c + x * x * k, x * y * k - z * s, x * z * k + y * s),
            (y * x * k + z * s, c + y * y * k, y * z * k - x * s),
            (z * x * k - y * s, z * y * k + x * s, c + z * z * k),
        ))

    @classmethod
    def rotation_x(cls, angle: float) -> Transform3D:
        c, s = math.cos(angle), math.sin(angle)
        return cls(rotation=((1.0, 0.0, 0.0), (0.0, c, -s), (0.0, s, c)))

    @classmethod
    def rotation_y(cls, angle: float) -> Transform3D:
        c, s = math.cos(angle), math.sin(angle)
        return cls(rotation=((c, 0.0, s), (0.0, 1.0, 0.0), (-s, 0.0, c)))

    @classmethod
    def rotation_z(cls, angle: float) -> Transform3D:
        c, s = math.cos(angle), math.sin(angle)
        return cls(rotation=((c, -s, 0.0), (s, c, 0.0), (0.0, 0.0, 1.0)))

    @classmethod
    def translation_of(cls, point: Point3D) -> Transform3D:
        return cls(translation=point)

    def multiply(self, other: Transform3D) -> Transform3D:
        """Return self · other."""
        a, b = self.rotation, other.rotation
        rows = tuple(
            tuple(sum(a[i][k] * b[k][j] for k in range(3)) for j in range(3))
            for i in range(3)
        )
        return Transform3D(
            rotation=rows,  # type: ignore[arg-type]
            translation=self.apply_vector(other.translation) + self.translation,
        )

    def translated(self, point: Point3D) -> Transform3D:
        """Same rotation, translation replaced by `point`."""
        return Transform3D(rotation=self.rotation, translation=point)

    def apply_vector(self, v: Point3D) -> Point3D:
        r = self.rotation
        return Point3D(
            x=r[0][0] * v.x + r[0][1] * v.y + r[0][2] * v.z,
            y=r[1][0] * v.x + r[1][1] * v.y + r[1][2] * v.z,
            z=r[2][0] * v.x + r[2][1] * v.y + r[2][2] * v.z,
        )

    def apply(self, point: Point3D) -> Point3D:
        return self.apply_vector(point) + self.translation

    def determinant(self) -> float:
        r = self.rotation
        return (
            r[0][0] * (r[1][1] * r[2][2] - r[1][2] * r[2][1])
            - r[0][1] * (r[1][0] * r[2][2] - r[1][2] * r[2][0])
            + r[0][2] * (r[1][0] * r[2][1] - r[1][1] * r[2][0])
        )

    def is_rotation(self, tol: float = 1e-9) -> bool:
        """True when orthonormal, right-handed and without translation."""
        if self.translation.length() > tol:
            return False
        r = self.rotation
        for i in range(3):
            for j in range(3):
                dot = sum(r[i][k] * r[j][k] for k in range(3))
                if abs(dot - (1.0 if i == j else 0.0)) > tol:
                    return False
        return abs(self.determinant() - 1.0) <= tol

    def to_matrix4(self) -> list[list[float]]:
        """Row-major 4x4 homogeneous matrix."""
        r, t = self.rotation, self.translation
        return [
            [r[0][0], r[0][1], r[0][2], t.x],
            [r[1][0], r[1][1], r[1][2], t.y],
            [r[2][0], r[2][1], r[2][2], t.z],
            [0.0, 0.0, 0.0, 1.0],
        ]
