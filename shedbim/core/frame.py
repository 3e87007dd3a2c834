"""Single transverse frame geometry — two columns and two rafters.

Works in the frame plane: x across the span from the left building edge,
y as elevation. The left half is computed, the right half is its mirror
about mid-span. Member depths are accounted for so that girts land on the
building edge, purlins sit on the nominal roof line, and every member is
placed on its centerline rather than on a face.
"""

from __future__ import annotations
import logging
import math

from shedbim.core.errors import ShedGeometryError
from shedbim.models import (
    FrameMembers, Line3D, MemberType, Point2D, Point3D, ShedCalc, ShedUser,
    Side, StructuralMember, Transform3D,
)

logger = logging.getLogger(__name__)


def mirror_x(x: float, span: float) -> float:
    """Reflect an x coordinate about mid-span."""
    return x + 2 * (span / 2 - x)


def column_x(calc: ShedCalc) -> float:
    """Left column centerline, inset by the girt depth and half the web."""
    return calc.side_girt.depth + calc.column.web / 2


def column_top(user: ShedUser, calc: ShedCalc) -> float:
    """Elevation where the column meets the underside of the roof purlins."""
    pitch = user.pitch_radians
    inner = _roof_line_at_column_inner_face(user, calc)
    return inner.y - calc.roof_purlin.depth / math.cos(pitch)


def _roof_line_at_column_inner_face(user: ShedUser, calc: ShedCalc) -> Point2D:
    slope = math.tan(user.pitch_radians)
    # Outer column face: the girt sits outside it, below the eave line
    outer = Point2D(
        x=calc.side_girt.depth,
        y=user.height + slope * calc.side_girt.depth,
    )
    return outer + Point2D(x=calc.column.web, y=slope * calc.column.web)


def rafter_points(user: ShedUser, calc: ShedCalc) -> tuple[Point2D, Point2D]:
    """Left rafter centerline (eave end, ridge end) in the frame plane."""
    pitch = user.pitch_radians
    cos_p = math.cos(pitch)
    half_web = calc.rafter.web / 2

    inner = _roof_line_at_column_inner_face(user, calc)
    top_of_rafter = Point2D(x=inner.x, y=inner.y - calc.roof_purlin.depth / cos_p)
    start = top_of_rafter.polar(math.radians(270) + pitch, half_web)

    bottom_at_ridge = Point2D(
        x=user.span / 2,
        y=user.ridge_height - (calc.roof_purlin.depth + calc.rafter.web) / cos_p,
    )
    end = bottom_at_ridge.polar(math.radians(90) + pitch, half_web)
    return start, end


def build_frame(
    user: ShedUser,
    calc: ShedCalc,
    y: float,
    facing: float = 90.0,
    index: int = 0,
) -> FrameMembers:
    """
    Build the members of one frame at along-length position `y`.

    `facing` is the rotation (degrees) about each member's own axis that
    decides which way the open side of the profile points.
    """
    if not 0 <= user.pitch < 90:
        raise ShedGeometryError(f"pitch must be in [0, 90) degrees, got {user.pitch}")

    span = user.span
    x1 = column_x(calc)
    if x1 >= span / 2:
        raise ShedGeometryError(
            f"span {span} is too small for column {calc.column.name} "
            f"and girt {calc.side_girt.name}"
        )
    x2 = mirror_x(x1, span)
    z_top = column_top(user, calc)
    if z_top <= 0:
        raise ShedGeometryError(f"eave height {user.height} leaves no column below the roof")

    start, end = rafter_points(user, calc)
    if start.x >= end.x:
        raise ShedGeometryError(
            f"rafter {calc.rafter.name} does not fit between column and ridge"
        )

    pitch = user.pitch_radians
    # Lowest point of the rafter: its underside at the eave end
    if start.y - calc.rafter.web / 2 * math.cos(pitch) <= 0:
        raise ShedGeometryError(
            f"eave height {user.height} puts rafter {calc.rafter.name} below the ground"
        )

    turn = Transform3D.rotation_z(math.radians(facing))
    column_trans = turn
    rafter_left_trans = Transform3D.rotation_y(math.radians(90) - pitch).multiply(turn)
    rafter_right_trans = Transform3D.rotation_y(math.radians(90) + pitch).multiply(turn)

    column_left = StructuralMember(
        line=Line3D(start=Point3D(x=x1, y=y, z=0.0), end=Point3D(x=x1, y=y, z=z_top)),
        transform=column_trans,
        profile=calc.column,
        type=MemberType.COLUMN, side=Side.LEFT, frame=index,
    )
    column_right = StructuralMember(
        line=Line3D(start=Point3D(x=x2, y=y, z=0.0), end=Point3D(x=x2, y=y, z=z_top)),
        transform=column_trans,
        profile=calc.column,
        type=MemberType.COLUMN, side=Side.RIGHT, frame=index,
    )

    left_line = Line3D(
        start=Point3D(x=start.x, y=y, z=start.y),
        end=Point3D(x=end.x, y=y, z=end.y),
    )
    # Mirrored and reversed: runs ridge to eave
    right_line = Line3D(
        start=Point3D(x=mirror_x(end.x, span), y=y, z=end.y),
        end=Point3D(x=mirror_x(start.x, span), y=y, z=start.y),
    )
    rafter_left = StructuralMember(
        line=left_line, transform=rafter_left_trans, profile=calc.rafter,
        type=MemberType.RAFTER, side=Side.LEFT, frame=index,
    )
    rafter_right = StructuralMember(
        line=right_line, transform=rafter_right_trans, profile=calc.rafter,
        type=MemberType.RAFTER, side=Side.RIGHT, frame=index,
    )

    logger.debug(
        "frame %d at y=%.1f: columns x=%.1f/%.1f top=%.1f, rafter %.1f,%.1f -> %.1f,%.1f",
        index, y, x1, x2, z_top, start.x, start.y, end.x, end.y,
    )

    return FrameMembers(
        index=index, y=y,
        column_left=column_left, column_right=column_right,
        rafter_left=rafter_left, rafter_right=rafter_right,
    )
