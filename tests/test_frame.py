# File: tests/test_frame.py
"""
Tests for single-frame geometry: column/rafter centerlines, mirroring
and orientation transforms.
"""

import math

import pytest

from shedbim.core.errors import ShedGeometryError
from shedbim.core.frame import build_frame, column_top, column_x, mirror_x, rafter_points
from shedbim.models import Point3D, ShedUser

Z = Point3D(x=0, y=0, z=1)
X = Point3D(x=1, y=0, z=0)


def assert_point(p, expected, tol=1e-9):
    assert p.as_tuple() == pytest.approx(expected, abs=tol)


def roof_centerline_z(user, calc, x):
    """Elevation of the left rafter centerline at x."""
    p = math.radians(user.pitch)
    return (user.height + math.tan(p) * x
            - (calc.roof_purlin.depth + calc.rafter.web / 2) / math.cos(p))


def test_mirror_x():
    assert mirror_x(140, 6000) == 5860
    assert mirror_x(3000, 6000) == 3000


def test_column_positions(user, calc):
    frame = build_frame(user, calc, y=32)
    assert column_x(calc) == 140
    assert frame.column_left.line.start.x == pytest.approx(140)
    assert frame.column_right.line.start.x == pytest.approx(5860)
    for col in (frame.column_left, frame.column_right):
        assert col.line.start.z == 0
        assert col.line.start.x == col.line.end.x
        assert col.line.start.y == col.line.end.y == 32


def test_column_top(user, calc):
    p = math.radians(22)
    expected = 3000 + math.tan(p) * (64 + 152) - 64 / math.cos(p)
    assert column_top(user, calc) == pytest.approx(expected)

    frame = build_frame(user, calc, y=0)
    assert frame.column_left.line.end.z == pytest.approx(expected)
    assert frame.column_right.line.end.z == pytest.approx(expected)


def test_rafter_lies_on_centerline(user, calc):
    start, end = rafter_points(user, calc)
    assert start.y == pytest.approx(roof_centerline_z(user, calc, start.x))
    assert end.y == pytest.approx(roof_centerline_z(user, calc, end.x))
    assert start.x < end.x


def test_rafter_follows_pitch(user, calc):
    line = build_frame(user, calc, y=0).rafter_left.line
    d = line.delta()
    assert math.degrees(math.atan2(d.z, d.x)) == pytest.approx(22)


def test_rafter_ends_near_ridge(user, calc):
    frame = build_frame(user, calc, y=0)
    half_web = calc.rafter.web / 2
    offset = math.sin(math.radians(22)) * half_web
    left_end = frame.rafter_left.line.end
    right_start = frame.rafter_right.line.start
    assert left_end.x == pytest.approx(3000 - offset)
    assert right_start.x == pytest.approx(3000 + offset)
    assert (left_end.x + right_start.x) / 2 == pytest.approx(user.span / 2, rel=1e-9)
    assert left_end.z == pytest.approx(right_start.z)


def test_right_side_mirrors_left(user, calc):
    frame = build_frame(user, calc, y=100)
    cl, cr = frame.column_left.line, frame.column_right.line
    assert cr.start.x == pytest.approx(user.span - cl.start.x)
    assert (cr.start.z, cr.end.z) == (cl.start.z, cl.end.z)

    rl, rr = frame.rafter_left.line, frame.rafter_right.line
    # Right rafter runs ridge to eave
    assert rr.start.x == pytest.approx(user.span - rl.end.x)
    assert rr.end.x == pytest.approx(user.span - rl.start.x)
    assert rr.start.z == rl.end.z
    assert rr.end.z == rl.start.z
    assert rr.length() == pytest.approx(rl.length())


def test_all_members_share_y(user, calc):
    frame = build_frame(user, calc, y=1234.5)
    for member in frame.members():
        assert member.line.start.y == member.line.end.y == 1234.5


def test_pitch_zero(calc):
    flat = ShedUser(span=6000, length=8000, side_bays=2, height=3000, pitch=0)
    frame = build_frame(flat, calc, y=0)
    assert frame.column_left.line.end.z == pytest.approx(3000 - 64)
    for rafter in (frame.rafter_left, frame.rafter_right):
        assert rafter.line.start.z == pytest.approx(rafter.line.end.z)
        assert rafter.line.start.z == pytest.approx(3000 - 64 - 76)
    assert frame.rafter_left.line.end.x == pytest.approx(3000)


def test_member_transforms_align_with_lines(user, calc):
    frame = build_frame(user, calc, y=0, facing=90)
    for member in frame.members():
        assert member.transform.is_rotation()
        assert_point(member.transform.apply_vector(Z), member.line.direction().as_tuple())


def test_placement_reaches_member_end(user, calc):
    frame = build_frame(user, calc, y=500)
    for member in frame.members():
        local_end = Point3D(x=0, y=0, z=member.length())
        assert_point(member.placement().apply(local_end), member.line.end.as_tuple(), tol=1e-6)


def test_facing_turns_profile_about_its_axis(user, calc):
    frame = build_frame(user, calc, y=0, facing=270)
    assert_point(frame.column_left.transform.apply_vector(X), (0, -1, 0))

    frame = build_frame(user, calc, y=0, facing=90)
    assert_point(frame.column_left.transform.apply_vector(X), (0, 1, 0))
    # Rafter tilt leaves the facing axis horizontal
    assert_point(frame.rafter_left.transform.apply_vector(X), (0, 1, 0))


def test_profiles_are_shared(user, calc):
    frame = build_frame(user, calc, y=0)
    assert frame.column_left.profile is calc.column
    assert frame.rafter_right.profile is calc.rafter


def test_span_too_small(calc):
    narrow = ShedUser(span=250, length=8000, side_bays=2, height=3000, pitch=22)
    with pytest.raises(ShedGeometryError):
        build_frame(narrow, calc, y=0)


def test_pitch_out_of_range_rejected(calc):
    steep = ShedUser.model_construct(span=6000, length=8000, side_bays=2, height=3000, pitch=90)
    with pytest.raises(ShedGeometryError):
        build_frame(steep, calc, y=0)


def test_rafter_must_fit(calc):
    # Room for columns but not for a rafter to the ridge
    tight = ShedUser(span=500, length=8000, side_bays=2, height=3000, pitch=22)
    with pytest.raises(ShedGeometryError):
        build_frame(tight, calc, y=0)


def test_rafter_below_ground_rejected(calc):
    # Column top clears the ground, the rafter under the purlins does not
    low = ShedUser(span=6000, length=8000, side_bays=2, height=100, pitch=0)
    assert column_top(low, calc) > 0
    with pytest.raises(ShedGeometryError):
        build_frame(low, calc, y=0)
