from .geometry import Point2D, Point3D, Line3D, Transform3D, intersect_lines
from .profiles import Profile, ProfileKind, STANDARD_PROFILES, create_c, create_top_hat
from .parameters import ShedUser, ShedCalc, ShedInput, GenerationConfig
from .bim import StructuralMember, FrameMembers, ShedBim, BimStats, MemberType, Side

__all__ = [
    "Point2D", "Point3D", "Line3D", "Transform3D", "intersect_lines",
    "Profile", "ProfileKind", "STANDARD_PROFILES", "create_c", "create_top_hat",
    "ShedUser", "ShedCalc", "ShedInput", "GenerationConfig",
    "StructuralMember", "FrameMembers", "ShedBim", "BimStats", "MemberType", "Side",
]
