"""BIM output models — structural members and the assembled shed."""

from __future__ import annotations
from enum import Enum
from pydantic import BaseModel, ConfigDict, computed_field

from .geometry import Line3D, Transform3D
from .profiles import Profile


class MemberType(str, Enum):
    COLUMN = "column"
    RAFTER = "rafter"


class Side(str, Enum):
    LEFT = "left"
    RIGHT = "right"


class StructuralMember(BaseModel):
    """
    A straight member: centerline, cross-section orientation and profile.

    The renderer extrudes the profile outline along local +Z by the
    centerline length, then applies `placement()`.
    """
    model_config = ConfigDict(frozen=True)

    line: Line3D
    transform: Transform3D
    profile: Profile
    type: MemberType
    side: Side
    frame: int = 0

    def length(self) -> float:
        return self.line.length()

    def placement(self) -> Transform3D:
        """Orientation transform moved to the centerline start."""
        return Transform3D.translation_of(self.line.start).multiply(self.transform)


class FrameMembers(BaseModel):
    """The two columns and two rafters of one transverse frame."""
    model_config = ConfigDict(frozen=True)

    index: int
    y: float
    column_left: StructuralMember
    column_right: StructuralMember
    rafter_left: StructuralMember
    rafter_right: StructuralMember

    def members(self) -> list[StructuralMember]:
        return [self.column_left, self.column_right, self.rafter_left, self.rafter_right]


class BimStats(BaseModel):
    """Summary statistics for a generated shed."""
    frames: int = 0
    total_members: int = 0
    columns: int = 0
    rafters: int = 0
    length_by_profile: dict[str, float] = {}   # Cut-list total per profile name

    @classmethod
    def from_members(cls, frames: int, members: list[StructuralMember]) -> BimStats:
        lengths: dict[str, float] = {}
        for m in members:
            lengths[m.profile.name] = lengths.get(m.profile.name, 0.0) + m.length()
        columns = sum(1 for m in members if m.type == MemberType.COLUMN)
        return cls(
            frames=frames,
            total_members=len(members),
            columns=columns,
            rafters=len(members) - columns,
            length_by_profile=lengths,
        )


class ShedBim(BaseModel):
    """The complete generated shed, members listed in frame order."""
    model_config = ConfigDict(frozen=True)

    columns_left: tuple[StructuralMember, ...] = ()
    columns_right: tuple[StructuralMember, ...] = ()
    rafters_left: tuple[StructuralMember, ...] = ()
    rafters_right: tuple[StructuralMember, ...] = ()

    @classmethod
    def from_frames(cls, frames: list[FrameMembers]) -> ShedBim:
        return cls(
            columns_left=tuple(f.column_left for f in frames),
            columns_right=tuple(f.column_right for f in frames),
            rafters_left=tuple(f.rafter_left for f in frames),
            rafters_right=tuple(f.rafter_right for f in frames),
        )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def stats(self) -> BimStats:
        return BimStats.from_members(self.frame_count, self.members())

    @property
    def frame_count(self) -> int:
        return len(self.columns_left)

    def frame(self, index: int) -> FrameMembers:
        col = self.columns_left[index]
        return FrameMembers(
            index=index,
            y=col.line.start.y,
            column_left=col,
            column_right=self.columns_right[index],
            rafter_left=self.rafters_left[index],
            rafter_right=self.rafters_right[index],
        )

    def members(self) -> list[StructuralMember]:
        return [
            *self.columns_left, *self.columns_right,
            *self.rafters_left, *self.rafters_right,
        ]
