"""Shed input parameters and generation configuration."""

from __future__ import annotations
import math
from pydantic import BaseModel, ConfigDict, Field

from .profiles import Profile


class ShedUser(BaseModel):
    """User-facing building dimensions (millimetres, degrees)."""
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    span: float = Field(gt=0)             # Eave line to eave line
    length: float = Field(gt=0)           # Along the ridge
    side_bays: int = Field(ge=1)          # Bays along the length
    height: float = Field(gt=0)           # Eave height
    pitch: float = Field(ge=0, lt=90)     # Roof angle from horizontal

    @property
    def bay_spacing(self) -> float:
        return self.length / self.side_bays

    @property
    def frame_count(self) -> int:
        return self.side_bays + 1

    @property
    def pitch_radians(self) -> float:
        return math.radians(self.pitch)

    @property
    def ridge_height(self) -> float:
        """Nominal roof line elevation at mid-span."""
        return self.height + math.tan(self.pitch_radians) * self.span / 2


class ShedCalc(BaseModel):
    """Profiles assigned to each structural role."""
    model_config = ConfigDict(frozen=True)

    column: Profile
    rafter: Profile
    roof_purlin: Profile
    side_girt: Profile


class ShedInput(BaseModel):
    """A complete build request: dimensions plus profile assignment."""
    model_config = ConfigDict(frozen=True)

    user: ShedUser
    calc: ShedCalc


class GenerationConfig(BaseModel):
    """Controls frame placement and profile facing."""
    model_config = ConfigDict(allow_inf_nan=False)

    inset_end_frames: bool = True       # Pull end frames in by half a column flange
    first_frame_facing: float = 270.0   # Degrees about Z, frame 0 only
    frame_facing: float = 90.0          # Degrees about Z, every other frame
