"""Structural cross-section profiles (cold-formed C and top-hat sections).

All dimensions are in millimetres. A profile is an immutable record of its
raw dimensions; `web`, `flange` and `depth` are fixed aliases of those.
"""

from __future__ import annotations
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator


class ProfileKind(str, Enum):
    C = "c"
    TOP_HAT = "top_hat"


class Profile(BaseModel):
    """A cross-section definition shared by every member that uses it."""
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    name: str
    kind: ProfileKind = ProfileKind.C
    width: float = Field(gt=0)        # Flange
    height: float = Field(gt=0)       # Web (C) / depth (top-hat)
    thickness: float = Field(gt=0)
    lip: float = Field(default=0.0, ge=0)

    @model_validator(mode="after")
    def _check_section(self) -> Profile:
        if self.thickness >= self.height / 2:
            raise ValueError(
                f"{self.name}: thickness {self.thickness} must be less than "
                f"half the height ({self.height})"
            )
        if self.thickness >= self.width / 2:
            raise ValueError(
                f"{self.name}: thickness {self.thickness} must be less than "
                f"half the width ({self.width})"
            )
        if self.kind == ProfileKind.TOP_HAT and self.lip != 0:
            raise ValueError(f"{self.name}: top-hat sections have no lip")
        return self

    # Used when the profile is a column or rafter
    @computed_field  # type: ignore[prop-decorator]
    @property
    def web(self) -> float:
        return self.height

    @computed_field  # type: ignore[prop-decorator]
    @property
    def flange(self) -> float:
        return self.width

    # Used when the profile is a purlin or girt
    @computed_field  # type: ignore[prop-decorator]
    @property
    def depth(self) -> float:
        return self.height


def create_c(name: str, web: float, flange: float, lip: float, thickness: float) -> Profile:
    """Lipped cold-formed channel."""
    return Profile(
        name=name, kind=ProfileKind.C,
        height=web, width=flange, lip=lip, thickness=thickness,
    )


def create_top_hat(name: str, depth: float, width: float, thickness: float) -> Profile:
    """Top-hat (Z/TH) purlin or girt section."""
    return Profile(
        name=name, kind=ProfileKind.TOP_HAT,
        height=depth, width=width, thickness=thickness,
    )


# Common cold-formed sections: C<web><thickness x10>, TH<depth><thickness x100>
STANDARD_PROFILES: dict[str, Profile] = {
    p.name: p for p in (
        create_c("C10010", 102, 51, 12.5, 1.0),
        create_c("C10015", 102, 51, 13.5, 1.5),
        create_c("C10019", 102, 51, 14.5, 1.9),
        create_c("C15012", 152, 64, 14.5, 1.2),
        create_c("C15015", 152, 64, 14.5, 1.5),
        create_c("C15019", 152, 64, 15.5, 1.9),
        create_c("C15024", 152, 64, 15.5, 2.4),
        create_c("C20015", 203, 76, 15.5, 1.5),
        create_c("C20019", 203, 76, 19.5, 1.9),
        create_c("C20024", 203, 76, 21.0, 2.4),
        create_c("C25019", 254, 76, 18.5, 1.9),
        create_c("C25024", 254, 76, 18.5, 2.4),
        create_top_hat("TH40075", 40, 100, 0.75),
        create_top_hat("TH64075", 64, 100, 0.75),
        create_top_hat("TH64", 64, 100, 1.0),       # TH64100, under its short name
        create_top_hat("TH96100", 96, 100, 1.0),
        create_top_hat("TH120120", 120, 100, 1.2),
    )
}
