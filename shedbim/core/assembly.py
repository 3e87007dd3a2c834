"""Shed assembly — places one frame per bay boundary along the building."""

from __future__ import annotations
import logging

from shedbim.core.errors import ShedGeometryError
from shedbim.core.frame import build_frame
from shedbim.models import GenerationConfig, ShedBim, ShedCalc, ShedInput, ShedUser

logger = logging.getLogger(__name__)


def frame_positions(
    user: ShedUser,
    calc: ShedCalc,
    config: GenerationConfig | None = None,
) -> list[float]:
    """
    Along-length coordinate of every frame, start of building first.

    End frames are set back by half the column flange so the outside of the
    end columns, not their centerline, lands on the nominal building ends.
    """
    if config is None:
        config = GenerationConfig()
    if user.side_bays < 1:
        raise ShedGeometryError(f"side_bays must be at least 1, got {user.side_bays}")

    spacing = user.length / user.side_bays
    if config.inset_end_frames and spacing <= calc.column.flange:
        raise ShedGeometryError(
            f"bay spacing {spacing:g} is too small for column flange {calc.column.flange:g}"
        )

    last = user.side_bays
    positions: list[float] = []
    for i in range(last + 1):
        y = i * spacing
        if config.inset_end_frames:
            if i == 0:
                y += calc.column.flange / 2
            elif i == last:
                y -= calc.column.flange / 2
        positions.append(y)
    return positions


def frame_facing(index: int, config: GenerationConfig | None = None) -> float:
    """Profile facing (degrees about Z) for a frame. Only frame 0 is turned."""
    if config is None:
        config = GenerationConfig()
    return config.first_frame_facing if index == 0 else config.frame_facing


def build_model(
    user: ShedUser,
    calc: ShedCalc,
    config: GenerationConfig | None = None,
) -> ShedBim:
    """Build every frame of the shed and collect the members per side."""
    if config is None:
        config = GenerationConfig()

    positions = frame_positions(user, calc, config)
    frames = [
        build_frame(user, calc, y, facing=frame_facing(i, config), index=i)
        for i, y in enumerate(positions)
    ]
    bim = ShedBim.from_frames(frames)

    logger.info(
        "built shed %gx%g, %d bays: %d frames, %d members",
        user.span, user.length, user.side_bays, len(frames), len(bim.members()),
    )
    return bim


def build_shed(shed: ShedInput, config: GenerationConfig | None = None) -> ShedBim:
    return build_model(shed.user, shed.calc, config)
