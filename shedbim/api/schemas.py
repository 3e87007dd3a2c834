"""API request/response schemas."""

from __future__ import annotations
from pydantic import BaseModel

from shedbim.models import GenerationConfig, Profile, ShedBim, ShedUser


class CalcInput(BaseModel):
    """Profile assignment; each entry is a catalogue name or an inline profile."""
    column: str | Profile = "C15024"
    rafter: str | Profile = "C15024"
    roof_purlin: str | Profile = "TH64"
    side_girt: str | Profile = "TH64"


class GenerateRequest(BaseModel):
    """Request body for the /generate endpoint."""
    user: ShedUser
    calc: CalcInput = CalcInput()
    config: GenerationConfig = GenerationConfig()


class GenerateResponse(BaseModel):
    """Response from the /generate endpoint."""
    bim: ShedBim
    frame_count: int
    member_count: int


class ErrorDetail(BaseModel):
    detail: str
    code: str


class ErrorResponse(BaseModel):
    """Body of an HTTPException raised with an ErrorDetail."""
    detail: ErrorDetail
