"""FastAPI route definitions."""

from __future__ import annotations
import logging

from fastapi import APIRouter, HTTPException, status

from shedbim.core.errors import ProfileNotFoundError, ShedGeometryError
from shedbim.models import Profile, ProfileKind
from shedbim.services.shed_service import ShedService
from shedbim.api.schemas import ErrorResponse, GenerateRequest, GenerateResponse

logger = logging.getLogger(__name__)

router = APIRouter()

# Shared service instance
_service = ShedService()


def _profile_not_found(e: ProfileNotFoundError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail={"detail": str(e), "code": "profile_not_found"},
    )


@router.post(
    "/generate",
    response_model=GenerateResponse,
    responses={404: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
async def generate_shed(request: GenerateRequest) -> GenerateResponse:
    """Generate the column and rafter geometry of a shed."""
    calc_in = request.calc
    try:
        calc = _service.resolve_calc(
            calc_in.column, calc_in.rafter, calc_in.roof_purlin, calc_in.side_girt,
        )
        bim = _service.generate(request.user, calc, request.config)
    except ProfileNotFoundError as e:
        raise _profile_not_found(e) from e
    except ShedGeometryError as e:
        logger.info("Rejected shed input: %s", e)
        raise HTTPException(
            status_code=422,
            detail={"detail": str(e), "code": "invalid_geometry"},
        ) from e

    return GenerateResponse(
        bim=bim,
        frame_count=bim.frame_count,
        member_count=len(bim.members()),
    )


@router.get("/profiles", response_model=list[Profile])
async def list_profiles(kind: ProfileKind | None = None) -> list[Profile]:
    """List catalogue profiles, optionally only one kind."""
    return _service.list_profiles(kind)


@router.get("/profiles/{name}", response_model=Profile, responses={404: {"model": ErrorResponse}})
async def get_profile(name: str) -> Profile:
    try:
        return _service.registry.get_profile(name)
    except ProfileNotFoundError as e:
        raise _profile_not_found(e) from e


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
