"""High-level shed generation service — facade for the API layer."""

from __future__ import annotations
import logging

from shedbim.models import (
    GenerationConfig, Profile, ProfileKind, ShedBim, ShedCalc, ShedUser,
)
from shedbim.core.assembly import build_model
from shedbim.core.registry import ProfileRegistry, create_default_registry

logger = logging.getLogger(__name__)


class ShedService:
    """Resolves profiles, delegates to the builder, returns the BIM."""

    def __init__(self, registry: ProfileRegistry | None = None) -> None:
        self.registry = registry or create_default_registry()

    def resolve_profile(self, ref: str | Profile) -> Profile:
        """A catalogue name or an inline profile."""
        if isinstance(ref, Profile):
            return ref
        return self.registry.get_profile(ref)

    def resolve_calc(
        self,
        column: str | Profile,
        rafter: str | Profile,
        roof_purlin: str | Profile,
        side_girt: str | Profile,
    ) -> ShedCalc:
        return ShedCalc(
            column=self.resolve_profile(column),
            rafter=self.resolve_profile(rafter),
            roof_purlin=self.resolve_profile(roof_purlin),
            side_girt=self.resolve_profile(side_girt),
        )

    def generate(
        self,
        user: ShedUser,
        calc: ShedCalc,
        config: GenerationConfig | None = None,
    ) -> ShedBim:
        if config is None:
            config = GenerationConfig()

        logger.debug(
            "generating shed with column=%s rafter=%s purlin=%s girt=%s",
            calc.column.name, calc.rafter.name, calc.roof_purlin.name, calc.side_girt.name,
        )
        return build_model(user, calc, config)

    def list_profiles(self, kind: ProfileKind | None = None) -> list[Profile]:
        return self.registry.list_profiles(kind)
