"""Shared pydantic configuration for Gamma records."""

from __future__ import annotations

from typing import Annotated, Optional, TypeVar

from pydantic import AfterValidator, BaseModel, ConfigDict

T = TypeVar("T")


def _none_as_empty(value: tuple | None) -> tuple:
    # Upstream sends null for empty collections on older records
    return () if value is None else value


# Immutable nested collection; JSON null decodes as ()
Collection = Annotated[Optional[tuple[T, ...]], AfterValidator(_none_as_empty)]


class GammaModel(BaseModel):
    """Immutable record that drops unknown upstream fields."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)
