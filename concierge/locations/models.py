from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

LocationLevel = Literal["country", "region", "city", "neighbourhood"]


class CityNode(BaseModel):
    model_config = ConfigDict(frozen=True)

    count: int = 0
    neighbourhoods: dict[str, int] = Field(default_factory=dict)

    @field_validator("neighbourhoods", mode="before")
    @classmethod
    def _names_without_counts(cls, value: Any) -> Any:
        # Plain name lists carry no counts; they are reported as 0
        if isinstance(value, (list, tuple)):
            return {str(name): 0 for name in value}
        return value


class RegionNode(BaseModel):
    model_config = ConfigDict(frozen=True)

    count: int = 0
    cities: dict[str, CityNode] = Field(default_factory=dict)


class CountryNode(BaseModel):
    model_config = ConfigDict(frozen=True)

    count: int = 0
    regions: dict[str, RegionNode] = Field(default_factory=dict)


class LocationTree(BaseModel):
    """Snapshot of the location hierarchy for one organization."""

    model_config = ConfigDict(frozen=True)

    countries: dict[str, CountryNode]


class LocationParams(BaseModel):
    org_key: str = Field(..., min_length=1)
    country: str | None = None
    region: str | None = None
    city: str | None = None


class LocationOption(BaseModel):
    value: str
    count: int


class LocationResponse(BaseModel):
    level: LocationLevel
    parent: str | None = None
    options: list[LocationOption] = Field(default_factory=list)
