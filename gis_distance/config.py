"""Library defaults loaded from environment / .env file."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from gis_distance.domain.enums import FormulaKind

DEFAULT_RADIUS_KM = 6_367.45
MIN_RADIUS_KM = 6_357.0
MAX_RADIUS_KM = 6_378.0


class Settings(BaseSettings):
    # Calculator defaults
    default_radius_km: float = Field(
        default=DEFAULT_RADIUS_KM, ge=MIN_RADIUS_KM, le=MAX_RADIUS_KM
    )
    default_formula: FormulaKind = FormulaKind.HAVERSINE

    # Vincenty iteration
    vincenty_max_iterations: int = Field(default=100, ge=1)
    vincenty_tolerance: float = Field(default=1e-12, gt=0)  # radians of lambda

    model_config = {
        "env_file": ".env",
        "env_prefix": "GIS_DISTANCE_",
        "extra": "ignore",
    }

    @field_validator("default_formula", mode="before")
    @classmethod
    def _normalise_formula(cls, value):
        return FormulaKind.parse(value) or value


settings = Settings()
