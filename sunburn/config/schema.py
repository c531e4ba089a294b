"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field, field_validator, model_validator

from sunburn.models.profile import SkinType, SPFLevel, SweatLevel


class DoseConfig(BaseModel):
    model_config = {"extra": "forbid"}

    # Percent of the burn budget per minute per unit UVI, before dividing by MED
    damage_rate_per_minute: float = Field(default=150.0, gt=0.0)
    med_per_coefficient: float = Field(default=80.0, gt=0.0)  # J/m^2
    damage_threshold: float = Field(default=100.0, gt=0.0)
    safety_threshold: float = Field(default=95.0, gt=0.0)
    low_uv_ramp_enabled: bool = True
    low_uv_ramp_low: float = Field(default=1.0, ge=0.0)
    low_uv_ramp_high: float = Field(default=3.0, gt=0.0)

    @model_validator(mode="after")
    def _check_ramp(self) -> "DoseConfig":
        if self.low_uv_ramp_high <= self.low_uv_ramp_low:
            raise ValueError("low_uv_ramp_high must be greater than low_uv_ramp_low")
        return self


class CalculationConfig(BaseModel):
    model_config = {"extra": "forbid"}

    max_points: int = Field(default=26, ge=1)
    slice_options: list[int] = Field(default=[4, 6, 12, 30], min_length=1)
    evening_cutoff_hour: int = Field(default=22, ge=0, le=23)
    min_points_for_evening_stop: int = Field(default=11, ge=0)

    @field_validator("slice_options")
    @classmethod
    def _sorted_options(cls, v: list[int]) -> list[int]:
        for n in v:
            if not 1 <= n <= 60:
                raise ValueError(f"slices per hour must be in 1..60, got {n}")
        return sorted(set(v))


class ProfileConfig(BaseModel):
    model_config = {"extra": "forbid"}

    skin_type: SkinType = SkinType.II
    spf_level: SPFLevel = SPFLevel.NONE
    sweat_level: SweatLevel = SweatLevel.LOW
    timezone: str = "UTC"


class SunburnConfig(BaseModel):
    model_config = {"extra": "forbid"}

    dose: DoseConfig = DoseConfig()
    calculation: CalculationConfig = CalculationConfig()
    profile: ProfileConfig = ProfileConfig()
