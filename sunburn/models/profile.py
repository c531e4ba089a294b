"""User profile variants: skin type, sunscreen level and sweat level."""

from dataclasses import dataclass
from enum import StrEnum


class SkinType(StrEnum):
    I = "I"  # noqa: E741
    II = "II"
    III = "III"
    IV = "IV"
    V = "V"
    VI = "VI"


class SPFLevel(StrEnum):
    NONE = "NONE"
    SPF_15 = "SPF_15"
    SPF_30 = "SPF_30"
    SPF_50_PLUS = "SPF_50_PLUS"


class SweatLevel(StrEnum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


@dataclass(frozen=True)
class SkinTypeProfile:
    subtitle: str
    description: str
    coefficient: float  # MED = med_per_coefficient * coefficient


@dataclass(frozen=True)
class SPFProfile:
    label: str
    coefficient: float


@dataclass(frozen=True)
class SweatProfile:
    label: str
    start_hours: float
    duration_hours: float
