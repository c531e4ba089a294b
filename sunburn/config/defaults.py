"""Read-only lookup tables for skin types, sunscreen levels and sweat levels."""

from types import MappingProxyType

from sunburn.models.profile import (
    SkinType,
    SkinTypeProfile,
    SPFLevel,
    SPFProfile,
    SweatLevel,
    SweatProfile,
)

SKIN_TYPES = MappingProxyType({
    SkinType.I: SkinTypeProfile(
        subtitle="Very Light",
        description="Burns easily, often has freckles",
        coefficient=2.5,  # MED 200 J/m^2
    ),
    SkinType.II: SkinTypeProfile(
        subtitle="Light",
        description="Burns easily, tans minimally",
        coefficient=3.125,  # MED 250 J/m^2
    ),
    SkinType.III: SkinTypeProfile(
        subtitle="Medium",
        description="Burns moderately, tans gradually",
        coefficient=4.375,  # MED 350 J/m^2
    ),
    SkinType.IV: SkinTypeProfile(
        subtitle="Olive",
        description="Burns rarely, tans easily",
        coefficient=5.625,  # MED 450 J/m^2
    ),
    SkinType.V: SkinTypeProfile(
        subtitle="Brown",
        description="Very rarely burns, tans deeply",
        coefficient=7.5,  # MED 600 J/m^2
    ),
    SkinType.VI: SkinTypeProfile(
        subtitle="Very Dark",
        description="Almost never burns, naturally dark",
        coefficient=12.5,  # MED 1000 J/m^2
    ),
})

SPF_LEVELS = MappingProxyType({
    SPFLevel.NONE: SPFProfile(label="None", coefficient=1.0),
    SPFLevel.SPF_15: SPFProfile(label="SPF 15", coefficient=15.0),
    SPFLevel.SPF_30: SPFProfile(label="SPF 30", coefficient=30.0),
    SPFLevel.SPF_50_PLUS: SPFProfile(label="SPF 50+", coefficient=50.0),
})

SWEAT_LEVELS = MappingProxyType({
    SweatLevel.LOW: SweatProfile(label="None", start_hours=0.0, duration_hours=0.0),
    SweatLevel.MEDIUM: SweatProfile(label="Some", start_hours=2.0, duration_hours=12.0),
    SweatLevel.HIGH: SweatProfile(label="Profuse", start_hours=1.0, duration_hours=6.0),
})
