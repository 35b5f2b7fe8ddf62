"""
Shared data structures for Starforge.

Enums name every categorical value the tables produce; the frozen record
dataclasses are what the generators return. No generator mutates a record:
regeneration and edits produce new instances (see starforge.provenance).
"""

from dataclasses import dataclass, field, fields
from datetime import datetime
from enum import Enum
from typing import Any, Optional

from starforge.provenance import GenerationMethod, Procedural, Provenance


# =============================================================================
# STELLAR ENUMS
# =============================================================================


class StarClass(str, Enum):
    """Main-sequence spectral classes, brightest first."""
    O = "O"
    B = "B"
    A = "A"
    F = "F"
    G = "G"
    K = "K"
    M = "M"


class SystemType(str, Enum):
    """Star system multiplicity, derived from the companion count."""
    SINGLE = "single"
    BINARY = "binary"
    TRINARY = "trinary"
    QUATERNARY = "quaternary"


class OrbitalZone(str, Enum):
    """Orbital zones around a star, innermost first."""
    INFERNAL = "infernal"
    HOT = "hot"
    HABITABLE = "habitable"
    COLD = "cold"
    OUTER = "outer"
    BEYOND = "beyond"


# =============================================================================
# WORLD ENUMS
# =============================================================================


class WorldType(str, Enum):
    """Primary world variants."""
    HABITAT = "habitat"
    TERRESTRIAL = "terrestrial"
    DWARF = "dwarf"


class DwarfComposition(str, Enum):
    """Bulk composition of dwarf worlds."""
    METALLIC = "metallic"
    SILICACEOUS = "silicaceous"
    CARBONACEOUS = "carbonaceous"
    OTHER = "other"


class Atmosphere(str, Enum):
    """Atmospheric pressure bands."""
    NONE = "none"
    TRACE = "trace"
    THIN = "thin"
    STANDARD = "standard"
    DENSE = "dense"
    VERY_DENSE = "very_dense"


class Temperature(str, Enum):
    """Surface temperature bands."""
    FROZEN = "frozen"
    COLD = "cold"
    COOL = "cool"
    TEMPERATE = "temperate"
    WARM = "warm"
    HOT = "hot"
    VERY_HOT = "very_hot"


class HazardType(str, Enum):
    """Dominant environmental hazard."""
    NONE = "none"
    SEISMIC = "seismic"
    VOLCANIC = "volcanic"
    WEATHER = "weather"
    RADIATION = "radiation"
    OTHER = "other"


class BiochemicalResources(str, Enum):
    """Availability of organic chemistry."""
    NONE = "none"
    POOR = "poor"
    MODERATE = "moderate"
    RICH = "rich"
    VERY_RICH = "very_rich"


class HabitabilityRating(str, Enum):
    """Qualitative habitability bands, best first."""
    PARADISE = "Paradise"
    EXCELLENT = "Excellent"
    GOOD = "Good"
    MARGINAL = "Marginal"
    HARSH = "Harsh"
    HOSTILE = "Hostile"


class DevelopmentLevel(str, Enum):
    """World development levels, least developed first."""
    UNDERDEVELOPED = "underdeveloped"
    DEVELOPING = "developing"
    MATURE = "mature"
    DEVELOPED = "developed"
    WELL_DEVELOPED = "well_developed"
    VERY_DEVELOPED = "very_developed"


# =============================================================================
# INHABITANT ENUMS
# =============================================================================


class PowerStructure(str, Enum):
    ANARCHY = "anarchy"
    FEUDAL = "feudal"
    AUTOCRACY = "autocracy"
    OLIGARCHY = "oligarchy"
    REPRESENTATIVE = "representative"
    DEMOCRACY = "democracy"
    MERITOCRACY = "meritocracy"
    TECHNOCRACY = "technocracy"
    AI_SYNTHETIC = "ai_synthetic"


class Governance(str, Enum):
    """Quality of government."""
    CHAOTIC = "chaotic"
    WEAK = "weak"
    MODERATE = "moderate"
    STRONG = "strong"
    TOTALITARIAN = "totalitarian"


class SourceOfPower(str, Enum):
    MILITARY = "military"
    RELIGIOUS = "religious"
    CORPORATE = "corporate"
    POPULAR = "popular"
    HEREDITARY = "hereditary"
    BUREAUCRATIC = "bureaucratic"
    ACADEMIC = "academic"
    OTHER = "other"


# =============================================================================
# STARPORT AND CULTURE ENUMS
# =============================================================================


class StarportClass(str, Enum):
    """Starport quality classes, worst first."""
    X = "X"
    E = "E"
    D = "D"
    C = "C"
    B = "B"
    A = "A"


class BaseType(str, Enum):
    NAVAL = "naval"
    SCOUT = "scout"
    PIRATE = "pirate"
    RESEARCH = "research"
    MILITARY = "military"


class CultureCategory(str, Enum):
    SOCIAL = "social"
    ECONOMIC = "economic"
    TECHNOLOGICAL = "technological"


# =============================================================================
# SECONDARY BODY ENUMS
# =============================================================================


class PlanetType(str, Enum):
    GAS_GIANT = "gas_giant"
    ICE_GIANT = "ice_giant"
    ASTEROID_BELT = "asteroid_belt"
    PLANETOID_BELT = "planetoid_belt"


class BeltDensity(str, Enum):
    SPARSE = "sparse"
    MODERATE = "moderate"
    DENSE = "dense"


class DiskType(str, Enum):
    ACCRETION = "accretion"
    PROTOPLANETARY = "protoplanetary"


class DiskZone(str, Enum):
    """Zone a circumstellar disk occupies; the habitable zone is split in two."""
    INFERNAL = "infernal"
    HOT = "hot"
    HABITABLE_INNER = "habitable_inner"
    HABITABLE_OUTER = "habitable_outer"
    COLD = "cold"
    OUTER = "outer"


class MassUnit(str, Enum):
    """Mass units: Ceres, Lunar, Earth and Jupiter masses."""
    CM = "CM"
    LM = "LM"
    EM = "EM"
    JM = "JM"


class MoonType(str, Enum):
    CAPTURED_ASTEROID = "captured_asteroid"
    MINOR = "minor"
    MAJOR = "major"


class BrownDwarfSpectralType(str, Enum):
    L = "L"
    T = "T"
    Y = "Y"


# =============================================================================
# SERIALIZATION
# =============================================================================


def serialize(value: Any) -> Any:
    """Convert records, enums and containers into JSON-compatible values."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return value.isoformat()
    if hasattr(value, "to_dict") and not isinstance(value, type):
        return value.to_dict()
    if isinstance(value, dict):
        return {str(serialize(k)): serialize(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [serialize(v) for v in value]
    return value


def _record_dict(record: Any) -> dict[str, Any]:
    data = {f.name: serialize(getattr(record, f.name)) for f in fields(record)}
    if "provenance" in data:
        data["generation_method"] = record.provenance.method.value
    return data


class RecordMixin:
    """Common helpers for generated records."""

    @property
    def generation_method(self) -> GenerationMethod:
        return self.provenance.method

    @property
    def rolls(self) -> dict[str, Any]:
        return dict(self.provenance.rolls)

    def to_dict(self) -> dict[str, Any]:
        return _record_dict(self)


# =============================================================================
# STELLAR RECORDS
# =============================================================================


@dataclass(frozen=True)
class StellarProperty:
    """Resolved physical properties of a (class, grade) pair."""
    star_class: StarClass
    grade: int
    mass: float          # solar masses
    luminosity: float    # solar luminosities
    temperature: int     # Kelvin
    radius: float        # solar radii, derived from luminosity and temperature
    color: str = ""
    description: str = ""

    def to_dict(self) -> dict[str, Any]:
        return _record_dict(self)


@dataclass(frozen=True)
class StellarZones:
    """Orbital zone boundaries in AU for one luminosity."""
    luminosity: float
    hot_inner: float        # infernal/hot edge
    habitable_inner: float
    habitable_outer: float
    cold_outer: float       # cold/outer edge
    frostline: float

    def boundaries(self) -> tuple[float, float, float, float, float]:
        """Boundaries innermost first: hot, habitable inner/outer, cold, frostline."""
        return (
            self.hot_inner,
            self.habitable_inner,
            self.habitable_outer,
            self.cold_outer,
            self.frostline,
        )

    @property
    def habitable_midpoint(self) -> float:
        return (self.habitable_inner + self.habitable_outer) / 2

    def zone_range(self, zone: "OrbitalZone") -> tuple[float, float]:
        """Inner and outer AU boundary of a zone."""
        ranges = {
            OrbitalZone.INFERNAL: (0.0, self.hot_inner),
            OrbitalZone.HOT: (self.hot_inner, self.habitable_inner),
            OrbitalZone.HABITABLE: (self.habitable_inner, self.habitable_outer),
            OrbitalZone.COLD: (self.habitable_outer, self.cold_outer),
            OrbitalZone.OUTER: (self.cold_outer, self.frostline),
        }
        if zone not in ranges:
            raise ValueError(f"Zone {zone} has no outer boundary")
        return ranges[zone]

    def to_dict(self) -> dict[str, Any]:
        return _record_dict(self)


@dataclass(frozen=True)
class StarRecord(RecordMixin):
    """A primary or companion star."""
    id: str
    name: str
    star_class: StarClass
    grade: int
    orbital_distance: float  # AU from the primary; 0 for the primary itself
    mass: float
    luminosity: float
    temperature: int
    radius: float
    provenance: Provenance = field(default_factory=Procedural)
    warnings: tuple[str, ...] = ()

    @property
    def designation(self) -> str:
        return f"{self.star_class.value}{self.grade}"

    @property
    def is_primary(self) -> bool:
        return self.orbital_distance == 0


@dataclass(frozen=True)
class CompanionResult:
    """Companions rolled for one primary star."""
    companions: tuple[StarRecord, ...]
    system_type: SystemType
    count_rolls: tuple[int, ...]
    max_reached: bool = False

    def to_dict(self) -> dict[str, Any]:
        return _record_dict(self)


# =============================================================================
# WORLD RECORDS
# =============================================================================


@dataclass(frozen=True)
class WorldRecord(RecordMixin):
    """
    The primary world of a star system.

    Physical and environmental fields come from the world generator; the
    inhabitant, development, starport and culture fields stay empty until
    the system generator fills them in.
    """
    id: str
    name: str
    star_system_id: str
    world_type: WorldType
    size: int                # size table roll (2-12)
    size_label: str
    mass: float              # Earth masses (habitats: MVT/GVT mass value)
    gravity: Optional[float]  # None for habitats
    composition: Optional[DwarfComposition]
    atmosphere: Atmosphere
    temperature: Temperature
    hazard_type: HazardType
    hazard_intensity: Optional[int]
    biochemical_resources: BiochemicalResources
    habitability_score: float
    habitability_rating: HabitabilityRating
    tech_level: int
    orbit_position: int
    population: Optional[int] = None
    wealth: Optional[int] = None
    power_structure: Optional[PowerStructure] = None
    governance: Optional[Governance] = None
    source_of_power: Optional[SourceOfPower] = None
    development_level: Optional[DevelopmentLevel] = None
    starport_class: Optional[StarportClass] = None
    port_value_score: Optional[int] = None
    cultural_traits: tuple[str, ...] = ()
    provenance: Provenance = field(default_factory=Procedural)
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)


@dataclass(frozen=True)
class InhabitantsRecord(RecordMixin):
    """Society of a world: wealth, rulers and how they rule."""
    world_id: str
    wealth: int
    wealth_label: str
    soc_modifier: int
    power_structure: PowerStructure
    governance: Governance
    governance_modifier: str
    source_of_power: SourceOfPower
    population: int
    provenance: Provenance = field(default_factory=Procedural)


@dataclass(frozen=True)
class BasePresence:
    """Whether one base type exists at a starport."""
    base_type: BaseType
    present: bool
    roll: Optional[int] = None
    target: Optional[int] = None

    def to_dict(self) -> dict[str, Any]:
        return _record_dict(self)


@dataclass(frozen=True)
class StarportRecord(RecordMixin):
    world_id: str
    starport_class: StarportClass
    port_value_score: int
    label: str
    description: str
    capabilities: tuple[str, ...]
    bases: tuple[BasePresence, ...]
    port_fee_multiplier: Optional[float] = None
    provenance: Provenance = field(default_factory=Procedural)

    def base(self, base_type: BaseType) -> BasePresence:
        for presence in self.bases:
            if presence.base_type == base_type:
                return presence
        raise KeyError(base_type)

    @property
    def present_bases(self) -> list[BaseType]:
        return [b.base_type for b in self.bases if b.present]


@dataclass(frozen=True)
class CultureTrait:
    category: CultureCategory
    trait: str
    description: str
    roll: str  # d66 code, e.g. "34"

    def __str__(self) -> str:
        return f"{self.trait}: {self.description}"

    def to_dict(self) -> dict[str, Any]:
        return _record_dict(self)


@dataclass(frozen=True)
class CultureRecord(RecordMixin):
    world_id: str
    traits: tuple[CultureTrait, ...]
    provenance: Provenance = field(default_factory=Procedural)

    def trait(self, category: CultureCategory) -> CultureTrait:
        for trait in self.traits:
            if trait.category == category:
                return trait
        raise KeyError(category)


# =============================================================================
# SECONDARY BODY RECORDS
# =============================================================================


@dataclass(frozen=True)
class DiskRecord(RecordMixin):
    """A circumstellar disk (dust, debris or planet-forming material)."""
    id: str
    name: str
    star_system_id: str
    orbit_position: int
    disk_type: DiskType
    disk_zone: DiskZone
    disk_mass: float
    disk_mass_unit: MassUnit
    inner_radius: float  # AU
    outer_radius: float  # AU
    provenance: Provenance = field(default_factory=Procedural)

    @property
    def midpoint(self) -> float:
        return (self.inner_radius + self.outer_radius) / 2


@dataclass(frozen=True)
class PlanetRecord(RecordMixin):
    """A secondary planet: a giant (size/mass) or a belt (density/width)."""
    id: str
    name: str
    star_system_id: str
    orbit_position: int
    planet_type: PlanetType
    size: Optional[float] = None       # Jupiter masses, giants only
    mass: Optional[float] = None       # Jupiter masses, giants only
    size_label: Optional[str] = None
    density: Optional[BeltDensity] = None  # belts only
    belt_width: Optional[float] = None     # AU, belts only
    provenance: Provenance = field(default_factory=Procedural)

    @property
    def is_giant(self) -> bool:
        return self.planet_type in (PlanetType.GAS_GIANT, PlanetType.ICE_GIANT)


@dataclass(frozen=True)
class MoonRecord(RecordMixin):
    id: str
    name: str
    parent_id: str
    star_system_id: str
    orbit_position: int  # sequence number around the parent, from 1
    moon_type: MoonType
    size: float          # Lunar masses
    mass: float
    gravity: float       # G
    size_label: str = ""
    provenance: Provenance = field(default_factory=Procedural)


@dataclass(frozen=True)
class BrownDwarfRecord(RecordMixin):
    id: str
    name: str
    star_system_id: str
    orbit_position: int
    mass: float          # Jupiter masses
    temperature: int     # Kelvin
    spectral_type: BrownDwarfSpectralType
    color: str = ""
    description: str = ""
    provenance: Provenance = field(default_factory=Procedural)
