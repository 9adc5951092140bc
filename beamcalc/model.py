# Beam, Section, Support, Loads, Units, BeamModel (immutable dataclasses)

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Dict, Optional, Tuple, Union


class SupportType(str, Enum):
    PINNED = "pinned"
    ROLLER = "roller"
    FIXED = "fixed"


@dataclass(frozen=True)
class Section:
    E: Optional[float] = None
    I: Optional[float] = None

    @property
    def EI(self) -> Optional[float]:
        """Flexural rigidity, or None when E or I is missing or zero."""
        if self.E and self.I:
            return float(self.E) * float(self.I)
        return None


@dataclass(frozen=True)
class Beam:
    length: float
    section: Section = field(default_factory=Section)

    def __post_init__(self):
        if not self.length > 0.0:
            raise ValueError(f"Beam length must be positive, got {self.length}")

    @property
    def EI(self) -> Optional[float]:
        return self.section.EI if self.section is not None else None


@dataclass(frozen=True)
class Support:
    """
    Point support. Pinned and roller restrain deflection (one unknown, Ry);
    fixed also restrains rotation (two unknowns, Ry and M).
    """
    id: str
    x: float
    type: SupportType = SupportType.PINNED

    def __post_init__(self):
        # accept plain strings ("fixed") as well as the enum
        object.__setattr__(self, "type", SupportType(self.type))

    @property
    def unknowns(self) -> int:
        return 2 if self.type is SupportType.FIXED else 1


@dataclass(frozen=True)
class PointLoad:
    id: str
    x: float
    magnitude: float  # signed force, negative = downward

    kind: ClassVar[str] = "point"


@dataclass(frozen=True)
class DistributedLoad:
    """Uniformly distributed load of intensity w over [x_start, x_end]."""
    id: str
    x_start: float
    x_end: float
    w: float  # force per unit length, negative = downward

    kind: ClassVar[str] = "udl"

    def __post_init__(self):
        if self.x_start > self.x_end:
            raise ValueError(
                f"UDL {self.id}: x_start ({self.x_start}) must not exceed x_end ({self.x_end})"
            )

    @property
    def span(self) -> float:
        return self.x_end - self.x_start

    @property
    def total(self) -> float:
        return self.w * self.span

    @property
    def centroid(self) -> float:
        return self.x_start + self.span / 2


@dataclass(frozen=True)
class MomentLoad:
    id: str
    x: float
    magnitude: float  # signed concentrated moment

    kind: ClassVar[str] = "moment"


Load = Union[PointLoad, DistributedLoad, MomentLoad]

LENGTH_UNITS = ("m", "cm", "mm", "ft", "in")
FORCE_UNITS = ("kN", "N", "kgf", "lb", "kip")


@dataclass(frozen=True)
class Units:
    """Unit labels for the report. The engine itself is unit-agnostic."""
    length: str = "m"
    force: str = "kN"

    def __post_init__(self):
        if self.length not in LENGTH_UNITS:
            raise ValueError(f"Unknown length unit {self.length!r}; expected one of {LENGTH_UNITS}")
        if self.force not in FORCE_UNITS:
            raise ValueError(f"Unknown force unit {self.force!r}; expected one of {FORCE_UNITS}")

    @property
    def moment(self) -> str:
        return f"{self.force}·{self.length}"

    @property
    def distributed(self) -> str:
        return f"{self.force}/{self.length}"


def _required(d: Dict[str, Any], key: str, owner: str) -> float:
    value = d.get(key)
    if value is None:
        raise ValueError(f"{owner} is missing required field {key!r}")
    return float(value)


def load_from_dict(d: Dict[str, Any]) -> Load:
    """
    Build a load from its flat record. point/moment need x and magnitude,
    udl needs x_start, x_end and w; a missing field raises ValueError.
    """
    kind = d.get("type")
    load_id = str(d.get("id", ""))
    owner = f"Load {load_id!r} ({kind})"
    if kind == PointLoad.kind:
        return PointLoad(load_id, _required(d, "x", owner), _required(d, "magnitude", owner))
    if kind == DistributedLoad.kind:
        return DistributedLoad(
            load_id,
            _required(d, "x_start", owner),
            _required(d, "x_end", owner),
            _required(d, "w", owner),
        )
    if kind == MomentLoad.kind:
        return MomentLoad(load_id, _required(d, "x", owner), _required(d, "magnitude", owner))
    raise ValueError(f"Unknown load type {kind!r} for load {load_id!r}")


def load_to_dict(load: Load) -> Dict[str, Any]:
    if isinstance(load, DistributedLoad):
        return {"id": load.id, "type": load.kind, "x_start": load.x_start,
                "x_end": load.x_end, "w": load.w}
    return {"id": load.id, "type": load.kind, "x": load.x, "magnitude": load.magnitude}


@dataclass(frozen=True)
class BeamModel:
    """
    Immutable snapshot of one beam configuration.

    An analysis run works on one of these, so it can never alias or mutate
    the caller's lists.
    """
    beam: Beam
    supports: Tuple[Support, ...] = ()
    loads: Tuple[Load, ...] = ()
    units: Units = field(default_factory=Units)

    def __post_init__(self):
        object.__setattr__(self, "supports", tuple(self.supports))
        object.__setattr__(self, "loads", tuple(self.loads))

    @property
    def length(self) -> float:
        return float(self.beam.length)

    def count_unknowns(self) -> int:
        return sum(s.unknowns for s in self.supports)

    def validate(self) -> None:
        """Raise ValueError for duplicate support ids or positions off the beam."""
        L = self.length
        seen = set()
        for s in self.supports:
            if s.id in seen:
                raise ValueError(f"Duplicate support id {s.id!r}")
            seen.add(s.id)
            if not 0.0 <= s.x <= L:
                raise ValueError(f"Support {s.id} at x={s.x} lies outside the beam [0, {L}]")

        for load in self.loads:
            if isinstance(load, DistributedLoad):
                xs = (load.x_start, load.x_end)
            else:
                xs = (load.x,)
            for x in xs:
                if not 0.0 <= x <= L:
                    raise ValueError(
                        f"Load {load.id} at x={x} lies outside the beam [0, {L}]"
                    )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BeamModel":
        """
        Build a model from the flat configuration record:
        {beam: {length, section: {E, I}}, supports: [...], loads: [...], units: {length, force}}
        """
        beam_d = data.get("beam") or {}
        section_d = beam_d.get("section") or {}
        beam = Beam(
            length=float(beam_d.get("length", 0.0)),
            section=Section(E=section_d.get("E"), I=section_d.get("I")),
        )
        supports = [
            Support(str(s.get("id", "")), _required(s, "x", f"Support {s.get('id')!r}"),
                    s.get("type", SupportType.PINNED))
            for s in data.get("supports") or []
        ]
        loads = [load_from_dict(ld) for ld in data.get("loads") or []]
        units_d = data.get("units") or {}
        units = Units(length=units_d.get("length", "m"), force=units_d.get("force", "kN"))
        return cls(beam=beam, supports=supports, loads=loads, units=units)

    def to_dict(self) -> Dict[str, Any]:
        section = self.beam.section
        return {
            "beam": {"length": self.beam.length, "section": {"E": section.E, "I": section.I}},
            "supports": [{"id": s.id, "x": s.x, "type": s.type.value} for s in self.supports],
            "loads": [load_to_dict(ld) for ld in self.loads],
            "units": {"length": self.units.length, "force": self.units.force},
        }
