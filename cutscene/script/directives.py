# cutscene/script/directives.py
from __future__ import annotations

from dataclasses import MISSING, dataclass, fields
from typing import Any, ClassVar, Dict, Mapping, Optional, Tuple, Type, Union

from cutscene.script.errors import ScriptSchemaError
from cutscene.script.locale import LOCALES, LocaleRecord

Position = Tuple[float, float]


# ---------------------------------------------------------------------
# Field checks (author-time)
# ---------------------------------------------------------------------
def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _check_name(owner: str, field_name: str, value: Any) -> None:
    if not isinstance(value, str) or not value.strip():
        raise ScriptSchemaError(f"{owner}.{field_name} must be a non-empty string (got {value!r})")


def _check_optional_name(owner: str, field_name: str, value: Any) -> None:
    if value is not None:
        _check_name(owner, field_name, value)


def _check_number(owner: str, field_name: str, value: Any) -> None:
    if not _is_number(value):
        raise ScriptSchemaError(f"{owner}.{field_name} must be a number (got {value!r})")


def _check_int(owner: str, field_name: str, value: Any) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise ScriptSchemaError(f"{owner}.{field_name} must be an integer (got {value!r})")


def _coerce_position(directive: Any, field_name: str = "position") -> None:
    """Normalize a 2-sequence (tuple, list, Vector2) into an (x, y) float tuple."""
    owner = type(directive).__name__
    value = getattr(directive, field_name)
    try:
        x, y = value
    except (TypeError, ValueError):
        raise ScriptSchemaError(f"{owner}.{field_name} must be an (x, y) pair (got {value!r})")
    if not (_is_number(x) and _is_number(y)):
        raise ScriptSchemaError(f"{owner}.{field_name} must hold numbers (got {value!r})")
    object.__setattr__(directive, field_name, (float(x), float(y)))


# ---------------------------------------------------------------------
# Variants
# ---------------------------------------------------------------------
@dataclass(frozen=True)
class Speech:
    """Show a line in the speech bubble. Suspends until acknowledged."""

    type: ClassVar[str] = "Speech"
    text: LocaleRecord

    def __post_init__(self) -> None:
        if not isinstance(self.text, LocaleRecord):
            raise ScriptSchemaError(f"Speech.text must be a LocaleRecord (got {self.text!r})")


@dataclass(frozen=True)
class Wait:
    """Suspend for exactly `count` simulation frames."""

    type: ClassVar[str] = "Wait"
    count: int

    def __post_init__(self) -> None:
        _check_int("Wait", "count", self.count)
        if self.count < 0:
            raise ScriptSchemaError(f"Wait.count must be >= 0 (got {self.count})")


@dataclass(frozen=True)
class Close:
    """Dismiss the speech bubble."""

    type: ClassVar[str] = "Close"


@dataclass(frozen=True)
class GetSpell:
    type: ClassVar[str] = "GetSpell"
    spell: str

    def __post_init__(self) -> None:
        _check_name("GetSpell", "spell", self.spell)


@dataclass(frozen=True)
class Warp:
    """Send the player to another level entity. Suspends until the host resumes."""

    type: ClassVar[str] = "Warp"
    destination_iid: str

    def __post_init__(self) -> None:
        _check_name("Warp", "destination_iid", self.destination_iid)


@dataclass(frozen=True)
class Sprite:
    type: ClassVar[str] = "Sprite"
    name: str
    position: Position
    aseprite: str

    def __post_init__(self) -> None:
        _check_name("Sprite", "name", self.name)
        _check_name("Sprite", "aseprite", self.aseprite)
        _coerce_position(self)


@dataclass(frozen=True)
class Despawn:
    type: ClassVar[str] = "Despawn"
    name: str

    def __post_init__(self) -> None:
        _check_name("Despawn", "name", self.name)


@dataclass(frozen=True)
class BGM:
    """Switch background music; `path=None` stops it."""

    type: ClassVar[str] = "BGM"
    path: Optional[str]

    def __post_init__(self) -> None:
        _check_optional_name("BGM", "path", self.path)


@dataclass(frozen=True)
class SE:
    type: ClassVar[str] = "SE"
    path: str

    def __post_init__(self) -> None:
        _check_name("SE", "path", self.path)


@dataclass(frozen=True)
class Shake:
    """One-shot camera shake. `value` is the magnitude, decayed by `attenuation`."""

    type: ClassVar[str] = "Shake"
    value: float
    attenuation: float

    def __post_init__(self) -> None:
        _check_number("Shake", "value", self.value)
        _check_number("Shake", "attenuation", self.attenuation)


@dataclass(frozen=True)
class ShakeStart:
    """Continuous shake until another ShakeStart; `value=None` stops it."""

    type: ClassVar[str] = "ShakeStart"
    value: Optional[float]

    def __post_init__(self) -> None:
        if self.value is not None:
            _check_number("ShakeStart", "value", self.value)


@dataclass(frozen=True)
class Flash:
    type: ClassVar[str] = "Flash"
    position: Position
    intensity: float
    radius: float
    duration: int
    reverse: bool

    def __post_init__(self) -> None:
        _coerce_position(self)
        _check_number("Flash", "intensity", self.intensity)
        _check_number("Flash", "radius", self.radius)
        if self.radius < 0:
            raise ScriptSchemaError(f"Flash.radius must be >= 0 (got {self.radius})")
        _check_int("Flash", "duration", self.duration)
        if self.duration <= 0:
            raise ScriptSchemaError(f"Flash.duration must be > 0 (got {self.duration})")
        if not isinstance(self.reverse, bool):
            raise ScriptSchemaError(f"Flash.reverse must be a bool (got {self.reverse!r})")


@dataclass(frozen=True)
class SetCameraTarget:
    """Follow the named entity; `name=None` hands the camera back to the player."""

    type: ClassVar[str] = "SetCameraTarget"
    name: Optional[str]

    def __post_init__(self) -> None:
        _check_optional_name("SetCameraTarget", "name", self.name)


@dataclass(frozen=True)
class SpawnRaven:
    type: ClassVar[str] = "SpawnRaven"
    name: str
    position: Position

    def __post_init__(self) -> None:
        _check_name("SpawnRaven", "name", self.name)
        _coerce_position(self)


@dataclass(frozen=True)
class SetTile:
    """Fill the w x h tile rectangle whose top-left is (x, y)."""

    type: ClassVar[str] = "SetTile"
    x: int
    y: int
    w: int
    h: int
    tile: str

    def __post_init__(self) -> None:
        for name in ("x", "y", "w", "h"):
            _check_int("SetTile", name, getattr(self, name))
        if self.w < 1 or self.h < 1:
            raise ScriptSchemaError(f"SetTile size must be at least 1x1 (got {self.w}x{self.h})")
        _check_name("SetTile", "tile", self.tile)


Directive = Union[
    Speech, Wait, Close, GetSpell, Warp, Sprite, Despawn, BGM, SE,
    Shake, ShakeStart, Flash, SetCameraTarget, SpawnRaven, SetTile,
]

DIRECTIVE_TYPES: Dict[str, Type[Any]] = {
    cls.type: cls
    for cls in (
        Speech, Wait, Close, GetSpell, Warp, Sprite, Despawn, BGM, SE,
        Shake, ShakeStart, Flash, SetCameraTarget, SpawnRaven, SetTile,
    )
}


@dataclass(frozen=True)
class Done:
    """Terminal marker returned by ScriptRoutine.advance() once exhausted."""

    type: ClassVar[str] = "Done"


DONE = Done()


def is_directive(value: Any) -> bool:
    return type(value) in DIRECTIVE_TYPES.values()


def suspends(directive: Directive) -> bool:
    """True if the scheduler must hold off the next advance() after this directive."""
    if isinstance(directive, (Speech, Warp)):
        return True
    if isinstance(directive, Wait):
        return directive.count > 0
    return False


# ---------------------------------------------------------------------
# Wire format
# ---------------------------------------------------------------------
def directive_to_dict(directive: Directive) -> Dict[str, Any]:
    """Flat tagged mapping, the same shape authored content uses."""
    if isinstance(directive, Speech):
        return {"type": Speech.type, **directive.text.to_dict()}

    out: Dict[str, Any] = {"type": directive.type}
    for f in fields(directive):
        value = getattr(directive, f.name)
        if isinstance(value, tuple):
            value = list(value)
        out[f.name] = value
    return out


def directive_from_dict(data: Mapping[str, Any]) -> Directive:
    if not isinstance(data, Mapping):
        raise ScriptSchemaError(f"directive must be a mapping (got {data!r})")

    tag = data.get("type")
    cls = DIRECTIVE_TYPES.get(tag) if isinstance(tag, str) else None
    if cls is None:
        raise ScriptSchemaError(f"unknown directive type {tag!r}")

    payload = {k: v for k, v in data.items() if k != "type"}

    if cls is Speech:
        unknown = sorted(set(payload) - set(LOCALES))
        if unknown:
            raise ScriptSchemaError(f"Speech has unknown locale keys: {unknown}")
        return Speech(LocaleRecord.from_dict(payload))

    names = [f.name for f in fields(cls)]
    unknown = sorted(set(payload) - set(names))
    if unknown:
        raise ScriptSchemaError(f"{tag} has unknown fields: {unknown}")

    missing = [
        f.name for f in fields(cls)
        if f.name not in payload and f.default is MISSING
    ]
    if missing:
        raise ScriptSchemaError(f"{tag} is missing fields: {missing}")

    return cls(**payload)
