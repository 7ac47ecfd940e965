# cutscene/runtime/triggers.py
from __future__ import annotations
from typing import Dict, Optional, Type

from cutscene.debug.debug_logger import log
from cutscene.script.errors import ScriptSchemaError
from cutscene.script.routine import ScriptContext, ScriptRoutine
from .player import ScriptPlayer


# key -> ScriptRoutine subclass
_ROUTINE_REGISTRY: Dict[str, Type[ScriptRoutine]] = {}


def register_routine(key: str, cls: Type[ScriptRoutine]) -> None:
    """
    Register a routine class under the key actors refer to it by.

    Examples:
      register_routine("GuideRabbit", GuideRabbit)
      register_routine("HugeSlimeDespawn", HugeSlimeDespawn)
    """
    if not isinstance(key, str) or not key.strip():
        raise ValueError("routine key must be a non-empty string")
    if not (isinstance(cls, type) and issubclass(cls, ScriptRoutine)):
        raise ValueError(f"{cls!r} is not a ScriptRoutine subclass")
    _ROUTINE_REGISTRY[key] = cls


def get_routine(key: str) -> Optional[Type[ScriptRoutine]]:
    return _ROUTINE_REGISTRY.get(key)


def all_routines() -> Dict[str, Type[ScriptRoutine]]:
    return dict(_ROUTINE_REGISTRY)


def trigger_routine(
    player: ScriptPlayer,
    key: str,
    context: ScriptContext,
    *,
    interrupt: bool = False,
) -> bool:
    """
    Build a fresh routine for `key` and play it on `player`.

    Returns True if a routine was started. Nothing starts when the key
    is unknown, when another routine is still running (unless
    `interrupt`), or when the routine's content fails schema checks.
    """
    cls = _ROUTINE_REGISTRY.get(key)
    if cls is None:
        log("content", f"no routine registered for {key!r}")
        return False

    if player.is_running() and not interrupt:
        return False

    try:
        routine = cls(context)
    except ScriptSchemaError as exc:
        log("content", f"{key}: refusing to play malformed routine: {exc}")
        return False

    player.play(routine)
    return True
