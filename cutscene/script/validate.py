# cutscene/script/validate.py
from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Type

from cutscene.runtime.triggers import all_routines
from cutscene.script.directives import DONE, GetSpell
from cutscene.script.errors import ScriptSchemaError
from cutscene.script.routine import ScriptContext, ScriptRoutine
from cutscene.script.state import ExternalState

# Authored routines are a few dozen directives; anything past this is a runaway.
MAX_DIRECTIVES = 1000


def _fresh(state: ExternalState) -> ExternalState:
    return ExternalState(inventory=state.inventory, flags=state.flags)


def validate_routine(
    cls: Type[ScriptRoutine],
    states: Sequence[ExternalState] = (),
    *,
    max_directives: int = MAX_DIRECTIVES,
) -> List[str]:
    """
    Dry-run a routine against fixture states for authoring sanity.

    Returns a list of human-readable issues.
    - No pygame display, no handlers
    - Fixture states are copied, never mutated
    - GetSpell is applied to the copy so later branches see it
    """
    issues: List[str] = []

    key = getattr(cls, "key", None)
    if not key or not isinstance(key, str):
        issues.append(f"{cls.__name__}: key missing/invalid")
    elif any(c.isspace() for c in key):
        issues.append(f"{cls.__name__}: key contains whitespace: {key!r}")

    for i, fixture in enumerate(states or (ExternalState(),)):
        where = f"{cls.__name__}[state {i}]"
        state = _fresh(fixture)
        raised_before = state.true_flags()

        try:
            routine = cls(ScriptContext(state=state))
        except ScriptSchemaError as exc:
            issues.append(f"{where}: schema error: {exc}")
            continue

        finished = False
        for _ in range(max_directives):
            directive = routine.advance()
            if directive is DONE:
                finished = True
                break
            if isinstance(directive, GetSpell):
                state.grant_item(directive.spell)

        if not finished:
            issues.append(f"{where}: did not finish within {max_directives} directives")
            continue

        left_raised = sorted(state.true_flags() - raised_before)
        if left_raised:
            issues.append(f"{where}: leaves flags raised: {left_raised}")

    return issues


def validate_all(
    states: Sequence[ExternalState] = (),
    routines: Optional[Iterable[Type[ScriptRoutine]]] = None,
) -> List[str]:
    if routines is None:
        routines = all_routines().values()

    issues: List[str] = []
    for cls in routines:
        issues.extend(validate_routine(cls, states))
    return issues
