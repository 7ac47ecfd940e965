# cutscene/script/routine.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, ClassVar, FrozenSet, Iterator, List, Optional, Sequence, Set, Union

import pygame

from cutscene.debug.debug_logger import log
from cutscene.script.directives import (
    DONE,
    Directive,
    Done,
    Position,
    Speech,
    is_directive,
)
from cutscene.script.errors import ScriptSchemaError
from cutscene.script.locale import LocaleRecord
from cutscene.script.state import ExternalState


@dataclass
class ScriptContext:
    """
    Everything a routine may look at, handed over when the host triggers it.

    `actor_position` is where the triggering actor stood at that moment;
    it is copied so later movement of the actor does not leak in.
    """

    state: ExternalState
    actor_position: pygame.math.Vector2 = field(
        default_factory=lambda: pygame.math.Vector2(0, 0)
    )
    speaker: Optional[str] = None

    def __post_init__(self) -> None:
        self.actor_position = pygame.math.Vector2(self.actor_position)

    @property
    def actor_xy(self) -> Position:
        return (self.actor_position.x, self.actor_position.y)


# ---------------------------------------------------------------------
# Steps
# ---------------------------------------------------------------------
@dataclass(frozen=True)
class Emit:
    directive: Directive

    def __post_init__(self) -> None:
        if not is_directive(self.directive):
            raise ScriptSchemaError(f"Emit expects a directive (got {self.directive!r})")


@dataclass(frozen=True)
class SetFlag:
    """Flip a shared flag. Produces no directive."""

    name: str
    value: bool

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise ScriptSchemaError(f"SetFlag.name must be a non-empty string (got {self.name!r})")


@dataclass(frozen=True)
class When:
    """
    Optional segment. `predicate` is checked exactly once, when the
    cursor reaches this step, against the state as it is right then.
    """

    predicate: Callable[[ExternalState], bool]
    steps: tuple
    label: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "steps", _check_steps(self.steps))


Step = Union[Emit, SetFlag, When]


def _check_steps(steps: Sequence[Step]) -> tuple:
    checked = tuple(steps)
    for step in checked:
        if not isinstance(step, (Emit, SetFlag, When)):
            raise ScriptSchemaError(f"not a script step: {step!r}")
    return checked


# ---------------------------------------------------------------------
# Authoring helpers
# ---------------------------------------------------------------------
def emit(*directives: Directive) -> list[Emit]:
    return [Emit(d) for d in directives]


def say(ja: str, **translations: str) -> Emit:
    return Emit(Speech(LocaleRecord(ja=ja, **translations)))


def unless_has(item_id: str, *steps: Step) -> When:
    """First-time-only segment: runs if the inventory lacks `item_id`."""
    return When(lambda state: not state.has_item(item_id), steps, label=f"!has({item_id})")


def while_flag(name: str, *steps: Step) -> list[Step]:
    """Raise `name` before `steps` and drop it again once they are through."""
    return [SetFlag(name, True), *steps, SetFlag(name, False)]


def _describe(directive: Directive) -> str:
    if isinstance(directive, Speech):
        ja = directive.text.ja
        return f"Speech({ja[:16]!r}{'...' if len(ja) > 16 else ''})"
    return repr(directive)


# ---------------------------------------------------------------------
# Routine
# ---------------------------------------------------------------------
@dataclass
class _Frame:
    steps: tuple
    index: int = 0


class ScriptRoutine:
    """
    Base class for authored interactions.

    Subclasses set `key` and implement `build(context)` returning their
    steps. The host pulls directives with `advance()`:

      - one call = one directive (SetFlag / When steps are consumed
        silently on the way)
      - once exhausted, every call returns DONE
      - a routine instance is single-use; trigger a fresh one per
        interaction

    Waiting and speech acknowledgement are the scheduler's business;
    nothing here blocks or keeps time.
    """

    key: ClassVar[str] = ""

    def __init__(self, context: ScriptContext):
        self.context = context
        self._frames: List[_Frame] = [_Frame(_check_steps(self.build(context)))]
        self._emitted = 0
        self._done = False
        self._raised: Set[str] = set()

    def build(self, context: ScriptContext) -> Sequence[Step]:
        raise NotImplementedError

    @property
    def name(self) -> str:
        return self.key or type(self).__name__

    @property
    def done(self) -> bool:
        return self._done

    @property
    def emitted(self) -> int:
        """How many directives have been handed out so far."""
        return self._emitted

    @property
    def raised_flags(self) -> FrozenSet[str]:
        """Flags this routine switched on and has not switched off yet."""
        return frozenset(self._raised)

    def advance(self) -> Union[Directive, Done]:
        if self._done:
            return DONE

        state = self.context.state
        while self._frames:
            frame = self._frames[-1]
            if frame.index >= len(frame.steps):
                self._frames.pop()
                continue

            step = frame.steps[frame.index]
            frame.index += 1

            if isinstance(step, Emit):
                self._emitted += 1
                log("script", f"{self.name} #{self._emitted} -> {_describe(step.directive)}")
                return step.directive

            if isinstance(step, SetFlag):
                if step.value and not state.get_flag(step.name):
                    self._raised.add(step.name)
                elif not step.value:
                    self._raised.discard(step.name)
                state.set_flag(step.name, step.value)
            elif step.predicate(state):
                log("script", f"{self.name} enters segment {step.label or '<when>'}")
                self._frames.append(_Frame(step.steps))
            else:
                log("script", f"{self.name} skips segment {step.label or '<when>'}")

        self._done = True
        log("script", f"{self.name} done after {self._emitted} directives")
        return DONE

    def __iter__(self) -> Iterator[Directive]:
        while True:
            directive = self.advance()
            if directive is DONE:
                return
            yield directive
