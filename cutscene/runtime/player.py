# cutscene/runtime/player.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from cutscene.debug.debug_logger import log
from cutscene.script.directives import (
    DONE,
    Close,
    Directive,
    GetSpell,
    SetCameraTarget,
    Speech,
    Wait,
    Warp,
)
from cutscene.script.locale import LocaleRecord
from cutscene.script.routine import ScriptRoutine
from cutscene.script.state import ExternalState

DirectiveHandler = Callable[[Directive], None]

# Directives the player applies itself before any host handler runs.
_BUILTIN = (Speech, Close, GetSpell, SetCameraTarget, Wait)


@dataclass
class PlayerConfig:
    fps: int = 60                      # frames per second of update() calls
    reset_flags_on_abort: bool = True  # drop flags a routine left raised


class ScriptPlayer:
    """
    Fixed-step runner for a single active ScriptRoutine.

    You call:
      - player.play(routine) when an interaction starts
      - player.update() once per simulation frame
      - player.acknowledge() when the player dismisses a speech bubble
      - player.abort() when the interaction is cut short (walked away,
        scene unloaded)

    Each frame, instantaneous directives are executed back to back
    until one asks for a pause (Speech / Warp wait for acknowledge(),
    Wait holds for its frame count) or the routine is done.

    Host-side effects (sound, sprites, flashes...) are delegated to
    handlers registered per directive type. Directives without a handler
    are logged and skipped.
    """

    def __init__(self, state: ExternalState, config: Optional[PlayerConfig] = None):
        self.state = state
        self.config = config or PlayerConfig()
        self.handlers: Dict[str, DirectiveHandler] = {}

        self._active: Optional[ScriptRoutine] = None
        self._wait = 0
        self._awaiting_ack = False

        # Presentation state the host reads back every frame.
        self.speech: Optional[LocaleRecord] = None
        self.camera_target: Optional[str] = None
        self.frame = 0

    def register_handler(self, directive_type: str, func: DirectiveHandler) -> None:
        self.handlers[directive_type] = func

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def play(self, routine: ScriptRoutine) -> None:
        """Start a routine, aborting whichever one was running."""
        if self._active is not None:
            self.abort()

        self._active = routine
        self._wait = 0
        self._awaiting_ack = False

        speaker = routine.context.speaker
        if speaker is not None:
            self.camera_target = speaker
        log("player", f"play {routine.name} (speaker={speaker!r})")

    def update(self) -> None:
        """Advance one simulation frame."""
        if self._active is None:
            return
        self.frame += 1

        if self._awaiting_ack:
            return
        if self._wait > 0:
            self._wait -= 1
            if self._wait > 0:
                return

        self._pump()

    def acknowledge(self) -> None:
        """Release the current Speech / Warp pause; the routine resumes next frame."""
        if self._active is not None and self._awaiting_ack:
            self._awaiting_ack = False
            log("player", f"ack on frame {self.frame}")

    def abort(self) -> None:
        """
        Stop the active routine mid-sequence.

        Flags the routine raised through SetFlag and has not lowered
        yet are lowered again. Flags the host set meanwhile are kept.
        """
        if self._active is None:
            return
        routine = self._active

        if self.config.reset_flags_on_abort:
            for name in sorted(routine.raised_flags):
                self.state.set_flag(name, False)

        self._clear()
        log("player", f"abort {routine.name} after {routine.emitted} directives")

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def is_running(self) -> bool:
        return self._active is not None

    @property
    def active(self) -> Optional[ScriptRoutine]:
        return self._active

    @property
    def awaiting_ack(self) -> bool:
        return self._awaiting_ack

    @property
    def waiting_frames(self) -> int:
        return self._wait

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _pump(self) -> None:
        routine = self._active
        # A handler may play() another routine; that one starts next frame.
        while self._active is routine and routine is not None:
            directive = routine.advance()
            if directive is DONE:
                self._finish()
                return

            # Pause is recorded first so a handler may acknowledge() right away.
            if isinstance(directive, Wait):
                self._wait = directive.count
            elif isinstance(directive, (Speech, Warp)):
                self._awaiting_ack = True

            self._execute(directive)

            if self._wait > 0 or self._awaiting_ack:
                return

    def _execute(self, directive: Directive) -> None:
        if isinstance(directive, Speech):
            self.speech = directive.text
        elif isinstance(directive, Close):
            self.speech = None
        elif isinstance(directive, GetSpell):
            self.state.grant_item(directive.spell)
        elif isinstance(directive, SetCameraTarget):
            self.camera_target = directive.name

        handler = self.handlers.get(directive.type)
        if handler:
            handler(directive)
        elif not isinstance(directive, _BUILTIN):
            log("player", f"No handler for directive '{directive.type}', skipping.")

    def _finish(self) -> None:
        routine = self._active
        self._clear()
        log("player", f"finished {routine.name} on frame {self.frame}")

    def _clear(self) -> None:
        self._active = None
        self._wait = 0
        self._awaiting_ack = False
        self.speech = None
        self.camera_target = None
