from __future__ import annotations

import pytest

from cutscene.runtime.player import ScriptPlayer
from cutscene.scenes import registry as _scenes  # noqa: F401  (seeds the registry)
from cutscene.script.routine import ScriptContext
from cutscene.script.state import ExternalState


@pytest.fixture()
def state() -> ExternalState:
    return ExternalState()


@pytest.fixture()
def ctx(state: ExternalState) -> ScriptContext:
    return ScriptContext(state=state, actor_position=(120.0, -48.0))


@pytest.fixture()
def player(state: ExternalState) -> ScriptPlayer:
    return ScriptPlayer(state)


def _run_to_end(player: ScriptPlayer, max_frames: int = 5000) -> int:
    """Update (acknowledging every speech) until the routine finishes. Returns frames used."""
    for n in range(1, max_frames + 1):
        player.acknowledge()
        player.update()
        if not player.is_running():
            return n
    raise AssertionError("routine did not finish")


@pytest.fixture()
def run_to_end():
    return _run_to_end

