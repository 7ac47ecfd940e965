from __future__ import annotations

import pytest

from cutscene.runtime.player import ScriptPlayer
from cutscene.runtime import triggers
from cutscene.runtime.triggers import all_routines, get_routine, register_routine, trigger_routine
from cutscene.scenes.huge_slime import HugeSlimeDespawn
from cutscene.scenes.rabbit_camp import GuideRabbit, ShopRabbit
from cutscene.script.directives import Wait
from cutscene.script.routine import Emit, ScriptContext, ScriptRoutine


class _Malformed(ScriptRoutine):
    key = "TestMalformed"

    def build(self, context):
        return [Emit(Wait(-60))]


def test_authored_routines_are_registered() -> None:
    keys = set(all_routines())
    assert {
        "GuideRabbit",
        "SingleplayRabbit",
        "MultiplayerRabbit",
        "ReadingRabbit",
        "TrainingRabbit",
        "SpellListRabbit",
        "ShopRabbit",
        "HugeSlimeDespawn",
        "RavenAftermath",
    } <= keys
    assert get_routine("HugeSlimeDespawn") is HugeSlimeDespawn


def test_register_rejects_bad_input() -> None:
    with pytest.raises(ValueError):
        register_routine("", GuideRabbit)
    with pytest.raises(ValueError):
        register_routine("NotARoutine", dict)  # type: ignore[arg-type]


def test_trigger_builds_a_fresh_routine(player: ScriptPlayer, ctx: ScriptContext) -> None:
    assert trigger_routine(player, "GuideRabbit", ctx)
    first = player.active
    player.abort()
    assert trigger_routine(player, "GuideRabbit", ctx)
    assert player.active is not first
    assert player.active.emitted == 0


def test_trigger_unknown_key(player: ScriptPlayer, ctx: ScriptContext) -> None:
    assert not trigger_routine(player, "NoSuchRabbit", ctx)
    assert not player.is_running()


def test_busy_player_is_not_interrupted_by_default(player: ScriptPlayer, ctx: ScriptContext) -> None:
    assert trigger_routine(player, "GuideRabbit", ctx)
    assert not trigger_routine(player, "ShopRabbit", ctx)
    assert isinstance(player.active, GuideRabbit)

    assert trigger_routine(player, "ShopRabbit", ctx, interrupt=True)
    assert isinstance(player.active, ShopRabbit)


def test_malformed_routine_is_refused_without_crashing(
    player: ScriptPlayer, ctx: ScriptContext, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setitem(triggers._ROUTINE_REGISTRY, _Malformed.key, _Malformed)
    assert not trigger_routine(player, _Malformed.key, ctx)
    assert not player.is_running()


def test_malformed_routine_does_not_stay_registered() -> None:
    assert get_routine(_Malformed.key) is None
