from __future__ import annotations

from cutscene.runtime.player import PlayerConfig, ScriptPlayer
from cutscene.scenes.huge_slime import HugeSlimeDespawn
from cutscene.scenes.rabbit_camp import LANTERN, GuideRabbit, SpellListRabbit
from cutscene.script.directives import SE, Warp
from cutscene.script.routine import Emit, ScriptContext, ScriptRoutine, say
from cutscene.script.state import SPELL_LIST_OPEN, ExternalState


def test_speech_holds_until_acknowledged(player: ScriptPlayer, ctx: ScriptContext) -> None:
    player.play(GuideRabbit(ctx))
    player.update()
    assert player.speech.ja == "テスト"
    assert player.awaiting_ack

    for _ in range(10):
        player.update()
    assert player.active.emitted == 1

    player.acknowledge()
    player.update()
    assert player.active.emitted == 2  # the Wait
    assert player.waiting_frames == 60


def test_wait_holds_for_exactly_count_frames(player: ScriptPlayer, ctx: ScriptContext) -> None:
    player.play(GuideRabbit(ctx))
    player.update()
    player.acknowledge()
    player.update()  # Wait(60) executed on this frame

    for _ in range(59):
        player.update()
    assert player.speech.ja == "テスト"
    player.update()
    assert player.speech.ja == "テスト2"


def test_guide_grants_lantern_and_finishes(player: ScriptPlayer, state: ExternalState, ctx: ScriptContext, run_to_end) -> None:
    player.play(GuideRabbit(ctx))
    run_to_end(player)

    assert state.has_item(LANTERN)
    assert not player.is_running()
    assert player.speech is None

    # second visit: no gift, and the inventory is unchanged
    player.play(GuideRabbit(ctx))
    run_to_end(player)
    assert state.inventory == {LANTERN}


def test_handlers_receive_host_effects(player: ScriptPlayer, ctx: ScriptContext, run_to_end) -> None:
    sounds: list[str] = []
    player.register_handler(SE.type, lambda d: sounds.append(d.path))

    player.play(HugeSlimeDespawn(ctx))
    frames = run_to_end(player)

    assert sounds == ["audio/雷魔法4.ogg", "audio/雷魔法4.ogg", "audio/地震魔法2.ogg", "audio/雷魔法4.ogg"]
    # 1 + 60 + 180 + 240: the final burst runs on the frame the last Wait expires
    assert frames == 481


def test_speaker_takes_the_camera_until_done(player: ScriptPlayer, state: ExternalState, run_to_end) -> None:
    ctx = ScriptContext(state=state, speaker="shop rabbit")
    player.play(GuideRabbit(ctx))
    assert player.camera_target == "shop rabbit"
    run_to_end(player)
    assert player.camera_target is None


def test_abort_lowers_flags_the_routine_raised(player: ScriptPlayer, state: ExternalState, ctx: ScriptContext) -> None:
    state.set_flag("door_open", True)
    player.play(SpellListRabbit(ctx))
    player.update()
    assert state.get_flag(SPELL_LIST_OPEN)

    player.abort()
    assert not player.is_running()
    assert state.get_flag(SPELL_LIST_OPEN) is False
    assert state.get_flag("door_open") is True
    assert player.speech is None


def test_abort_can_leave_flags_alone(state: ExternalState, ctx: ScriptContext) -> None:
    player = ScriptPlayer(state, PlayerConfig(reset_flags_on_abort=False))
    player.play(SpellListRabbit(ctx))
    player.update()
    player.abort()
    assert state.get_flag(SPELL_LIST_OPEN) is True


def test_play_replaces_and_aborts_the_running_routine(player: ScriptPlayer, state: ExternalState, ctx: ScriptContext) -> None:
    player.play(SpellListRabbit(ctx))
    player.update()
    player.play(GuideRabbit(ctx))
    assert state.get_flag(SPELL_LIST_OPEN) is False
    assert isinstance(player.active, GuideRabbit)


def test_warp_waits_for_the_host(player: ScriptPlayer, ctx: ScriptContext) -> None:
    class Portal(ScriptRoutine):
        def build(self, context):
            return [Emit(Warp("camp-entrance")), say("着いた")]

    warps: list[str] = []
    player.register_handler(Warp.type, lambda d: warps.append(d.destination_iid))
    player.play(Portal(ctx))
    player.update()
    player.update()
    assert warps == ["camp-entrance"]
    assert player.speech is None

    player.acknowledge()
    player.update()
    assert player.speech.ja == "着いた"


def test_update_without_routine_is_a_no_op(player: ScriptPlayer) -> None:
    player.update()
    player.acknowledge()
    player.abort()
    assert player.frame == 0


def test_handler_may_acknowledge_a_warp_immediately(player: ScriptPlayer, ctx: ScriptContext) -> None:
    class Portal(ScriptRoutine):
        def build(self, context):
            return [Emit(Warp("camp-entrance")), say("着いた")]

    player.register_handler(Warp.type, lambda d: player.acknowledge())
    player.play(Portal(ctx))
    player.update()
    assert player.speech.ja == "着いた"


def test_abort_keeps_flags_the_host_raised_meanwhile(player: ScriptPlayer, state: ExternalState, ctx: ScriptContext) -> None:
    player.play(SpellListRabbit(ctx))
    player.update()
    state.set_flag("bridge_lowered", True)

    player.abort()
    assert state.get_flag(SPELL_LIST_OPEN) is False
    assert state.get_flag("bridge_lowered") is True


def test_handler_starting_another_routine_waits_for_next_frame(player: ScriptPlayer, ctx: ScriptContext) -> None:
    class First(ScriptRoutine):
        def build(self, context):
            return [Emit(SE("audio/bell.ogg")), say("一番目")]

    class Second(ScriptRoutine):
        def build(self, context):
            return [say("二番目")]

    second = Second(ctx)
    player.register_handler(SE.type, lambda d: player.play(second))
    player.play(First(ctx))

    player.update()
    assert player.active is second
    assert player.speech is None
    assert second.emitted == 0

    player.update()
    assert player.speech.ja == "二番目"
