from __future__ import annotations

import pytest

from cutscene.scenes.registry import ALL_ROUTINES
from cutscene.scenes.rabbit_camp import LANTERN, GuideRabbit, ShopRabbit, SpellListRabbit
from cutscene.script.directives import DONE, Close, GetSpell, Speech, Wait
from cutscene.script.routine import ScriptContext
from cutscene.script.state import SPELL_LIST_OPEN, ExternalState


def _run(cls, state: ExternalState) -> list:
    return list(cls(ScriptContext(state=state)))


def test_guide_without_lantern_ends_with_the_gift() -> None:
    out = _run(GuideRabbit, ExternalState())

    assert isinstance(out[0], Speech) and out[0].text.ja == "テスト"
    assert out[1] == Wait(60)
    assert out[-2:] == [Close(), GetSpell(LANTERN)]
    assert out[-3].text.en == "Right, it's dark around here. You should take this."
    assert len(out) == 12


def test_guide_with_lantern_stops_after_last_unconditional_line() -> None:
    without = _run(GuideRabbit, ExternalState())
    with_lantern = _run(GuideRabbit, ExternalState(inventory={LANTERN}))

    assert with_lantern == without[:9]
    assert isinstance(with_lantern[-1], Speech)
    assert Close() not in with_lantern
    assert not any(isinstance(d, GetSpell) for d in with_lantern)


def test_lantern_segment_never_offered_twice() -> None:
    state = ExternalState()
    first = _run(GuideRabbit, state)
    for d in first:
        if isinstance(d, GetSpell):
            state.grant_item(d.spell)

    second = _run(GuideRabbit, state)
    assert GetSpell(LANTERN) in first
    assert GetSpell(LANTERN) not in second


def test_spell_list_flag_brackets_the_whole_talk() -> None:
    state = ExternalState()
    r = SpellListRabbit(ScriptContext(state=state))

    assert state.get_flag(SPELL_LIST_OPEN) is False
    seen = []
    while True:
        d = r.advance()
        if d is DONE:
            break
        seen.append(d)
        assert state.get_flag(SPELL_LIST_OPEN) is True
    assert len(seen) == 3
    assert state.get_flag(SPELL_LIST_OPEN) is False


def test_shop_is_a_single_line() -> None:
    out = _run(ShopRabbit, ExternalState())
    assert len(out) == 1
    assert out[0].text.en == "Welcome! We sell relics found in the labyrinth."


@pytest.mark.parametrize("cls", ALL_ROUTINES, ids=lambda c: c.key)
@pytest.mark.parametrize("inventory", [(), (LANTERN,)], ids=["empty", "lantern"])
def test_every_speech_has_reference_text(cls, inventory) -> None:
    out = _run(cls, ExternalState(inventory=inventory))
    for d in out:
        if isinstance(d, Speech):
            assert isinstance(d.text.ja, str) and d.text.ja.strip()


@pytest.mark.parametrize("cls", ALL_ROUTINES, ids=lambda c: c.key)
def test_routines_are_deterministic(cls) -> None:
    assert _run(cls, ExternalState()) == _run(cls, ExternalState())
