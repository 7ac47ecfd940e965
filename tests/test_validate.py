from __future__ import annotations

from cutscene.scenes.rabbit_camp import LANTERN, GuideRabbit
from cutscene.scenes.registry import ALL_ROUTINES
from cutscene.script.directives import Wait
from cutscene.script.routine import Emit, ScriptRoutine, SetFlag, say
from cutscene.script.state import ExternalState
from cutscene.script.validate import validate_all, validate_routine


def test_authored_content_is_clean() -> None:
    states = [ExternalState(), ExternalState(inventory={LANTERN})]
    assert validate_all(states, routines=ALL_ROUTINES) == []


def test_fixture_states_are_not_mutated() -> None:
    fixture = ExternalState()
    assert validate_routine(GuideRabbit, [fixture]) == []
    assert fixture.inventory == set()


def test_flag_left_raised_is_reported() -> None:
    class Leaky(ScriptRoutine):
        key = "Leaky"

        def build(self, context):
            return [SetFlag("spellListOpen", True), say("開けっぱなし")]

    issues = validate_routine(Leaky)
    assert len(issues) == 1
    assert "spellListOpen" in issues[0]


def test_schema_errors_are_reported_not_raised() -> None:
    class Negative(ScriptRoutine):
        key = "Negative"

        def build(self, context):
            return [Emit(Wait(-1))]

    issues = validate_routine(Negative)
    assert issues and "schema error" in issues[0]


def test_blank_japanese_line_is_reported_as_schema_error() -> None:
    class Untitled(ScriptRoutine):
        key = "Untitled"

        def build(self, context):
            return [say("   ", en="hello")]

    issues = validate_routine(Untitled)
    assert len(issues) == 1
    assert "schema error" in issues[0]


def test_runaway_bound() -> None:
    issues = validate_routine(GuideRabbit, max_directives=3)
    assert any("did not finish" in i for i in issues)


def test_bad_key_is_reported() -> None:
    class Spaced(ScriptRoutine):
        key = "Guide Rabbit"

        def build(self, context):
            return [say("やあ")]

    assert validate_routine(Spaced) == ["Spaced: key contains whitespace: 'Guide Rabbit'"]
