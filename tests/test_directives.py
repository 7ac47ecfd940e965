from __future__ import annotations

import pytest

from cutscene.script.directives import (
    BGM,
    DIRECTIVE_TYPES,
    DONE,
    Close,
    Flash,
    GetSpell,
    SetCameraTarget,
    SetTile,
    Shake,
    Speech,
    Sprite,
    Wait,
    Warp,
    directive_from_dict,
    directive_to_dict,
    is_directive,
    suspends,
)
from cutscene.script.errors import ScriptSchemaError
from cutscene.script.locale import LocaleRecord


def test_wait_count_must_be_non_negative_int() -> None:
    assert Wait(0).count == 0
    with pytest.raises(ScriptSchemaError):
        Wait(-1)
    with pytest.raises(ScriptSchemaError):
        Wait(1.5)  # type: ignore[arg-type]
    with pytest.raises(ScriptSchemaError):
        Wait(True)  # type: ignore[arg-type]


def test_flash_duration_must_be_positive() -> None:
    with pytest.raises(ScriptSchemaError):
        Flash(position=(0, 0), intensity=10.0, radius=240.0, duration=0, reverse=False)


def test_positions_normalize_to_float_tuples() -> None:
    sprite = Sprite(name="huge slime body", position=[3, 4], aseprite="enemy/huge_slime.aseprite")
    assert sprite.position == (3.0, 4.0)

    with pytest.raises(ScriptSchemaError):
        Sprite(name="x", position=(1, 2, 3), aseprite="a.aseprite")
    with pytest.raises(ScriptSchemaError):
        Sprite(name="x", position=("a", 2), aseprite="a.aseprite")


def test_names_and_paths_must_be_non_empty() -> None:
    with pytest.raises(ScriptSchemaError):
        GetSpell("")
    with pytest.raises(ScriptSchemaError):
        Warp(" ")
    # null is allowed where the wire format allows it
    assert BGM(None).path is None
    assert SetCameraTarget(None).name is None


def test_set_tile_needs_a_real_rectangle() -> None:
    with pytest.raises(ScriptSchemaError):
        SetTile(x=22, y=153, w=0, h=5, tile="StoneTile")


def test_directives_are_immutable() -> None:
    wait = Wait(60)
    with pytest.raises(AttributeError):
        wait.count = 10  # type: ignore[misc]


def test_done_is_not_a_directive() -> None:
    assert not is_directive(DONE)
    assert is_directive(Close())
    assert "Done" not in DIRECTIVE_TYPES


def test_suspension_rules() -> None:
    assert suspends(Speech(LocaleRecord(ja="テスト")))
    assert suspends(Warp("level-entity-iid"))
    assert suspends(Wait(60))
    assert not suspends(Wait(0))
    assert not suspends(Close())
    assert not suspends(Shake(value=6.0, attenuation=-0.5))


# ---------------------------------------------------------------------
# Wire format
# ---------------------------------------------------------------------
def test_speech_wire_shape_is_flat() -> None:
    data = directive_to_dict(Speech(LocaleRecord(ja="テスト")))
    assert data["type"] == "Speech"
    assert data["ja"] == "テスト"
    assert data["en"] == ""
    assert set(data) == {"type", "ja", "en", "zh_cn", "zh_tw", "es", "fr", "pt", "de", "ko", "ru"}


def test_authored_flash_parses() -> None:
    flash = directive_from_dict({
        "type": "Flash",
        "position": [392.0, -2504.0],
        "intensity": 10.0,
        "radius": 240.0,
        "duration": 240,
        "reverse": True,
    })
    assert flash == Flash(position=(392.0, -2504.0), intensity=10.0, radius=240.0, duration=240, reverse=True)
    assert directive_to_dict(flash)["position"] == [392.0, -2504.0]


def test_null_fields_parse() -> None:
    assert directive_from_dict({"type": "BGM", "path": None}) == BGM(None)
    assert directive_from_dict({"type": "SetCameraTarget", "name": None}) == SetCameraTarget(None)
    assert directive_from_dict({"type": "Close"}) == Close()


def test_wire_errors() -> None:
    with pytest.raises(ScriptSchemaError, match="unknown directive type"):
        directive_from_dict({"type": "Explode"})
    with pytest.raises(ScriptSchemaError, match="unknown directive type"):
        directive_from_dict({"type": ["Speech"]})
    with pytest.raises(ScriptSchemaError, match="unknown directive type"):
        directive_from_dict({"type": {"a": 1}})
    with pytest.raises(ScriptSchemaError, match="unknown directive type"):
        directive_from_dict({"count": 1})
    with pytest.raises(ScriptSchemaError, match="missing"):
        directive_from_dict({"type": "Wait"})
    with pytest.raises(ScriptSchemaError, match="unknown fields"):
        directive_from_dict({"type": "Wait", "count": 1, "frames": 2})
    with pytest.raises(ScriptSchemaError, match="unknown locale"):
        directive_from_dict({"type": "Speech", "ja": "x", "it": "y"})
    with pytest.raises(ScriptSchemaError):
        directive_from_dict({"type": "Speech", "en": "no reference text"})
    with pytest.raises(ScriptSchemaError):
        directive_from_dict({"type": "Wait", "count": -5})
