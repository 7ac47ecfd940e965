# cutscene/scenes/huge_slime.py
from __future__ import annotations

from cutscene.script.directives import (
    BGM,
    SE,
    Despawn,
    Flash,
    SetCameraTarget,
    SetTile,
    Shake,
    SpawnRaven,
    Sprite,
    Wait,
)
from cutscene.script.routine import ScriptContext, ScriptRoutine, emit

HUGE_SLIME_BODY = "huge slime body"

THUNDER_SE = "audio/雷魔法4.ogg"
QUAKE_SE = "audio/地震魔法2.ogg"
COLLAPSE_SE = "audio/kuzureru.ogg"


class HugeSlimeDespawn(ScriptRoutine):
    """
    Boss defeat: the slime's body is left behind as a sprite at the
    boss position, struck twice, then fades out in a long flash.
    """

    key = "HugeSlimeDespawn"

    def build(self, context: ScriptContext):
        pos = context.actor_xy
        return emit(
            Sprite(name=HUGE_SLIME_BODY, position=pos, aseprite="enemy/huge_slime.aseprite"),
            BGM(path=None),
            Shake(value=6.0, attenuation=-0.5),
            SE(path=THUNDER_SE),
            Flash(position=pos, intensity=10.0, radius=480.0, duration=10, reverse=False),
            Wait(60),
            Shake(value=6.0, attenuation=-0.5),
            SE(path=THUNDER_SE),
            Flash(position=pos, intensity=10.0, radius=480.0, duration=10, reverse=False),
            Wait(180),
            Shake(value=6.0, attenuation=0.0),
            SE(path=QUAKE_SE),
            Flash(position=pos, intensity=10.0, radius=240.0, duration=240, reverse=True),
            Wait(240),
            SE(path=THUNDER_SE),
            Flash(position=pos, intensity=10.0, radius=240.0, duration=240, reverse=False),
            Despawn(name=HUGE_SLIME_BODY),
            Shake(value=6.0, attenuation=-0.5),
        )


class RavenAftermath(ScriptRoutine):
    """Floor collapse after the slime fight, then the raven flies past."""

    key = "RavenAftermath"

    # Fixed map coordinates of the collapse and the raven perch.
    COLLAPSE_ORIGIN = (22, 153)
    RAVEN_POSITION = (392.0, -2504.0)

    def build(self, context: ScriptContext):
        x, y = self.COLLAPSE_ORIGIN
        return emit(
            Wait(240),
            SetTile(x=x, y=y, w=5, h=5, tile="StoneTile"),
            SE(path=COLLAPSE_SE),
            SpawnRaven(name="raven", position=self.RAVEN_POSITION),
            Wait(120),
            SetCameraTarget(name="raven"),
            Wait(120),
            SetCameraTarget(name=None),
            Despawn(name="raven"),
        )
