# cutscene/scenes/registry.py
from __future__ import annotations

from cutscene.runtime.triggers import register_routine
from cutscene.scenes.huge_slime import HugeSlimeDespawn, RavenAftermath
from cutscene.scenes.rabbit_camp import (
    GuideRabbit,
    MultiplayerRabbit,
    ReadingRabbit,
    ShopRabbit,
    SingleplayRabbit,
    SpellListRabbit,
    TrainingRabbit,
)

ALL_ROUTINES = (
    GuideRabbit,
    SingleplayRabbit,
    MultiplayerRabbit,
    ReadingRabbit,
    TrainingRabbit,
    SpellListRabbit,
    ShopRabbit,
    HugeSlimeDespawn,
    RavenAftermath,
)


# ------------------------------------------------------------
# Seed the trigger registry with every authored routine
# ------------------------------------------------------------

def _seed_defaults() -> None:
    for cls in ALL_ROUTINES:
        register_routine(cls.key, cls)


_seed_defaults()
