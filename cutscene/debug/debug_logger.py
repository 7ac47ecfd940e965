# cutscene/debug/debug_logger.py

from __future__ import annotations
from typing import Iterable

# ----------------------------------------------------------------------
# Core debug toggles
# ----------------------------------------------------------------------

DEBUG_ENABLED: bool = True

ENABLED_CATEGORIES: set[str] = {
    "script",   # routine cursor / emitted directives
    "player",   # ScriptPlayer scheduling (waits, acks, aborts)
    "state",    # inventory + flag mutations
    "content",  # authoring / schema problems
}

def enable_categories(*cats: str) -> None:
    ENABLED_CATEGORIES.update(cats)

def disable_categories(*cats: str) -> None:
    for c in cats:
        ENABLED_CATEGORIES.discard(c)

def set_categories(cats: Iterable[str]) -> None:
    global ENABLED_CATEGORIES
    ENABLED_CATEGORIES = set(cats)

def log(category: str, message: str) -> None:
    if not DEBUG_ENABLED:
        return
    if category not in ENABLED_CATEGORIES:
        return
    print(f"[SCRIPT {category.upper()}] {message}")
