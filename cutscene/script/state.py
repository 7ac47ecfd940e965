# cutscene/script/state.py

from __future__ import annotations
from typing import Dict, Iterable, Optional

from cutscene.debug.debug_logger import log

# Flag routines raise while the spell catalog UI is showing.
SPELL_LIST_OPEN = "spellListOpen"


class ExternalState:
    """
    Session-wide inventory + flag store shared by every routine.

    Owned by the host. Routines only read it through `has_item` /
    `get_flag` and flip flags with `set_flag`; the scheduler writes the
    inventory when it executes GetSpell. Unknown flags read as False.
    """

    def __init__(
        self,
        inventory: Iterable[str] = (),
        flags: Optional[Dict[str, bool]] = None,
    ) -> None:
        self.inventory: set[str] = set(inventory)
        self.flags: Dict[str, bool] = dict(flags or {})

    # Inventory ---------------------------------------------------------
    def has_item(self, item_id: str) -> bool:
        return item_id in self.inventory

    def grant_item(self, item_id: str) -> None:
        if item_id in self.inventory:
            return  # idempotent
        self.inventory.add(item_id)
        log("state", f"grant {item_id!r}")

    # Flags -------------------------------------------------------------
    def get_flag(self, name: str) -> bool:
        return self.flags.get(name, False)

    def set_flag(self, name: str, value: bool) -> None:
        value = bool(value)
        if self.flags.get(name, False) != value:
            log("state", f"flag {name} = {value}")
        self.flags[name] = value

    def true_flags(self) -> frozenset[str]:
        return frozenset(name for name, on in self.flags.items() if on)

    def debug(self) -> None:
        print("Inventory:", ", ".join(sorted(self.inventory)))
        print("Flags:", ", ".join(sorted(self.true_flags())))
