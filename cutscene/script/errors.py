# cutscene/script/errors.py
from __future__ import annotations


class ScriptSchemaError(ValueError):
    """
    Authored content is malformed (bad directive field, missing locale
    text, negative wait...). Raised at construction/load time; never
    used for runtime conditions.
    """
