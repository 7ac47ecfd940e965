# cutscene/script/locale.py
from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping

from cutscene.script.errors import ScriptSchemaError

# Closed set of display locales. `ja` is the authoring/reference locale.
LOCALES: tuple[str, ...] = (
    "ja", "en", "zh_cn", "zh_tw", "es", "fr", "pt", "de", "ko", "ru",
)


@dataclass(frozen=True)
class LocaleRecord:
    """
    One line of dialogue in every supported locale.

    Only `ja` is required. The rest default to "" which means the line
    has not been translated yet; picking a fallback for display is the
    host's job, not ours.
    """

    ja: str
    en: str = ""
    zh_cn: str = ""
    zh_tw: str = ""
    es: str = ""
    fr: str = ""
    pt: str = ""
    de: str = ""
    ko: str = ""
    ru: str = ""

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if not isinstance(value, str):
                raise ScriptSchemaError(
                    f"LocaleRecord.{f.name} must be a string (got {value!r})"
                )
        if not self.ja.strip():
            raise ScriptSchemaError("LocaleRecord.ja must be a non-empty string")

    def get(self, code: str) -> str:
        if code not in LOCALES:
            raise KeyError(code)
        return getattr(self, code)

    def untranslated(self) -> tuple[str, ...]:
        return tuple(code for code in LOCALES if not getattr(self, code))

    # -----------------------------
    # Serialization helpers
    # -----------------------------
    def to_dict(self) -> Dict[str, str]:
        return {code: getattr(self, code) for code in LOCALES}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LocaleRecord":
        if "ja" not in data:
            raise ScriptSchemaError("LocaleRecord is missing the 'ja' field")
        return cls(**{code: data.get(code, "") for code in LOCALES})
