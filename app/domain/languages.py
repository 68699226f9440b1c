from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Language:
    key: str
    name: str


class Languages:
    """Registry of the languages installed on the server.

    Built from a ``key:name`` list such as ``"java:Java,js:JavaScript"``.
    Entries without a name use their key as name; blank entries are ignored.
    When a key is declared twice the last declaration wins.
    """

    def __init__(self, languages: list[Language] | None = None):
        self._by_key: dict[str, Language] = {}
        for language in languages or []:
            self._by_key[language.key] = language

    @classmethod
    def from_setting(cls, value: str) -> Languages:
        languages = []
        for entry in value.split(","):
            entry = entry.strip()
            if not entry:
                continue
            key, _, name = entry.partition(":")
            key = key.strip()
            if not key:
                continue
            languages.append(Language(key=key, name=name.strip() or key))
        return cls(languages)

    def all(self) -> list[Language]:
        return sorted(self._by_key.values(), key=lambda language: language.key)

    def keys(self) -> set[str]:
        return set(self._by_key)

    def get(self, key: str | None) -> Language | None:
        if key is None:
            return None
        return self._by_key.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self._by_key

    def __len__(self) -> int:
        return len(self._by_key)
