from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

# Strategies, in the order they are tried
BY_NAME = "name"
BY_PROJECT = "project"
BY_DEFAULT = "default"


@dataclass
class ProfileResolution:
    """Tracks, per language, which profile was picked and by which strategy.

    A language is resolved at most once: later strategies only see the
    languages that earlier ones left unresolved, so every language ends up
    either resolved by exactly one strategy or in ``unresolved``.
    """

    language_keys: set[str]
    profiles: dict[str, object] = field(default_factory=dict)
    resolved_by: dict[str, str] = field(default_factory=dict)

    @property
    def unresolved(self) -> set[str]:
        return self.language_keys - self.profiles.keys()

    def accept(self, strategy: str, candidates: Iterable) -> None:
        """Record candidates (objects with a ``language`` attribute) for still unresolved languages."""
        pending = self.unresolved
        for profile in candidates:
            if profile.language in pending and profile.language not in self.profiles:
                self.profiles[profile.language] = profile
                self.resolved_by[profile.language] = strategy
