"""Trait identifiers for retrait."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

_PART_PATTERN = re.compile(r"^[a-z0-9_]+$")


@dataclass(frozen=True)
class TraitIdentifier:
    """A structured, dotted identifier for a trait."""

    parts: tuple[str, ...]

    def __post_init__(self):
        """Validate the identifier parts."""
        if not self.parts:
            raise ValueError("Trait identifier cannot be empty.")
        for part in self.parts:
            if not _PART_PATTERN.match(part):
                raise ValueError(
                    f"Invalid part '{part}' in trait identifier. "
                    "Only lowercase letters, numbers, and underscores are allowed."
                )

    def __str__(self) -> str:
        """Return the string representation of the identifier."""
        return ".".join(self.parts)

    @classmethod
    def from_string(cls, identifier: str) -> TraitIdentifier:
        """Create a TraitIdentifier from a string."""
        if not identifier:
            raise ValueError("Trait identifier cannot be empty.")
        return cls(parts=tuple(identifier.split(".")))

    @staticmethod
    def is_valid_part(part: str) -> bool:
        """Return True if `part` may appear in an identifier."""
        return bool(_PART_PATTERN.match(part))


@dataclass(frozen=True)
class TraitImplementationIdentifier:
    """Identifies the attachment of a trait to one class, e.g. ``animal|Dog``."""

    trait_id: TraitIdentifier
    target_type: str

    def __str__(self) -> str:
        """Return the string representation of the identifier."""
        return f"{self.trait_id}|{self.target_type}"

    @classmethod
    def from_string(cls, identifier: str) -> TraitImplementationIdentifier:
        """Create a TraitImplementationIdentifier from a string."""
        if "|" not in identifier:
            raise ValueError("Invalid TraitImplementationIdentifier format. Expected 'trait_id|target_type'.")
        trait_id_str, target_type = identifier.split("|", 1)
        return cls(
            trait_id=TraitIdentifier.from_string(trait_id_str),
            target_type=target_type,
        )

    @classmethod
    def from_trait_and_class(cls, trait_id: TraitIdentifier, target: type[Any]) -> TraitImplementationIdentifier:
        """Create a TraitImplementationIdentifier from a trait identifier and a class."""
        return cls(trait_id=trait_id, target_type=target.__qualname__)
