"""Core TraitManager class for retrait."""

from collections.abc import Iterator
from typing import Any

from retrait.exceptions import DuplicateTraitError
from retrait.identifier import TraitIdentifier
from retrait.implementation import Builder, CapabilityType
from retrait.traits import Trait


class TraitManager:
    """Keeps a catalog of named traits and answers which of them apply to a class."""

    def __init__(self) -> None:
        """Initialize the TraitManager."""
        self._trait_map: dict[str, Trait[Any, Any]] = {}

    def register(self, trait: Trait[Any, CapabilityType]) -> Trait[Any, CapabilityType]:
        """Register a trait under its identifier and return it."""
        trait_id = str(trait.identifier)
        existing = self._trait_map.get(trait_id)
        if existing is not None and existing is not trait:
            raise DuplicateTraitError(f"Trait with identifier '{trait_id}' already registered.")
        self._trait_map[trait_id] = trait
        return trait

    def define(
        self,
        identifier: TraitIdentifier | str,
        default_builder: Builder[CapabilityType],
        description: str = "",
    ) -> Trait[Any, CapabilityType]:
        """Create a trait from a default builder and register it."""
        return self.register(Trait(default_builder, identifier=identifier, description=description))

    def get_trait_by_id(self, identifier: TraitIdentifier | str) -> Trait[Any, Any] | None:
        """Get a trait by its identifier."""
        return self._trait_map.get(str(identifier))

    def get_traits_for(self, target: Any) -> list[Trait[Any, Any]]:
        """Get all registered traits attached to `target`, a class or an instance."""
        return [trait for trait in self._trait_map.values() if trait.has_impl_for(target)]

    def __iter__(self) -> Iterator[Trait[Any, Any]]:
        return iter(list(self._trait_map.values()))

    def __len__(self) -> int:
        return len(self._trait_map)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, Trait):
            return self._trait_map.get(str(item.identifier)) is item
        if isinstance(item, TraitIdentifier | str):
            return str(item) in self._trait_map
        return False
