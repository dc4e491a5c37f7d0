"""The per-class entry stored in a trait's association table."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from retrait.identifier import TraitIdentifier, TraitImplementationIdentifier

CapabilityType = TypeVar("CapabilityType")

Builder = Callable[[Any], CapabilityType]


@dataclass(frozen=True)
class TraitImplementation(Generic[CapabilityType]):
    """
    How a trait builds its capability object for one attached class.

    An entry with no builder uses the trait's default builder; an entry with a
    builder overrides it for that class only.
    """

    builder: Builder[CapabilityType] | None = None

    @property
    def uses_default(self) -> bool:
        """Return True if this entry defers to the trait's default builder."""
        return self.builder is None

    def resolve(self, default: Builder[CapabilityType]) -> Builder[CapabilityType]:
        """Return the builder to invoke for a target of the attached class."""
        return default if self.builder is None else self.builder

    def identifier_for(self, trait_id: TraitIdentifier, target: type[Any]) -> TraitImplementationIdentifier:
        """Return the identifier of this entry when attached to `target`."""
        return TraitImplementationIdentifier.from_trait_and_class(trait_id, target)
