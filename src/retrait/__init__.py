"""Retrofittable traits: attach capabilities to existing classes without touching them."""

from .exceptions import DuplicateTraitError, InvalidTraitTargetError, TraitError, TraitNotImplementedError
from .identifier import TraitIdentifier, TraitImplementationIdentifier
from .implementation import TraitImplementation
from .manager import TraitManager
from .traits import Trait

__all__ = [
    "DuplicateTraitError",
    "InvalidTraitTargetError",
    "Trait",
    "TraitError",
    "TraitIdentifier",
    "TraitImplementation",
    "TraitImplementationIdentifier",
    "TraitManager",
    "TraitNotImplementedError",
]
