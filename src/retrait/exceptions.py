"""Custom exceptions for retrait."""

from typing import Any


class TraitError(Exception):
    """Base class for exceptions raised by retrait."""

    pass


class TraitNotImplementedError(TraitError, LookupError):
    """Raised by `Trait.require` when the target's class has no attachment for the trait."""

    def __init__(self, message: str, trait_id: str, target_type: type[Any]) -> None:
        super().__init__(message)
        self.trait_id = trait_id
        self.target_type = target_type

    def __str__(self) -> str:
        base_str = super().__str__()
        return f"{base_str} (Trait: {self.trait_id}, Target Type: {self.target_type.__qualname__})"


class InvalidTraitTargetError(TraitError, TypeError):
    """Raised when a trait is attached to something that is not a class."""

    def __init__(self, message: str, trait_id: str, target: Any) -> None:
        super().__init__(message)
        self.trait_id = trait_id
        self.target = target


class DuplicateTraitError(TraitError, ValueError):
    """Raised when a different trait is registered under an identifier already in use."""

    pass
