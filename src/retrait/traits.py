"""Core Trait class: attach capabilities to existing classes after the fact."""

from __future__ import annotations

import logging
import weakref
from collections.abc import Callable
from typing import Any, Generic, TypeVar, cast

from retrait import config
from retrait.exceptions import InvalidTraitTargetError, TraitNotImplementedError
from retrait.identifier import TraitIdentifier
from retrait.implementation import Builder, TraitImplementation
from retrait.memo import MISSING, InstanceMemo

logger = logging.getLogger(__name__)

TargetType = TypeVar("TargetType")
CapabilityType = TypeVar("CapabilityType")
BuilderType = TypeVar("BuilderType", bound=Callable[..., Any])

DEFAULT_IDENTIFIER = TraitIdentifier(parts=("trait",))


def _resolve_identifier(identifier: TraitIdentifier | str | None, default_builder: Callable[..., Any]) -> TraitIdentifier:
    if isinstance(identifier, TraitIdentifier):
        return identifier
    if identifier is not None:
        return TraitIdentifier.from_string(identifier)
    name = getattr(default_builder, "__name__", "").lower()
    return TraitIdentifier(parts=(name,)) if TraitIdentifier.is_valid_part(name) else DEFAULT_IDENTIFIER


class Trait(Generic[TargetType, CapabilityType]):
    """
    A capability that can be attached to existing classes without modifying them.

    A trait is built from a default builder, a callable turning a target object
    into a capability object. Classes are attached with `impl_for`, optionally
    with a builder of their own. Calling the trait on an object returns the
    capability built for that exact object, or None if the object's class has
    not been attached.

    Capabilities are built at most once per object and the same capability
    object is returned on every later call. Neither attached classes nor
    targets are kept alive by the trait.

    Example::

        Animal = Trait(lambda self: SimpleNamespace(make_sound=lambda: f"{self.name} aaa!"))
        Animal.impl_for(Dog)
        Animal(Dog("Jack")).make_sound()  # "Jack aaa!"

    """

    def __init__(
        self,
        default_builder: Builder[CapabilityType],
        identifier: TraitIdentifier | str | None = None,
        description: str = "",
    ) -> None:
        """Initialize the trait with its default builder."""
        self.default_builder = default_builder
        self.identifier = _resolve_identifier(identifier, default_builder)
        self.description = description
        self._implementations: weakref.WeakKeyDictionary[type[Any], TraitImplementation[CapabilityType]] = (
            weakref.WeakKeyDictionary()
        )
        self._memo: InstanceMemo[CapabilityType] = InstanceMemo()

    def __call__(self, target: TargetType) -> CapabilityType | None:
        """Return the capability for `target`, or None if its class is not attached."""
        implementation = self._implementations.get(type(target))
        if implementation is None:
            return None
        return self._build(target, implementation)

    def _build(self, target: Any, implementation: TraitImplementation[CapabilityType]) -> CapabilityType:
        cached = self._memo.get(target, MISSING)
        if cached is not MISSING:
            return cast(CapabilityType, cached)

        capability = implementation.resolve(self.default_builder)(target)
        if self._memo.set(target, capability):
            logger.debug(
                "Built capability for %s on %s instance at %#x.",
                self.identifier,
                type(target).__qualname__,
                id(target),
            )
        return capability

    def impl_for(
        self,
        target: type[Any],
        builder: Builder[CapabilityType] | None = None,
    ) -> Trait[TargetType, CapabilityType]:
        """
        Attach this trait to the class `target`.

        Args:
            target: The class to attach. Only exact instances of it are affected;
                    subclasses need their own attachment.
            builder: Optional builder used instead of the default builder for
                     instances of `target`.

        Returns:
            The trait itself, so attachments can be chained.

        Attaching a class again replaces its previous builder.

        """
        if not isinstance(target, type):
            raise InvalidTraitTargetError(
                f"Cannot attach trait '{self.identifier}' to {target!r}: expected a class.",
                trait_id=str(self.identifier),
                target=target,
            )

        implementation = TraitImplementation(builder)
        previous = self._implementations.get(target)
        if previous is not None and previous != implementation:
            self._log_reattach(target)
        self._implementations[target] = implementation
        logger.debug(
            "Attached %s (%s builder).",
            implementation.identifier_for(self.identifier, target),
            "default" if implementation.uses_default else "custom",
        )
        return self

    def _log_reattach(self, target: type[Any]) -> None:
        level = logging.WARNING if config.settings.warn_on_reattach else logging.DEBUG
        logger.log(
            level,
            "Trait '%s' is already attached to %s; replacing its builder.",
            self.identifier,
            target.__qualname__,
        )

    def implementation(self, target: type[Any]) -> Callable[[BuilderType], BuilderType]:
        """
        Attach the decorated function as the builder for `target`.

        The function is returned unchanged::

            @Animal.implementation(Cat)
            def cat_animal(cat: Cat) -> AnimalCapability:
                ...

        """

        def decorator(builder: BuilderType) -> BuilderType:
            self.impl_for(target, builder)
            return builder

        return decorator

    def has_impl_for(self, target: Any) -> bool:
        """
        Return True if this trait is attached to `target`.

        `target` may be a class or an instance; for an instance its exact class
        is checked. None is never attached. Nothing is built.
        """
        if target is None:
            return False
        if isinstance(target, type):
            return target in self._implementations
        return type(target) in self._implementations

    def __contains__(self, target: Any) -> bool:
        return self.has_impl_for(target)

    def unsafe(self, target: Any) -> CapabilityType:
        """
        Return a capability for `target` whether or not its class is attached.

        Attached targets behave exactly as with a normal call. For any other
        target the default builder is invoked directly; the result is not
        memoized and the class stays unattached. The target is not validated,
        so errors raised by the builder, or later by the capability, propagate
        to the caller.
        """
        implementation = self._implementations.get(type(target))
        if implementation is not None:
            return self._build(target, implementation)
        return self.default_builder(target)

    def require(self, target: TargetType) -> CapabilityType:
        """Return the capability for `target`, raising if its class is not attached."""
        implementation = self._implementations.get(type(target))
        if implementation is None:
            raise TraitNotImplementedError(
                f"Trait '{self.identifier}' is not implemented for this object.",
                trait_id=str(self.identifier),
                target_type=type(target),
            )
        return self._build(target, implementation)

    def get_implementation(self, target: type[Any]) -> TraitImplementation[CapabilityType] | None:
        """Return the association entry for the class `target`, if attached."""
        return self._implementations.get(target)

    def implementors(self) -> list[type[Any]]:
        """Return the attached classes that are still alive."""
        return list(self._implementations.keys())

    def __repr__(self) -> str:
        return f"<Trait {self.identifier} ({len(self._implementations)} implementors)>"
