"""Unit tests for the TraitManager."""

from types import SimpleNamespace
from typing import Any

import pytest

from retrait import DuplicateTraitError, Trait, TraitIdentifier, TraitManager


class Dog:
    """A sample class."""

    def __init__(self, name: str):
        self.name = name


class Cat:
    """Another sample class."""

    def __init__(self, name: str):
        self.name = name


@pytest.fixture
def trait_manager() -> TraitManager:
    """Return an empty TraitManager."""
    return TraitManager()


def test_trait_manager_register(trait_manager: TraitManager, animal: Trait[Any, SimpleNamespace]):
    """Test that a trait can be registered and found by its identifier."""
    assert trait_manager.register(animal) is animal
    assert trait_manager.get_trait_by_id("animal") is animal
    assert trait_manager.get_trait_by_id(TraitIdentifier(parts=("animal",))) is animal
    assert trait_manager.get_trait_by_id("missing") is None
    assert animal in trait_manager
    assert "animal" in trait_manager
    assert len(trait_manager) == 1


def test_trait_manager_register_is_idempotent(trait_manager: TraitManager, animal: Trait[Any, SimpleNamespace]):
    """Test that registering the same trait twice is allowed."""
    trait_manager.register(animal)
    trait_manager.register(animal)
    assert list(trait_manager) == [animal]


def test_trait_manager_uniqueness(trait_manager: TraitManager, animal: Trait[Any, SimpleNamespace]):
    """Test that trait identifiers must be unique."""
    trait_manager.register(animal)
    duplicate = Trait(lambda self: SimpleNamespace(), identifier="animal")

    with pytest.raises(DuplicateTraitError, match="already registered"):
        trait_manager.register(duplicate)
    assert duplicate not in trait_manager
    assert trait_manager.get_trait_by_id("animal") is animal


def test_trait_manager_define(trait_manager: TraitManager):
    """Test that define creates and registers a trait."""
    pet = trait_manager.define("pet", lambda self: SimpleNamespace(pet=lambda: f"petting {self.name}"), "Pettable.")
    pet.impl_for(Dog)

    assert trait_manager.get_trait_by_id("pet") is pet
    assert pet.description == "Pettable."
    assert pet(Dog("Jack")).pet() == "petting Jack"


def test_trait_manager_get_traits_for(
    trait_manager: TraitManager,
    animal: Trait[Any, SimpleNamespace],
    can_swim: Trait[Any, SimpleNamespace],
):
    """Test that the traits attached to a class or instance can be listed."""
    trait_manager.register(animal)
    trait_manager.register(can_swim)
    animal.impl_for(Dog).impl_for(Cat)
    can_swim.impl_for(Dog)

    assert trait_manager.get_traits_for(Dog) == [animal, can_swim]
    assert trait_manager.get_traits_for(Dog("Jack")) == [animal, can_swim]
    assert trait_manager.get_traits_for(Cat("Bart")) == [animal]
    assert trait_manager.get_traits_for(None) == []
    assert trait_manager.get_traits_for(object()) == []


def test_trait_manager_contains_other_values(trait_manager: TraitManager):
    """Test that membership checks ignore unsupported values."""
    assert 42 not in trait_manager
