from types import SimpleNamespace
from typing import Any

import pytest

from retrait import Trait


def animal_sound(self: Any) -> SimpleNamespace:
    """Build the default Animal capability."""
    return SimpleNamespace(make_sound=lambda: f"{self.name} aaa!")


def swimming(self: Any) -> SimpleNamespace:
    """Build the default CanSwim capability."""
    return SimpleNamespace(swim=lambda: f"{self.name} is swimming!")


@pytest.fixture
def animal() -> Trait[Any, SimpleNamespace]:
    """Return a fresh Animal trait."""
    return Trait(animal_sound, identifier="animal")


@pytest.fixture
def can_swim() -> Trait[Any, SimpleNamespace]:
    """Return a fresh CanSwim trait."""
    return Trait(swimming, identifier="can_swim")
