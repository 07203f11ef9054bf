"""Core data types: diets, organisms and encounter results."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator


class Diet(Enum):
    """Diet capability of an organism kind: (can_eat_meat, can_eat_plants)."""

    PLANT = (False, False)
    HERBIVORE = (False, True)
    CARNIVORE = (True, False)
    OMNIVORE = (True, True)

    @property
    def can_eat_meat(self) -> bool:
        return self.value[0]

    @property
    def can_eat_plants(self) -> bool:
        return self.value[1]

    @classmethod
    def from_capability(cls, can_eat_meat: bool, can_eat_plants: bool) -> Diet:
        return cls((bool(can_eat_meat), bool(can_eat_plants)))


@dataclass(frozen=True)
class Organism:
    """Immutable organism value.

    Attributes:
        species: Identity value; organisms are the same species iff equal.
        vitality: Remaining life force (0 means dead).
        diet: Diet capability, fixed for the organism's kind.
    """

    species: Any
    vitality: int
    diet: Diet

    def __post_init__(self) -> None:
        if isinstance(self.vitality, bool) or not isinstance(self.vitality, int):
            raise TypeError(
                f"vitality must be an int, got {type(self.vitality).__name__}"
            )
        if self.vitality < 0:
            raise ValueError(f"vitality must be >= 0, got {self.vitality}")
        if not isinstance(self.diet, Diet):
            raise TypeError(f"diet must be a Diet, got {self.diet!r}")

    @property
    def can_eat_meat(self) -> bool:
        return self.diet.can_eat_meat

    @property
    def can_eat_plants(self) -> bool:
        return self.diet.can_eat_plants

    @property
    def dead(self) -> bool:
        return self.vitality == 0

    def after(self, new_vitality: int | None = None) -> Organism:
        """Return this organism's post-encounter state.

        Same species and diet; a plain copy when *new_vitality* is omitted.
        """
        if new_vitality is None:
            new_vitality = self.vitality
        return Organism(self.species, new_vitality, self.diet)


def plant(species: Any, vitality: int) -> Organism:
    return Organism(species, vitality, Diet.PLANT)


def herbivore(species: Any, vitality: int) -> Organism:
    return Organism(species, vitality, Diet.HERBIVORE)


def carnivore(species: Any, vitality: int) -> Organism:
    return Organism(species, vitality, Diet.CARNIVORE)


def omnivore(species: Any, vitality: int) -> Organism:
    return Organism(species, vitality, Diet.OMNIVORE)


@dataclass(frozen=True)
class EncounterResult:
    """Outcome of one encounter. Unpacks as (participant1, participant2, offspring)."""

    participant1: Organism
    participant2: Organism
    offspring: Organism | None = None

    def __iter__(self) -> Iterator[Organism | None]:
        return iter((self.participant1, self.participant2, self.offspring))


class InvalidPairingError(ValueError):
    """Raised when two plants are paired in an encounter."""

    def __init__(
        self, participant1: Organism, participant2: Organism, message: str
    ) -> None:
        self.participant1 = participant1
        self.participant2 = participant2
        super().__init__(message)
