"""organisms - Pairwise predator, prey and mating encounters between organisms."""
from organisms.diet import can_eat, can_mate, is_plant
from organisms.encounter import eating_each_other, encounter
from organisms.series import encounter_series
from organisms.types import (
    Diet,
    EncounterResult,
    InvalidPairingError,
    Organism,
    carnivore,
    herbivore,
    omnivore,
    plant,
)

__all__ = [
    "Diet",
    "EncounterResult",
    "InvalidPairingError",
    "Organism",
    "can_eat",
    "can_mate",
    "carnivore",
    "eating_each_other",
    "encounter",
    "encounter_series",
    "herbivore",
    "is_plant",
    "omnivore",
    "plant",
]
