"""Pairwise encounter resolution.

Rules are tried in order and the first match wins:

1. Either organism is dead: nothing happens.
2. Same species and diet: they mate and produce one offspring.
3. Otherwise they try to eat each other (see ``eating_each_other``).
"""
from __future__ import annotations

from organisms.diet import can_eat, can_mate, is_plant
from organisms.types import EncounterResult, InvalidPairingError, Organism


def encounter(organism1: Organism, organism2: Organism) -> EncounterResult:
    """Resolve one encounter between two organisms.

    Raises:
        InvalidPairingError: If both organisms are plants.
    """
    if is_plant(organism1) and is_plant(organism2):
        raise InvalidPairingError(
            organism1, organism2, "two plants cannot meet in an encounter"
        )

    if organism1.dead or organism2.dead:
        return EncounterResult(organism1.after(), organism2.after())

    if can_mate(organism1, organism2):
        child = organism1.after((organism1.vitality + organism2.vitality) // 2)
        return EncounterResult(organism1.after(), organism2.after(), child)

    after1, after2 = eating_each_other(organism1, organism2)
    return EncounterResult(after1, after2)


def _is_eater_of(organism: Organism, other: Organism, capable: bool) -> bool:
    # Any non-plant eats a plant; otherwise the diet has to allow it.
    return capable or (is_plant(other) and not is_plant(organism))


def eating_each_other(
    organism1: Organism, organism2: Organism
) -> tuple[Organism, Organism]:
    """Resolve predation between two living organisms.

    organism1 attempts first. A plant is always eaten whole; an animal is
    only eaten by a strictly stronger eater, which gains half its vitality.
    Two capable eaters of equal strength kill each other.
    """
    can1eat2 = can_eat(organism1, organism2)
    can2eat1 = can_eat(organism2, organism1)
    v1 = organism1.vitality
    v2 = organism2.vitality

    if _is_eater_of(organism1, organism2, can1eat2):
        if is_plant(organism2):
            return organism1.after(v1 + v2), organism2.after(0)
        if v1 > v2:
            return organism1.after(v1 + v2 // 2), organism2.after(0)

    if _is_eater_of(organism2, organism1, can2eat1):
        if is_plant(organism1):
            return organism1.after(0), organism2.after(v1 + v2)
        if v2 > v1:
            return organism1.after(0), organism2.after(v1 // 2 + v2)

    if can1eat2 and can2eat1:
        return organism1.after(0), organism2.after(0)

    return organism1.after(), organism2.after()
