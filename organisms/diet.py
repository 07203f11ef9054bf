"""Diet classification predicates."""
from __future__ import annotations

from organisms.types import Diet, Organism


def is_plant(organism: Organism) -> bool:
    return organism.diet is Diet.PLANT


def can_eat(organism: Organism, other: Organism) -> bool:
    """Check if *organism* is able to eat *other*. Not symmetric."""
    if is_plant(other):
        return organism.can_eat_plants
    return organism.can_eat_meat


def can_mate(organism1: Organism, organism2: Organism) -> bool:
    """Same species and same diet."""
    return (
        organism1.species == organism2.species
        and organism1.diet is organism2.diet
    )
