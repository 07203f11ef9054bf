"""Sequential encounter runner."""
from __future__ import annotations

from typing import Callable, Iterable

from organisms.encounter import encounter
from organisms.types import EncounterResult, Organism


def encounter_series(
    organism: Organism,
    opponents: Iterable[Organism],
    on_encounter: Callable[[EncounterResult], None] | None = None,
) -> Organism:
    """Send *organism* through *opponents* in order and return its final state.

    Only the focal organism is carried forward; opponents' post-states and
    offspring are dropped. ``on_encounter(result)`` fires after each
    encounter if the caller needs them.
    """
    current = organism.after()
    for opponent in opponents:
        result = encounter(current, opponent)
        if on_encounter is not None:
            on_encounter(result)
        current = result.participant1
    return current
