"""Tests for organisms.series.encounter_series."""
from __future__ import annotations

from organisms import EncounterResult, carnivore, encounter_series, herbivore, omnivore, plant


class TestEncounterSeries:
    def test_no_opponents_returns_equal_copy(self) -> None:
        wolf = carnivore("wolf", 5)
        assert encounter_series(wolf, []) == wolf

    def test_accumulates_through_opponents(self) -> None:
        deer = herbivore("deer", 2)
        final = encounter_series(deer, [plant("grass", 3), plant("clover", 4)])
        assert final.vitality == 9
        assert final.species == "deer"

    def test_order_sensitivity(self) -> None:
        boar = omnivore("boar", 5)
        grass = plant("grass", 4)
        lynx = carnivore("lynx", 7)

        # Grass first makes the boar strong enough to eat the lynx.
        assert encounter_series(boar, [grass, lynx]).vitality == 12
        # Lynx first kills the boar, which then cannot eat the grass.
        assert encounter_series(boar, [lynx, grass]).vitality == 0

    def test_order_sensitivity_without_death(self) -> None:
        boar = omnivore("boar", 5)
        grass = plant("grass", 4)
        deer = herbivore("deer", 6)
        assert encounter_series(boar, [grass, deer]).vitality == 12
        assert encounter_series(boar, [deer, grass]).vitality == 9

    def test_dead_organism_stays_dead(self) -> None:
        final = encounter_series(herbivore("deer", 0), [plant("grass", 10)])
        assert final.vitality == 0

    def test_offspring_are_discarded(self) -> None:
        deer = herbivore("deer", 4)
        final = encounter_series(deer, [herbivore("deer", 6)])
        assert final == deer

    def test_accepts_any_iterable(self) -> None:
        opponents = (plant("grass", n) for n in (1, 2, 3))
        assert encounter_series(herbivore("deer", 1), opponents).vitality == 7

    def test_on_encounter_sees_each_result(self) -> None:
        seen: list[EncounterResult] = []
        deer = herbivore("deer", 4)
        encounter_series(
            deer,
            [herbivore("deer", 6), plant("grass", 2)],
            on_encounter=seen.append,
        )
        assert len(seen) == 2
        assert seen[0].offspring is not None
        assert seen[0].offspring.vitality == 5
        assert seen[1].participant1.vitality == 6
        assert seen[1].participant2.vitality == 0
