"""Shared test fixtures."""

import random
from typing import Callable, Iterable

import pytest

from trailsim.core.engine import TrailEngine
from trailsim.core.state import SimulationState
from trailsim.core.theme import ThemeDescriptor


class ScriptedRandom(random.Random):
    """random() returns queued values, then `default` once the queue is empty."""

    def __init__(self, values: Iterable[float] = (), default: float = 0.5):
        super().__init__(0)
        self.values = list(values)
        self.default = default

    def random(self) -> float:
        if self.values:
            return self.values.pop(0)
        return self.default

    def choice(self, seq):
        return seq[int(self.random() * len(seq))]


STANDARD_THEME = {
    "name": "Coast Trail",
    "version": "1.2",
    "resources": {
        "fuel": {"name": "Gas", "icon": "G", "start": 100, "max": 100},
        "food": {"name": "Snacks", "icon": "S", "start": 100, "max": 200},
        "morale": {"name": "Vibes", "icon": "V", "start": 80, "max": 100},
        "currency": {"name": "Cash", "icon": "$", "start": 0},
        "special_item": {"name": "Herbs", "icon": "H", "start": 10, "max": 50},
    },
    "professions": [
        {
            "id": "dealer",
            "display_name": "Dealer",
            "starting_currency": 500,
            "score_multiplier": 0.8,
            "modifiers": {
                "morale_drain_by_phase": {"early": 3, "middle": 5, "late": 7},
                "forage_bonus": 0.5,
                "antagonist_target_chance": 0.5,
            },
        },
        {
            "id": "artist",
            "display_name": "Artist",
            "starting_currency": 100,
            "score_multiplier": 1.3,
            "modifiers": {"forage_morale_change": 5},
        },
    ],
    "journey": {
        "total_distance": 2000,
        "end_location": "Eden",
        "phases": [
            {"name": "early", "start": 0, "end": 700},
            {"name": "middle", "start": 700, "end": 1400},
            {"name": "late", "start": 1400, "end": 2000},
        ],
    },
    "locations": [
        {"name": "Start", "distance": 0},
        {"name": "Creek", "distance": 100, "landmark": {"title": "Creek", "morale_boost": 10}},
        {"name": "Ridge", "distance": 300},
        {"name": "Valley", "distance": 900},
        {"name": "Eden", "distance": 2000},
    ],
    "events": {
        "pools": {
            "early": [
                {"id": "flat_tire", "text": "Flat tire!", "effects": {"fuel": -5}},
                {
                    "id": "jam",
                    "text": "Jam session",
                    "weight": 2,
                    "condition": {"kind": "item", "item": "guitar"},
                    "effects": {"morale": 10},
                },
                {
                    "id": "cop_stop",
                    "text": "Pulled over",
                    "antagonist": True,
                    "effects": {"currency": -20},
                },
            ],
            "middle": [],
            "late": [{"id": "last_stretch", "text": "Almost there", "effects": {"morale": 5}}],
        },
        "doubts": [
            {
                "name": "homesick",
                "trigger": "low_morale",
                "morale_drain": 2,
                "abandon_reason": "went home",
            },
            {"name": "spooked", "trigger": "high_special_item", "morale_drain": 3},
        ],
    },
    "shop": [
        {"id": "gas", "name": "Gas can", "cost": 40, "resource": "fuel", "amount": 30},
        {"id": "snacks", "name": "Snacks", "cost": 10, "resource": "food", "amount": 20},
        {
            "id": "guitar",
            "name": "Guitar",
            "cost": 100,
            "collectible": "guitar",
            "amount": 1,
            "effects": {"morale": 100},
        },
        {"id": "parts", "name": "Spare parts", "cost": 25, "collectible": "parts", "amount": 2},
    ],
}


MYSTERY_THEME = {
    "name": "Desert Mystery",
    "version": "0.9",
    "resources": {
        "fuel": {"name": "Fuel", "start": 100, "max": 100},
        "food": {"name": "Evidence", "start": 0, "max": 100, "accumulates": True},
        "morale": {"name": "Belief", "start": 70, "max": 100},
        "currency": {"name": "Cash", "start": 50},
        "special_item": {"name": "Paranoia", "start": 20, "max": 100, "inverted": True},
    },
    "professions": [
        {"id": "reporter", "display_name": "Reporter", "starting_currency": 200},
    ],
    "journey": {
        "total_distance": 1000,
        "end_location": "Crash Site",
        "phases": [
            {"name": "early", "start": 0, "end": 400},
            {"name": "late", "start": 400, "end": 1000},
        ],
    },
    "locations": [
        {"name": "Motel", "distance": 0},
        {"name": "Diner", "distance": 200},
        {"name": "Crash Site", "distance": 1000},
    ],
    "events": {
        "pools": {
            "early": [{"id": "lights", "text": "Lights in the sky", "effects": {"food": 5}}],
            "late": [],
        },
        "doubts": [
            {"name": "watched", "trigger": "high_special_item", "morale_drain": 4},
        ],
    },
    "mystery": {"enabled": True, "time_limit": 30, "bonus_points_per_day": 50},
}


@pytest.fixture()
def theme() -> ThemeDescriptor:
    return ThemeDescriptor.model_validate(STANDARD_THEME)


@pytest.fixture()
def mystery_theme() -> ThemeDescriptor:
    return ThemeDescriptor.model_validate(MYSTERY_THEME)


@pytest.fixture()
def state(theme: ThemeDescriptor) -> SimulationState:
    return SimulationState.from_theme(theme)


@pytest.fixture()
def scripted() -> Callable[..., ScriptedRandom]:
    """Factory: scripted(values, default=0.5)."""
    return ScriptedRandom


@pytest.fixture()
def engine(theme: ThemeDescriptor) -> TrailEngine:
    """Standard theme engine with a default-0.5 scripted RNG and a 3-member party."""
    eng = TrailEngine(theme, rng=ScriptedRandom())
    eng.initialize_party(["Ana", "Ben", "Cy"])
    return eng
