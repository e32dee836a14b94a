"""Choice event tests"""

from trailsim.core.conditions import ItemPresence
from trailsim.core.events.choices import (
    DEFAULT_CHOICE_MESSAGE,
    available_choices,
    resolve_choice,
)
from trailsim.core.theme import EventChoice, TrailEvent


def _event() -> TrailEvent:
    return TrailEvent(
        id="breakdown",
        text="The bus breaks down",
        choices=[
            EventChoice(text="Wait it out", effects={"days": 2}),
            EventChoice(
                text="Use spare parts",
                condition=ItemPresence(item="parts"),
                effects={"fuel": -2},
                message="Fixed!",
            ),
            EventChoice(
                text="Hitchhike for help",
                risk=0.3,
                effects={"morale": 5},
                message="A trucker helps out.",
                fail_effects={"currency": -50},
                fail_message="You got scammed.",
                fail_ends_game=True,
            ),
        ],
    )


class TestAvailableChoices:
    def test_condition_hides_choice(self, state):
        texts = [c.text for c in available_choices(state, _event())]
        assert texts == ["Wait it out", "Hitchhike for help"]

    def test_condition_met(self, state):
        state.items["parts"] = 1
        assert len(available_choices(state, _event())) == 3


class TestResolveChoice:
    def test_safe_choice_never_rolls(self, scripted):
        rng = scripted([0.0])
        outcome = resolve_choice(_event().choices[0], rng)
        assert outcome.failed is False
        assert outcome.effects == {"days": 2}
        assert outcome.message == DEFAULT_CHOICE_MESSAGE
        assert rng.values == [0.0]

    def test_risky_choice_fails_under_risk(self, scripted):
        outcome = resolve_choice(_event().choices[2], scripted([0.1]))
        assert outcome.failed is True
        assert outcome.effects == {"currency": -50}
        assert outcome.message == "You got scammed."
        assert outcome.ends_game is True

    def test_risky_choice_succeeds_over_risk(self, scripted):
        outcome = resolve_choice(_event().choices[2], scripted([0.3]))
        assert outcome.failed is False
        assert outcome.effects == {"morale": 5}
        assert outcome.ends_game is False
