"""Party morale / doubt / abandonment tests"""

import pytest

from trailsim.core.enums import DoubtTrigger
from trailsim.core.party.morale import (
    DEFAULT_ABANDON_REASON,
    PARANOIA_ABANDON_REASON,
    abandonment_reason,
    doubt_candidates,
    morale_abandon_chance,
    paranoia_abandon_chance,
    target_doubters,
    update_party,
)
from trailsim.core.party.roster import build_party
from trailsim.core.state import SimulationState
from trailsim.core.theme import DoubtSpec, ThemeDescriptor

HOMESICK = DoubtSpec(name="homesick", trigger=DoubtTrigger.LOW_MORALE, morale_drain=2)
SPOOKED = DoubtSpec(name="spooked", trigger=DoubtTrigger.HIGH_SPECIAL_ITEM, morale_drain=3)


@pytest.fixture()
def party_state(state):
    state.party = build_party(["Ana", "Ben", "Cy"])
    return state


# ── curves ──────────────────────────────────────────────


class TestTargetDoubters:
    @pytest.mark.parametrize(
        "morale, expected",
        [(100, 0), (80, 0), (75, 0), (74, 1), (50, 1), (49, 2), (30, 2), (29, 3), (0, 3)],
    )
    def test_step_function(self, morale, expected):
        assert target_doubters(morale) == expected


class TestMoraleAbandonChance:
    @pytest.mark.parametrize(
        "morale, expected",
        [
            (-5, 1.0),
            (0, 1.0),
            (15, 0.55),
            (30, 0.10),
            (40, 0.075),
            (50, 0.05),
            (60, 0.03),
            (75, 0.0),
            (90, 0.0),
        ],
    )
    def test_curve(self, morale, expected):
        assert morale_abandon_chance(morale) == pytest.approx(expected)


class TestParanoiaAbandonChance:
    @pytest.mark.parametrize(
        "paranoia, expected",
        [
            (120, 1.0),
            (100, 1.0),
            (92.5, 0.6),
            (85, 0.2),
            (77.5, 0.125),
            (70, 0.05),
            (69, 0.0),
            (0, 0.0),
        ],
    )
    def test_curve(self, paranoia, expected):
        assert paranoia_abandon_chance(paranoia) == pytest.approx(expected)


# ── doubt selection ─────────────────────────────────────


class TestDoubtCandidates:
    def test_high_special_item_only(self, scripted):
        assert doubt_candidates([HOMESICK, SPOOKED], 60, 80, scripted()) == [SPOOKED]

    def test_low_morale_only(self, scripted):
        assert doubt_candidates([HOMESICK, SPOOKED], 10, 40, scripted()) == [HOMESICK]

    def test_both_coin_flip(self, scripted):
        assert doubt_candidates([HOMESICK, SPOOKED], 60, 40, scripted([0.2])) == [SPOOKED]
        assert doubt_candidates([HOMESICK, SPOOKED], 60, 40, scripted([0.7])) == [HOMESICK]

    def test_neither_defaults_to_low_morale(self, scripted):
        assert doubt_candidates([HOMESICK, SPOOKED], 10, 60, scripted()) == [HOMESICK]

    def test_empty_filter_falls_back_to_catalog(self, scripted):
        assert doubt_candidates([HOMESICK], 60, 80, scripted()) == [HOMESICK]


class TestAbandonmentReason:
    def test_paranoia_dominant(self):
        assert abandonment_reason(HOMESICK, 0.05, 0.6) == PARANOIA_ABANDON_REASON

    def test_paranoia_trivial_uses_doubt(self):
        doubt = DoubtSpec(name="x", trigger=DoubtTrigger.LOW_MORALE, abandon_reason="left")
        assert abandonment_reason(doubt, 0.01, 0.07) == "left"

    def test_default_reason(self):
        assert abandonment_reason(None, 0.5, 0.0) == DEFAULT_ABANDON_REASON


# ── update_party ────────────────────────────────────────


class TestUpdateParty:
    def test_high_morale_clears_doubters(self, party_state, theme, scripted):
        party_state.resources["morale"] = 80
        party_state.resources["special_item"] = 20
        party_state.party[1].doubting = True
        party_state.party[1].doubt = "homesick"

        assert target_doubters(80) == 0
        assert update_party(party_state, theme, scripted()) == []
        assert party_state.doubting_members() == []
        assert party_state.party[1].doubt is None
        assert party_state.resources["morale"] == 80

    def test_exactly_75_keeps_doubters(self, party_state, theme, scripted):
        party_state.resources["morale"] = 75
        party_state.party[0].doubting = True
        party_state.party[0].doubt = "homesick"
        update_party(party_state, theme, scripted())
        assert party_state.party[0].doubting is True

    def test_promotes_in_roster_order(self, party_state, theme, scripted):
        party_state.resources["morale"] = 60
        abandoned = update_party(party_state, theme, scripted())

        assert abandoned == []
        ana, ben, cy = party_state.party
        assert ana.doubting is True
        assert ana.doubt == "homesick"
        assert not ben.doubting and not cy.doubting
        # homesick drains 2
        assert party_state.resources["morale"] == 58

    def test_tops_up_to_target(self, party_state, theme, scripted):
        party_state.resources["morale"] = 40
        party_state.party[0].doubting = True
        party_state.party[0].doubt = "homesick"
        update_party(party_state, theme, scripted(default=0.9))
        assert [m.name for m in party_state.doubting_members()] == ["Ana", "Ben"]

    def test_cumulative_drain_and_abandonment(self, party_state, theme, scripted):
        party_state.resources["morale"] = 20
        # three doubt draws, then one abandonment roll per doubter (chance 0.4)
        rng = scripted([0.0, 0.0, 0.0, 0.9, 0.39, 0.5])
        abandoned = update_party(party_state, theme, rng)

        assert party_state.resources["morale"] == 14
        assert [r.name for r in abandoned] == ["Ben"]
        assert abandoned[0].reason == "went home"
        ben = party_state.party[1]
        assert ben.abandoned is True
        assert ben.doubting is False
        assert ben.abandon_reason == "went home"

    def test_abandoned_members_stay_gone(self, party_state, theme, scripted):
        party_state.party[0].abandoned = True
        party_state.party[0].abandon_reason = "left earlier"
        party_state.resources["morale"] = 20
        update_party(party_state, theme, scripted(default=0.99))

        ana = party_state.party[0]
        assert ana.abandoned is True
        assert ana.doubting is False
        assert ana.abandon_reason == "left earlier"
        assert [m.name for m in party_state.doubting_members()] == ["Ben", "Cy"]

    def test_paranoia_specific_reason(self, mystery_theme, scripted):
        state = SimulationState.from_theme(mystery_theme)
        state.party = build_party(["Dana"])
        state.resources["morale"] = 70
        state.resources["special_item"] = 95

        abandoned = update_party(state, mystery_theme, scripted([0.0, 0.5]))

        assert abandoned[0].reason == PARANOIA_ABANDON_REASON
        assert state.party[0].doubt == "watched"
        assert state.resources["morale"] == 66

    def test_mild_paranoia_uses_default_reason(self, mystery_theme, scripted):
        state = SimulationState.from_theme(mystery_theme)
        state.party = build_party(["Dana"])
        state.resources["morale"] = 70
        state.resources["special_item"] = 72

        abandoned = update_party(state, mystery_theme, scripted([0.0, 0.0]))

        assert abandoned[0].reason == DEFAULT_ABANDON_REASON

    def test_empty_doubt_catalog(self, theme, scripted):
        data = theme.model_dump()
        data["events"]["doubts"] = []
        bare = ThemeDescriptor.model_validate(data)
        state = SimulationState.from_theme(bare)
        state.party = build_party(["Ana"])
        state.resources["morale"] = 60

        update_party(state, bare, scripted(default=0.9))

        assert state.party[0].doubting is True
        assert state.party[0].doubt is None
        assert state.resources["morale"] == 60
