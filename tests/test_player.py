"""Tests for Player skills, rating and disciplinary status."""

import pytest

from football_league import (
    CardType,
    InvalidArgumentError,
    Player,
    Position,
    clamp_skill,
    overall_rating,
)


class TestClampSkill:
    @pytest.mark.parametrize(
        "value, expected",
        [(-5, 1), (0, 1), (1, 1), (6, 6), (10, 10), (11, 10), (99, 10)],
    )
    def test_clamps_into_range(self, value, expected):
        assert clamp_skill(value) == expected

    @pytest.mark.parametrize("value", [-3, 0, 4, 10, 42])
    def test_is_idempotent(self, value):
        assert clamp_skill(clamp_skill(value)) == clamp_skill(value)


class TestOverallRating:
    def test_average_of_three_skills(self):
        assert overall_rating(9, 8, 7) == 8

    def test_rounds_to_nearest(self):
        # 20 / 3 = 6.67 and 19 / 3 = 6.33
        assert overall_rating(7, 7, 6) == 7
        assert overall_rating(7, 6, 6) == 6

    def test_matches_skill_mean_for_all_clamped_inputs(self):
        for pace in range(1, 11):
            for shooting in range(1, 11):
                for passing in (1, 5, 10):
                    player = Player("P", Position.DEFENDER, pace, shooting, passing)
                    assert player.overall_rating == round((pace + shooting + passing) / 3)


class TestPlayerConstruction:
    def test_defaults(self, make_player):
        player = make_player()

        assert player.age == 25
        assert player.nationality == "Unknown"
        assert player.jersey_number == 0
        assert player.is_injured is False
        assert player.yellow_cards == 0
        assert player.red_cards == 0

    def test_skills_are_clamped(self):
        player = Player("Wild", Position.FORWARD, 15, -2, 10)

        assert (player.pace, player.shooting, player.passing) == (10, 1, 10)
        assert player.overall_rating == 7

    def test_position_accepts_string(self):
        player = Player("Keeper", "Goalkeeper", 5, 2, 5)
        assert player.position is Position.GOALKEEPER

    def test_position_string_is_case_insensitive(self):
        player = Player("Mid", "midfielder", 5, 5, 5)
        assert player.position is Position.MIDFIELDER

    def test_float_skill_rejected(self):
        with pytest.raises(InvalidArgumentError):
            Player("Decimal", Position.FORWARD, 7.6, 7, 7)

    def test_unknown_position_rejected(self):
        with pytest.raises(InvalidArgumentError):
            Player("Nobody", "Sweeper-Keeper-Striker", 5, 5, 5)


class TestUpdateStats:
    def test_overwrites_and_recomputes_rating(self, make_player):
        player = make_player(pace=9, shooting=8, passing=7)
        player.update_stats(3, 3, 4)

        assert (player.pace, player.shooting, player.passing) == (3, 3, 4)
        assert player.overall_rating == 3

    def test_clamps_updates(self, make_player):
        player = make_player()
        player.update_stats(0, 20, 5)

        assert (player.pace, player.shooting, player.passing) == (1, 10, 5)
        assert player.overall_rating == 5

    def test_direct_assignment_is_clamped(self, make_player):
        player = make_player()
        player.pace = 42

        assert player.pace == 10
        assert player.overall_rating == round((10 + 7 + 7) / 3)

    def test_float_update_leaves_skills_unchanged(self, make_player):
        player = make_player(pace=8, shooting=6, passing=4)

        with pytest.raises(InvalidArgumentError):
            player.update_stats(9, 5.5, 9)

        assert (player.pace, player.shooting, player.passing) == (8, 6, 4)
        assert player.snapshot().stats.overall == 6

    def test_float_assignment_rejected(self, make_player):
        player = make_player()

        with pytest.raises(InvalidArgumentError):
            player.passing = 3.2

        assert player.passing == 7


class TestInjury:
    def test_set_and_clear_injury(self, make_player):
        player = make_player(pace=8, shooting=6, passing=4)
        player.set_injury_status(True)
        assert player.is_injured is True

        player.set_injury_status(False)
        assert player.is_injured is False
        assert (player.pace, player.shooting, player.passing) == (8, 6, 4)


class TestCards:
    def test_single_yellow(self, make_player):
        player = make_player()
        player.add_card("yellow")

        assert player.yellow_cards == 1
        assert player.red_cards == 0

    def test_two_yellows_become_red(self, make_player):
        player = make_player()
        player.add_card("yellow")
        player.add_card(CardType.YELLOW)

        assert player.yellow_cards == 0
        assert player.red_cards == 1

    def test_three_yellows(self, make_player):
        player = make_player()
        for _ in range(3):
            player.add_card("yellow")

        assert player.yellow_cards == 1
        assert player.red_cards == 1

    def test_red_card(self, make_player):
        player = make_player()
        player.add_card("red")

        assert player.yellow_cards == 0
        assert player.red_cards == 1

    def test_invalid_card_rejected_without_change(self, make_player):
        player = make_player()
        player.add_card("yellow")

        with pytest.raises(InvalidArgumentError):
            player.add_card("green")

        assert player.yellow_cards == 1
        assert player.red_cards == 0


class TestPlayerSnapshot:
    def test_snapshot_contents(self):
        player = Player("Saka", Position.FORWARD, 9, 8, 8, age=23, nationality="England", jersey_number=7)
        player.add_card("yellow")
        player.set_injury_status(True)

        snapshot = player.snapshot()

        assert snapshot.name == "Saka"
        assert snapshot.position == "Forward"
        assert snapshot.age == 23
        assert snapshot.nationality == "England"
        assert snapshot.jersey_number == 7
        assert snapshot.stats.pace == 9
        assert snapshot.stats.overall == 8
        assert snapshot.status.is_injured is True
        assert snapshot.status.yellow_cards == 1
        assert snapshot.status.red_cards == 0

    def test_snapshot_is_detached(self, make_player):
        player = make_player(pace=5, shooting=5, passing=5)
        snapshot = player.snapshot()
        player.update_stats(9, 9, 9)

        assert snapshot.stats.pace == 5
        assert snapshot.stats.overall == 5

    def test_snapshot_camel_case_dump(self, make_player):
        data = make_player(jersey_number=10).snapshot().model_dump(by_alias=True)

        assert data["jerseyNumber"] == 10
        assert data["status"] == {"isInjured": False, "yellowCards": 0, "redCards": 0}
