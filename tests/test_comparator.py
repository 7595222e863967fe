"""Tests for guess scoring.

Tests cover:
- Numeric attributes (exact, direction)
- Club and nationality partial matches
- Attribute ordering
- Win rules
- Invalid guesses
"""

import pytest

from footle.services.comparator import (
    AGE,
    ATTRIBUTE_ORDER,
    CLUB,
    FORM_LONG,
    FORM_SHORT,
    NATIONALITY,
    POSITION,
    SHIRT_NUMBER,
    Direction,
    MatchLevel,
    WinRule,
    all_attributes_exact,
    compare,
    compare_club,
    compare_nationality,
    compare_numeric,
)
from footle.services.sorare_client import Position
from tests.conftest import make_player


def by_attribute(verdict):
    return {a.attribute: a for a in verdict.attributes}


class TestCompareNumeric:
    """Tests for compare_numeric function."""

    def test_equal_is_exact(self):
        verdict = compare_numeric(AGE, 25, 25)

        assert verdict.match == MatchLevel.EXACT
        assert verdict.direction == Direction.NOT_APPLICABLE
        assert verdict.display_value == "25"

    def test_guess_higher(self):
        verdict = compare_numeric(AGE, 25, 36)

        assert verdict.match == MatchLevel.NONE
        assert verdict.direction == Direction.GUESS_HIGHER
        assert verdict.display_value == "36"

    def test_guess_lower(self):
        verdict = compare_numeric(SHIRT_NUMBER, 10, 7)

        assert verdict.match == MatchLevel.NONE
        assert verdict.direction == Direction.GUESS_LOWER


class TestCompareClub:
    """Tests for compare_club function."""

    def test_same_club(self):
        verdict = compare_club(make_player(), make_player("other"))

        assert verdict.match == MatchLevel.EXACT
        assert verdict.display_value == "https://assets.sorare.com/club/club-a.png"

    def test_same_league_is_partial(self):
        guess = make_player("other", club_slug="club-b", club_picture_url="b.png")

        assert compare_club(make_player(), guess).match == MatchLevel.PARTIAL

    def test_other_league(self):
        guess = make_player("other", club_slug="club-b", club_league_slug="laliga-es")

        assert compare_club(make_player(), guess).match == MatchLevel.NONE

    def test_two_free_agents_are_exact(self):
        secret = make_player(club_slug="", club_league_slug="", club_picture_url="")
        guess = make_player("other", club_slug="", club_league_slug="", club_picture_url="")

        assert compare_club(secret, guess).match == MatchLevel.EXACT

    def test_missing_league_is_never_partial(self):
        """Two clubs without a domestic league don't share one."""
        secret = make_player(club_slug="club-a", club_league_slug="")
        guess = make_player("other", club_slug="club-b", club_league_slug="")

        assert compare_club(secret, guess).match == MatchLevel.NONE


class TestCompareNationality:
    """Tests for compare_nationality function."""

    def test_same_country(self):
        verdict = compare_nationality(make_player(), make_player("other"))

        assert verdict.match == MatchLevel.EXACT
        assert verdict.display_value == "https://assets.sorare.com/flag/FR.png"

    @pytest.mark.parametrize(
        "secret_code,guess_code,expected",
        [
            ("FR", "ES", MatchLevel.PARTIAL),
            ("FR", "GB-ENG", MatchLevel.PARTIAL),
            ("AR", "BR", MatchLevel.PARTIAL),
            ("SN", "CI", MatchLevel.PARTIAL),
            ("JP", "TR", MatchLevel.PARTIAL),
            ("FR", "AR", MatchLevel.NONE),
            ("US", "MX", MatchLevel.PARTIAL),
            ("AU", "FR", MatchLevel.NONE),
        ],
    )
    def test_continents(self, secret_code, guess_code, expected):
        secret = make_player(nationality_code=secret_code)
        guess = make_player("other", nationality_code=guess_code)

        assert compare_nationality(secret, guess).match == expected

    def test_unmapped_codes_share_a_bucket(self):
        """Two unknown codes land in the same fallback continent."""
        secret = make_player(nationality_code="XK")
        guess = make_player("other", nationality_code="ZZ")

        assert compare_nationality(secret, guess).match == MatchLevel.PARTIAL

    def test_unmapped_vs_mapped(self):
        secret = make_player(nationality_code="FR")
        guess = make_player("other", nationality_code="ZZ")

        assert compare_nationality(secret, guess).match == MatchLevel.NONE


class TestCompare:
    """Tests for compare function."""

    def test_identity_is_all_exact_and_a_win(self):
        player = make_player()

        verdict = compare(player, player, attempts=3)

        assert verdict.is_win
        assert verdict.secret_name == player.display_name
        assert all(a.match == MatchLevel.EXACT for a in verdict.attributes)
        assert all(a.direction == Direction.NOT_APPLICABLE for a in verdict.attributes)
        assert all_attributes_exact(verdict)

    def test_attribute_order(self):
        verdict = compare(make_player(), make_player("other"), attempts=1)

        assert tuple(a.attribute for a in verdict.attributes) == ATTRIBUTE_ORDER
        assert ATTRIBUTE_ORDER == (
            AGE, CLUB, NATIONALITY, SHIRT_NUMBER, POSITION, FORM_SHORT, FORM_LONG
        )

    def test_mixed_guess(self):
        """Older, same league, same continent, lower shirt, other position, better form."""
        secret = make_player()
        guess = make_player(
            "guess",
            age=30,
            club_slug="club-b",
            club_picture_url="club-b.png",
            nationality_code="ES",
            flag_url="es.png",
            shirt_number=9,
            position=Position.MID,
            form_short=80,
            form_long=65,
        )

        verdict = compare(secret, guess, attempts=2)
        cells = by_attribute(verdict)

        assert not verdict.is_win
        assert verdict.secret_name == ""
        assert verdict.guess_slug == "guess"
        assert cells[AGE].match == MatchLevel.NONE
        assert cells[AGE].direction == Direction.GUESS_HIGHER
        assert cells[CLUB].match == MatchLevel.PARTIAL
        assert cells[CLUB].display_value == "club-b.png"
        assert cells[NATIONALITY].match == MatchLevel.PARTIAL
        assert cells[NATIONALITY].display_value == "es.png"
        assert cells[SHIRT_NUMBER].direction == Direction.GUESS_LOWER
        assert cells[POSITION].match == MatchLevel.NONE
        assert cells[POSITION].display_value == "MID"
        assert cells[FORM_SHORT].direction == Direction.GUESS_HIGHER
        assert cells[FORM_LONG].match == MatchLevel.EXACT

    def test_unresolved_guess_is_invalid(self):
        verdict = compare(make_player(), None, attempts=4)

        assert verdict.invalid
        assert verdict.attributes == []
        assert not verdict.is_win
        assert verdict.attempts == 4

    def test_attempts_do_not_change_tiers(self):
        secret = make_player()
        guess = make_player("other", age=21)

        first = compare(secret, guess, attempts=1)
        later = compare(secret, guess, attempts=9)

        assert first.attributes == later.attributes

    def test_lookalike_does_not_win_by_identifier(self):
        """Same attributes, different player: all green but no win by default."""
        secret = make_player()
        twin = make_player("twin")

        verdict = compare(secret, twin, attempts=1)

        assert all_attributes_exact(verdict)
        assert not verdict.is_win

    def test_lookalike_wins_with_all_exact_rule(self):
        secret = make_player()
        twin = make_player("twin")

        verdict = compare(secret, twin, attempts=1, win_rule=WinRule.ALL_EXACT)

        assert verdict.is_win
        assert verdict.secret_name == secret.display_name

    def test_all_exact_rule_needs_every_attribute(self):
        secret = make_player()
        almost = make_player("almost", form_long=64)

        verdict = compare(secret, almost, attempts=1, win_rule=WinRule.ALL_EXACT)

        assert not verdict.is_win
