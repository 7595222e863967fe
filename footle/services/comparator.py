"""Guess scoring - compares a guessed player against the daily secret.

These functions are stateless and have no network or database dependencies,
making them easy to test in isolation.

Attributes are always evaluated in the same order:
    age, club, nationality, shirt number, position, form (L5), form (L15)

Tiers:
- EXACT: same value
- PARTIAL: club in the same league, or nationality on the same continent
- NONE: anything else; numeric attributes also say whether the guess is
  higher or lower than the secret
"""

from dataclasses import dataclass, field
from enum import Enum

from footle.services.continents import continent_of
from footle.services.sorare_client import SubjectAttributes

# =============================================================================
# Enums
# =============================================================================


class MatchLevel(str, Enum):
    EXACT = "exact"
    PARTIAL = "partial"
    NONE = "none"


class Direction(str, Enum):
    GUESS_HIGHER = "guess_higher"
    GUESS_LOWER = "guess_lower"
    NOT_APPLICABLE = "not_applicable"


class WinRule(str, Enum):
    """How a guess wins the day."""

    IDENTIFIER = "identifier"  # the guessed player is the secret
    ALL_EXACT = "all_exact"  # every attribute matches


# =============================================================================
# Result types
# =============================================================================

# Attribute names, in display order
AGE = "age"
CLUB = "club"
NATIONALITY = "nationality"
SHIRT_NUMBER = "shirt_number"
POSITION = "position"
FORM_SHORT = "form_short"
FORM_LONG = "form_long"

ATTRIBUTE_ORDER = (AGE, CLUB, NATIONALITY, SHIRT_NUMBER, POSITION, FORM_SHORT, FORM_LONG)
NUMERIC_ATTRIBUTES = frozenset({AGE, SHIRT_NUMBER, FORM_SHORT, FORM_LONG})


@dataclass(slots=True, frozen=True)
class AttributeVerdict:
    """Result of comparing one attribute."""

    attribute: str
    display_value: str  # the guess's value (text or image URL)
    match: MatchLevel
    direction: Direction = Direction.NOT_APPLICABLE


@dataclass(slots=True)
class ComparisonVerdict:
    """Full result of one guess attempt."""

    attempts: int
    invalid: bool = False

    # Header: who was guessed
    guess_slug: str = ""
    guess_name: str = ""
    guess_picture_url: str = ""

    attributes: list[AttributeVerdict] = field(default_factory=list)

    is_win: bool = False
    secret_name: str = ""  # only filled in on a win, for the banner


# =============================================================================
# Pure Functions
# =============================================================================


def compare_numeric(attribute: str, secret: int, guess: int) -> AttributeVerdict:
    """Exact on equality, otherwise NONE with the direction of the guess."""
    if guess == secret:
        return AttributeVerdict(attribute, str(guess), MatchLevel.EXACT)
    direction = Direction.GUESS_HIGHER if guess > secret else Direction.GUESS_LOWER
    return AttributeVerdict(attribute, str(guess), MatchLevel.NONE, direction)


def compare_club(secret: SubjectAttributes, guess: SubjectAttributes) -> AttributeVerdict:
    """Same club is exact; a different club in the same domestic league is partial."""
    if guess.club_slug == secret.club_slug:
        match = MatchLevel.EXACT
    elif guess.club_league_slug and guess.club_league_slug == secret.club_league_slug:
        match = MatchLevel.PARTIAL
    else:
        match = MatchLevel.NONE
    return AttributeVerdict(CLUB, guess.club_picture_url, match)


def compare_nationality(
    secret: SubjectAttributes, guess: SubjectAttributes
) -> AttributeVerdict:
    """Same country is exact; same continent bucket is partial."""
    if guess.nationality_code == secret.nationality_code:
        match = MatchLevel.EXACT
    elif continent_of(guess.nationality_code) == continent_of(secret.nationality_code):
        match = MatchLevel.PARTIAL
    else:
        match = MatchLevel.NONE
    return AttributeVerdict(NATIONALITY, guess.flag_url, match)


def compare_position(
    secret: SubjectAttributes, guess: SubjectAttributes
) -> AttributeVerdict:
    match = MatchLevel.EXACT if guess.position == secret.position else MatchLevel.NONE
    return AttributeVerdict(POSITION, guess.position.value, match)


def compare_attributes(
    secret: SubjectAttributes, guess: SubjectAttributes
) -> list[AttributeVerdict]:
    """Per-attribute verdicts in display order."""
    return [
        compare_numeric(AGE, secret.age, guess.age),
        compare_club(secret, guess),
        compare_nationality(secret, guess),
        compare_numeric(SHIRT_NUMBER, secret.shirt_number, guess.shirt_number),
        compare_position(secret, guess),
        compare_numeric(FORM_SHORT, secret.form_short, guess.form_short),
        compare_numeric(FORM_LONG, secret.form_long, guess.form_long),
    ]


def all_attributes_exact(verdict: ComparisonVerdict) -> bool:
    """True when every compared attribute is an exact match."""
    return bool(verdict.attributes) and all(
        a.match == MatchLevel.EXACT for a in verdict.attributes
    )


def compare(
    secret: SubjectAttributes,
    guess: SubjectAttributes | None,
    attempts: int,
    win_rule: WinRule = WinRule.IDENTIFIER,
) -> ComparisonVerdict:
    """Score a guess against the secret.

    Args:
        secret: Today's secret player
        guess: The guessed player, or None if it could not be resolved
        attempts: Number of tries so far (echoed in the win banner only)
        win_rule: Whether a win needs the exact player or just all-green tiles

    Returns:
        ComparisonVerdict; invalid=True with no attributes when guess is None
    """
    if guess is None:
        return ComparisonVerdict(attempts=attempts, invalid=True)

    verdict = ComparisonVerdict(
        attempts=attempts,
        guess_slug=guess.slug,
        guess_name=guess.display_name,
        guess_picture_url=guess.picture_url,
        attributes=compare_attributes(secret, guess),
    )

    if win_rule == WinRule.ALL_EXACT:
        verdict.is_win = all_attributes_exact(verdict)
    else:
        verdict.is_win = guess.slug == secret.slug

    if verdict.is_win:
        verdict.secret_name = secret.display_name
    return verdict
