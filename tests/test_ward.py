"""Tests for stake-wide versus ward classification."""

import pytest

from bulletin.processing.ward import (
    DIGEST_WARD_TOKENS,
    WARD_CODES,
    Destination,
    WardClassifier,
    normalize_ward_code,
)


@pytest.mark.parametrize(
    "description",
    [
        "Stake Choir Practice",
        "BP Ward Stake Conference Prep",
        "CY Seminary Graduation",
        "Cypress Ward Conference",
        "Garden Grove 11th Branch Conference",
        "Family History Marathon - La Palma building",
        "stake youth dance",
    ],
)
def test_exclusion_vocabulary_is_stake_wide(description):
    classifier = WardClassifier()
    assert classifier.is_ward_event(description) is False
    assert classifier.route(description) is Destination.STAKE


@pytest.mark.parametrize(
    "description",
    [
        "BP Youth Night",
        "Buena Park Ward Christmas Party",
        "Cypress Park Ward Breakfast",
        "La Palma Trunk or Treat",
        "Crescent Ward Primary Program",
        "V. V. Ward Campout",
        "Valley View Ward Dinner",
        "West Grove Ward Social",
        "Korean Branch Activity",
        "GG Youth Activity",
    ],
)
def test_ward_tokens_mark_ward_events(description):
    classifier = WardClassifier()
    assert classifier.is_ward_event(description) is True
    assert classifier.route(description) is Destination.WARD


def test_ward_tokens_are_case_sensitive():
    classifier = WardClassifier()
    assert classifier.is_ward_event("bp youth night") is False


def test_short_codes_match_inside_words():
    """Two-letter codes also match inside other words."""
    assert WardClassifier().is_ward_event("CYCLE Tour") is True


def test_stake_takes_precedence_in_any_order():
    classifier = WardClassifier()
    for description in ["Stake BP Dance", "BP Stake Dance", "BP Dance (stake)"]:
        assert classifier.is_ward_event(description) is False
        assert classifier.route(description) is Destination.STAKE


def test_plain_event_is_stake_wide():
    assert WardClassifier().route("Temple Day") is Destination.STAKE


def test_selected_ward_keeps_own_events():
    classifier = WardClassifier("bp")
    assert classifier.ward_code == "BP"
    assert classifier.route("BP Youth Night") is Destination.WARD
    assert classifier.route("Buena Park Ward Christmas Party") is Destination.WARD


def test_selected_ward_drops_other_wards():
    classifier = WardClassifier("BP")
    assert classifier.route("CY Youth Night") is Destination.DROP
    # Stake-wide events are unaffected by the ward filter
    assert classifier.route("Stake Choir Practice") is Destination.STAKE


def test_korean_belongs_to_garden_grove():
    assert WardClassifier("GG").route("Korean Branch Activity") is Destination.WARD
    assert WardClassifier("BP").route("Korean Branch Activity") is Destination.DROP


def test_selected_ward_requires_long_name():
    """"Cypress" alone is a ward event but not specifically the Cypress Ward."""
    classifier = WardClassifier("CY")
    assert classifier.route("Cypress Ward Dinner") is Destination.WARD
    assert classifier.route("Cyp Primary Activity") is Destination.DROP


def test_normalize_ward_code():
    assert normalize_ward_code(" vv ") == "VV"
    assert set(WARD_CODES) == {"BP", "CY", "LP", "CR", "VV", "CP", "WG", "GG"}
    with pytest.raises(ValueError, match="Invalid ward code"):
        normalize_ward_code("XX")


def test_cp_is_not_a_bulletin_ward_token():
    """CP only selects a ward; it does not mark events as ward events."""
    classifier = WardClassifier()
    assert classifier.route("CPR Certification") is Destination.STAKE
    assert classifier.route("Cypress Park Ward Breakfast") is Destination.WARD


def test_selected_cp_ward_keeps_cypress_park_events():
    classifier = WardClassifier("CP")
    assert classifier.route("Cypress Park Ward Breakfast") is Destination.WARD
    assert classifier.route("Cypress Ward Breakfast") is Destination.DROP


@pytest.mark.parametrize(
    "description",
    [
        "La Palma Community Fair",
        "Buena Park Library Story Time",
        "Garden Grove Strawberry Festival",
        "Valley View High Graduation",
    ],
)
def test_digest_tokens_need_full_unit_names(description):
    assert WardClassifier().is_ward_event(description) is True
    assert WardClassifier(ward_tokens=DIGEST_WARD_TOKENS).is_ward_event(description) is False


@pytest.mark.parametrize(
    "description",
    [
        "La Palma Ward Christmas Party",
        "Garden Grove 11th Branch Social",
        "CP Youth Night",
        "BP Youth Night",
    ],
)
def test_digest_tokens_mark_ward_events(description):
    assert WardClassifier(ward_tokens=DIGEST_WARD_TOKENS).is_ward_event(description) is True
