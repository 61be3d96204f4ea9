from navietta.domain.models import LocationInvalid, LocationValid
from navietta.geo.fallback import FALLBACK_LOCATIONS, example_locations, lookup_fallback


def test_exact_match_is_case_insensitive():
    result = lookup_fallback("  MELBOURNE ")
    assert isinstance(result, LocationValid)
    assert result.location.full_name == "Melbourne, Australia"
    assert result.location.latitude == -37.8136
    assert result.location.longitude == 144.9631
    assert result.suggestions == ()


def test_input_containing_a_key_matches():
    result = lookup_fallback("Greater London area")
    assert isinstance(result, LocationValid)
    assert result.location.name == "London"


def test_key_containing_input_matches():
    result = lookup_fallback("hong")
    assert isinstance(result, LocationValid)
    assert result.location.name == "Hong Kong"


def test_first_partial_match_wins_and_others_are_suggested():
    result = lookup_fallback("london to paris")
    assert isinstance(result, LocationValid)
    assert result.location.name == "London"
    assert result.suggestions == ("Paris, France",)


def test_unknown_place_returns_guidance():
    result = lookup_fallback("Zzqxw123")
    assert isinstance(result, LocationInvalid)
    assert result.error == (
        'I cannot locate "Zzqxw123". Please verify the spelling or provide more details.'
    )
    assert result.suggestions == (
        "London, United Kingdom",
        "Paris, France",
        "New York, United States",
    )


def test_empty_input_does_not_match_every_entry():
    assert isinstance(lookup_fallback(""), LocationInvalid)


def test_table_contents():
    assert set(FALLBACK_LOCATIONS) == {
        "london",
        "paris",
        "new york",
        "tokyo",
        "sydney",
        "melbourne",
        "hong kong",
    }
    assert len(example_locations()) == 3
