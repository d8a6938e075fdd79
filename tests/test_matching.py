import pytest

from address_validator.core.matching import component_match_ratio, is_exact_match
from address_validator.models import AddressComponents

STANDARDIZED = AddressComponents(
    number="1600",
    street="Amphitheatre Pkwy",
    city="Mountain View",
    state="CA",
    zip_code="94043",
)


class TestIsExactMatch:
    """Test the near-duplicate heuristic."""

    def test_punctuation_and_case_are_ignored(self) -> None:
        assert is_exact_match(
            "1600 amphitheatre parkway mountain view ca 94043",
            "1600 Amphitheatre Parkway, Mountain View, CA 94043",
        )

    def test_formatted_superset_of_original(self) -> None:
        assert is_exact_match(
            "1600 Amphitheatre Parkway, Mountain View, CA 94043",
            "1600 Amphitheatre Parkway, Mountain View, CA 94043, USA",
        )

    def test_original_superset_of_formatted(self) -> None:
        assert is_exact_match("Apt 4, 10 Main St, Austin TX", "10 Main St")

    def test_abbreviation_difference_is_not_a_match(self) -> None:
        assert not is_exact_match(
            "1600 amphitheatre pkwy mountain view ca",
            "1600 Amphitheatre Parkway, Mountain View, CA 94043, USA",
        )

    @pytest.mark.parametrize(
        ("original", "formatted"),
        [("", "10 Main St"), ("10 Main St", ""), (None, "10 Main St"), ("10 Main St", None)],
    )
    def test_empty_side_is_never_a_match(self, original, formatted) -> None:
        assert not is_exact_match(original, formatted)


class TestComponentMatchRatio:
    """Test component_match_ratio."""

    def test_all_components_present(self) -> None:
        original = "1600 Amphitheatre Pkwy, Mountain View, CA 94043"
        assert component_match_ratio(original, STANDARDIZED) == 1.0

    def test_partial_presence(self) -> None:
        # zip code missing from the input
        original = "1600 amphitheatre pkwy mountain view ca"
        assert component_match_ratio(original, STANDARDIZED) == pytest.approx(0.8)

    def test_only_non_empty_components_count(self) -> None:
        standardized = AddressComponents(city="Austin", state="TX")
        assert component_match_ratio("somewhere in austin", standardized) == 0.5

    def test_accepts_mapping(self) -> None:
        standardized = {"number": "10", "street": "Main St", "zipCode": "78749"}
        assert component_match_ratio("10 main st", standardized) == pytest.approx(2 / 3)

    def test_mapping_with_python_zip_key(self) -> None:
        assert component_match_ratio("78749", {"zip_code": "78749"}) == 1.0

    @pytest.mark.parametrize("standardized", [{}, AddressComponents()])
    def test_no_components_is_zero(self, standardized) -> None:
        assert component_match_ratio("1600 Amphitheatre Pkwy", standardized) == 0

    def test_missing_original(self) -> None:
        assert component_match_ratio(None, STANDARDIZED) == 0
