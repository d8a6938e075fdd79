import pytest

from address_validator import AddressValidationService, ValidationStatus
from address_validator.models import AddressValidatorError, GeocodeOutcome, GeocodeStatus
from address_validator.service import get_default_service, validate
from tests.fakes import (
    GOOGLEPLEX,
    BrokenExtractionProvider,
    DuckTypedProvider,
    NamelessProvider,
    StubProvider,
    raw_result,
)


class TestValidate:
    """End-to-end behavior of AddressValidationService.validate."""

    def test_perfect_match_is_valid(self, googleplex_service: AddressValidationService) -> None:
        result = googleplex_service.validate("1600 Amphitheatre Parkway, Mountain View, CA 94043")

        assert result.status == ValidationStatus.VALID
        assert result.standardized.number == "1600"
        assert result.standardized.street == "Amphitheatre Pkwy"
        assert result.standardized.city == "Mountain View"
        assert result.standardized.state == "CA"
        assert result.standardized.zip_code == "94043"
        assert result.confidence == 1.0
        assert result.provider == "stub-geocoder"
        assert result.reason is None

    def test_loose_input_is_corrected(self, googleplex_service: AddressValidationService) -> None:
        result = googleplex_service.validate("1600 amphitheatre pkwy mountain view ca")

        assert result.status == ValidationStatus.CORRECTED
        assert result.standardized.street == "Amphitheatre Pkwy"
        assert result.confidence > 0.7
        assert result.confidence == 0.88
        assert result.original == "1600 amphitheatre pkwy mountain view ca"
        assert result.reason is None

    def test_provider_receives_trimmed_input(
        self, googleplex_service: AddressValidationService, googleplex_provider: StubProvider
    ) -> None:
        result = googleplex_service.validate("   1600 amphitheatre pkwy mountain view ca  ")

        assert googleplex_provider.calls == ["1600 amphitheatre pkwy mountain view ca"]
        assert result.original == "1600 amphitheatre pkwy mountain view ca"

    def test_multiple_results_are_unverifiable(self) -> None:
        provider = StubProvider([raw_result(formatted="Address 1"), raw_result(formatted="Address 2")])

        result = AddressValidationService(provider).validate("ambiguous address")

        assert result.status == ValidationStatus.UNVERIFIABLE
        assert result.reason == "Multiple matches found"
        assert result.confidence == 0
        assert result.standardized.to_dict() == {
            "number": "",
            "street": "",
            "city": "",
            "state": "",
            "zipCode": "",
        }

    def test_zero_results_status(self) -> None:
        provider = StubProvider([], status=GeocodeStatus.ZERO_RESULTS)

        result = AddressValidationService(provider).validate("invalid address 99999")

        assert result.status == ValidationStatus.UNVERIFIABLE
        assert result.confidence == 0
        assert result.reason == "No results found"

    def test_ok_status_with_empty_results(self) -> None:
        result = AddressValidationService(StubProvider([])).validate("invalid address 99999")

        assert result.reason == "No results found"

    def test_zero_results_status_wins_over_stray_results(self) -> None:
        provider = StubProvider([GOOGLEPLEX], status=GeocodeStatus.ZERO_RESULTS)

        result = AddressValidationService(provider).validate("1600 Amphitheatre Parkway")

        assert result.reason == "No results found"

    def test_provider_error_is_unverifiable(self) -> None:
        provider = StubProvider(
            error=AddressValidatorError.create(
                "provider_denied", "Google Geocoding API key is invalid or quota exceeded"
            )
        )

        result = AddressValidationService(provider).validate("10 Main St")

        assert result.status == ValidationStatus.UNVERIFIABLE
        assert result.reason == (
            "Validation error: Google Geocoding API key is invalid or quota exceeded"
        )
        assert result.confidence == 0
        assert provider.stats["error_count"] == 1

    def test_arbitrary_exception_is_unverifiable(self) -> None:
        provider = StubProvider(error=TimeoutError("upstream timed out"))

        result = AddressValidationService(provider).validate("10 Main St")

        assert result.status == ValidationStatus.UNVERIFIABLE
        assert result.reason is not None
        assert result.reason.startswith("Validation error:")
        assert "upstream timed out" in result.reason

    def test_failure_after_lookup_is_caught(self) -> None:
        provider = BrokenExtractionProvider([GOOGLEPLEX])

        result = AddressValidationService(provider).validate("10 Main St")

        assert result.status == ValidationStatus.UNVERIFIABLE
        assert result.reason == "Validation error: extraction exploded"

    @pytest.mark.parametrize("address", ["", "   ", "\t\n", None, 42, ["10 Main St"]])
    def test_missing_address_skips_provider(self, address) -> None:
        provider = StubProvider([GOOGLEPLEX])

        result = AddressValidationService(provider).validate(address)

        assert result.status == ValidationStatus.UNVERIFIABLE
        assert result.reason == "Address is required"
        assert result.confidence == 0
        assert provider.calls == []
        assert provider.stats["lookup_count"] == 0

    def test_missing_address_original(self) -> None:
        service = AddressValidationService(StubProvider())

        assert service.validate("   ").original == "   "
        assert service.validate(None).original == ""

    def test_low_confidence_is_unverifiable_without_reason(self) -> None:
        provider = StubProvider(
            [raw_result(city="City", tier="APPROXIMATE", formatted="Approximate Location")]
        )

        result = AddressValidationService(provider).validate("some vague place")

        # 0.5 * 0.4, no components matched the input
        assert result.status == ValidationStatus.UNVERIFIABLE
        assert result.confidence == 0.2
        assert result.reason is None
        assert result.standardized.city == "City"

    def test_exact_but_incomplete_is_corrected(self) -> None:
        provider = StubProvider(
            [
                raw_result(
                    number="10",
                    street="Main Street",
                    city="Austin",
                    state="TX",
                    tier="ROOFTOP",
                    formatted="10 Main St, Austin, TX",
                )
            ]
        )

        result = AddressValidationService(provider).validate("10 Main St, Austin, TX")

        # 0.4 + 0.3 * 1.0 + 0.2
        assert result.confidence == 0.9
        assert result.status == ValidationStatus.CORRECTED

    def test_confidence_threshold_is_inclusive(self) -> None:
        provider = StubProvider(
            [
                raw_result(
                    number="10",
                    street="Main St",
                    city="Austin",
                    state="TX",
                    zip_code="78701",
                    tier="UNKNOWN",
                    formatted="Somewhere else entirely",
                )
            ]
        )
        service = AddressValidationService(provider, confidence_threshold=0.6)

        # 0.3 * 0.4 + 0.4 + 0.8 * 0.1 = 0.6
        result = service.validate("10 Main St Austin TX")

        assert result.confidence == 0.6
        assert result.status == ValidationStatus.CORRECTED

    def test_duck_typed_provider(self) -> None:
        outcome = GeocodeOutcome(
            status=GeocodeStatus.OK,
            results=(
                {
                    "number": "10",
                    "street": "main street",
                    "city": "austin",
                    "state": "texas",
                    "zipCode": "78701",
                },
            ),
        )

        result = AddressValidationService(DuckTypedProvider(outcome)).validate(
            "10 Main St, Austin TX 78701"
        )

        assert result.provider == "duck-geocoder"
        assert result.standardized.state == "TX"
        assert result.status == ValidationStatus.CORRECTED

    @pytest.mark.parametrize("address", ["", None, "1600 Amphitheatre Parkway"])
    def test_unreadable_provider_name_does_not_raise(self, address) -> None:
        service = AddressValidationService(NamelessProvider([GOOGLEPLEX]))

        result = service.validate(address)

        assert result.provider == ""
        assert result.status == ValidationStatus.UNVERIFIABLE


class TestBatch:
    def test_validate_batch_preserves_order(self, googleplex_service) -> None:
        results = googleplex_service.validate_batch(
            ["1600 amphitheatre pkwy mountain view ca", "", None]
        )

        assert [r.status for r in results] == [
            ValidationStatus.CORRECTED,
            ValidationStatus.UNVERIFIABLE,
            ValidationStatus.UNVERIFIABLE,
        ]


class TestDefaultService:
    def test_default_service_uses_configured_provider(self, monkeypatch) -> None:
        from address_validator import service as service_module
        from address_validator.providers import ProviderFactory

        ProviderFactory.register("stub", StubProvider)
        monkeypatch.setenv("ADDRESS_PROVIDER", "stub")
        monkeypatch.setenv("ADDRESS_API_KEY", "secret")
        monkeypatch.setattr(service_module, "_default_service", None)

        default = get_default_service()

        assert isinstance(default.provider, StubProvider)
        assert default.provider.init_kwargs["api_key"] == "secret"
        assert validate("").reason == "Address is required"
