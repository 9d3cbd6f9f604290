"""
Rate Provider Unit Tests
"""

import logging

import pytest

from fxconv.models import DEFAULT_RATES, NOT_FOUND_RATE
from fxconv.providers import BaseRateProvider, TableRateProvider


class TestTableRateProviderDefaults:
    """Fallback to the built-in table."""

    @pytest.mark.parametrize("rates", [None, {}])
    def test_absent_or_empty_table_uses_defaults(self, rates):
        """None and {} both select the default table."""
        provider = TableRateProvider(rates)

        assert dict(provider.rates) == {"USD": 1.0, "EUR": 0.85, "UGX": 3700.0}
        assert provider.using_defaults is True

    def test_default_lookups(self):
        """Default codes resolve; anything else gets the sentinel."""
        provider = TableRateProvider()

        assert provider.get_rate("USD") == 1.0
        assert provider.get_rate("EUR") == 0.85
        assert provider.get_rate("UGX") == 3700.0
        assert provider.get_rate("ZZZ") == -1.0

    def test_default_table_emits_single_warning(self, caplog):
        """Exactly one warning line per default construction."""
        with caplog.at_level(logging.WARNING, logger="fxconv.providers.table"):
            TableRateProvider(None)

        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 1
        assert warnings[0].getMessage() == "Warning: Using default exchange rates."

    def test_supplied_table_emits_no_warning(self, caplog):
        """A non-empty table is used silently."""
        with caplog.at_level(logging.WARNING, logger="fxconv.providers.table"):
            TableRateProvider({"USD": 1.0})

        assert not [r for r in caplog.records if r.levelno >= logging.WARNING]

    def test_default_constant_is_read_only(self):
        """DEFAULT_RATES cannot be modified at runtime."""
        with pytest.raises(TypeError):
            DEFAULT_RATES["USD"] = 2.0  # type: ignore[index]


class TestTableRateProviderSupplied:
    """Caller-supplied tables."""

    def setup_method(self):
        self.source = {"USD": 1.0, "EUR": 0.85, "UGX": 3800.0}
        self.provider = TableRateProvider(self.source)

    def test_is_rate_provider(self):
        """TableRateProvider implements the provider interface."""
        assert isinstance(self.provider, BaseRateProvider)

    def test_lookup_known_codes(self):
        """Supplied rates win over the defaults."""
        assert self.provider.get_rate("UGX") == 3800.0
        assert self.provider.using_defaults is False

    def test_unknown_code_returns_sentinel(self):
        """Unknown codes return -1.0 instead of raising."""
        assert self.provider.get_rate("XYZ") == NOT_FOUND_RATE

    def test_lookup_is_exact_match(self):
        """Codes are not normalized."""
        assert self.provider.get_rate("usd") == NOT_FOUND_RATE
        assert self.provider.get_rate(" USD") == NOT_FOUND_RATE

    def test_non_positive_rates_are_stored_unvalidated(self):
        """Zero and negative rates are kept as given."""
        provider = TableRateProvider({"USD": 1.0, "BAD": 0.0, "NEG": -3.5})

        assert provider.get_rate("BAD") == 0.0
        assert provider.get_rate("NEG") == -3.5

    def test_caller_mutation_does_not_leak(self):
        """Changing the source dict after construction has no effect."""
        self.source["EUR"] = 99.0
        self.source["GBP"] = 0.79

        assert self.provider.get_rate("EUR") == 0.85
        assert self.provider.get_rate("GBP") == NOT_FOUND_RATE

    def test_rates_view_is_read_only(self):
        """The exposed table rejects item assignment."""
        with pytest.raises(TypeError):
            self.provider.rates["EUR"] = 1.0  # type: ignore[index]

    def test_using_defaults_is_read_only(self):
        """using_defaults is a property, not a settable attribute."""
        with pytest.raises(AttributeError):
            self.provider.using_defaults = True  # type: ignore[misc]

    def test_currencies_sorted(self):
        """currencies() lists known codes alphabetically."""
        assert self.provider.currencies() == ("EUR", "UGX", "USD")


class TestBaseRateProvider:
    """Contract every provider must satisfy."""

    def test_provider_without_table_cannot_be_built(self):
        """A provider that only implements get_rate is incomplete."""
        class LookupOnlyProvider(BaseRateProvider):
            def get_rate(self, currency):
                return NOT_FOUND_RATE

        with pytest.raises(TypeError):
            LookupOnlyProvider()

    def test_currencies_derived_from_rates(self):
        """currencies() comes for free once rates is implemented."""
        class FixedProvider(BaseRateProvider):
            PROVIDER_NAME = "fixed"

            @property
            def rates(self):
                return {"JPY": 150.0, "CHF": 0.9}

            @property
            def using_defaults(self):
                return False

            def get_rate(self, currency):
                return self.rates.get(currency, NOT_FOUND_RATE)

        assert FixedProvider().currencies() == ("CHF", "JPY")

    def test_provider_names(self):
        """Each provider identifies itself."""
        assert BaseRateProvider.PROVIDER_NAME == "base"
        assert TableRateProvider.PROVIDER_NAME == "table"
