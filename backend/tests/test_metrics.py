"""Unit tests for the per-listing metric formulas."""

from __future__ import annotations

import pytest

from app.config import FinancialAssumptions
from app.models.listing import Listing
from app.services.metrics import (
    RENT_PER_SQM,
    acquisition_roi,
    break_even_years,
    enrich_with_metrics,
    estimate_monthly_rent,
    price_per_area,
    rent_rate_for_city,
    rental_yield,
)
from app.utils.numbers import mean, round_half_up
from conftest import listing_data


def _listing(**overrides) -> Listing:
    return Listing(**listing_data(**overrides))


class TestRounding:
    def test_half_rounds_away_from_zero(self):
        assert round_half_up(2.675, 2) == 2.68
        assert round_half_up(0.125, 2) == 0.13
        assert round_half_up(-1.005, 2) == -1.01

    def test_one_decimal(self):
        assert round_half_up(27.45, 1) == 27.5

    def test_values_wider_than_default_precision(self):
        assert round_half_up(1e27, 2) == 1e27
        assert price_per_area(1e27, 1.0) == 1e27

    def test_non_finite_passes_through(self):
        assert round_half_up(float("inf"), 2) == float("inf")

    def test_mean_skips_none(self):
        assert mean([1, None, 3]) == 2
        assert mean([]) is None
        assert mean([None]) is None


class TestPricePerArea:
    @pytest.mark.parametrize(
        "price,size",
        [(300_000, 80), (123_456.78, 61.3), (99_999, 7), (1_250_000, 333.3)],
    )
    def test_times_size_gives_back_price(self, price, size):
        assert price_per_area(price, size) * size == pytest.approx(price, abs=0.01 * size)

    def test_rounded_to_cents(self):
        assert price_per_area(100_000, 3) == 33333.33

    @pytest.mark.parametrize("price,size", [(0, 80), (300_000, 0), (None, 80), (300_000, None)])
    def test_unknown_inputs_give_zero(self, price, size):
        assert price_per_area(price, size) == 0


class TestRentalYield:
    def test_basic(self):
        assert rental_yield(14_400, 300_000) == 4.8

    def test_zero_rent(self):
        assert rental_yield(0, 100_000) == 0

    def test_zero_price(self):
        assert rental_yield(12_000, 0) == 0


class TestAcquisitionRoi:
    def test_reference_case(self):
        # 14400 / (300000 * 1.1) * 100 = 4.3636...
        assert acquisition_roi(_listing(price=300_000, estimated_rent=1200)) == 4.36

    def test_zero_rent_gives_zero(self):
        assert acquisition_roi(_listing(estimated_rent=0)) == 0

    def test_missing_rent_gives_zero(self):
        assert acquisition_roi(_listing(estimated_rent=None)) == 0

    def test_assumptions_can_be_overridden(self):
        no_fees = FinancialAssumptions(acquisition_cost_rate=0)
        assert acquisition_roi(_listing(price=300_000, estimated_rent=1200), no_fees) == 4.8


class TestEstimateMonthlyRent:
    def test_known_city(self):
        assert estimate_monthly_rent(_listing(city="München", size=50)) == 900

    def test_unknown_city_uses_default_rate(self):
        assert estimate_monthly_rent(_listing(city="Bonn", size=50)) == 500

    def test_fractional_size(self):
        assert estimate_monthly_rent(_listing(city="Leipzig", size=61.33)) == 490.64

    def test_rate_table_has_default(self):
        assert rent_rate_for_city(None) == RENT_PER_SQM["Default"]

    def test_rate_table_is_read_only(self):
        with pytest.raises(TypeError):
            RENT_PER_SQM["Bonn"] = 11  # type: ignore[index]


class TestBreakEvenYears:
    def test_basic(self):
        # 330000 / 14400 = 22.916...
        assert break_even_years(_listing(price=300_000, estimated_rent=1200)) == 22.9

    def test_missing_rent_is_undefined(self):
        assert break_even_years(_listing(estimated_rent=None)) is None
        assert break_even_years(_listing(estimated_rent=0)) is None


class TestEnrichWithMetrics:
    def test_fills_derived_fields(self):
        listing = enrich_with_metrics(_listing(price=300_000, size=80, estimated_rent=1200))
        assert listing.price_per_sqm == 3750
        assert listing.rental_yield == 4.8
        assert listing.roi == 4.36

    def test_estimates_rent_when_missing(self):
        listing = enrich_with_metrics(_listing(city="Hamburg", size=70, estimated_rent=None))
        assert listing.estimated_rent == 980
        assert listing.rental_yield == rental_yield(980 * 12, listing.price)

    def test_keeps_supplied_rent(self):
        listing = enrich_with_metrics(_listing(city="Hamburg", size=70, estimated_rent=1500))
        assert listing.estimated_rent == 1500

    def test_idempotent(self):
        listing = enrich_with_metrics(_listing(price=412_345, size=77.7, estimated_rent=None))
        first = (listing.estimated_rent, listing.price_per_sqm, listing.rental_yield, listing.roi)
        enrich_with_metrics(listing)
        second = (listing.estimated_rent, listing.price_per_sqm, listing.rental_yield, listing.roi)
        assert first == second

    def test_recomputes_stale_values(self):
        listing = _listing(price=300_000, size=80, estimated_rent=1200)
        listing.roi = 99.0
        listing.price_per_sqm = 1.0
        enrich_with_metrics(listing)
        assert listing.roi == 4.36
        assert listing.price_per_sqm == 3750
