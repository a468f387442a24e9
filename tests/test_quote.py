"""Tests for the tour quote estimator and booking financial roll-ups."""
from datetime import date

import pytest

from navigator.models.tour import BookingStatus, HotelLevel, Season
from navigator.schemas.quote import BookingFinancialRecord, CostEstimateRequest, PackageIncludes
from navigator.services.money import round_half_up
from navigator.services.quote import (
    apply_agent_commission,
    estimate_cost,
    season_for_date,
    summarize_bookings,
    summarize_by_agent,
    summarize_by_month,
)


class TestSeason:

    @pytest.mark.parametrize("month,season", [
        (1, Season.peak), (2, Season.peak), (11, Season.peak), (12, Season.peak),
        (3, Season.shoulder), (5, Season.shoulder), (9, Season.shoulder), (10, Season.shoulder),
        (6, Season.low), (7, Season.low), (8, Season.low),
    ])
    def test_month_buckets(self, month, season):
        assert season_for_date(date(2026, month, 15)) == season


class TestEstimate:

    def test_breakdown(self, package):
        request = CostEstimateRequest(number_of_adults=2, number_of_children=1, pickup_date=date(2026, 7, 1))
        est = estimate_cost(package, request)

        b = est.cost_breakdown
        assert est.total_people == 3
        assert b.accommodation_cost == 1500 * 3 * 3
        assert b.meal_cost == 600 * 3 * 3
        assert b.guide_cost == 2000 * 3
        assert b.transport_cost == 1500 * 3
        assert b.attractions_cost == 1000 * 3
        assert b.total_costs == 13500 + 5400 + 6000 + 4500 + 3000
        assert est.season == Season.low
        assert est.estimated_revenue == 30000
        assert est.estimated_profit == 30000 - 32400
        assert est.profit_margin == pytest.approx(-8.0)

    def test_peak_multiplier_and_hotel_level(self, package):
        request = CostEstimateRequest(
            number_of_adults=2, hotel_level=HotelLevel.luxury, pickup_date=date(2026, 12, 20),
        )
        est = estimate_cost(package, request)
        assert est.season_multiplier == 1.3
        assert est.estimated_revenue == 26000
        assert est.cost_breakdown.accommodation_cost == 3000 * 3 * 2

    def test_request_overrides_and_package_exclusions(self, package):
        package = package.model_copy(update={"includes": PackageIncludes(meals=False)})
        request = CostEstimateRequest(
            number_of_adults=2, pickup_date=date(2026, 4, 1), includes_guide=False, includes_attractions=False,
        )
        b = estimate_cost(package, request).cost_breakdown
        assert b.meal_cost == 0
        assert b.guide_cost == 0
        assert b.attractions_cost == 0
        assert b.transport_cost == 4500

    def test_idempotent(self, package):
        request = CostEstimateRequest(number_of_adults=4, pickup_date=date(2026, 3, 3))
        first = estimate_cost(package, request)
        second = estimate_cost(package, request)
        assert first.model_dump_json() == second.model_dump_json()

    def test_zero_revenue_margin(self, package):
        free = package.model_copy(update={"base_price_per_person": 0})
        est = estimate_cost(free, CostEstimateRequest(number_of_adults=2, pickup_date=date(2026, 1, 5)))
        assert est.estimated_revenue == 0
        assert est.profit_margin == 0

    def test_empty_group(self, package):
        est = estimate_cost(package, CostEstimateRequest(number_of_adults=0, pickup_date=date(2026, 1, 5)))
        assert est.estimated_revenue == 0
        assert est.profit_margin == 0

    def test_revenue_rounds_half_up(self):
        assert round_half_up(2.5) == 3
        assert round_half_up(3.5) == 4
        assert round_half_up(-2.5) == -2
        assert round_half_up(10.49) == 10


class TestCommission:

    def test_arithmetic(self):
        f = apply_agent_commission(10000, 6000, 10)
        assert f.commission == 1000
        assert f.net_profit == 3000
        assert f.profit_margin == pytest.approx(30.0)

    def test_zero_revenue(self):
        f = apply_agent_commission(0, 500, 15)
        assert f.commission == 0
        assert f.net_profit == -500
        assert f.profit_margin == 0


def _record(booking_id, **kw):
    return BookingFinancialRecord(booking_id=booking_id, **kw)


class TestSummaries:

    def test_empty(self):
        s = summarize_bookings([])
        assert s.total_bookings == 0
        assert s.average_revenue == 0
        assert s.average_profit == 0
        assert s.profit_margin == 0
        assert summarize_by_agent([]) == []

    def test_totals_skip_cancelled(self):
        records = [
            _record("b1", status=BookingStatus.completed, revenue=10000, total_cost=6000, commission_rate=10),
            _record("b2", status=BookingStatus.confirmed, revenue=5000, total_cost=2000),
            _record("b3", status=BookingStatus.cancelled, revenue=99999, total_cost=1),
        ]
        s = summarize_bookings(records)
        assert s.total_bookings == 2
        assert s.completed_bookings == 1
        assert s.total_revenue == 15000
        assert s.total_costs == 8000
        assert s.total_commissions == 1000
        assert s.total_profit == 6000
        assert s.average_revenue == 7500
        assert s.average_profit == 3000
        assert s.profit_margin == pytest.approx(40.0)

    def test_by_agent(self):
        records = [
            _record("b1", agent_id="a1", agent_name="Somchai", company="Siam Tours", revenue=10000, total_cost=6000,
                    commission_rate=10),
            _record("b2", agent_id="a2", revenue=20000, total_cost=5000, commission_rate=5),
            _record("b3", agent_id="a1", revenue=4000, total_cost=1000, commission_rate=10),
            _record("b4", revenue=50000, total_cost=1000),
        ]
        agents = summarize_by_agent(records)
        assert [a.agent_id for a in agents] == ["a2", "a1"]

        a2, a1 = agents
        assert a2.agent_name == "a2"
        assert a2.total_profit == 14000
        assert a1.agent_name == "Somchai"
        assert a1.company == "Siam Tours"
        assert a1.total_bookings == 2
        assert a1.total_commissions == 1400
        assert a1.total_profit == 5600
        assert a1.average_profit == 2800

    def test_agent_name_requires_agent_id(self):
        with pytest.raises(ValueError):
            _record("b1", agent_name="Nobody")


class TestMonthlySummary:

    def test_month_filter_status_counts_and_breakdown(self):
        records = [
            _record("b1", status=BookingStatus.completed, pickup_date=date(2026, 3, 2), revenue=10000,
                    total_cost=6000, commission_rate=10,
                    costs={"guide_fees": 2000, "transport": 1500, "accommodation": 1000, "food": 500}),
            _record("b2", status=BookingStatus.pending, pickup_date=date(2026, 3, 30), revenue=4000, total_cost=1000),
            _record("b3", status=BookingStatus.in_progress, pickup_date=date(2026, 3, 15), revenue=2000,
                    total_cost=500, costs={"attractions": 500}),
            _record("b4", status=BookingStatus.cancelled, pickup_date=date(2026, 3, 10), revenue=9000, total_cost=1),
            _record("b5", status=BookingStatus.confirmed, pickup_date=date(2026, 4, 1), revenue=7000),
            _record("b6", status=BookingStatus.confirmed, pickup_date=date(2025, 3, 5), revenue=7000),
            _record("b7", status=BookingStatus.confirmed, revenue=7000),
        ]
        m = summarize_by_month(records, 2026, 3)
        assert (m.year, m.month) == (2026, 3)
        assert m.total_bookings == 3
        assert m.total_revenue == 16000
        assert m.total_costs == 7500
        assert m.total_commissions == 1000
        assert m.total_profit == 7500
        assert m.profit_margin == pytest.approx(46.875)
        assert m.bookings_by_status.model_dump() == {"pending": 1, "confirmed": 0, "in_progress": 1, "completed": 1}
        assert m.cost_breakdown.model_dump() == {
            "guide_fees": 2000,
            "transport": 1500,
            "accommodation": 1000,
            "attractions": 500,
            "food": 500,
            "other": 2000,
        }

    def test_empty_month(self):
        records = [_record("b1", pickup_date=date(2026, 5, 1), revenue=1000, total_cost=200)]
        m = summarize_by_month(records, 2026, 6)
        assert m.total_bookings == 0
        assert m.total_revenue == 0
        assert m.total_profit == 0
        assert m.profit_margin == 0
        assert m.bookings_by_status.model_dump() == {"pending": 0, "confirmed": 0, "in_progress": 0, "completed": 0}
        assert all(v == 0 for v in m.cost_breakdown.model_dump().values())
