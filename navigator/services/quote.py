"""Tour quote estimator, agent commission and booking financial roll-ups."""
from datetime import date

from navigator.models.tour import BookingStatus, Season
from navigator.schemas.quote import (
    AgentPerformance,
    BookingCostItems,
    BookingFinancialRecord,
    BookingFinancials,
    BookingsByStatus,
    CostBreakdown,
    CostEstimate,
    CostEstimateRequest,
    FinancialReport,
    FinancialSummary,
    MonthlyFinancialData,
    TourPackage,
)
from navigator.services.money import margin_percent, round_half_up

_PEAK_MONTHS = {11, 12, 1, 2}
_LOW_MONTHS = {6, 7, 8}


def season_for_date(day: date) -> Season:
    if day.month in _PEAK_MONTHS:
        return Season.peak
    if day.month in _LOW_MONTHS:
        return Season.low
    return Season.shoulder


def estimate_cost(package: TourPackage, request: CostEstimateRequest) -> CostEstimate:
    """Deterministic quote for a group on a package; the same inputs always give the same estimate."""
    nights = package.duration
    people = request.number_of_adults + request.number_of_children
    tpl = package.cost_template
    inc = package.includes
    with_guide = inc.guide if request.includes_guide is None else request.includes_guide
    with_attractions = inc.attractions if request.includes_attractions is None else request.includes_attractions

    accommodation = tpl.accommodation_per_night.rate_for(request.hotel_level) * nights * people if inc.accommodation else 0
    meals = tpl.meal_per_day * nights * people if inc.meals else 0
    guide = tpl.guide_per_day * nights if with_guide else 0
    transport = tpl.transport_per_day * nights if inc.transport else 0
    attractions = tpl.attractions_per_person * people if with_attractions else 0
    total = accommodation + meals + guide + transport + attractions

    season = season_for_date(request.pickup_date)
    multiplier = package.season_multipliers.multiplier_for(season)
    revenue = round_half_up(package.base_price_per_person * people * multiplier)
    profit = revenue - total

    return CostEstimate(
        package_id=package.id,
        package_name=package.name,
        duration=package.duration,
        number_of_adults=request.number_of_adults,
        number_of_children=request.number_of_children,
        total_people=people,
        hotel_level=request.hotel_level,
        pickup_date=request.pickup_date,
        season=season,
        season_multiplier=multiplier,
        cost_breakdown=CostBreakdown(
            accommodation_cost=accommodation,
            meal_cost=meals,
            guide_cost=guide,
            transport_cost=transport,
            attractions_cost=attractions,
            total_costs=total,
        ),
        estimated_revenue=revenue,
        estimated_profit=profit,
        profit_margin=margin_percent(profit, revenue),
    )


def apply_agent_commission(revenue: float, total_cost: float, commission_rate: float = 10) -> BookingFinancials:
    commission = revenue * commission_rate / 100
    net_profit = revenue - total_cost - commission
    return BookingFinancials(
        revenue=revenue,
        total_cost=total_cost,
        commission_rate=commission_rate,
        commission=commission,
        net_profit=net_profit,
        profit_margin=margin_percent(net_profit, revenue),
    )


def _live(records: list[BookingFinancialRecord]) -> list[BookingFinancialRecord]:
    return [r for r in records if r.status != BookingStatus.cancelled]


def summarize_bookings(records: list[BookingFinancialRecord]) -> FinancialSummary:
    """Totals over non-cancelled bookings. Averages are per booking, 0 when there are none."""
    live = _live(records)
    rows = [apply_agent_commission(r.revenue, r.total_cost, r.commission_rate) for r in live]
    revenue = sum(f.revenue for f in rows)
    profit = sum(f.net_profit for f in rows)
    count = len(rows)
    return FinancialSummary(
        total_revenue=revenue,
        total_costs=sum(f.total_cost for f in rows),
        total_commissions=sum(f.commission for f in rows),
        total_profit=profit,
        total_bookings=count,
        completed_bookings=sum(1 for r in live if r.status == BookingStatus.completed),
        average_revenue=revenue / count if count else 0.0,
        average_profit=profit / count if count else 0.0,
        profit_margin=margin_percent(profit, revenue),
    )


def summarize_by_agent(records: list[BookingFinancialRecord]) -> list[AgentPerformance]:
    """Per-agent roll-up of non-cancelled bookings, most profitable first. Direct bookings are skipped."""
    groups: dict[str, list[BookingFinancialRecord]] = {}
    for r in _live(records):
        if r.agent_id:
            groups.setdefault(r.agent_id, []).append(r)

    agents = []
    for agent_id, rows in groups.items():
        first = rows[0]
        summary = summarize_bookings(rows)
        agents.append(AgentPerformance(
            agent_id=agent_id,
            agent_name=next((r.agent_name for r in rows if r.agent_name), agent_id),
            company=first.company,
            total_bookings=summary.total_bookings,
            total_revenue=summary.total_revenue,
            total_costs=summary.total_costs,
            total_commissions=summary.total_commissions,
            total_profit=summary.total_profit,
            average_profit=summary.average_profit,
            profit_margin=summary.profit_margin,
        ))
    agents.sort(key=lambda a: a.total_profit, reverse=True)
    return agents


def financial_report(records: list[BookingFinancialRecord]) -> FinancialReport:
    return FinancialReport(summary=summarize_bookings(records), agents=summarize_by_agent(records))


_COST_ITEMS = ("guide_fees", "transport", "accommodation", "attractions", "food", "other")


def _cost_items(record: BookingFinancialRecord) -> dict[str, float]:
    items = record.costs.model_dump() if record.costs else dict.fromkeys(_COST_ITEMS, 0.0)
    itemized = sum(items.values())
    items["other"] += max(record.total_cost - itemized, 0)
    return items


def summarize_by_month(records: list[BookingFinancialRecord], year: int, month: int) -> MonthlyFinancialData:
    """Roll-up of non-cancelled bookings picked up in the given calendar month.

    Bookings without a pickup date are left out.
    """
    rows = [
        r for r in _live(records)
        if r.pickup_date is not None and r.pickup_date.year == year and r.pickup_date.month == month
    ]
    summary = summarize_bookings(rows)

    by_status = dict.fromkeys(BookingsByStatus.model_fields, 0)
    breakdown = dict.fromkeys(_COST_ITEMS, 0.0)
    for r in rows:
        by_status[r.status.name] += 1
        for key, amount in _cost_items(r).items():
            breakdown[key] += amount

    return MonthlyFinancialData(
        year=year,
        month=month,
        total_revenue=summary.total_revenue,
        total_costs=summary.total_costs,
        total_commissions=summary.total_commissions,
        total_profit=summary.total_profit,
        total_bookings=summary.total_bookings,
        profit_margin=summary.profit_margin,
        bookings_by_status=BookingsByStatus(**by_status),
        cost_breakdown=BookingCostItems(**breakdown),
    )
