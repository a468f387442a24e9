"""Tour quotes: cost estimate, agent commission, booking financial roll-ups."""
from fastapi import APIRouter, Query
from navigator.schemas.quote import (
    BookingFinancialRecord,
    BookingFinancials,
    CommissionInput,
    CostEstimate,
    EstimateInput,
    FinancialReport,
    MonthlyFinancialData,
)
from navigator.services.quote import apply_agent_commission, estimate_cost, financial_report, summarize_by_month

router = APIRouter(prefix="/quotes", tags=["quotes"])


@router.post("/estimate", response_model=CostEstimate)
def estimate(data: EstimateInput):
    return estimate_cost(data.package, data.request)


@router.post("/booking-financials", response_model=BookingFinancials)
def booking_financials(data: CommissionInput):
    return apply_agent_commission(data.revenue, data.total_cost, data.commission_rate)


@router.post("/financial-summary", response_model=FinancialReport)
def financial_summary(records: list[BookingFinancialRecord]):
    return financial_report(records)


@router.post("/financial-summary/monthly", response_model=MonthlyFinancialData)
def monthly_financial_summary(
    records: list[BookingFinancialRecord],
    year: int = Query(..., ge=1),
    month: int = Query(..., ge=1, le=12),
):
    return summarize_by_month(records, year, month)
