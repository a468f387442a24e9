"""Tour package pricing, cost estimate and financial roll-up schemas."""
from datetime import date
from pydantic import BaseModel, Field, model_validator
from navigator.models.tour import HotelLevel, Season, PackageStatus, BookingStatus


class AccommodationRates(BaseModel):
    budget: float = Field(800, ge=0)
    standard: float = Field(1500, ge=0)
    luxury: float = Field(3000, ge=0)
    premium: float = Field(5000, ge=0)

    def rate_for(self, level: HotelLevel) -> float:
        return getattr(self, level.value)


class CostTemplate(BaseModel):
    """Per-unit operating costs of a package, in THB."""
    accommodation_per_night: AccommodationRates = Field(default_factory=AccommodationRates)
    meal_per_day: float = Field(600, ge=0)
    guide_per_day: float = Field(2000, ge=0)
    transport_per_day: float = Field(1500, ge=0)
    attractions_per_person: float = Field(1000, ge=0)


class SeasonMultipliers(BaseModel):
    peak: float = Field(1.3, ge=0)
    shoulder: float = Field(1.1, ge=0)
    low: float = Field(1.0, ge=0)

    def multiplier_for(self, season: Season) -> float:
        return getattr(self, season.value)


class PackageIncludes(BaseModel):
    accommodation: bool = True
    meals: bool = True
    guide: bool = True
    transport: bool = True
    attractions: bool = True


class TourPackage(BaseModel):
    """Pricing view of a tour package; persistence lives elsewhere."""
    id: str | None = None
    name: str
    code: str | None = None
    duration: int = Field(..., ge=1)  # days
    status: PackageStatus = PackageStatus.draft
    includes: PackageIncludes = Field(default_factory=PackageIncludes)
    min_group_size: int = Field(1, ge=1)
    max_group_size: int = Field(10, ge=1)
    cost_template: CostTemplate = Field(default_factory=CostTemplate)
    base_price_per_person: float = Field(..., ge=0)
    season_multipliers: SeasonMultipliers = Field(default_factory=SeasonMultipliers)


class CostEstimateRequest(BaseModel):
    number_of_adults: int = Field(..., ge=0)
    number_of_children: int = Field(0, ge=0)
    hotel_level: HotelLevel = HotelLevel.standard
    pickup_date: date
    includes_guide: bool | None = None  # None: follow the package
    includes_attractions: bool | None = None


class CostBreakdown(BaseModel):
    accommodation_cost: float
    meal_cost: float
    guide_cost: float
    transport_cost: float
    attractions_cost: float
    total_costs: float


class CostEstimate(BaseModel):
    package_id: str | None
    package_name: str
    duration: int
    number_of_adults: int
    number_of_children: int
    total_people: int
    hotel_level: HotelLevel
    pickup_date: date
    season: Season
    season_multiplier: float
    cost_breakdown: CostBreakdown
    estimated_revenue: int
    estimated_profit: float
    profit_margin: float


class EstimateInput(BaseModel):
    package: TourPackage
    request: CostEstimateRequest


class CommissionInput(BaseModel):
    revenue: float = Field(..., ge=0)
    total_cost: float = Field(..., ge=0)
    commission_rate: float = Field(10, ge=0, le=100)  # percent


class BookingFinancials(BaseModel):
    revenue: float
    total_cost: float
    commission_rate: float
    commission: float
    net_profit: float
    profit_margin: float


class BookingCostItems(BaseModel):
    """Itemized operating cost of a booking, in THB."""
    guide_fees: float = Field(0, ge=0)
    transport: float = Field(0, ge=0)
    accommodation: float = Field(0, ge=0)
    attractions: float = Field(0, ge=0)
    food: float = Field(0, ge=0)
    other: float = Field(0, ge=0)


class BookingFinancialRecord(BaseModel):
    """One booking's money figures as the dashboard sees them."""
    booking_id: str
    status: BookingStatus = BookingStatus.pending
    pickup_date: date | None = None
    agent_id: str | None = None
    agent_name: str | None = None
    company: str | None = None
    revenue: float = Field(0, ge=0)
    total_cost: float = Field(0, ge=0)
    commission_rate: float = Field(0, ge=0, le=100)
    costs: BookingCostItems | None = None  # total_cost not itemized here counts as other

    @model_validator(mode="after")
    def agent_name_needs_agent(self):
        if self.agent_name and not self.agent_id:
            raise ValueError("agent_name given without agent_id")
        return self


class FinancialSummary(BaseModel):
    total_revenue: float
    total_costs: float
    total_commissions: float
    total_profit: float
    total_bookings: int
    completed_bookings: int
    average_revenue: float
    average_profit: float
    profit_margin: float


class AgentPerformance(BaseModel):
    agent_id: str
    agent_name: str
    company: str | None = None
    total_bookings: int
    total_revenue: float
    total_costs: float
    total_commissions: float
    total_profit: float
    average_profit: float
    profit_margin: float


class FinancialReport(BaseModel):
    summary: FinancialSummary
    agents: list[AgentPerformance]


class BookingsByStatus(BaseModel):
    pending: int = 0
    confirmed: int = 0
    in_progress: int = 0
    completed: int = 0


class MonthlyFinancialData(BaseModel):
    year: int
    month: int
    total_revenue: float
    total_costs: float
    total_commissions: float
    total_profit: float
    total_bookings: int
    profit_margin: float
    bookings_by_status: BookingsByStatus
    cost_breakdown: BookingCostItems
