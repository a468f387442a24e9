from navigator.schemas.result import ServiceResult
from navigator.schemas.profile import UserProfile
from navigator.schemas.rules import VisaCategory, RiskIndicator, RuleEngineOutput
from navigator.schemas.tax import IncomeTrigger, TaxFilingObligation, TaxThreshold, TaxAnalysis, DoubleTaxationTreaty
from navigator.schemas.legal import LegalScenario, LegalTopic, LegalResource, LegalResourceDirectory
from navigator.schemas.quote import (
    TourPackage,
    CostEstimateRequest,
    CostEstimate,
    EstimateInput,
    CommissionInput,
    BookingFinancials,
    BookingFinancialRecord,
    FinancialSummary,
    AgentPerformance,
    FinancialReport,
    BookingCostItems,
    BookingsByStatus,
    MonthlyFinancialData,
)
