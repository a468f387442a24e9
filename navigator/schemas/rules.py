"""Rule engine output records."""
from pydantic import BaseModel
from navigator.models.profile import VisaType
from navigator.models.rules import Priority, TaxExposureLevel, PaperworkDomain, RiskType, RiskSeverity


class VisaCategory(BaseModel):
    type: VisaType
    is_applicable: bool
    reason: str
    priority: Priority


class RiskIndicator(BaseModel):
    type: RiskType
    severity: RiskSeverity
    description: str


class RuleEngineOutput(BaseModel):
    categories: list[VisaCategory]
    paperwork: list[PaperworkDomain]
    tax_exposure: TaxExposureLevel
    risks: list[RiskIndicator]
    warnings: list[str]
