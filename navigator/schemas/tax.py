"""Tax analysis records."""
from typing import Literal

from pydantic import BaseModel
from navigator.models.rules import TaxResidencyStatus


class IncomeTrigger(BaseModel):
    category: str  # thai-sourced, foreign-remitted-same-year, foreign-not-remitted, ...
    is_taxable: bool | Literal["conditional"]
    explanation: str
    threshold: str | None = None
    conditions: list[str] | None = None


class TaxFilingObligation(BaseModel):
    must_file: bool
    reason: str
    deadline: str | None = None
    forms: list[str] | None = None
    notes: list[str] = []


class TaxThreshold(BaseModel):
    name: str
    value: str
    description: str
    applicability: str


class TaxAnalysis(BaseModel):
    residency_status: TaxResidencyStatus
    residency_explanation: str
    income_triggers: list[IncomeTrigger]
    filing_obligation: TaxFilingObligation
    relevant_thresholds: list[TaxThreshold]
    warnings: list[str]
    disclaimers: list[str]


class DoubleTaxationTreaty(BaseModel):
    country: str
    has_treaty: bool
    notes: list[str]
