"""
Enumerations shared by schemas, services and routers.
Every closed vocabulary in the API is a str-enum so it serializes as its value.
"""
from navigator.models.profile import StayDuration, CurrentLocation, PurposeOfStay, VisaType
from navigator.models.rules import (
    Priority,
    TaxResidencyStatus,
    TaxExposureLevel,
    PaperworkDomain,
    RiskType,
    RiskSeverity,
)
from navigator.models.legal import LegalDomain, ResourceCategory
from navigator.models.tour import HotelLevel, Season, PackageStatus, BookingStatus

__all__ = [
    "StayDuration",
    "CurrentLocation",
    "PurposeOfStay",
    "VisaType",
    "Priority",
    "TaxResidencyStatus",
    "TaxExposureLevel",
    "PaperworkDomain",
    "RiskType",
    "RiskSeverity",
    "LegalDomain",
    "ResourceCategory",
    "HotelLevel",
    "Season",
    "PackageStatus",
    "BookingStatus",
]
