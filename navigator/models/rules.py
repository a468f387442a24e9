"""Closed vocabularies produced by the rule engine and tax classifier."""
import enum


class Priority(str, enum.Enum):
    primary = "primary"
    secondary = "secondary"
    possible = "possible"


PRIORITY_RANK = {
    Priority.primary: 3,
    Priority.secondary: 2,
    Priority.possible: 1,
}


def priority_value(priority) -> int:
    """Numeric rank used to resolve duplicate visa categories; unknown ranks 0."""
    try:
        return PRIORITY_RANK.get(Priority(priority), 0)
    except ValueError:
        return 0


class TaxResidencyStatus(str, enum.Enum):
    resident = "resident"
    non_resident = "non-resident"
    uncertain = "uncertain"


class TaxExposureLevel(str, enum.Enum):
    none = "none"
    possible = "possible"
    likely = "likely"
    certain = "certain"


FILING_EXPOSURE_LEVELS = frozenset({TaxExposureLevel.likely, TaxExposureLevel.certain})


class PaperworkDomain(str, enum.Enum):
    visa_extension = "visa-extension"
    ninety_day_reporting = "90-day-reporting"
    tm30_reporting = "tm30-reporting"
    work_permit = "work-permit"
    driving_license = "driving-license"
    vehicle_registration = "vehicle-registration"
    residence_certificate = "residence-certificate"
    bank_account = "bank-account"
    tax_filing = "tax-filing"


class RiskType(str, enum.Enum):
    immigration = "immigration"
    tax = "tax"


class RiskSeverity(str, enum.Enum):
    info = "info"
    warning = "warning"
    critical = "critical"
