"""Closed vocabularies describing the person a profile belongs to."""
import enum


class StayDuration(str, enum.Enum):
    short_term = "short-term"  # under 90 days
    medium_term = "medium-term"  # 90 days to 1 year
    long_term = "long-term"  # 1 year or more


class CurrentLocation(str, enum.Enum):
    in_thailand = "in-thailand"
    outside_thailand = "outside-thailand"


class PurposeOfStay(str, enum.Enum):
    tourism = "tourism"
    employment = "employment"
    digital_nomad = "digital-nomad"
    retirement = "retirement"
    family = "family"
    education = "education"
    business = "business"
    investment = "investment"


class VisaType(str, enum.Enum):
    tourist_visa_exempt = "tourist-visa-exempt"
    tourist_visa_on_arrival = "tourist-visa-on-arrival"
    tourist_visa_tr = "tourist-visa-tr"
    non_immigrant_b = "non-immigrant-b"
    non_immigrant_o = "non-immigrant-o"
    non_immigrant_ed = "non-immigrant-ed"
    dtv_visa = "dtv-visa"
    smart_visa = "smart-visa"
    ltr_visa = "ltr-visa"
    elite_visa = "elite-visa"


TOURIST_VISA_TYPES = frozenset({VisaType.tourist_visa_exempt, VisaType.tourist_visa_tr})
