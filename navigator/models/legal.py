"""Legal knowledge domains."""
import enum


class LegalDomain(str, enum.Enum):
    property = "property"
    business = "business"
    employment = "employment"


class ResourceCategory(str, enum.Enum):
    government_offices = "government-offices"
    embassies = "embassies"
    lawyers = "lawyers"
    legal_aid = "legal-aid"
