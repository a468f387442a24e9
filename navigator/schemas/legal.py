"""Static legal knowledge records."""
from pydantic import BaseModel
from navigator.models.legal import LegalDomain, ResourceCategory


class LegalScenario(BaseModel):
    scenario: str
    what_the_law_says: str
    required_steps: list[str] = []
    required_documents: list[str] = []
    typical_documents: list[str] = []
    government_office: str | None = None
    prohibitions: list[str] = []
    notes: list[str] = []


class LegalTopic(BaseModel):
    domain: LegalDomain
    topic: str
    description: str
    relevant_laws: list[str] = []
    key_points: list[str] = []
    required_documents: list[str] = []
    restrictions: list[str] = []
    penalties: list[str] = []
    disclaimers: list[str] = []
    official_resources: list[str] = []
    common_scenarios: list[LegalScenario] = []


class LegalResource(BaseModel):
    name: str
    type: str
    specialty: list[str] = []
    website: str | None = None
    notes: list[str] = []


class LegalResourceDirectory(BaseModel):
    category: ResourceCategory
    resources: list[LegalResource]
