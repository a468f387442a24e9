"""Legal knowledge lookups (property, business, employment) and resource directory."""
from navigator.knowledge.business_law import BUSINESS_TOPICS
from navigator.knowledge.employment_law import EMPLOYMENT_TOPICS
from navigator.knowledge.property_law import PROPERTY_TOPICS
from navigator.knowledge.resources import LEGAL_RESOURCES
from navigator.models.legal import LegalDomain, ResourceCategory
from navigator.schemas.legal import LegalResourceDirectory, LegalTopic
from navigator.schemas.result import ServiceResult

LEGAL_TABLES: dict[LegalDomain, dict[str, LegalTopic]] = {
    LegalDomain.property: PROPERTY_TOPICS,
    LegalDomain.business: BUSINESS_TOPICS,
    LegalDomain.employment: EMPLOYMENT_TOPICS,
}


def get_legal_info(domain: LegalDomain, topic_key: str) -> ServiceResult[LegalTopic]:
    topic = LEGAL_TABLES.get(domain, {}).get(topic_key)
    if topic is None:
        return ServiceResult.fail(f"No legal information found for {getattr(domain, 'value', domain)}/{topic_key}")
    # Callers get a copy; the tables stay untouched.
    return ServiceResult.ok(topic.model_copy(deep=True))


def get_domain_topics(domain: LegalDomain) -> ServiceResult[list[LegalTopic]]:
    table = LEGAL_TABLES.get(domain, {})
    return ServiceResult.ok([t.model_copy(deep=True) for t in table.values()])


def get_legal_resources(category: ResourceCategory | None = None) -> ServiceResult[list[LegalResourceDirectory]]:
    directories = [d for d in LEGAL_RESOURCES if category is None or d.category == category]
    return ServiceResult.ok([d.model_copy(deep=True) for d in directories])
