"""Legal information (property, business, employment) and legal resources."""
import logging

from fastapi import APIRouter, HTTPException, Query
from navigator.models.legal import LegalDomain, ResourceCategory
from navigator.schemas.legal import LegalResourceDirectory, LegalTopic
from navigator.services.legal import get_domain_topics, get_legal_info, get_legal_resources

router = APIRouter(prefix="/legal", tags=["legal"])
log = logging.getLogger("uvicorn.error")


@router.get("/resources", response_model=list[LegalResourceDirectory])
def list_resources(category: ResourceCategory | None = Query(None, description="Filter by resource category")):
    return get_legal_resources(category).data


@router.get("/{domain}", response_model=list[LegalTopic])
def list_topics(domain: LegalDomain):
    return get_domain_topics(domain).data


@router.get("/{domain}/{topic_key}", response_model=LegalTopic)
def get_topic(domain: LegalDomain, topic_key: str):
    result = get_legal_info(domain, topic_key)
    if not result.success:
        log.warning("legal lookup miss: %s", result.error)
        raise HTTPException(status_code=404, detail=result.error)
    return result.data
