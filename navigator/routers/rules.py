"""Rule engine: visa categories, paperwork, risks and warnings for a profile."""
import logging

from fastapi import APIRouter, Depends, HTTPException
from navigator.dependencies import get_conversion_rate, get_country_lists
from navigator.knowledge.countries import CountryLists
from navigator.schemas.profile import UserProfile
from navigator.schemas.rules import RuleEngineOutput
from navigator.services.rule_engine import evaluate

router = APIRouter(prefix="/rules", tags=["rules"])
log = logging.getLogger("uvicorn.error")


@router.post("/evaluate", response_model=RuleEngineOutput)
def evaluate_profile(
    profile: UserProfile,
    rate: float = Depends(get_conversion_rate),
    countries: CountryLists = Depends(get_country_lists),
):
    result = evaluate(profile, countries=countries, thb_per_foreign_unit=rate)
    if not result.success:
        log.warning("rules/evaluate failed: %s", result.error)
        raise HTTPException(status_code=500, detail=result.error)
    return result.data
