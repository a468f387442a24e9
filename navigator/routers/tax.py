"""Tax exposure analysis and treaty lookup."""
import logging

from fastapi import APIRouter, Depends, HTTPException
from navigator.dependencies import get_country_lists
from navigator.knowledge.countries import CountryLists
from navigator.schemas.profile import UserProfile
from navigator.schemas.tax import DoubleTaxationTreaty, TaxAnalysis
from navigator.services.tax import analyze_tax_exposure, has_tax_treaty

router = APIRouter(prefix="/tax", tags=["tax"])
log = logging.getLogger("uvicorn.error")


@router.post("/analyze", response_model=TaxAnalysis)
def analyze(profile: UserProfile, countries: CountryLists = Depends(get_country_lists)):
    result = analyze_tax_exposure(profile, countries=countries)
    if not result.success:
        log.warning("tax/analyze failed: %s", result.error)
        raise HTTPException(status_code=500, detail=result.error)
    return result.data


@router.get("/treaty/{nationality}", response_model=DoubleTaxationTreaty)
def treaty(nationality: str, countries: CountryLists = Depends(get_country_lists)):
    return has_tax_treaty(nationality, countries=countries).data
