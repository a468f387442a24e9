"""Shared dependencies: configured conversion rate and country lists."""
from fastapi import Depends

from navigator.config import Settings, get_settings
from navigator.knowledge.countries import CountryLists, DEFAULT_COUNTRY_LISTS


def get_conversion_rate(settings: Settings = Depends(get_settings)) -> float:
    return settings.thb_per_foreign_unit


def get_country_lists() -> CountryLists:
    return DEFAULT_COUNTRY_LISTS
