"""Fixed country lists (Thai Immigration Bureau / Revenue Department, 2025).

Lists are lower-case frozensets built once at import. Callers that need a
different source pass their own CountryLists to the services.
"""
from dataclasses import dataclass

VISA_EXEMPT_COUNTRIES = frozenset({
    # Americas
    "usa", "canada", "brazil", "argentina", "chile", "peru", "mexico",
    # Europe - Schengen
    "austria", "belgium", "czech republic", "denmark", "estonia", "finland",
    "france", "germany", "greece", "hungary", "iceland", "italy", "latvia",
    "liechtenstein", "lithuania", "luxembourg", "malta", "netherlands", "norway",
    "poland", "portugal", "slovakia", "slovenia", "spain", "sweden", "switzerland",
    # Europe - non-Schengen
    "uk", "ireland",
    # Asia
    "japan", "south korea", "singapore", "malaysia", "hong kong", "macau",
    "brunei", "philippines", "vietnam", "indonesia", "laos", "mongolia",
    # Middle East
    "israel", "turkey", "uae", "bahrain", "oman", "qatar", "kuwait",
    # Oceania
    "australia", "new zealand",
    # Africa
    "south africa",
})

# 15 days, 2000 THB, airports only. Kept disjoint from the exemption list.
VISA_ON_ARRIVAL_COUNTRIES = frozenset({
    "andorra", "bulgaria", "bhutan", "china", "cyprus", "ethiopia",
    "fiji", "georgia", "india", "kazakhstan", "maldives", "mauritius",
    "papua new guinea", "romania", "san marino", "saudi arabia", "taiwan",
    "uzbekistan", "vanuatu",
}) - VISA_EXEMPT_COUNTRIES

TAX_TREATY_COUNTRIES = frozenset({
    "australia", "austria", "bahrain", "bangladesh", "belgium", "bulgaria",
    "canada", "china", "cyprus", "czech republic", "denmark", "finland",
    "france", "germany", "hong kong", "hungary", "india", "indonesia",
    "ireland", "israel", "italy", "japan", "korea", "kuwait", "laos",
    "luxembourg", "malaysia", "mauritius", "myanmar", "nepal", "netherlands",
    "new zealand", "norway", "oman", "pakistan", "philippines", "poland",
    "romania", "russia", "saudi arabia", "seychelles", "singapore",
    "slovenia", "south africa", "spain", "sri lanka", "sweden", "switzerland",
    "taiwan", "turkey", "uae", "uk", "ukraine", "usa", "uzbekistan", "vietnam",
})


def normalize_country(name: str) -> str:
    return (name or "").strip().lower()


@dataclass(frozen=True)
class CountryLists:
    visa_exempt: frozenset[str] = VISA_EXEMPT_COUNTRIES
    visa_on_arrival: frozenset[str] = VISA_ON_ARRIVAL_COUNTRIES
    tax_treaty: frozenset[str] = TAX_TREATY_COUNTRIES

    def is_visa_exempt(self, nationality: str) -> bool:
        return normalize_country(nationality) in self.visa_exempt

    def has_visa_on_arrival(self, nationality: str) -> bool:
        return normalize_country(nationality) in self.visa_on_arrival

    def has_tax_treaty(self, nationality: str) -> bool:
        return normalize_country(nationality) in self.tax_treaty


DEFAULT_COUNTRY_LISTS = CountryLists()
