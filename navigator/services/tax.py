"""Tax exposure classifier: residency, income triggers, filing obligation.

Informational only. Nothing here computes an amount owed; the outputs name
the rules and thresholds that may apply to a profile. All explanatory text is
fixed reference wording and is reproduced as written.
"""
from navigator.knowledge.countries import CountryLists, DEFAULT_COUNTRY_LISTS
from navigator.models.profile import PurposeOfStay, StayDuration, VisaType
from navigator.models.rules import TaxExposureLevel, TaxResidencyStatus
from navigator.schemas.profile import UserProfile
from navigator.schemas.result import ServiceResult
from navigator.schemas.tax import (
    DoubleTaxationTreaty,
    IncomeTrigger,
    TaxAnalysis,
    TaxFilingObligation,
    TaxThreshold,
)

RESIDENCY_DAYS = 180
FILING_DEADLINE = "March 31 of the following year"
PND_90 = "PND 90 (Personal Income Tax Return)"
PND_91 = "PND 91 (Half-year Tax Return)"

_RESIDENCY_EXPLANATIONS = {
    TaxResidencyStatus.resident: (
        "Tax residency is defined as being present in Thailand for 180 days or more in a calendar year. "
        "Based on your profile, you may be classified as a Thai tax resident."
    ),
    TaxResidencyStatus.non_resident: (
        "Tax residency is defined as being present in Thailand for 180 days or more in a calendar year. "
        "Based on your profile, you are likely a non-resident for tax purposes."
    ),
    TaxResidencyStatus.uncertain: (
        "Tax residency status cannot be determined without knowing exact days in Thailand. "
        "Tax residency is triggered at 180 days in a calendar year."
    ),
}

DISCLAIMERS = (
    "This analysis provides information about Thai tax rules and thresholds only.",
    "This is NOT tax advice, tax planning, or a calculation of tax owed.",
    "This is NOT a recommendation on whether to remit income to Thailand or how to structure finances.",
    "Thai tax law is complex and subject to interpretation by the Thai Revenue Department.",
    "Tax rules change frequently. This analysis is based on rules current as of 2025-2026, "
    "including 2024/2025 remittance rule changes.",
    "IMPORTANT: 2024/2025 rule changes regarding foreign income remittance are recent and implementation "
    "varies by Revenue office. Interpretation may evolve.",
    "Individual circumstances vary significantly and affect tax treatment.",
    "Professional tax advice from a qualified Thai tax advisor is strongly recommended, especially for:",
    "  • Foreign income remittance planning",
    "  • Double taxation treaty (DTA) claims",
    "  • Cryptocurrency taxation",
    "  • Pension income treatment",
    "  • Remote work / digital nomad scenarios",
    "  • Tax ID (TIN) application and filing",
    "Double taxation treaties, deductions, and exemptions may significantly affect actual tax liability.",
    "This analysis does not cover: corporate tax, VAT, withholding tax, specific industries tax, "
    "property tax, or other tax types.",
    "Cryptocurrency tax treatment is evolving - no comprehensive guidelines issued yet by Thai Revenue "
    "Department as of 2025.",
    "Tax residency counting (180-day rule) is based on calendar year (Jan 1 - Dec 31), not visa validity period.",
    "Remittance includes: bank transfers, cash brought in, credit card funding from foreign accounts, "
    "crypto converted to THB in Thailand.",
    "Provincial Revenue offices may have different interpretation or expertise levels compared to Bangkok offices.",
    "Tax obligations exist separately from immigration status - even illegal work may be assessable for tax.",
)


def classify_residency(profile: UserProfile) -> TaxResidencyStatus:
    """Day count wins when known; otherwise infer from the intended stay."""
    if profile.days_in_thailand is None and profile.intended_stay_duration is None:
        return TaxResidencyStatus.uncertain
    if profile.days_in_thailand is not None:
        if profile.days_in_thailand >= RESIDENCY_DAYS:
            return TaxResidencyStatus.resident
        return TaxResidencyStatus.non_resident
    if profile.intended_stay_duration == StayDuration.long_term:
        return TaxResidencyStatus.resident
    if profile.intended_stay_duration == StayDuration.medium_term:
        return TaxResidencyStatus.uncertain
    return TaxResidencyStatus.non_resident


def classify_exposure(profile: UserProfile) -> TaxExposureLevel:
    """Coarse exposure level shared by the rule engine's paperwork, risk and warning passes."""
    if not (profile.has_thai_income or profile.has_foreign_income):
        return TaxExposureLevel.none
    if profile.has_thai_income:
        return TaxExposureLevel.certain
    if profile.intended_stay_duration == StayDuration.long_term:
        return TaxExposureLevel.likely
    return TaxExposureLevel.possible


def _has_thai_source(profile: UserProfile) -> bool:
    return profile.has_thai_income or profile.will_work_in_thailand


def _resident_foreign_triggers() -> list[IncomeTrigger]:
    return [
        IncomeTrigger(
            category="foreign-remitted-same-year",
            is_taxable="conditional",
            explanation=(
                "2024/2025 Rule Change: Foreign income remitted to Thailand is now assessable for tax residents, "
                "regardless of when earned. Previous interpretation (only same-year remittances taxable) was "
                "clarified by Thai Revenue Department in 2024. Remittance = transferring money into Thailand via "
                "bank transfers, bringing cash, or using foreign-sourced income in Thailand."
            ),
            conditions=[
                "Income must be remitted (brought into) Thailand",
                "Tax resident status (180+ days in Thailand)",
                "Applies to income earned in ANY year (changed from previous 'same year only' rule)",
                "Exemptions may apply for certain income types (consult tax advisor)",
                "Double taxation treaty benefits may reduce or eliminate tax (if applicable)",
            ],
        ),
        IncomeTrigger(
            category="foreign-remitted-prior-year",
            is_taxable="conditional",
            explanation=(
                "Prior-year foreign income remitted to Thailand: The 2024 clarification states that ALL "
                "remittances are assessable, including savings from prior years. This represents a significant "
                "change from previous practice where only same-year income was clearly taxable."
            ),
            conditions=[
                "Income earned in previous calendar years",
                "Remitted to Thailand in current year",
                "May be assessable for tax (2024 rule change)",
                "Proving income was previously taxed or is exempt requires documentation",
                "Tax advisor consultation essential for determining actual tax liability",
            ],
        ),
        IncomeTrigger(
            category="foreign-not-remitted",
            is_taxable=False,
            explanation=(
                "Foreign income that is not remitted (brought into) Thailand remains outside Thai tax "
                "jurisdiction. This includes: (1) money kept in foreign bank accounts, (2) investments held "
                "abroad, (3) pension payments left in origin country. Strategy note: Some tax residents choose "
                "to remit only what they need to live on."
            ),
            conditions=[
                "Income remains outside Thailand",
                "Not transferred to Thai bank accounts",
                "Not used for transactions in Thailand (credit cards funded by foreign accounts may count as remittance)",
            ],
        ),
        IncomeTrigger(
            category="crypto-income",
            is_taxable="conditional",
            explanation=(
                "Cryptocurrency income taxation (as of 2024-2025): (1) Crypto trading profits may be assessable "
                "income if remitted to Thailand. (2) Mining/staking rewards may be assessable. (3) Crypto-to-crypto "
                "trades: Tax treatment unclear (Thai Revenue Department hasn't issued definitive guidance). "
                "(4) Selling crypto for THB in Thailand: Likely assessable. (5) DeFi yield: Treatment uncertain."
            ),
            conditions=[
                "Crypto income must be 'realized' (converted to fiat or used)",
                "Remittance rule applies (must bring into Thailand to be taxable)",
                "Documentation of cost basis may be required",
                "No official crypto tax guidelines issued yet (as of 2025)",
                "Treatment may vary by immigration office interpretation",
            ],
        ),
        IncomeTrigger(
            category="pension-income",
            is_taxable="conditional",
            explanation=(
                "Pension income from foreign sources: (1) Government pensions: May be exempt under double "
                "taxation treaties (varies by country). (2) Private pensions: Generally assessable if remitted to "
                "Thailand. (3) Social Security (US): May be exempt under US-Thailand tax treaty. (4) UK state "
                "pension: May be exempt under UK-Thailand treaty. Specific treatment depends on source country "
                "and treaty provisions."
            ),
            conditions=[
                "Government pension vs private pension distinction important",
                "Double taxation treaty provisions vary by country",
                "Remittance to Thailand required to trigger tax",
                "Documentation from pension provider may be required",
                "Some countries tax pensions at source (may get credit in Thailand)",
            ],
        ),
        IncomeTrigger(
            category="remote-work-income",
            is_taxable="conditional",
            explanation=(
                "Remote work income (working for foreign employer while in Thailand): (1) If employer is outside "
                "Thailand and you're paid to foreign account: Taxable only if remitted to Thailand (2024 rules "
                "apply). (2) If work performed in Thailand but for foreign clients: May be considered Thai-sourced "
                "income (gray area). (3) DTV visa holders: Explicitly allowed to work remotely for foreign "
                "employers, income taxable if remitted. (4) Freelancers: If services performed in Thailand, may "
                "be Thai-sourced (consult tax advisor)."
            ),
            conditions=[
                "Employer location matters (foreign employer = foreign income)",
                "Where services performed may affect sourcing",
                "DTV visa holders: Clear that remote work for foreign employers is foreign income",
                "Freelancing vs employment distinction important",
                "Remittance still required to trigger tax",
            ],
        ),
    ]


def identify_income_triggers(profile: UserProfile, residency: TaxResidencyStatus) -> list[IncomeTrigger]:
    triggers: list[IncomeTrigger] = []
    if _has_thai_source(profile):
        triggers.append(IncomeTrigger(
            category="thai-sourced",
            is_taxable=True,
            explanation="Income from Thai sources is taxable in Thailand regardless of tax residency status.",
            threshold="All Thai-sourced income is subject to personal income tax",
        ))

    if not profile.has_foreign_income:
        return triggers

    if residency == TaxResidencyStatus.resident:
        triggers.extend(_resident_foreign_triggers())
    elif residency == TaxResidencyStatus.non_resident:
        triggers.append(IncomeTrigger(
            category="foreign-not-remitted",
            is_taxable=False,
            explanation=(
                "Non-residents are generally not taxed on foreign-sourced income in Thailand, even if remitted. "
                "However, Thai-sourced income is taxable regardless of residency status."
            ),
        ))
    else:
        triggers.append(IncomeTrigger(
            category="foreign-remitted-same-year",
            is_taxable="conditional",
            explanation=(
                "Tax treatment of foreign income depends on tax residency status (180+ days threshold) and "
                "whether income is remitted to Thailand. As of 2024-2025, tax residents may be taxed on ALL "
                "foreign income remitted to Thailand (not just same-year income)."
            ),
            conditions=[
                "Tax residency status must be determined (count exact days)",
                "Remittance status must be known (bank transfers, cash, credit card funding)",
                "2024 rule changes significantly expand taxation of remitted foreign income",
                "Professional tax advice essential before remitting funds",
            ],
        ))
    return triggers


def determine_filing_obligation(
    profile: UserProfile,
    residency: TaxResidencyStatus,
    triggers: list[IncomeTrigger],
) -> TaxFilingObligation:
    # "conditional" counts as possibly taxable
    if not any(t.is_taxable is True or t.is_taxable == "conditional" for t in triggers):
        return TaxFilingObligation(
            must_file=False,
            reason="No taxable income identified based on provided information.",
            notes=[
                "Tax filing is required if you have assessable income in Thailand",
                "This assessment is based on information provided and may not cover all scenarios",
            ],
        )

    if _has_thai_source(profile):
        return TaxFilingObligation(
            must_file=True,
            reason="Thai-sourced income requires tax filing regardless of residency status.",
            deadline=FILING_DEADLINE,
            forms=[PND_90, PND_91],
            notes=[
                "Employer may withhold tax if employed in Thailand",
                "Annual reconciliation required via PND 90",
                "Tax ID number (TIN) required BEFORE filing - apply at local Revenue Department office",
                "TIN application requires: passport, visa, work permit (if applicable), Thai address proof (lease/TM30)",
                "Late filing may result in penalties (200 THB/month) and interest (1.5%/month)",
                "Some employers can arrange TIN for employees",
                "E-filing available through RD website (requires TIN and PIN)",
            ],
        )

    if residency == TaxResidencyStatus.resident and profile.has_foreign_income:
        return TaxFilingObligation(
            must_file=True,
            reason=(
                "Tax residents with foreign income remitted to Thailand may be required to file "
                "(2024/2025 rule changes apply)."
            ),
            deadline=FILING_DEADLINE,
            forms=[PND_90],
            notes=[
                "Filing requirement applies if foreign income is remitted to Thailand",
                "2024/2025 rule change: ALL remittances now assessable (not just same-year income)",
                "Tax ID number (TIN) required - apply at Revenue Department office BEFORE filing",
                "TIN application: passport, visa, proof of Thai address (lease/TM30), bank statements showing remittance",
                "Double taxation treaty (DTA) benefits may apply if your country has treaty with Thailand",
                "To claim DTA benefits: (1) Obtain tax residency certificate from home country, "
                "(2) Submit with PND 90, (3) May need to show proof of foreign tax paid",
                "Some provincial Revenue offices more familiar with DTA claims than others "
                "(Bangkok offices generally better)",
                "Professional tax advisor essential - can help with: TIN application, PND 90 filing, DTA claims, "
                "documentation",
                "Keep records: foreign tax statements, proof of income source, bank transfer records, "
                "tax residency certificate",
            ],
        )

    return TaxFilingObligation(
        must_file=False,
        reason=(
            "Filing requirement cannot be determined without complete information on residency "
            "and income remittance."
        ),
        notes=[
            "Tax filing may be required if:",
            "  • You are in Thailand 180+ days in a calendar year, AND",
            "  • You have Thai-sourced income, OR",
            "  • You remit foreign income to Thailand in the same year it is earned",
            "Consult with a Thai tax advisor to determine specific obligations",
        ],
    )


def relevant_thresholds(profile: UserProfile) -> list[TaxThreshold]:
    thresholds = [
        TaxThreshold(
            name="Tax Residency Threshold",
            value="180 days in a calendar year",
            description="Presence in Thailand for 180 days or more triggers tax residency status",
            applicability="All individuals",
        ),
    ]
    if profile.has_thai_income or profile.has_foreign_income:
        thresholds += [
            TaxThreshold(
                name="Personal Allowance",
                value="60,000 THB per year",
                description="Standard personal deduction available to all taxpayers",
                applicability="All tax filers",
            ),
            TaxThreshold(
                name="Tax-Free Income Threshold",
                value="150,000 THB per year",
                description="Income below this threshold (after allowances and deductions) is generally not taxed",
                applicability="Individuals with assessable income",
            ),
            TaxThreshold(
                name="Tax Rates",
                value="Progressive: 0% to 35%",
                description=(
                    "Personal income tax is progressive. Rates: 0% (up to 150k), 5%, 10%, 15%, 20%, 25%, 30%, "
                    "35% (over 5M THB)"
                ),
                applicability="All taxable income",
            ),
        ]
    if profile.has_thai_spouse:
        thresholds.append(TaxThreshold(
            name="Spouse Allowance",
            value="60,000 THB per year",
            description="Additional deduction available for supporting a spouse",
            applicability="Taxpayers with dependent spouse",
        ))
    return thresholds


def _warnings(profile: UserProfile, residency: TaxResidencyStatus, countries: CountryLists) -> list[str]:
    warnings: list[str] = []
    nationality = profile.nationality
    is_nomad = profile.has_purpose(PurposeOfStay.digital_nomad)

    if residency == TaxResidencyStatus.resident and profile.has_foreign_income:
        warnings.append(
            "CRITICAL 2024/2025 Rule Change: Thai tax rules regarding foreign income remittance changed "
            "significantly. Thai Revenue Department clarified that ALL foreign income remitted to Thailand is "
            "assessable (not just same-year income). This affects: (1) Savings from prior years, (2) Investment "
            "returns, (3) Pension income, (4) Remote work income. Previous practice of only taxing same-year "
            "remittances NO LONGER APPLIES. Professional tax advice is essential."
        )
        warnings.append(
            "Provincial vs Bangkok Tax Offices: Implementation of new remittance rules varies by office. Bangkok "
            "Revenue Departments (especially those handling expats) are more familiar with foreign income taxation "
            "and DTA claims. Provincial offices may: (1) Have less experience with foreign income cases, "
            "(2) Require more documentation, (3) Take longer to process DTA claims. Consider: Filing at Bangkok "
            "office if possible (requires Bangkok address proof), or hiring tax advisor familiar with your local "
            "office."
        )

    if countries.has_tax_treaty(nationality):
        warnings.append(
            f"Thailand has a double taxation treaty (DTA) with {nationality}. You may be eligible for tax credits "
            f"or exemptions. To claim DTA benefits: (1) Obtain tax residency certificate from {nationality} "
            "(usually from tax authority), (2) Keep proof of foreign tax paid (if applicable), (3) Submit both "
            "with PND 90 filing, (4) May need to fill out DTA claim form (varies by treaty). Process can take "
            "several months. Revenue Department may request additional documentation. Tax advisor with DTA "
            "experience recommended."
        )
    else:
        warnings.append(
            f"No double taxation treaty found with {nationality}. You may face taxation in both countries on the "
            f"same income. This means: (1) {nationality} may tax your worldwide income, (2) Thailand may tax "
            "income remitted to Thailand, (3) No automatic credit for foreign tax paid, (4) May need to pay tax "
            f"twice unless home country provides unilateral relief. Check with {nationality} tax authority about "
            "foreign tax credits."
        )

    if residency == TaxResidencyStatus.uncertain:
        warnings.append(
            "Tax residency status cannot be determined from provided information. Count exact days in Thailand "
            "to determine if 180-day threshold is crossed. Day counting: (1) Count BOTH arrival and departure "
            "days, (2) Count ALL days (not just visa days), (3) Calendar year basis (Jan 1 - Dec 31), (4) Keep "
            "arrival/departure records (immigration stamps, flight tickets). If close to 180 days: Consider "
            "leaving before threshold to avoid tax resident status (but ensure visa compliance)."
        )

    if profile.will_work_in_thailand and profile.current_visa_type != VisaType.non_immigrant_b:
        warnings.append(
            "Working in Thailand requires proper work authorization (Non-B visa + work permit). Tax obligations "
            "may exist even for unauthorized work - Revenue Department can assess tax on illegal income. "
            "Additionally: (1) Working illegally can lead to deportation and blacklisting, (2) Employers hiring "
            "without work permit face fines, (3) Tax filing doesn't legalize work status (separate issues). Get "
            "proper work authorization before working."
        )

    if is_nomad or (
        profile.has_foreign_income and not profile.has_thai_income and not profile.will_work_in_thailand
    ):
        warnings.append(
            "Digital Nomads / Remote Workers: Tax treatment depends on: (1) Whether employer is in Thailand "
            "(Thai-sourced) or abroad (foreign-sourced), (2) Whether you remit income to Thailand, (3) Whether "
            "you're a tax resident (180+ days). DTV visa holders: Explicitly allowed to work remotely for foreign "
            "employers, income is foreign-sourced but taxable if remitted. Tourist visa holders: Working (even "
            "remotely) may violate visa terms, but if for foreign employer and not remitted, unlikely to trigger "
            "Thai tax. Crypto earnings: Increasingly scrutinized - keep detailed records."
        )

    if profile.age and profile.age >= 50 and profile.has_foreign_income:
        warnings.append(
            "Pension Income (Age 50+): If receiving pension from home country: (1) Government pensions (civil "
            "service, military) may be exempt under DTA, (2) Private pensions generally taxable if remitted to "
            "Thailand, (3) Social Security/state pensions: Treatment varies by country (US Social Security may be "
            "exempt under US-Thailand DTA, UK state pension may be exempt under UK-Thailand DTA). Obtain tax "
            "residency certificate from home country to claim DTA benefits. Provincial Revenue offices may be "
            "unfamiliar with pension taxation - Bangkok offices better."
        )

    if profile.has_foreign_income and is_nomad:
        warnings.append(
            "Cryptocurrency Taxation (2025): Thai Revenue Department has not issued comprehensive crypto tax "
            "guidelines yet. Current interpretation: (1) Crypto gains may be assessable if converted to fiat and "
            "remitted to Thailand, (2) Crypto-to-crypto trades: Tax treatment unclear, (3) Staking/mining "
            "rewards: Likely assessable if remitted, (4) Holding crypto: Not taxable until realized. Keep "
            "detailed records: (1) Transaction history, (2) Cost basis documentation, (3) Exchange statements, "
            "(4) Wallet addresses. Tax treatment may change as Thailand develops crypto regulations."
        )

    return warnings


def analyze_tax_exposure(
    profile: UserProfile,
    countries: CountryLists = DEFAULT_COUNTRY_LISTS,
) -> ServiceResult[TaxAnalysis]:
    try:
        residency = classify_residency(profile)
        triggers = identify_income_triggers(profile, residency)
        analysis = TaxAnalysis(
            residency_status=residency,
            residency_explanation=_RESIDENCY_EXPLANATIONS[residency],
            income_triggers=triggers,
            filing_obligation=determine_filing_obligation(profile, residency, triggers),
            relevant_thresholds=relevant_thresholds(profile),
            warnings=_warnings(profile, residency, countries),
            disclaimers=list(DISCLAIMERS),
        )
    except Exception as e:
        return ServiceResult.fail(f"Tax analysis failed: {e}")
    return ServiceResult.ok(analysis)


def has_tax_treaty(
    nationality: str,
    countries: CountryLists = DEFAULT_COUNTRY_LISTS,
) -> ServiceResult[DoubleTaxationTreaty]:
    """Treaty lookup (case-insensitive) with claiming procedure or no-treaty implications."""
    has_treaty = countries.has_tax_treaty(nationality)
    if has_treaty:
        notes = [
            f"Double taxation treaty (DTA) exists between Thailand and {nationality}.",
            "DTA Claiming Procedure: (1) Obtain tax residency certificate from your home country's tax authority "
            "(proves you're a resident there for tax purposes).",
            "(2) Gather proof of foreign tax paid (if applicable): tax returns, withholding certificates, "
            "payment receipts.",
            "(3) Submit with Thai tax filing (PND 90): Include tax residency certificate, proof of foreign tax, "
            "and completed DTA claim form (if required by specific treaty).",
            "(4) Revenue Department review: May take several months, may request additional documentation, may "
            "contact home country tax authority.",
            "DTA benefits vary by treaty: Some treaties exempt certain income types (government pensions, "
            "royalties), others provide tax credits (reduce Thai tax by foreign tax paid), others set maximum "
            "tax rates. Specific benefits depend on income type and treaty provisions.",
            "Office variability: Bangkok Revenue offices (especially those handling expats like Lumpini, "
            "Ploenchit) more familiar with DTA claims. Provincial offices may require more documentation or "
            "take longer.",
            "Professional assistance: Tax advisors with DTA experience can: expedite claims, ensure proper "
            "documentation, communicate with Revenue Department, maximize benefits. Recommended for significant "
            "income or complex situations.",
        ]
    else:
        notes = [
            f"No double taxation treaty on record between Thailand and {nationality}.",
            "Implications: (1) May be subject to tax in both Thailand and home country on the same income "
            "(double taxation).",
            "(2) No automatic relief in Thailand for foreign tax paid (though home country may provide unilateral "
            "credit).",
            "(3) Recommend checking with home country tax authority about foreign tax credits or exemptions they "
            "may offer.",
            "(4) Consider: Not remitting income to Thailand to avoid Thai tax, OR remitting only what needed and "
            "keeping rest abroad.",
            "Note: Absence from this list doesn't guarantee no treaty exists - verify with Thai Revenue "
            "Department or tax advisor. Treaty list updated periodically.",
        ]
    return ServiceResult.ok(DoubleTaxationTreaty(country=nationality, has_treaty=has_treaty, notes=notes))
