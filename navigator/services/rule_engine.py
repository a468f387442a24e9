"""Decision-tree evaluator: visa categories, paperwork, risks and warnings for a profile.

Each decision tree is an independent producer of candidate categories. Candidates
are merged by visa type (highest priority wins, first seen wins on ties) and
returned sorted by priority.
"""
from dataclasses import dataclass
from typing import Callable

from navigator.knowledge.countries import CountryLists, DEFAULT_COUNTRY_LISTS
from navigator.models.profile import (
    CurrentLocation,
    PurposeOfStay,
    StayDuration,
    TOURIST_VISA_TYPES,
    VisaType,
)
from navigator.models.rules import (
    FILING_EXPOSURE_LEVELS,
    PaperworkDomain,
    Priority,
    RiskSeverity,
    RiskType,
    TaxExposureLevel,
    priority_value,
)
from navigator.schemas.profile import UserProfile
from navigator.schemas.result import ServiceResult
from navigator.schemas.rules import RiskIndicator, RuleEngineOutput, VisaCategory
from navigator.services.money import round_half_up, to_thb
from navigator.services.tax import classify_exposure

DTV_FINANCIAL_PROOF_THB = 500_000
RETIREMENT_MIN_AGE = 50
RETIREMENT_MONTHLY_THB = 65_000
RETIREMENT_ANNUAL_THB = 800_000
RETIREMENT_COMBINATION_THB = 400_000
SPOUSE_ANNUAL_THB = 400_000
SPOUSE_MONTHLY_THB = 40_000
# Unconverted monthly income (foreign unit)
SMART_MIN_MONTHLY_INCOME = 3500
LTR_MIN_MONTHLY_INCOME = 6700


@dataclass(frozen=True)
class EvaluationContext:
    countries: CountryLists
    thb_per_foreign_unit: float


DecisionTree = Callable[[UserProfile, EvaluationContext], list[VisaCategory]]


def _category(visa: VisaType, applicable: bool, reason: str, priority: Priority) -> VisaCategory:
    return VisaCategory(type=visa, is_applicable=applicable, reason=reason, priority=priority)


# --- decision trees ---------------------------------------------------------

def tourist_tree(profile: UserProfile, ctx: EvaluationContext) -> list[VisaCategory]:
    if profile.intended_stay_duration != StayDuration.short_term:
        return []
    exempt = ctx.countries.is_visa_exempt(profile.nationality)
    out = [
        _category(
            VisaType.tourist_visa_exempt,
            exempt,
            "Nationality may qualify for visa exemption (verify duration with Thai embassy)"
            if exempt
            else "Visa exemption may not apply for this nationality; tourist visa required",
            Priority.primary if exempt else Priority.secondary,
        )
    ]
    if ctx.countries.has_visa_on_arrival(profile.nationality):
        out.append(_category(
            VisaType.tourist_visa_on_arrival,
            True,
            "Visa on Arrival available at Thai airports (15 days, 2000 THB)",
            Priority.secondary,
        ))
    out.append(_category(
        VisaType.tourist_visa_tr,
        True,
        "Tourist visa (TR) can be obtained for short-term stays (60 days + 30 day extension)",
        Priority.secondary if exempt else Priority.primary,
    ))
    return out


def employment_tree(profile: UserProfile, ctx: EvaluationContext) -> list[VisaCategory]:
    if not (profile.will_work_in_thailand or profile.has_purpose(PurposeOfStay.employment)):
        return []
    return [_category(
        VisaType.non_immigrant_b,
        True,
        "Employment in Thailand requires Non-Immigrant B visa and work permit",
        Priority.primary,
    )]


def digital_nomad_tree(profile: UserProfile, ctx: EvaluationContext) -> list[VisaCategory]:
    if not (
        profile.has_purpose(PurposeOfStay.digital_nomad)
        and not profile.will_work_in_thailand
        and profile.has_foreign_income
    ):
        return []
    estimated = to_thb(profile.monthly_income, ctx.thb_per_foreign_unit)
    meets = estimated >= DTV_FINANCIAL_PROOF_THB
    if meets:
        reason = (
            "DTV (Destination Thailand Visa) may apply for: (1) remote workers employed abroad, (2) freelancers "
            "with foreign clients, (3) participants in Thai soft power activities (Muay Thai, cooking classes, "
            "medical treatment). Requires proof of 500,000 THB equivalent in bank or income documentation."
        )
    else:
        reason = (
            "DTV requires financial proof (~500,000 THB in bank or equivalent foreign income). Current estimated "
            f"income: ~{round_half_up(estimated)} THB/year. Verify specific requirements for your qualifying "
            "activity category."
        )
    return [
        _category(VisaType.dtv_visa, meets, reason, Priority.primary if meets else Priority.possible),
        _category(
            VisaType.tourist_visa_tr,
            True,
            "Tourist visa can be used for short-term stays while working remotely for foreign companies (not Thai "
            "companies). Immigration may question frequent entries on tourist visas.",
            Priority.secondary if meets else Priority.primary,
        ),
    ]


def retirement_tree(profile: UserProfile, ctx: EvaluationContext) -> list[VisaCategory]:
    if not profile.has_purpose(PurposeOfStay.retirement):
        return []
    if not profile.age or not profile.monthly_income:
        return [_category(
            VisaType.non_immigrant_o,
            False,
            "Retirement visa eligibility requires age and income information (age 50+, financial proof required: "
            "800,000 THB in Thai bank OR 65,000 THB/month pension OR combination method: 400,000 THB + monthly income)",
            Priority.primary,
        )]

    monthly = to_thb(profile.monthly_income, ctx.thb_per_foreign_unit)
    annual = monthly * 12
    if profile.age < RETIREMENT_MIN_AGE:
        applicable = False
        reason = (
            f"Retirement visa requires age 50+ (currently {profile.age}). Financial requirements: (1) 800,000 THB "
            "in Thai bank account (must season 2-3 months), OR (2) 65,000 THB/month pension income, OR "
            "(3) combination of 400,000 THB in bank + monthly income."
        )
    elif monthly >= RETIREMENT_MONTHLY_THB or annual >= RETIREMENT_ANNUAL_THB:
        applicable = True
        reason = (
            "May qualify for Non-O retirement visa. Financial options: (1) 800,000 THB in Thai bank (2-3 month "
            "seasoning required), (2) 65,000 THB/month pension, (3) combination method (400,000 THB + income). "
            "Verify exact requirements at your immigration office."
        )
    elif annual >= RETIREMENT_COMBINATION_THB:
        applicable = True
        reason = (
            "May qualify using combination method: deposit 400,000 THB in Thai bank + show monthly income. Total "
            f"must equal 800,000 THB annually. Current estimated income: ~{round_half_up(annual)} THB/year. "
            "Verify with immigration office."
        )
    else:
        applicable = False
        reason = (
            "Financial requirements not met. Need: (1) 800,000 THB in bank, OR (2) 65,000 THB/month, OR "
            f"(3) combination totaling 800,000 THB/year. Current estimated income: ~{round_half_up(annual)} THB/year."
        )
    return [_category(VisaType.non_immigrant_o, applicable, reason, Priority.primary)]


def family_tree(profile: UserProfile, ctx: EvaluationContext) -> list[VisaCategory]:
    if not (profile.has_purpose(PurposeOfStay.family) or profile.has_thai_spouse):
        return []
    if profile.has_thai_spouse:
        monthly = to_thb(profile.monthly_income, ctx.thb_per_foreign_unit)
        annual = monthly * 12
        if annual >= SPOUSE_ANNUAL_THB or monthly >= SPOUSE_MONTHLY_THB:
            reason = (
                "Non-O visa can be obtained for Thai spouse. Requirements: (1) marriage certificate (legalized by "
                "Thai embassy if married abroad), (2) financial proof: 400,000 THB in Thai bank account (2-month "
                "seasoning) OR 40,000 THB/month income. Note: 1-year extension requires home visit by immigration."
            )
        else:
            reason = (
                "Non-O visa for Thai spouse requires financial proof: (1) 400,000 THB in bank OR (2) 40,000 THB/month "
                f"income. Current estimated income: ~{round_half_up(annual)} THB/year. Also requires marriage "
                "certificate legalized by Thai embassy."
            )
    else:
        reason = (
            "Non-O visa can be obtained for supporting Thai national family members. If for Thai child: requires "
            "child's Thai birth certificate and proof of relationship. Financial requirements may be lower than "
            "Thai spouse visa (verify with immigration). If for elderly Thai parent: different requirements apply."
        )
    return [_category(VisaType.non_immigrant_o, True, reason, Priority.primary)]


def education_tree(profile: UserProfile, ctx: EvaluationContext) -> list[VisaCategory]:
    if not profile.has_purpose(PurposeOfStay.education):
        return []
    return [
        _category(
            VisaType.non_immigrant_ed,
            True,
            "Non-ED visa applies for students enrolled in legitimate Thai educational institutions. Requirements: "
            "(1) acceptance letter from school, (2) proof of tuition payment, (3) maintain 80% minimum attendance "
            "for visa extensions. Note: Language school ED visas face increased immigration scrutiny as of "
            "2024-2025 (frequent attendance checks, school visits). Universities: easier extensions. Alternative: "
            "DTV visa now available for Muay Thai training, Thai cooking courses (500,000 THB financial proof "
            "required).",
            Priority.primary,
        ),
        _category(
            VisaType.dtv_visa,
            True,
            "DTV visa (soft power category) may be an alternative for Muay Thai training, Thai cooking classes, or "
            "cultural courses. Requires 500,000 THB financial proof. May be preferable to ED visa for short-term "
            "courses to avoid attendance monitoring.",
            Priority.possible,
        ),
    ]


def smart_visa_tree(profile: UserProfile, ctx: EvaluationContext) -> list[VisaCategory]:
    if not (profile.will_work_in_thailand and profile.has_purpose(PurposeOfStay.employment)):
        return []
    qualifies = (profile.monthly_income or 0) >= SMART_MIN_MONTHLY_INCOME
    return [_category(
        VisaType.smart_visa,
        qualifies,
        "SMART Visa may apply for highly-skilled professionals in targeted industries (verify sector eligibility "
        "and qualification requirements)"
        if qualifies
        else "SMART Visa requires high income threshold (~100,000 THB/month) and specific industry qualifications",
        Priority.possible if qualifies else Priority.secondary,
    )]


def long_term_tree(profile: UserProfile, ctx: EvaluationContext) -> list[VisaCategory]:
    if profile.intended_stay_duration != StayDuration.long_term:
        return []
    out = []
    if profile.monthly_income and profile.monthly_income >= LTR_MIN_MONTHLY_INCOME:
        out.append(_category(
            VisaType.ltr_visa,
            True,
            "LTR visa may apply for high-income individuals (verify specific category requirements: Wealthy Global "
            "Citizen, Work-from-Thailand Professional, etc.)",
            Priority.possible,
        ))
    out.append(_category(
        VisaType.elite_visa,
        True,
        "Elite visa provides long-term stay option (5-20 years, membership-based, verify cost)",
        Priority.possible,
    ))
    return out


def transition_tree(profile: UserProfile, ctx: EvaluationContext) -> list[VisaCategory]:
    # Extension holders cannot be detected from a profile; see the risk pass.
    return []


DECISION_TREES: tuple[DecisionTree, ...] = (
    tourist_tree,
    employment_tree,
    digital_nomad_tree,
    retirement_tree,
    family_tree,
    education_tree,
    smart_visa_tree,
    long_term_tree,
    transition_tree,
)


def merge_categories(candidates: list[VisaCategory]) -> list[VisaCategory]:
    """One entry per visa type, sorted by priority descending."""
    merged: dict[VisaType, VisaCategory] = {}
    for cat in candidates:
        existing = merged.get(cat.type)
        if existing is None or priority_value(cat.priority) > priority_value(existing.priority):
            merged[cat.type] = cat
    return sorted(merged.values(), key=lambda c: priority_value(c.priority), reverse=True)


def match_visa_categories(profile: UserProfile, ctx: EvaluationContext) -> list[VisaCategory]:
    candidates: list[VisaCategory] = []
    for tree in DECISION_TREES:
        candidates.extend(tree(profile, ctx))
    return merge_categories(candidates)


# --- paperwork, risks, warnings --------------------------------------------

def determine_paperwork(profile: UserProfile, exposure: TaxExposureLevel) -> list[PaperworkDomain]:
    duration = profile.intended_stay_duration
    in_thailand = profile.current_location == CurrentLocation.in_thailand
    paperwork = []
    if duration in (StayDuration.medium_term, StayDuration.long_term):
        paperwork.append(PaperworkDomain.visa_extension)
    if in_thailand and duration != StayDuration.short_term:
        paperwork.append(PaperworkDomain.ninety_day_reporting)
    if in_thailand:
        paperwork.append(PaperworkDomain.tm30_reporting)
    if profile.will_work_in_thailand:
        paperwork.append(PaperworkDomain.work_permit)
    if profile.needs_driving_license:
        paperwork.append(PaperworkDomain.driving_license)
    if profile.needs_vehicle_ownership:
        paperwork.append(PaperworkDomain.vehicle_registration)
    if profile.needs_driving_license or profile.needs_vehicle_ownership or profile.needs_bank_account:
        paperwork.append(PaperworkDomain.residence_certificate)
    if profile.needs_bank_account:
        paperwork.append(PaperworkDomain.bank_account)
    if exposure in FILING_EXPOSURE_LEVELS:
        paperwork.append(PaperworkDomain.tax_filing)
    return paperwork


def _risk(kind: RiskType, severity: RiskSeverity, description: str) -> RiskIndicator:
    return RiskIndicator(type=kind, severity=severity, description=description)


def identify_risks(profile: UserProfile, exposure: TaxExposureLevel) -> list[RiskIndicator]:
    visa = profile.current_visa_type
    duration = profile.intended_stay_duration
    in_thailand = profile.current_location == CurrentLocation.in_thailand
    on_tourist_visa = visa in TOURIST_VISA_TYPES
    risks = []

    if profile.has_purpose(PurposeOfStay.digital_nomad) and on_tourist_visa:
        risks.append(_risk(
            RiskType.immigration, RiskSeverity.warning,
            "Working remotely on tourist visa may be questioned at immigration. Verify latest digital nomad visa "
            "options (DTV).",
        ))
    if profile.will_work_in_thailand and visa != VisaType.non_immigrant_b:
        risks.append(_risk(
            RiskType.immigration, RiskSeverity.critical,
            "Employment in Thailand without proper work authorization (Non-B visa + work permit) is illegal.",
        ))
    if exposure in FILING_EXPOSURE_LEVELS:
        risks.append(_risk(
            RiskType.tax, RiskSeverity.warning,
            "Tax residency may apply. Consult with a Thai tax advisor regarding filing obligations and foreign "
            "income reporting.",
        ))
    if duration == StayDuration.long_term and on_tourist_visa:
        risks.append(_risk(
            RiskType.immigration, RiskSeverity.critical,
            "Tourist visa/exemption is not suitable for long-term stay. Visa extension or different visa category "
            "required.",
        ))
    if visa == VisaType.tourist_visa_exempt and duration != StayDuration.short_term:
        risks.append(_risk(
            RiskType.immigration, RiskSeverity.warning,
            "Extended stays on visa exemption using 'border runs' (leaving and re-entering on visa exemption) "
            "trigger immigration scrutiny. Definitions: (1) 'Border run' = exit/re-enter on visa exemption "
            "(increasingly questioned, especially by land border). (2) 'Visa run' = exit to obtain new visa (more "
            "acceptable but still scrutinized if frequent). Immigration officers may deny entry after 2-3 "
            "consecutive visa exempt entries, especially at land borders (limited to 2 land entries per calendar "
            "year as of 2024). Air entries: more flexible but not unlimited. Consider proper long-term visa "
            "(Non-O, DTV, etc.) to avoid denial of entry.",
        ))
    if visa == VisaType.tourist_visa_on_arrival and duration != StayDuration.short_term:
        risks.append(_risk(
            RiskType.immigration, RiskSeverity.critical,
            "Visa-on-Arrival (VoA) is strictly for short stays (15 days max, obtainable only at airports, costs "
            "2000 THB). Cannot be extended. Multiple consecutive VoA entries may be denied. Not suitable for "
            "extended stays - consider tourist visa (TR) or longer-term visa category.",
        ))
    if visa == VisaType.tourist_visa_exempt and in_thailand:
        risks.append(_risk(
            RiskType.immigration, RiskSeverity.info,
            "Land border visa-exempt entries limited to 2 times per calendar year (as of 2024 rule). If planning "
            "multiple entries, use air entry (more flexible) or obtain proper tourist visa (TR). Exceeding 2 land "
            "entries may result in denial at border checkpoint.",
        ))
    if in_thailand and (profile.days_in_thailand or 0) > 365 and on_tourist_visa:
        risks.append(_risk(
            RiskType.immigration, RiskSeverity.warning,
            "Long-term continuous stay on tourist visa/exemption may indicate need to transition to proper visa "
            "category. If you received COVID-era extensions (2020-2022): these have expired and you must "
            "transition to a proper long-term visa (Non-O, Non-B, Non-ED, DTV, etc.). Continuing on tourist visas "
            "after extended stay may result in immigration questioning or denial of entry/extension.",
        ))
    if visa == VisaType.dtv_visa:
        risks.append(_risk(
            RiskType.immigration, RiskSeverity.info,
            "DTV visa holders must comply with 90-day reporting (every 90 consecutive days in Thailand) and TM30 "
            "registration (within 24 hours of arrival at residence). DTV is valid for 5 years with 180-day stays "
            "per entry. Can be extended for additional 180 days (total 360 days per year). Verify work "
            "restrictions: remote work for foreign companies only, not Thai clients.",
        ))
    return risks


def generate_warnings(profile: UserProfile, exposure: TaxExposureLevel) -> list[str]:
    warnings = [
        "Immigration requirements may vary by office location. Verify specific requirements with your local "
        "immigration office. Bangkok Immigration Office in Muang Thong Thani tends to have stricter "
        "interpretation than provincial offices.",
        "Thai immigration and tax rules are subject to change. This analysis is based on rules current as of "
        "early 2025-2026. Recent major changes: (1) DTV visa launched in 2024, (2) Land border visa-exempt limit "
        "(2/year) implemented 2024, (3) Tax on foreign remittances clarified in 2024-2025. Verify current rules "
        "with official sources.",
    ]
    if exposure != TaxExposureLevel.none:
        warnings.append(
            "Tax obligations depend on multiple factors including days in Thailand and income source. Professional "
            "tax advice is recommended. Note: 2024 tax law changes affect foreign income remitted to Thailand - "
            "previously only same-year remittances were taxable, now all remittances may be taxable if you're a "
            "tax resident (180+ days)."
        )
    if profile.has_purpose(PurposeOfStay.digital_nomad):
        warnings.append(
            "DTV (Destination Thailand Visa) launched in 2024. Categories: (1) Digital Nomads/Remote Workers, "
            "(2) Freelancers, (3) Soft Power (Muay Thai, cooking, medical treatment, seminars). Requires 500,000 "
            "THB proof. Valid 5 years, 180 days per entry, extendable once for 180 days (total 360 days/year). "
            "Verify latest requirements and application process at Thai embassy/consulate in your country."
        )
    if profile.has_purpose(PurposeOfStay.retirement):
        warnings.append(
            "Retirement visa financial requirements strictly enforced: 800,000 THB must be seasoned in Thai bank "
            "account for 2-3 months BEFORE application, then maintained at 400,000+ THB throughout the year. Some "
            "offices require funds to return to 800,000 THB 2-3 months before annual extension. Verify exact "
            "seasoning requirements with your immigration office."
        )
    if profile.has_thai_spouse or profile.has_purpose(PurposeOfStay.family):
        warnings.append(
            "Family/Thai spouse visa extensions often require home visit by immigration officers to verify genuine "
            "relationship. Prepare: photos of couple together, joint utility bills, witness statements from "
            "neighbors. Visit is usually scheduled but can be unannounced. Some offices more strict than others."
        )
    if profile.has_purpose(PurposeOfStay.education):
        warnings.append(
            "Student (ED) visa scrutiny increased significantly in 2024-2025, especially for language schools. "
            "Immigration now conducts attendance checks, unannounced school visits, and student interviews. "
            "Language schools must report absences. 80% minimum attendance required. Fake schools shut down. ED "
            "visa holders working illegally face deportation and blacklisting. Consider DTV visa for soft power "
            "courses (Muay Thai, cooking) as alternative."
        )
    if (
        profile.current_visa_type == VisaType.tourist_visa_exempt
        and profile.current_location == CurrentLocation.in_thailand
    ):
        warnings.append(
            "Frequent visa-exempt entries ('border runs') increasingly questioned by immigration. After 2-3 "
            "consecutive entries (especially by land), immigration may: (1) question purpose of stay, (2) require "
            "proof of funds/accommodation/onward travel, (3) deny entry. Land border crossings limited to 2 per "
            "calendar year. If staying long-term, obtain proper visa category to avoid denial of entry."
        )
    return warnings


def evaluate(
    profile: UserProfile,
    countries: CountryLists = DEFAULT_COUNTRY_LISTS,
    thb_per_foreign_unit: float = 36.0,
) -> ServiceResult[RuleEngineOutput]:
    """Run every decision tree and the paperwork, risk and warning passes."""
    try:
        ctx = EvaluationContext(countries=countries, thb_per_foreign_unit=thb_per_foreign_unit)
        exposure = classify_exposure(profile)
        output = RuleEngineOutput(
            categories=match_visa_categories(profile, ctx),
            paperwork=determine_paperwork(profile, exposure),
            tax_exposure=exposure,
            risks=identify_risks(profile, exposure),
            warnings=generate_warnings(profile, exposure),
        )
    except Exception as e:
        return ServiceResult.fail(f"Rule engine analysis failed: {e}")
    return ServiceResult.ok(output)
