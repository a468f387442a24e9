"""Tests for the tax exposure classifier."""
import pytest

from navigator.models.profile import PurposeOfStay, StayDuration, VisaType
from navigator.models.rules import TaxExposureLevel, TaxResidencyStatus
from navigator.services import tax
from navigator.services.tax import (
    analyze_tax_exposure,
    classify_exposure,
    classify_residency,
    has_tax_treaty,
)


class TestResidency:

    @pytest.mark.parametrize("days", [180, 200, 366])
    def test_days_at_or_over_threshold_is_resident(self, make_profile, days):
        for duration in (None, *StayDuration):
            profile = make_profile(days_in_thailand=days, intended_stay_duration=duration)
            assert classify_residency(profile) == TaxResidencyStatus.resident

    @pytest.mark.parametrize("days", [0, 90, 179])
    def test_days_under_threshold_is_non_resident(self, make_profile, days):
        for duration in (None, *StayDuration):
            profile = make_profile(days_in_thailand=days, intended_stay_duration=duration, has_thai_income=True)
            assert classify_residency(profile) == TaxResidencyStatus.non_resident

    @pytest.mark.parametrize("duration,expected", [
        (None, TaxResidencyStatus.uncertain),
        (StayDuration.long_term, TaxResidencyStatus.resident),
        (StayDuration.medium_term, TaxResidencyStatus.uncertain),
        (StayDuration.short_term, TaxResidencyStatus.non_resident),
    ])
    def test_inferred_from_duration(self, make_profile, duration, expected):
        assert classify_residency(make_profile(intended_stay_duration=duration)) == expected


class TestExposure:

    def test_no_income_is_none(self, make_profile):
        assert classify_exposure(make_profile(will_work_in_thailand=True)) == TaxExposureLevel.none

    @pytest.mark.parametrize("duration", [None, *StayDuration])
    def test_thai_income_is_always_certain(self, make_profile, duration):
        profile = make_profile(has_thai_income=True, has_foreign_income=True, intended_stay_duration=duration)
        assert classify_exposure(profile) == TaxExposureLevel.certain

    def test_scenario_c(self, make_profile):
        profile = make_profile(
            has_thai_income=True, has_foreign_income=True, intended_stay_duration=StayDuration.short_term,
        )
        assert classify_exposure(profile) == TaxExposureLevel.certain

    @pytest.mark.parametrize("duration,expected", [
        (StayDuration.long_term, TaxExposureLevel.likely),
        (StayDuration.medium_term, TaxExposureLevel.possible),
        (StayDuration.short_term, TaxExposureLevel.possible),
        (None, TaxExposureLevel.possible),
    ])
    def test_foreign_income_only(self, make_profile, duration, expected):
        profile = make_profile(has_foreign_income=True, intended_stay_duration=duration)
        assert classify_exposure(profile) == expected


class TestAnalysis:

    def test_thai_income_must_file(self, make_profile):
        result = analyze_tax_exposure(make_profile(has_thai_income=True, days_in_thailand=100))
        assert result.success
        obligation = result.data.filing_obligation
        assert obligation.must_file is True
        assert obligation.deadline == "March 31 of the following year"
        assert obligation.forms == ["PND 90 (Personal Income Tax Return)", "PND 91 (Half-year Tax Return)"]
        assert result.data.income_triggers[0].category == "thai-sourced"

    def test_resident_with_foreign_income(self, make_profile):
        data = analyze_tax_exposure(make_profile(has_foreign_income=True, days_in_thailand=200)).data
        categories = [t.category for t in data.income_triggers]
        assert categories == [
            "foreign-remitted-same-year",
            "foreign-remitted-prior-year",
            "foreign-not-remitted",
            "crypto-income",
            "pension-income",
            "remote-work-income",
        ]
        not_remitted = data.income_triggers[2]
        assert not_remitted.is_taxable is False
        assert data.filing_obligation.must_file is True
        assert data.filing_obligation.forms == ["PND 90 (Personal Income Tax Return)"]
        assert data.warnings[0].startswith("CRITICAL 2024/2025 Rule Change")

    def test_non_resident_foreign_income_need_not_file(self, make_profile):
        data = analyze_tax_exposure(make_profile(has_foreign_income=True, days_in_thailand=30)).data
        assert [t.is_taxable for t in data.income_triggers] == [False]
        assert data.filing_obligation.must_file is False
        assert data.filing_obligation.reason.startswith("No taxable income")

    def test_uncertain_foreign_income_is_undetermined(self, make_profile):
        data = analyze_tax_exposure(make_profile(has_foreign_income=True)).data
        assert data.residency_status == TaxResidencyStatus.uncertain
        assert [t.is_taxable for t in data.income_triggers] == ["conditional"]
        assert data.filing_obligation.must_file is False
        assert data.filing_obligation.reason.startswith("Filing requirement cannot be determined")
        assert any(w.startswith("Tax residency status cannot be determined") for w in data.warnings)

    def test_resident_trigger_detail(self, make_profile):
        data = analyze_tax_exposure(make_profile(has_foreign_income=True, days_in_thailand=200)).data
        conditions = {t.category: len(t.conditions) for t in data.income_triggers}
        assert conditions == {
            "foreign-remitted-same-year": 5,
            "foreign-remitted-prior-year": 5,
            "foreign-not-remitted": 3,
            "crypto-income": 5,
            "pension-income": 5,
            "remote-work-income": 5,
        }
        crypto = data.income_triggers[3]
        assert crypto.explanation.endswith("(5) DeFi yield: Treatment uncertain.")
        notes = data.filing_obligation.notes
        assert len(notes) == 9
        assert notes[-1].startswith("Keep records:")

    def test_thai_source_filing_notes(self, make_profile):
        notes = analyze_tax_exposure(make_profile(has_thai_income=True)).data.filing_obligation.notes
        assert len(notes) == 7
        assert notes[-1] == "E-filing available through RD website (requires TIN and PIN)"

    def test_thresholds(self, make_profile):
        names = [t.name for t in analyze_tax_exposure(make_profile()).data.relevant_thresholds]
        assert names == ["Tax Residency Threshold"]

        profile = make_profile(has_foreign_income=True, has_thai_spouse=True)
        names = [t.name for t in analyze_tax_exposure(profile).data.relevant_thresholds]
        assert names == [
            "Tax Residency Threshold",
            "Personal Allowance",
            "Tax-Free Income Threshold",
            "Tax Rates",
            "Spouse Allowance",
        ]

    def test_treaty_warning_uses_nationality_as_given(self, make_profile):
        warnings = analyze_tax_exposure(make_profile(nationality="Germany")).data.warnings
        assert warnings[0].startswith("Thailand has a double taxation treaty (DTA) with Germany.")

        warnings = analyze_tax_exposure(make_profile(nationality="Kenya")).data.warnings
        assert warnings[0].startswith("No double taxation treaty found with Kenya.")

    def test_situational_warnings(self, make_profile):
        profile = make_profile(
            will_work_in_thailand=True,
            current_visa_type=VisaType.tourist_visa_exempt,
            purpose_of_stay=[PurposeOfStay.digital_nomad],
            has_foreign_income=True,
            age=55,
            days_in_thailand=10,
        )
        warnings = analyze_tax_exposure(profile).data.warnings
        assert [w.split(":")[0].split(" ")[0] for w in warnings] == [
            "Thailand",  # treaty
            "Working",
            "Digital",
            "Pension",
            "Cryptocurrency",
        ]

    def test_disclaimers_are_fixed(self, make_profile):
        first = analyze_tax_exposure(make_profile()).data.disclaimers
        second = analyze_tax_exposure(make_profile(has_thai_income=True)).data.disclaimers
        assert first == second
        assert len(first) == 21

    def test_failure_is_wrapped(self, make_profile, monkeypatch):
        def broken(profile, residency):
            raise ValueError("bad trigger")

        monkeypatch.setattr(tax, "identify_income_triggers", broken)
        result = analyze_tax_exposure(make_profile())
        assert result.success is False
        assert result.error == "Tax analysis failed: bad trigger"


class TestTreaty:

    @pytest.mark.parametrize("name", ["usa", "USA", "Usa", " uk "])
    def test_lookup_is_case_insensitive(self, name):
        result = has_tax_treaty(name)
        assert result.success
        assert result.data.has_treaty is True
        assert result.data.country == name

    def test_no_treaty(self):
        data = has_tax_treaty("Brazil").data
        assert data.has_treaty is False
        assert data.notes[0] == "No double taxation treaty on record between Thailand and Brazil."
        assert len(data.notes) == 6
        assert data.notes[4].startswith("(4) Consider: Not remitting income")

    def test_treaty_notes(self):
        data = has_tax_treaty("Japan").data
        assert data.notes[0] == "Double taxation treaty (DTA) exists between Thailand and Japan."
        assert any(n.startswith("DTA Claiming Procedure") for n in data.notes)
        assert len(data.notes) == 8
        assert data.notes[-1].startswith("Professional assistance:")
