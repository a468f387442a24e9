"""Tests for legal knowledge lookups."""
from navigator.models.legal import LegalDomain, ResourceCategory
from navigator.services.legal import LEGAL_TABLES, get_domain_topics, get_legal_info, get_legal_resources


class TestLegalInfo:

    def test_known_topic(self):
        result = get_legal_info(LegalDomain.property, "condo-ownership")
        assert result.success
        assert result.data.domain == LegalDomain.property
        assert "49%" in " ".join(result.data.key_points)
        assert result.data.common_scenarios

    def test_scenario_d_missing_topic(self):
        result = get_legal_info(LegalDomain.property, "does-not-exist")
        assert result.success is False
        assert result.data is None
        assert "property" in result.error
        assert "does-not-exist" in result.error

    def test_unknown_domain_string_is_missing(self):
        result = get_legal_info("visa", "x")
        assert result.success is False
        assert result.error == "No legal information found for visa/x"

    def test_topic_from_other_domain_is_missing(self):
        assert get_legal_info(LegalDomain.business, "condo-ownership").success is False

    def test_returned_topic_is_a_copy(self):
        topic = get_legal_info(LegalDomain.employment, "employment-contract").data
        topic.key_points.append("mutated")
        topic.common_scenarios[0].notes.clear()

        fresh = get_legal_info(LegalDomain.employment, "employment-contract").data
        assert "mutated" not in fresh.key_points
        assert fresh.common_scenarios[0].notes

    def test_domain_topics(self):
        expected = {
            LegalDomain.property: 6,
            LegalDomain.business: 2,
            LegalDomain.employment: 2,
        }
        for domain, count in expected.items():
            topics = get_domain_topics(domain).data
            assert len(topics) == count
            assert all(t.domain == domain for t in topics)

    def test_every_table_entry_matches_its_domain(self):
        for domain, table in LEGAL_TABLES.items():
            for topic in table.values():
                assert topic.domain == domain
                assert topic.disclaimers


class TestResources:

    def test_all_categories(self):
        directories = get_legal_resources().data
        assert [d.category for d in directories] == [
            ResourceCategory.government_offices,
            ResourceCategory.embassies,
            ResourceCategory.lawyers,
            ResourceCategory.legal_aid,
        ]

    def test_filter_by_category(self):
        directories = get_legal_resources(ResourceCategory.lawyers).data
        assert len(directories) == 1
        assert directories[0].resources[0].name == "Thai Bar Association"
