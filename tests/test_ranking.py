"""Tests for agency text normalization, filtering and keyword ranking."""

import pytest

from agencies.ranking import (
    EXCLUDED,
    RankedResult,
    ScoredAgency,
    SearchCriteria,
    filter_by_location,
    rank_by_keywords,
    score_agency,
    search,
    search_terms,
)
from agencies.text import normalize_text
from shalom.errors import InputError
from shalom.models import Agency


def make_agency(ter_id, name="AGENCIA", department="LIMA", province="LIMA",
                zone=None, address="", status=None) -> Agency:
    return Agency(
        terminal_id=ter_id,
        name=name,
        department=department,
        province=province,
        zone=zone,
        address=address,
        status=status,
    )


class TestNormalizeText:
    def test_strips_accents_and_case(self):
        assert normalize_text("Junín") == "junin"
        assert normalize_text("JUNIN") == "junin"

    def test_handles_enye_and_umlaut(self):
        assert normalize_text("Ñaña Güemes") == "nana guemes"

    def test_idempotent(self):
        for text in ("Huánuco", "SAN MARTÍN", "ápurímac 12", ""):
            once = normalize_text(text)
            assert normalize_text(once) == once

    def test_search_terms_split_on_whitespace(self):
        assert search_terms("  Los   Olivos ") == ["los", "olivos"]
        assert search_terms("   ") == []


class TestSearchCriteria:
    def test_requires_a_criterion(self):
        with pytest.raises(InputError, match="at least one search criterion"):
            SearchCriteria(requested_fields=("hours",))

    def test_blank_filters_count_as_absent(self):
        with pytest.raises(InputError):
            SearchCriteria(requested_fields=("hours",), department="  ", keywords="")

    def test_requires_requested_fields(self):
        with pytest.raises(InputError, match="data field"):
            SearchCriteria(requested_fields=(), department="LIMA")

    def test_rejects_unknown_field(self):
        with pytest.raises(InputError, match="phone"):
            SearchCriteria(requested_fields=("phone",), department="LIMA")

    def test_resolves_aliases(self):
        criteria = SearchCriteria(
            requested_fields=("lat-long", "horario", "estado-de-agencia"),
            keywords="olivos",
        )
        assert criteria.requested_fields == ("coordinates", "hours", "status")

    def test_rejects_non_positive_cap(self):
        with pytest.raises(InputError, match="max_results"):
            SearchCriteria(requested_fields=("hours",), department="LIMA", max_results=0)

    def test_rejects_non_text_filter(self):
        with pytest.raises(InputError, match="department must be text"):
            SearchCriteria(requested_fields=("hours",), department=5)

    def test_rejects_bare_string_fields(self):
        with pytest.raises(InputError, match="list of field names"):
            SearchCriteria(requested_fields="hours", department="LIMA")

    def test_rejects_non_integer_cap(self):
        with pytest.raises(InputError, match="whole number"):
            SearchCriteria(requested_fields=("hours",), department="LIMA", max_results="3")

    def test_accepts_list_of_fields(self):
        criteria = SearchCriteria(requested_fields=["hours", "status"], department="LIMA")
        assert criteria.requested_fields == ("hours", "status")


class TestFilterByLocation:
    def test_accent_insensitive_department(self, sample_agencies):
        result = filter_by_location(sample_agencies, department="junin")
        assert [a.terminal_id for a in result] == [91]

    def test_substring_containment(self, sample_agencies):
        result = filter_by_location(sample_agencies, zone="tambo")
        assert [a.terminal_id for a in result] == [91]

    def test_filters_compose_with_and(self, sample_agencies):
        result = filter_by_location(sample_agencies, department="lima", zone="ate")
        assert [a.terminal_id for a in result] == [20]

    def test_preserves_order(self, sample_agencies):
        result = filter_by_location(sample_agencies, province="lima")
        assert [a.terminal_id for a in result] == [356, 20]

    def test_filter_order_does_not_matter(self, sample_agencies):
        a = filter_by_location(
            filter_by_location(sample_agencies, department="lima"), zone="olivos"
        )
        b = filter_by_location(
            filter_by_location(sample_agencies, zone="olivos"), department="lima"
        )
        assert a == b

    def test_record_missing_field_excluded(self):
        agencies = [make_agency(1, zone=None), make_agency(2, zone="SURCO")]
        assert [a.terminal_id for a in filter_by_location(agencies, zone="surco")] == [2]
        # Without a zone filter the record stays.
        assert len(filter_by_location(agencies, department="lima")) == 2

    def test_no_filters_keeps_everything(self, sample_agencies):
        assert filter_by_location(sample_agencies) == sample_agencies


class TestScoring:
    def test_zone_outweighs_address(self):
        by_zone = make_agency(1, name="AGENCIA NORTE", department="AMAZONAS",
                              province="BAGUA", zone="CHACHAPOYAS")
        by_address = make_agency(2, name="AGENCIA SUR", department="AMAZONAS",
                                 province="LUYA", zone="LUYA",
                                 address="JR. CHACHAPOYAS 123")
        ranked = rank_by_keywords([by_address, by_zone], ["chachapoyas"])
        assert [s.agency.terminal_id for s in ranked] == [1, 2]
        assert ranked[0].score == 5
        assert ranked[1].score == 2

    def test_term_counts_once_per_field(self, sample_agencies):
        los_olivos = next(a for a in sample_agencies if a.terminal_id == 356)
        # olivos: name 3 + zone 5 + address 2; lima: name 3 + province 4 + department 4
        assert score_agency(los_olivos, ["olivos"]) == 10
        assert score_agency(los_olivos, ["lima", "olivos"]) == 21

    def test_all_terms_required(self, sample_agencies):
        ate = next(a for a in sample_agencies if a.terminal_id == 20)
        assert score_agency(ate, ["lima", "olivos"]) == EXCLUDED

    def test_adding_a_matching_field_raises_score(self):
        base = make_agency(1, department="X", province="Y", zone="CERCADO")
        richer = make_agency(1, department="X", province="Y", zone="CERCADO",
                             address="PLAZA CERCADO")
        assert score_agency(richer, ["cercado"]) == score_agency(base, ["cercado"]) + 2

    def test_conjunctive_match(self, sample_agencies):
        ranked = rank_by_keywords(sample_agencies, ["lima", "olivos"])
        assert [s.agency.terminal_id for s in ranked] == [356]

    def test_sorted_by_score_descending(self, sample_agencies):
        ranked = rank_by_keywords(sample_agencies, ["atendiendo"])
        scores = [s.score for s in ranked]
        assert scores == sorted(scores, reverse=True)
        assert all(s.score > 0 for s in ranked)


class TestSearch:
    def test_department_only_scenario(self, sample_agencies):
        criteria = SearchCriteria(requested_fields=("hours",), department="AMAZONAS")
        result = search(criteria, sample_agencies)
        assert result.total == 1
        assert result.agencies[0].agency.terminal_id == 48
        assert not result.keyword_ranked

    def test_filter_only_keeps_catalog_order(self, sample_agencies):
        criteria = SearchCriteria(requested_fields=("status",), department="lima")
        result = search(criteria, sample_agencies)
        assert [s.agency.terminal_id for s in result.agencies] == [356, 20]
        assert all(s.score == 0 for s in result.agencies)

    def test_keywords_applied_after_filters(self, sample_agencies):
        criteria = SearchCriteria(
            requested_fields=("hours",), department="cusco", keywords="atendiendo"
        )
        assert search(criteria, sample_agencies).total == 0

    def test_keyword_ranked_flag(self, sample_agencies):
        criteria = SearchCriteria(requested_fields=("hours",), keywords="Chachapoyas")
        result = search(criteria, sample_agencies)
        assert result.keyword_ranked
        assert [s.agency.terminal_id for s in result.agencies] == [48]

    def test_no_match_is_empty_result(self, sample_agencies):
        criteria = SearchCriteria(requested_fields=("hours",), department="TACNA")
        result = search(criteria, sample_agencies)
        assert result.total == 0
        assert result.agencies == []


class TestRankedResult:
    def test_detailed_and_overflow(self):
        result = RankedResult([ScoredAgency(make_agency(i)) for i in range(10)])
        assert [s.agency.terminal_id for s in result.detailed(3)] == [0, 1, 2]
        preview, hidden = result.overflow(3, 5)
        assert [s.agency.terminal_id for s in preview] == [3, 4, 5, 6, 7]
        assert hidden == 2

    def test_overflow_empty_within_cap(self):
        result = RankedResult([ScoredAgency(make_agency(1))])
        assert result.overflow(3) == ([], 0)
