"""Tests for the keyword classifiers."""

from auditqa.engines.classifiers import (
    categorize_by_keywords,
    detect_education_category,
    find_matching_competencies,
    format_competencies_for_notes,
    get_category_ftags,
    is_ic_related,
    parse_ftags,
    score_competencies,
)
from auditqa.reference.competencies import COMPETENCY_LIBRARY, CompetencySkill
from auditqa.reference.education import UNCLASSIFIED, CategoryRule
from auditqa.reference.regulatory import (
    ASSESSMENT_CARE_PLANNING,
    CMS_CATEGORIES,
    FTAG_TO_CATEGORY,
    INFECTION_CONTROL,
    NURSING_SERVICES,
    QUALITY_OF_LIFE,
    REHABILITATION,
)

LIBRARY = (
    CompetencySkill(
        id="hh",
        code="HH-01",
        title="Hand Hygiene Technique",
        disciplines=("CNA", "Nurse"),
        platform="Mastered",
        keywords=("hand hygiene", "handwashing"),
    ),
    CompetencySkill(
        id="ppe",
        code="PPE-01",
        title="Donning and Doffing PPE",
        disciplines=("All Staff",),
        platform="C",
        keywords=("ppe", "gown", "gloves"),
    ),
    CompetencySkill(id="ost", code="OST-01", title="Ostomy Care", disciplines=("Nurse",), keywords=("ostomy",)),
)


class TestEducationCategory:
    def test_detects_infection_prevention(self):
        assert detect_education_category("Hand hygiene and PPE refresher") == "Infection Prevention"

    def test_uses_extra_text(self):
        assert detect_education_category("Monthly in-service", "Reviewed fall prevention rounding") == (
            "Falls & Resident Safety"
        )

    def test_blank_is_unclassified(self):
        assert detect_education_category("") == UNCLASSIFIED
        assert detect_education_category("Team lunch") == UNCLASSIFIED

    def test_tie_keeps_earliest_rule(self):
        rules = (CategoryRule("First", ("alpha",)), CategoryRule("Second", ("beta",)))
        assert detect_education_category("alpha beta", rules=rules) == "First"


class TestICRelated:
    def test_keyword_match_is_case_insensitive(self):
        assert is_ic_related("HAND HYGIENE observation")
        assert is_ic_related("Isolation cart stocked")
        assert not is_ic_related("Dining room temperature log")

    def test_substring_semantics(self):
        # "uti" is matched inside longer words
        assert is_ic_related("Routine check")

    def test_blank(self):
        assert not is_ic_related("")


class TestCompetencyMatching:
    def test_best_match_first(self):
        skills = find_matching_competencies("Staff missed hand hygiene at bedside", library=LIBRARY)
        assert skills[0].code == "HH-01"
        assert "OST-01" not in [s.code for s in skills]

    def test_scores_are_additive(self):
        matches = score_competencies("gloves not removed", library=LIBRARY)
        assert len(matches) == 1
        ppe = matches[0]
        assert ppe.skill.code == "PPE-01"
        # "gloves" keyword: +3 word/keyword containment, +5 found in text
        assert ppe.score == 8

    def test_limit(self):
        skills = find_matching_competencies("hand hygiene ppe gloves ostomy", library=LIBRARY, limit=2)
        assert len(skills) == 2

    def test_no_match(self):
        assert find_matching_competencies("xyz", library=LIBRARY) == []

    def test_default_library(self):
        skills = find_matching_competencies("hand hygiene")
        assert skills
        assert all(skill in COMPETENCY_LIBRARY for skill in skills)
        assert len(skills) <= 10


class TestNotesFormatting:
    def test_empty(self):
        assert format_competencies_for_notes([]) == ""

    def test_block(self):
        notes = format_competencies_for_notes(LIBRARY[:2])
        lines = notes.split("\n")
        assert lines[0] == "📋 RECOMMENDED COMPETENCY VALIDATION (MASTERED.IT):"
        assert "1. [HH-01] Hand Hygiene Technique" in lines
        assert "   Disciplines: CNA, Nurse | Platform: Mastered" in lines
        assert "   Disciplines: All Staff | Platform: Clinical Comp" in lines
        assert lines[-1] == "Assign above competencies in MASTERED.IT for validation."


class TestRegulatoryCategories:
    def test_every_mapped_ftag_has_a_known_category(self):
        assert len(CMS_CATEGORIES) == 17
        assert set(FTAG_TO_CATEGORY.values()) <= set(CMS_CATEGORIES)

    def test_parse_ftags_canonicalizes_and_dedupes(self):
        assert parse_ftags("See F-880, f880 and F 689; also F12") == ["F880", "F689"]

    def test_parse_ftags_empty(self):
        assert parse_ftags("") == []
        assert parse_ftags(None) == []

    def test_first_known_ftag_wins(self):
        assert categorize_by_keywords("Hand hygiene", ftags="F999, F-689, F880") == QUALITY_OF_LIFE

    def test_unknown_ftag_falls_through_to_keywords(self):
        assert categorize_by_keywords("Hand hygiene", ftags="F999") == INFECTION_CONTROL

    def test_keyword_rules_checked_in_order(self):
        assert categorize_by_keywords("New hire hand hygiene orientation") == "Orientation & Onboarding"
        assert categorize_by_keywords("Abuse prevention and infection control") == (
            "Abuse, Neglect & Exploitation Prevention"
        )

    def test_purpose_text_is_searched(self):
        assert categorize_by_keywords("Monthly in-service", purpose="Review of MDS timing") == ASSESSMENT_CARE_PLANNING

    def test_short_keywords_match_inside_words(self):
        # "pt" inside "prompt"
        assert categorize_by_keywords("Prompt call light response") == REHABILITATION

    def test_falls_back_to_nursing_services(self):
        assert categorize_by_keywords("Weekly huddle") == NURSING_SERVICES
        assert categorize_by_keywords("") == NURSING_SERVICES

    def test_category_ftags_in_numeric_order(self):
        assert get_category_ftags(INFECTION_CONTROL) == [f"F{n}" for n in range(880, 889)]
        life = get_category_ftags(QUALITY_OF_LIFE)
        assert life[0] == "F675"
        assert life[-1] == "F692"
        assert "F684" not in life
        assert len(life) == 12

    def test_unknown_category_has_no_ftags(self):
        assert get_category_ftags("Not a category") == []
