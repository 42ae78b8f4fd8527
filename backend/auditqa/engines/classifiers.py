"""Keyword classifiers: education and CMS regulatory categories, IC relevance, competencies.

All matching is plain case-insensitive substring containment, so short
keywords can hit inside longer words. Scores are additive per keyword and
ties keep the earliest candidate.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from auditqa.models.base import CamelModel
from auditqa.reference.competencies import COMPETENCY_LIBRARY, CompetencySkill
from auditqa.reference.education import EDUCATION_CATEGORY_RULES, UNCLASSIFIED, CategoryRule
from auditqa.reference.infection_control import IC_KEYWORDS
from auditqa.reference.regulatory import DEFAULT_CATEGORY, FTAG_TO_CATEGORY, KEYWORD_RULES, KeywordRule

KEYWORD_SCORE = 3

_NOTES_RULE = "━" * 50
_FTAG_PATTERN = re.compile(r"F-?\s?\d{3,4}", re.IGNORECASE)
_FTAG_SHAPE = re.compile(r"F\d{3,4}")
_NON_FTAG_CHARS = re.compile(r"[^F0-9]")


class CompetencyMatch(CamelModel):
    skill: CompetencySkill
    score: int


def detect_education_category(
    topic: str,
    extra: str = "",
    rules: Sequence[CategoryRule] = EDUCATION_CATEGORY_RULES,
) -> str:
    """Best-scoring education category for a topic (plus optional summary text)."""
    haystack = f"{topic or ''} {extra or ''}".lower()
    if not haystack.strip():
        return UNCLASSIFIED

    best_category, best_score = UNCLASSIFIED, 0
    for rule in rules:
        score = sum(KEYWORD_SCORE for kw in rule.keywords if kw.lower() in haystack)
        if score > best_score:
            best_category, best_score = rule.category, score
    return best_category


def is_ic_related(text: str, keywords: Sequence[str] = IC_KEYWORDS) -> bool:
    """True if the text mentions any infection-control keyword."""
    lowered = (text or "").lower()
    return any(kw in lowered for kw in keywords)


def score_competencies(
    issue: str,
    topic: str = "",
    library: Sequence[CompetencySkill] | None = None,
) -> list[CompetencyMatch]:
    """Score every skill in the library against the issue/topic text.

    Scoring, per skill:
    - +2 for each search word (longer than 2 chars) found in the title
    - +3 for each keyword/word pair where either contains the other
    - +5 for each keyword found anywhere in the search text
    """
    library = COMPETENCY_LIBRARY if library is None else library
    search_text = f"{issue or ''} {topic or ''}".lower()
    words = [w for w in search_text.split() if len(w) > 2]

    matches = []
    for skill in library:
        title = skill.title.lower()
        score = sum(2 for word in words if word in title)
        for keyword in skill.keywords:
            score += sum(3 for word in words if word in keyword or keyword in word)
            if keyword in search_text:
                score += 5
        if score > 0:
            matches.append(CompetencyMatch(skill=skill, score=score))

    matches.sort(key=lambda m: m.score, reverse=True)
    return matches


def find_matching_competencies(
    issue: str,
    topic: str = "",
    library: Sequence[CompetencySkill] | None = None,
    limit: int = 10,
) -> list[CompetencySkill]:
    """Top ``limit`` competencies for an issue, best match first."""
    return [m.skill for m in score_competencies(issue, topic, library)[:limit]]


def format_competencies_for_notes(competencies: Sequence[CompetencySkill]) -> str:
    """Plain-text block listing recommended competencies, for a QA action's notes."""
    if not competencies:
        return ""

    lines = ["📋 RECOMMENDED COMPETENCY VALIDATION (MASTERED.IT):", _NOTES_RULE, ""]
    for idx, comp in enumerate(competencies, start=1):
        platform = "Clinical Comp" if comp.platform == "C" else "Mastered"
        lines.append(f"{idx}. [{comp.code}] {comp.title}")
        lines.append(f"   Disciplines: {', '.join(comp.disciplines)} | Platform: {platform}")
        lines.append("")
    lines.append(_NOTES_RULE)
    lines.append("Assign above competencies in MASTERED.IT for validation.")
    return "\n".join(lines)


def parse_ftags(text: str) -> list[str]:
    """F-Tags cited in free text (``F880``, ``F-880``, ``f 880``), canonical and deduplicated."""
    tags = []
    for match in _FTAG_PATTERN.findall(text or ""):
        tag = _NON_FTAG_CHARS.sub("", match.upper())
        if _FTAG_SHAPE.fullmatch(tag):
            tags.append(tag)
    return list(dict.fromkeys(tags))


def categorize_by_keywords(
    topic: str,
    ftags: str = "",
    nysdoh_regs: str = "",
    purpose: str = "",
    rules: Sequence[KeywordRule] = KEYWORD_RULES,
) -> str:
    """CMS regulatory category for an education topic.

    The first cited F-Tag with a known category wins. Otherwise the keyword
    rules run in order over all four fields; with no hit the topic falls
    back to Nursing Services.
    """
    for tag in parse_ftags(ftags):
        if tag in FTAG_TO_CATEGORY:
            return FTAG_TO_CATEGORY[tag]

    text = " ".join((topic or "", ftags or "", nysdoh_regs or "", purpose or "")).lower()
    for rule in rules:
        if rule.pattern.search(text):
            return rule.category
    return DEFAULT_CATEGORY


def get_category_ftags(category: str) -> list[str]:
    """F-Tags mapped to a category, in numeric order."""
    tags = [tag for tag, mapped in FTAG_TO_CATEGORY.items() if mapped == category]
    return sorted(tags, key=lambda tag: int(tag[1:]))
