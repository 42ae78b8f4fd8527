"""Education topic categories and their detection keywords."""

from __future__ import annotations

from typing import NamedTuple

UNCLASSIFIED = "Other/Unclassified"


class CategoryRule(NamedTuple):
    category: str
    keywords: tuple[str, ...]


EDUCATION_CATEGORY_RULES: tuple[CategoryRule, ...] = (
    CategoryRule("Abuse/Neglect/Mistreatment", ("abuse", "neglect", "mistreatment", "exploitation", "iuo")),
    CategoryRule(
        "Infection Prevention",
        (
            "infection",
            "hand hygiene",
            "ppe",
            "isolation",
            "precaution",
            "glove",
            "mask",
            "disinfection",
            "c. difficile",
            "mrsa",
            "covid",
        ),
    ),
    CategoryRule(
        "Medication Safety",
        ("medication", "meds", "med pass", "narcotic", "controlled substance", "pharmacy", "antibiotic"),
    ),
    CategoryRule(
        "Falls & Resident Safety",
        ("fall", "falls", "fall prevention", "safety", "alarm", "siderail", "restraint", "rounding"),
    ),
    CategoryRule(
        "Skin/Wound & Pressure Injury",
        ("wound", "skin", "pressure", "pressure injury", "ulcer", "turning", "braden", "dressing"),
    ),
    CategoryRule(
        "Transfers, Lifts & Equipment",
        ("hoyer", "mechanical lift", "transfer", "gait belt", "wheelchair", "equipment safety"),
    ),
    CategoryRule(
        "Emergency Preparedness",
        ("emergency", "disaster", "fire", "evacuation", "elopement", "missing resident"),
    ),
    CategoryRule(
        "Documentation & Compliance",
        ("documentation", "charting", "care plan", "progress note", "incident report", "qapi", "compliance"),
    ),
    CategoryRule(
        "Change in Condition",
        ("change in condition", "assessment", "vital signs", "oxygen", "respiratory", "sepsis", "pain assessment"),
    ),
    CategoryRule(
        "Resident Rights",
        ("resident rights", "dignity", "privacy", "grievance", "customer service"),
    ),
)
