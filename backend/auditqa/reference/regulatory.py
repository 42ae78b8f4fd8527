"""CMS regulatory categories: F-Tag ranges and keyword rules for topic classification."""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import NamedTuple

RESIDENT_RIGHTS = "Resident Rights & Dignity"
ABUSE_PREVENTION = "Abuse, Neglect & Exploitation Prevention"
ADMISSION_DISCHARGE = "Admission, Transfer & Discharge"
ASSESSMENT_CARE_PLANNING = "Assessment & Care Planning"
QUALITY_OF_LIFE = "Quality of Life"
QUALITY_OF_CARE = "Quality of Care"
NURSING_SERVICES = "Nursing Services"
DIETARY_NUTRITION = "Dietary & Nutrition Services"
PHYSICIAN_SERVICES = "Physician Services"
REHABILITATION = "Rehabilitation Services"
DENTAL = "Dental Services"
PHARMACY = "Pharmacy & Medication Management"
INFECTION_CONTROL = "Infection Prevention & Control"
PHYSICAL_ENVIRONMENT = "Physical Environment & Safety"
ADMINISTRATION_QAPI = "Administration & QAPI"
ORIENTATION = "Orientation & Onboarding"
CLINICAL_COMPETENCIES = "Clinical Competencies & Skills"

CMS_CATEGORIES: tuple[str, ...] = (
    RESIDENT_RIGHTS,
    ABUSE_PREVENTION,
    ADMISSION_DISCHARGE,
    ASSESSMENT_CARE_PLANNING,
    QUALITY_OF_LIFE,
    QUALITY_OF_CARE,
    NURSING_SERVICES,
    DIETARY_NUTRITION,
    PHYSICIAN_SERVICES,
    REHABILITATION,
    DENTAL,
    PHARMACY,
    INFECTION_CONTROL,
    PHYSICAL_ENVIRONMENT,
    ADMINISTRATION_QAPI,
    ORIENTATION,
    CLINICAL_COMPETENCIES,
)

# Inclusive F-Tag number ranges per category.
_FTAG_RANGES: tuple[tuple[int, int, str], ...] = (
    (550, 586, RESIDENT_RIGHTS),
    (600, 610, ABUSE_PREVENTION),
    (620, 632, ADMISSION_DISCHARGE),
    (636, 642, ASSESSMENT_CARE_PLANNING),
    (655, 656, ASSESSMENT_CARE_PLANNING),
    (675, 681, QUALITY_OF_LIFE),
    (688, 692, QUALITY_OF_LIFE),
    (684, 687, QUALITY_OF_CARE),
    (694, 700, QUALITY_OF_CARE),
    (710, 718, PHYSICIAN_SERVICES),
    (720, 732, NURSING_SERVICES),
    (755, 761, PHARMACY),
    (795, 796, DENTAL),
    (800, 813, DIETARY_NUTRITION),
    (820, 827, REHABILITATION),
    (835, 850, ADMINISTRATION_QAPI),
    (880, 888, INFECTION_CONTROL),
    (920, 925, PHYSICAL_ENVIRONMENT),
)

FTAG_TO_CATEGORY = MappingProxyType(
    {f"F{number}": category for low, high, category in _FTAG_RANGES for number in range(low, high + 1)}
)


class KeywordRule(NamedTuple):
    category: str
    pattern: re.Pattern


# Checked in order, first hit wins. Plain substring matches with no word
# boundaries, so "pt" also hits inside "prompt" or "accepted".
KEYWORD_RULES: tuple[KeywordRule, ...] = (
    KeywordRule(ORIENTATION, re.compile(r"orientation|onboarding|new hire|new employee")),
    KeywordRule(ABUSE_PREVENTION, re.compile(r"abuse|neglect|exploitation|mandated reporter")),
    KeywordRule(INFECTION_CONTROL, re.compile(r"infection|ipcp|hand hygiene|ppe|isolation|outbreak|covid|f880")),
    KeywordRule(PHARMACY, re.compile(r"medication|med pass|pharmacy|drug|psychotropic|f755|f756")),
    KeywordRule(RESIDENT_RIGHTS, re.compile(r"dignity|rights|privacy|choice|self-determination|f550")),
    KeywordRule(QUALITY_OF_CARE, re.compile(r"fall|pressure ulcer|wound|restraint|pain|decline|f686|f689")),
    KeywordRule(ASSESSMENT_CARE_PLANNING, re.compile(r"assessment|care plan|mds|quarterly|f636|f656")),
    KeywordRule(DIETARY_NUTRITION, re.compile(r"nutrition|diet|food|feeding|hydration|f800")),
    KeywordRule(QUALITY_OF_LIFE, re.compile(r"activity|social|quality of life|f675")),
    KeywordRule(ADMINISTRATION_QAPI, re.compile(r"qapi|quality assurance|performance improvement|f835")),
    KeywordRule(PHYSICAL_ENVIRONMENT, re.compile(r"fire|safety|environment|disaster|emergency|f920")),
    KeywordRule(REHABILITATION, re.compile(r"therapy|rehab|pt|ot|speech|f820")),
    KeywordRule(ADMISSION_DISCHARGE, re.compile(r"admission|discharge|transfer|f620")),
    KeywordRule(PHYSICIAN_SERVICES, re.compile(r"physician|medical director|doctor|f710")),
    KeywordRule(DENTAL, re.compile(r"dental|dentist|oral|f795")),
    KeywordRule(CLINICAL_COMPETENCIES, re.compile(r"nursing|competency|skill|clinical")),
)

DEFAULT_CATEGORY = NURSING_SERVICES
