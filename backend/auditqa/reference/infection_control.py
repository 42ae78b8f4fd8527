"""Infection-control reference data: IC keyword list and the F88x F-Tag family."""

from __future__ import annotations

from types import MappingProxyType

IC_FTAG_PREFIX = "F88"

IC_FTAG_DEFINITIONS = MappingProxyType(
    {
        "F880": "Infection Prevention and Control Program",
        "F881": "Antibiotic Stewardship Program",
        "F882": "Infection Preventionist",
        "F883": "System for Preventing, Identifying, Reporting, Investigating",
        "F884": "Linens",
        "F885": "Dialysis",
        "F886": "Influenza and Pneumococcal Immunizations",
        "F887": "Influenza Vaccination Offered to Staff",
        "F888": "Reporting COVID-19",
    }
)

# Matched as plain substrings; short stems such as "uti" and "control" also
# hit unrelated words.
IC_KEYWORDS: tuple[str, ...] = (
    "infection",
    "control",
    "hand hygiene",
    "ppe",
    "isolation",
    "precaution",
    "transmiss",
    "covid",
    "influenza",
    "pneumonia",
    "mrsa",
    "uti",
    "catheter",
    "wound",
    "antibiotic",
    "sterilization",
    "sanitiz",
    "disinfect",
    "bloodborne",
)

# Always appended to the IC report recommendations.
IC_REGULATORY_REMINDERS: tuple[str, ...] = (
    "Ensure IP quarterly reports submitted to QAPI committee per F880 requirements",
    "Verify antibiotic stewardship program documentation current (F881 compliance)",
)
