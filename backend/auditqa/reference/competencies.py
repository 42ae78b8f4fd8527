"""Default competency-validation library (MASTERED.IT skill codes).

Injected into ``find_matching_competencies``; callers may pass their own
library instead.
"""

from __future__ import annotations

from typing import Literal

from pydantic import ConfigDict

from auditqa.models.base import CamelModel

Platform = Literal["Mastered", "C"]


class CompetencySkill(CamelModel):
    model_config = ConfigDict(frozen=True)

    id: str
    code: str
    title: str
    disciplines: tuple[str, ...] = ()
    platform: Platform = "Mastered"
    keywords: tuple[str, ...] = ()


def _skill(code, title, disciplines, platform, keywords, skill_id=None) -> CompetencySkill:
    return CompetencySkill(
        id=skill_id or code,
        code=code,
        title=title,
        disciplines=disciplines,
        platform=platform,
        keywords=keywords,
    )


COMPETENCY_LIBRARY: tuple[CompetencySkill, ...] = (
    # CNA
    _skill("50-292-25", "CC-Orientation Checklist: Certified Nursing Assistant", ("CNA",), "C", ("orientation", "cna", "checklist")),
    _skill("50-060-25", "Ostomy Care", ("CNA", "Nurse"), "Mastered", ("ostomy", "colostomy", "ileostomy", "stoma")),
    _skill("50-062-25", "Measuring and Recording Height", ("CNA",), "Mastered", ("height", "measurement", "vital")),
    _skill("50-065-25", "Prosthesis Application and Removal", ("CNA", "Nurse"), "Mastered", ("prosthesis", "prosthetic", "limb")),
    _skill("50-066-25", "Applying and Removing Restraints", ("CNA", "Nurse"), "Mastered", ("restraint", "safety", "fall")),
    _skill("50-070-25", "Passive Range of Motion Exercises Upper Extremities", ("CNA", "Nurse"), "Mastered", ("range of motion", "rom", "prom", "exercise", "upper")),
    _skill("50-071-25", "Assisting with a Walker", ("CNA", "Nurse"), "Mastered", ("walker", "ambulation", "mobility", "gait")),
    _skill("50-120-25", "Post-Mortem Care", ("CNA", "Nurse"), "Mastered", ("post-mortem", "death", "deceased")),
    _skill("50-076-25", "Dementia Care – Personal Hygiene", ("CNA",), "Mastered", ("dementia", "hygiene", "alzheimer", "cognitive")),
    _skill("50-072-25", "Transfer Using a Mechanical Stand-Up Lift", ("CNA", "Nurse"), "Mastered", ("transfer", "stand-up lift", "mechanical", "sit-to-stand")),
    _skill("50-073-25", "Mechanical Lift Hoyer", ("CNA", "Nurse"), "Mastered", ("hoyer", "mechanical lift", "transfer", "lift")),
    _skill("50-236-25", "Measuring and Recording Fluid Intake", ("CNA", "Nurse"), "Mastered", ("fluid", "intake", "hydration", "i&o")),
    _skill("50-238-25", "Measuring and Recording Respirations", ("CNA", "Nurse"), "Mastered", ("respiration", "breathing", "vital signs")),
    _skill("50-239-25", "Measuring and Recording Apical Pulse", ("CNA", "Nurse"), "Mastered", ("apical", "pulse", "heart rate", "vital")),
    _skill("50-246-25", "Gait Belt Application", ("CNA", "Nurse"), "Mastered", ("gait belt", "transfer", "ambulation", "safety")),
    _skill("50-247-25", "Transfer To and From Commode", ("CNA", "Nurse"), "Mastered", ("commode", "transfer", "toileting")),
    _skill("50-237-25", "Measuring & Recording Blood Pressure (Manual)", ("CNA", "Med Tech", "Nurse"), "Mastered", ("blood pressure", "bp", "manual", "vital signs")),
    _skill("50-240-25", "Compression Socks Application", ("CNA", "Nurse"), "Mastered", ("compression", "ted", "stockings", "dvt")),
    _skill("50-032-25", "One Person Transfer", ("CNA",), "Mastered", ("transfer", "one person", "mobility")),
    _skill("50-031-25", "Therapeutic Diets", ("CNA", "Dietary", "Nurse"), "Mastered", ("diet", "nutrition", "therapeutic", "feeding")),
    _skill("50-027-25", "Active Range of Motion (AROM) – Upper and Lower Extremities", ("CNA",), "Mastered", ("range of motion", "arom", "exercise", "active")),
    _skill("50-010-25", "Anticoagulant Medication Monitoring", ("CNA", "Nurse"), "Mastered", ("anticoagulant", "blood thinner", "coumadin", "warfarin")),
    _skill("50-007-25", "Glucometer: Obtaining a Blood Glucose Reading", ("CNA", "Med Tech", "Nurse"), "Mastered", ("glucometer", "blood sugar", "glucose", "diabetes", "fingerstick")),
    _skill("50-288-25", "Perineal Care with Urinary Catheter", ("CNA", "Nurse"), "Mastered", ("perineal", "catheter", "foley", "urinary")),
    _skill("50-279-25", "Fluid Restriction - CNA", ("CNA",), "Mastered", ("fluid restriction", "intake", "limit")),
    _skill("50-262-25", "Ambulation", ("CNA", "Nurse", "Therapy"), "Mastered", ("ambulation", "walking", "mobility", "gait")),
    _skill("50-077-25", "Dementia Care Assisting with Dressing & Undressing", ("CNA",), "Mastered", ("dementia", "dressing", "alzheimer")),
    _skill("50-260-25", "Obtaining a Temperature", ("CNA", "Nurse"), "Mastered", ("temperature", "vital signs", "fever")),
    _skill("50-259-25", "Feeding and Hydration Skills Checklist (Paid Feeding Assistant)", ("CNA", "Dietary", "Therapy"), "Mastered", ("feeding", "hydration", "nutrition", "eating")),
    _skill("50-252-25", "Contracture Management and Splinting Skills Checklist (CNA)", ("CNA", "Nurse"), "Mastered", ("contracture", "splint", "positioning")),
    _skill("50-250-25", "Assisting with meals", ("CNA", "Nurse", "Therapy"), "Mastered", ("meals", "eating", "feeding", "nutrition")),
    _skill("50-249-25", "Assisting with Using a Urinal", ("CNA",), "Mastered", ("urinal", "toileting", "elimination")),
    _skill("50-245-25", "Food Storage", ("CNA", "All Staff"), "Mastered", ("food", "storage", "refrigerator", "safety")),
    _skill("50-244-25", "Turning and Repositioning for Lateral & Supine", ("CNA", "Nurse", "PCA"), "Mastered", ("turning", "repositioning", "pressure", "skin", "lateral", "supine")),
    _skill("50-243-25", "Transfer To and From Shower/Tub", ("CNA",), "Mastered", ("shower", "tub", "bath", "transfer")),
    _skill("50-242-25", "Foley Catheter Care Skills Checklist (CNA)", ("CNA",), "Mastered", ("foley", "catheter", "urinary", "cauti")),
    _skill("50-233-25", "Measuring & Recording Radial Pulse", ("CNA", "Nurse", "Therapy"), "Mastered", ("radial", "pulse", "vital signs")),
    _skill("50-231-25", "Transfer from bed to chair wheelchair use of gait belt", ("CNA",), "Mastered", ("transfer", "wheelchair", "gait belt", "bed")),
    _skill("50-229-25", "Colostomy Care and Maintenance", ("CNA", "Nurse", "OT"), "Mastered", ("colostomy", "ostomy", "stoma")),
    _skill("50-228-25", "Measuring & Recording Blood Pressure (Automatic Device)", ("CNA", "Nurse", "Therapy"), "Mastered", ("blood pressure", "bp", "automatic", "vital signs")),
    _skill("50-226-25", "Passive Range of Motion (Lower Extremity)", ("CNA", "Nurse", "Therapy"), "Mastered", ("range of motion", "prom", "lower", "leg")),
    _skill("50-225-25", "Dementia Care – Assisting with Eating", ("CNA", "Nurse", "Therapy"), "Mastered", ("dementia", "eating", "feeding", "alzheimer")),
    _skill("50-223-25", "Dementia Care – Incontinence Care", ("CNA", "Nurse", "PCA"), "Mastered", ("dementia", "incontinence", "toileting")),
    _skill("50-215-25", "Transfers Using a Sliding Board", ("CNA", "Nurse", "PCA"), "Mastered", ("sliding board", "transfer", "mobility")),
    _skill("50-209-25", "Orthostatic Blood Pressure Measurement", ("CNA", "Nurse", "Therapy"), "Mastered", ("orthostatic", "blood pressure", "bp", "hypotension")),
    _skill("50-202-25", "Pulse Oximetry", ("CNA", "Med Tech", "Nurse"), "Mastered", ("pulse ox", "oximetry", "oxygen", "saturation", "spo2")),
    _skill("50-194-25", "Bathroom Assistance", ("CNA",), "Mastered", ("bathroom", "toileting", "assistance")),
    _skill("50-192-25", "Changing a Urinary Drainage Bag", ("CNA", "Med Tech", "Nurse"), "Mastered", ("urinary", "drainage bag", "catheter", "foley")),
    _skill("50-181-25", "Shampooing Hair", ("CNA",), "Mastered", ("shampoo", "hair", "hygiene")),
    _skill("50-185-25", "Changing an Adult Brief", ("CNA",), "Mastered", ("brief", "incontinence", "diaper")),
    _skill("50-182-25", "Modified Bed Bath", ("CNA",), "Mastered", ("bed bath", "bathing", "hygiene")),
    _skill("50-178-25", "Ventilator Observation and Support - CNA", ("CNA",), "Mastered", ("ventilator", "vent", "respiratory")),
    _skill("50-166-25", "Eyeglass Care", ("CNA",), "Mastered", ("eyeglass", "glasses", "vision")),
    _skill("50-165-25", "Fall Prevention", ("CNA", "All Staff"), "Mastered", ("fall", "prevention", "safety", "risk")),
    _skill("50-164-25", "Hand and Nail Care Skills Checklist (CNA)", ("CNA",), "Mastered", ("hand", "nail", "hygiene")),
    _skill("50-144-25", "Making an Occupied Bed", ("CNA",), "Mastered", ("occupied bed", "linen", "bed making")),
    _skill("50-143-25", "Making an Unoccupied Bed/Handling of Bed Linens", ("CNA",), "Mastered", ("unoccupied bed", "linen", "bed making")),
    _skill("50-106-25", "CC-Mouth Care", ("CNA",), "C", ("mouth", "oral", "dental")),
    _skill("50-107-25", "CC-Incontinent Care", ("CNA",), "C", ("incontinent", "incontinence", "toileting")),
    _skill("50-108-25", "CC-Handwashing", ("CNA",), "C", ("handwashing", "hand hygiene", "infection control")),
    _skill("50-104-25", "CC-Point of Care (POC)", ("CNA",), "C", ("point of care", "poc", "documentation")),
    _skill("50-102-25", "CC-Turning & Repositioning", ("CNA",), "C", ("turning", "repositioning", "pressure")),
    _skill("50-103-25", "CC-Bath/Shower", ("CNA",), "C", ("bath", "shower", "bathing", "hygiene")),
    _skill("50-110-25", "CC-Grooming", ("CNA",), "C", ("grooming", "hygiene", "appearance")),
    _skill("50-109-25", "CC-Transferring A Resident With The Use Of The Mechanical Lift-CNA", ("CNA",), "C", ("mechanical lift", "transfer", "hoyer")),
    _skill("50-111-25", "CC-Standing Lift Competency", ("CNA",), "C", ("standing lift", "sit-to-stand", "transfer")),
    _skill("50-117-25", "Lowering a Resident with a Fall", ("CNA",), "Mastered", ("fall", "lowering", "controlled descent")),
    _skill("50-116-25", "Applying and Removing a Urinary Leg Bag", ("CNA",), "Mastered", ("leg bag", "urinary", "catheter")),
    _skill("50-115-25", "Assisting with Eating", ("CNA",), "Mastered", ("eating", "feeding", "meals")),
    _skill("50-114-25", "Assisting a Resident with Bladder Incontinence", ("CNA",), "Mastered", ("bladder", "incontinence", "urinary")),
    _skill("50-113-25", "Assisting with Bowel Incontinence", ("CNA",), "Mastered", ("bowel", "incontinence", "fecal")),
    _skill("50-112-25", "Dressing a Resident with Hemiplegia/Hemiparesis", ("CNA",), "Mastered", ("hemiplegia", "hemiparesis", "dressing", "stroke")),
    _skill("50-085-25", "Perineal Care- Male Resident", ("CNA",), "Mastered", ("perineal", "male", "hygiene")),
    _skill("50-086-25", "Perineal Care – Female Residents", ("CNA",), "Mastered", ("perineal", "female", "hygiene")),
    _skill("50-087-25", "Assisting with Toileting Using a Bedpan", ("CNA",), "Mastered", ("bedpan", "toileting", "elimination")),
    _skill("50-084-25", "Full Bed Bath", ("CNA",), "Mastered", ("bed bath", "full bath", "hygiene")),
    _skill("50-083-25", "Assisting with Tub Bath", ("CNA",), "Mastered", ("tub", "bath", "bathing")),
    _skill("50-082-25", "Assisting with a Shower", ("CNA",), "Mastered", ("shower", "bathing", "hygiene")),
    _skill("50-081-25", "Assisting with Toileting", ("CNA",), "Mastered", ("toileting", "bathroom", "elimination")),
    _skill("50-080-25", "Shaving a Resident with a Razor/Electric Razor", ("CNA",), "Mastered", ("shaving", "razor", "grooming")),
    _skill("50-079-25", "Foot Care (CNA)", ("CNA",), "Mastered", ("foot", "care", "hygiene")),
    _skill("50-078-25", "Dementia Care – Assisting with Toileting", ("CNA",), "Mastered", ("dementia", "toileting", "alzheimer")),
    _skill("50-075-25", "Dementia Care – Bathing", ("CNA",), "Mastered", ("dementia", "bathing", "alzheimer")),
    _skill("50-064-25", "Measuring and Recording Pulse and Respiration", ("CNA",), "Mastered", ("pulse", "respiration", "vital signs")),
    _skill("50-063-25", "Measuring and Recording Weight", ("CNA",), "Mastered", ("weight", "measurement", "scale")),
    _skill("50-061-25", "Empty Contents of Urinary Drainage Bag", ("CNA",), "Mastered", ("urinary", "drainage", "catheter", "empty")),
    _skill("50-057-25", "Heel/Elbow Protectors – Application & Removal", ("CNA",), "Mastered", ("heel", "elbow", "protector", "pressure")),
    _skill("50-056-25", "Oral Care Conscious", ("CNA",), "Mastered", ("oral", "mouth", "dental")),
    _skill("50-054-25", "Assisting with Dressing and Undressing", ("CNA",), "Mastered", ("dressing", "undressing", "clothing")),
    _skill("50-053-25", "Dressing a Dependent Resident", ("CNA",), "Mastered", ("dressing", "dependent", "clothing")),
    _skill("50-052-25", "Measuring and Recording Pain", ("CNA",), "Mastered", ("pain", "assessment", "scale")),
    _skill("50-051-25", "Denture Care", ("CNA",), "Mastered", ("denture", "oral", "teeth")),
    _skill("50-050-25", "Assisting with Brushing and Flossing of Teeth", ("CNA",), "Mastered", ("brushing", "flossing", "oral", "dental")),
    _skill("50-048-25", "Repositioning in Wheelchair", ("CNA",), "Mastered", ("wheelchair", "repositioning", "positioning")),
    _skill("50-047-25", "Hearing Aid Care: Insertion, Removal, Cleaning, and Battery Replacement", ("CNA",), "Mastered", ("hearing aid", "hearing", "battery")),
    _skill("50-044-25", "Record and Report Condition Changes", ("CNA",), "Mastered", ("record", "report", "condition", "documentation")),
    _skill("50-043-25", "Transfer In and Out of Wheelchair", ("CNA",), "Mastered", ("wheelchair", "transfer")),
    _skill("50-042-25", "Record and Report Care Provided", ("CNA",), "Mastered", ("record", "report", "documentation")),
    _skill("50-041-25", "Turning and Repositioning in Bed", ("CNA",), "Mastered", ("turning", "repositioning", "bed", "pressure")),
    _skill("50-040-25", "Bed Mobility", ("CNA",), "Mastered", ("bed", "mobility", "movement")),
    _skill("50-039-25", "Transfer To and From a Car", ("CNA",), "Mastered", ("car", "transfer", "vehicle")),
    _skill("50-038-25", "Vital Signs – Complete Set", ("CNA",), "Mastered", ("vital signs", "temperature", "pulse", "respiration", "blood pressure")),
    _skill("50-037-25", "Urinary Toileting Program Evaluation", ("CNA",), "Mastered", ("urinary", "toileting", "program", "incontinence")),
    _skill("50-002-25", "Skin Care & Pressure Injury Prevention (CNA)", ("CNA", "Med Tech", "PCA"), "Mastered", ("skin", "pressure", "injury", "prevention", "wound")),
    _skill("50-001-25", "Oxygen (CNA)", ("CNA", "Med Tech", "PCA"), "Mastered", ("oxygen", "o2", "respiratory")),
    # Nurse
    _skill("50-171-25", "Back Rub", ("Nurse",), "Mastered", ("back rub", "massage", "comfort")),
    _skill("50-169-25", "Feeding a Resident with Dysphagia", ("Nurse",), "Mastered", ("dysphagia", "swallowing", "feeding")),
    _skill("50-168-25", "Feeding a Dependent Resident", ("Nurse",), "Mastered", ("feeding", "dependent", "eating")),
    _skill("50-163-25", "Medication Administration – Intravenous (IV)", ("Nurse",), "Mastered", ("iv", "intravenous", "medication", "injection")),
    _skill("50-162-25", "Medication Administration – Intramuscular Injection", ("Nurse",), "Mastered", ("intramuscular", "im", "injection", "medication")),
    _skill("50-161-25", "Medication Administration – Ear Drops", ("Nurse",), "Mastered", ("ear", "drops", "otic", "medication")),
    _skill("50-160-25", "Medication Administration – Nasal Sprays", ("Nurse",), "Mastered", ("nasal", "spray", "medication")),
    _skill("50-159-25", "Medication Administration – Eye Ointments", ("Nurse",), "Mastered", ("eye", "ointment", "ophthalmic", "medication")),
    _skill("50-158-25", "Medication Administration – Transdermal Patch Skills Checklist", ("Nurse",), "Mastered", ("transdermal", "patch", "medication")),
    _skill("50-157-25", "Medication Administration – Inhalants", ("Nurse",), "Mastered", ("inhaler", "inhalant", "respiratory", "medication")),
    _skill("50-156-25", "Medication Administration – Intradermal Injection", ("Nurse",), "Mastered", ("intradermal", "injection", "medication")),
    _skill("50-155-25", "Medication Administration – Nose Drops", ("Nurse",), "Mastered", ("nose", "drops", "nasal", "medication")),
    _skill("50-154-25", "Medication Administration – Subcutaneous Injection", ("Nurse",), "Mastered", ("subcutaneous", "subq", "injection", "medication")),
    _skill("50-153-25", "Medication Administration – Rectal Suppositories", ("Nurse",), "Mastered", ("rectal", "suppository", "medication")),
    _skill("50-152-25", "Medication Administration – Eye Drops", ("Nurse",), "Mastered", ("eye", "drops", "ophthalmic", "medication")),
    _skill("50-151-25", "Medication Administration – Transdermal Cream", ("Nurse",), "Mastered", ("transdermal", "cream", "topical", "medication")),
    _skill("50-150-25", "Medication Administration – Oral Medications", ("Nurse",), "Mastered", ("oral", "medication", "pills", "tablet")),
    _skill("50-149-25", "Medication Administration – Two Parenteral Medications in One Injection", ("Nurse",), "Mastered", ("parenteral", "injection", "medication", "mixing")),
    _skill("50-148-25", "Medication Administration – Z-Track Method", ("Nurse",), "Mastered", ("z-track", "injection", "im", "medication")),
    _skill("50-147-25", "Intake and Output (I&O) Measurement", ("Nurse",), "Mastered", ("intake", "output", "i&o", "fluid")),
    _skill("50-146-25", "Medication Pass", ("Nurse",), "Mastered", ("medication", "med pass", "administration")),
    _skill("50-145-25", "Medication Self-Administration Assistance", ("Nurse",), "Mastered", ("self-administration", "medication", "independence")),
    _skill("50-141-25", "Administering an ECG/EKG", ("Nurse",), "Mastered", ("ecg", "ekg", "cardiac", "heart")),
    _skill("50-140-25", "Indwelling Urinary Catheter Insertion", ("Nurse",), "Mastered", ("catheter", "insertion", "foley", "urinary")),
    _skill("50-139-25", "Obtaining a Sputum Specimen", ("Nurse",), "Mastered", ("sputum", "specimen", "respiratory")),
    _skill("50-138-25", "Obtaining a Wound Culture", ("Nurse",), "Mastered", ("wound", "culture", "specimen")),
    _skill("50-137-25", "Oxygen Administration", ("Nurse",), "Mastered", ("oxygen", "o2", "respiratory", "administration")),
    _skill("50-136-25", "Wound Dressing", ("Nurse",), "Mastered", ("wound", "dressing", "bandage")),
    _skill("50-135-25", "Wound Dressing with Packing Skills Checklist", ("Nurse",), "Mastered", ("wound", "packing", "dressing")),
    _skill("50-134-25", "Wound Care Assessment Skills Checklist", ("Nurse",), "Mastered", ("wound", "assessment", "care")),
    _skill("50-133-25", "Negative Pressure Wound Therapy (NPWT) – Application and Removal Skills Checklist", ("Nurse",), "Mastered", ("npwt", "negative pressure", "wound", "vac")),
    _skill("50-132-25", "Implanted Port (Port-a-Cath) Care, Accessing, and Flushing Skills Checklist", ("Nurse",), "Mastered", ("port", "port-a-cath", "access", "flushing")),
    _skill("50-131-25", "Bowel Sound Assessment Skills Checklist", ("Nurse",), "Mastered", ("bowel", "sounds", "assessment", "gi")),
    _skill("50-130-25", "Enema Administration Skills Checklist", ("Nurse",), "Mastered", ("enema", "bowel", "administration")),
    _skill("50-129-25", "Midstream Urine Collection Checklist", ("Nurse",), "Mastered", ("urine", "midstream", "specimen", "collection")),
    _skill("50-128-25", "Peripheral IV (PIV) – IV Fluid Administration", ("Nurse",), "Mastered", ("iv", "piv", "fluid", "administration")),
    _skill("50-127-25", "Peripheral IV (PIV) Care – Dressing & Flushing Skills Checklist", ("Nurse",), "Mastered", ("iv", "piv", "dressing", "flushing")),
    _skill("50-126-25", "Peripheral IV Catheter – Insertion and Removal Skills Checklist", ("Nurse",), "Mastered", ("iv", "piv", "insertion", "catheter")),
    _skill("50-124-25", "Midline Catheter – Dressing Change", ("Nurse",), "Mastered", ("midline", "catheter", "dressing")),
    _skill("50-123-25", "Peripherally Inserted Central Catheter (PICC) Line Removal", ("Nurse",), "Mastered", ("picc", "removal", "catheter")),
    _skill("50-122-25", "Medication Administration via Feeding Tube – Nurse Skills Checklist", ("Nurse",), "Mastered", ("feeding tube", "medication", "gtube", "peg")),
    _skill("50-121-25", "Nasogastric Tube Feeding Administration – Nurse", ("Nurse",), "Mastered", ("nasogastric", "ng tube", "feeding")),
    _skill("50-119-25", "Central Venous Catheter Care", ("Nurse",), "Mastered", ("central line", "cvc", "catheter")),
    _skill("50-118-25", "Central Venous Catheter Dressing Change – Application and Removal", ("Nurse",), "Mastered", ("central line", "cvc", "dressing")),
    _skill("50-074-25", "Responding to Hypoglycemia – Skills Checklist", ("Nurse",), "Mastered", ("hypoglycemia", "low blood sugar", "diabetes", "glucose")),
    _skill("50-059-25", "Sharps Handling, Disposal, and Waste Management", ("EVS/Housekeeping", "Nurse"), "Mastered", ("sharps", "disposal", "waste", "needle")),
    _skill("50-055-25", "Focused Neurological Checks", ("Nurse",), "Mastered", ("neuro", "neurological", "assessment")),
    _skill("50-049-25", "Ventilator Management and Care", ("Nurse",), "Mastered", ("ventilator", "vent", "respiratory")),
    _skill("50-017-25", "Musculoskeletal Assessment", ("Nurse",), "Mastered", ("musculoskeletal", "msk", "assessment")),
    _skill("50-015-25", "Hypertension Monitoring & Antihypertensive Medication Administration", ("Nurse",), "Mastered", ("hypertension", "blood pressure", "antihypertensive")),
    _skill("50-014-25", "Insulin Administration", ("Nurse",), "Mastered", ("insulin", "diabetes", "injection")),
    _skill("50-012-25", "Hypertension Assessment", ("Med Tech", "Nurse"), "Mastered", ("hypertension", "blood pressure", "assessment")),
    _skill("50-011-25", "High Alert Medication Administration", ("Med Tech", "Nurse"), "Mastered", ("high alert", "medication", "safety")),
    _skill("50-003-25", "Psychosocial Needs Assessment", ("Nurse", "Social Services"), "Mastered", ("psychosocial", "mental health", "assessment")),
    _skill("50-026-25", "Tracheostomy Care and Suctioning", ("Nurse",), "Mastered", ("tracheostomy", "trach", "suctioning", "airway")),
    _skill("50-036-25", "CAUTI Assessment", ("Nurse",), "Mastered", ("cauti", "catheter", "urinary", "infection")),
    _skill("50-035-25", "Urinary and Bowel Evaluation", ("Nurse",), "Mastered", ("urinary", "bowel", "evaluation", "incontinence")),
    _skill("50-033-25", "Trauma-Informed Care Risk Assessment", ("Nurse", "Social Services"), "Mastered", ("trauma", "informed care", "risk")),
    _skill("50-030-25", "Smoking Risk Assessment", ("Nurse",), "Mastered", ("smoking", "tobacco", "risk")),
    _skill("50-029-25", "Skin Assessment", ("Nurse",), "Mastered", ("skin", "assessment", "pressure", "wound")),
    _skill("50-028-25", "Sepsis Assessment", ("Nurse",), "Mastered", ("sepsis", "infection", "assessment")),
    _skill("50-069-25", "Active Range of Motion (AROM) – Upper and Lower Extremities", ("Nurse",), "Mastered", ("range of motion", "arom", "exercise")),
    _skill("50-025-25", "Nebulizer Therapy", ("Nurse",), "Mastered", ("nebulizer", "respiratory", "therapy")),
    _skill("50-024-25", "CPAP", ("Nurse",), "Mastered", ("cpap", "sleep apnea", "respiratory")),
    _skill("50-023-25", "Respiratory Assessment", ("Nurse",), "Mastered", ("respiratory", "assessment", "lung")),
    _skill("50-022-25", "Administering Immunizations", ("Nurse",), "Mastered", ("immunization", "vaccine", "injection")),
    _skill("50-020-25", "Pain Management", ("Nurse",), "Mastered", ("pain", "management", "assessment")),
    _skill("50-018-25", "Neurological Assessment", ("Nurse",), "Mastered", ("neuro", "neurological", "assessment")),
    _skill("50-016-25", "Medication Management", ("Nurse",), "Mastered", ("medication", "management", "administration")),
    _skill("50-013-25", "Injection Practices", ("Nurse",), "Mastered", ("injection", "safety", "sharps")),
    _skill("50-009-25", "Genitourinary Assessment", ("Nurse",), "Mastered", ("gu", "genitourinary", "urinary", "assessment")),
    _skill("50-008-25", "Glucometer Testing, Control, and Cleaning/Disinfection", ("Nurse", "QMA"), "Mastered", ("glucometer", "glucose", "testing", "control")),
    _skill("50-005-25", "Gastrointestinal (GI) Assessment", ("Nurse",), "Mastered", ("gi", "gastrointestinal", "assessment", "bowel")),
    _skill("50-287-25", "Sepsis Recognition and Management", ("Nurse",), "Mastered", ("sepsis", "recognition", "management")),
    _skill("50-280-25", "Fluid Restriction - Nurse", ("Nurse",), "Mastered", ("fluid restriction", "intake", "limit")),
    _skill("50-278-25", "Dialysis Monitoring – Pre- and Post-Treatment", ("Nurse",), "Mastered", ("dialysis", "monitoring", "renal")),
    _skill("50-277-25", "Dialysis", ("Nurse",), "Mastered", ("dialysis", "renal", "kidney")),
    _skill("50-276-25", "Fall Risk Assessment", ("Nurse",), "Mastered", ("fall", "risk", "assessment", "safety")),
    _skill("50-274-25", "Enteral Feeding", ("Nurse",), "Mastered", ("enteral", "feeding", "tube", "nutrition")),
    _skill("50-273-25", "Fluid Volume Status Assessment", ("Nurse",), "Mastered", ("fluid", "volume", "dehydration", "overload")),
    _skill("50-272-25", "Risk Management Assessment", ("Nurse",), "Mastered", ("risk", "management", "assessment")),
    _skill("50-270-25", "Suicide Risk Assessment", ("Nurse",), "Mastered", ("suicide", "risk", "mental health")),
    _skill("50-269-25", "SBAR Communication", ("Nurse",), "Mastered", ("sbar", "communication", "handoff")),
    _skill("50-268-25", "Oral Cavity Assessment - Nurse", ("Nurse",), "Mastered", ("oral", "mouth", "assessment")),
    _skill("50-267-25", "Cardiac Assessment - Nurse", ("Nurse",), "Mastered", ("cardiac", "heart", "assessment")),
    _skill("50-265-25", "COPD - Nurse", ("Nurse",), "Mastered", ("copd", "respiratory", "lung")),
    _skill("50-264-25", "Ears, Eyes, Nose, Throat (EENT) Assessment", ("Nurse",), "Mastered", ("eent", "ears", "eyes", "nose", "throat")),
    _skill("50-263-25", "Congestive Heart Failure (CHF) - Nurse", ("Nurse",), "Mastered", ("chf", "heart failure", "cardiac")),
    _skill("50-261-25", "Naloxone Administration", ("Nurse",), "Mastered", ("naloxone", "narcan", "overdose", "opioid")),
    _skill("50-241-25", "Wrapping an Extremity with ACE Bandage", ("Nurse",), "Mastered", ("ace", "bandage", "wrap", "extremity")),
    _skill("50-234-25", "Measuring and Recording Food Intake", ("Nurse",), "Mastered", ("food", "intake", "nutrition", "eating")),
    _skill("50-227-25", "Clean Dressing Change", ("Nurse",), "Mastered", ("dressing", "wound", "clean")),
    _skill("50-217-25", "Total Parenteral Nutrition (TPN) Administration (with Additives)", ("Nurse",), "Mastered", ("tpn", "parenteral", "nutrition", "iv")),
    _skill("50-213-25", "Oral and Nasopharyngeal Suctioning", ("Nurse",), "Mastered", ("suctioning", "oral", "nasopharyngeal", "airway")),
    _skill("50-208-25", "Insulin Pen Administration", ("Nurse",), "Mastered", ("insulin", "pen", "diabetes")),
    _skill("50-207-25", "Stroke Alert", ("Nurse",), "Mastered", ("stroke", "cva", "neuro", "alert")),
    _skill("50-203-25", "BiPAP", ("Nurse",), "Mastered", ("bipap", "respiratory", "breathing")),
    _skill("50-201-25", "Indwelling Urinary Catheter Removal", ("Nurse",), "Mastered", ("catheter", "foley", "removal", "urinary")),
    _skill("50-200-25", "Indwelling Urinary Catheter Maintenance, Flushing, and Specimen Collection", ("Nurse",), "Mastered", ("catheter", "foley", "maintenance", "flushing")),
    _skill("50-199-25", "Texas Catheter / Condom Catheter Application, Maintenance, and Removal", ("Nurse",), "Mastered", ("texas catheter", "condom catheter", "external")),
    _skill("50-198-25", "Total Parenteral Nutrition (TPN) Administration", ("Nurse",), "Mastered", ("tpn", "parenteral", "nutrition")),
    _skill("50-193-25", "Suprapubic Catheter Maintenance and Specimen Collection", ("Nurse",), "Mastered", ("suprapubic", "catheter", "specimen")),
    _skill("50-191-25", "Bowel Toileting Program Evaluation", ("Nurse",), "Mastered", ("bowel", "toileting", "program")),
    _skill("50-190-25", "Record and Report Care Provided – Nurse", ("Nurse",), "Mastered", ("record", "report", "documentation")),
    _skill("50-189-25", "Record and Report Condition Changes - Nurse", ("Nurse",), "Mastered", ("record", "report", "condition", "documentation")),
    _skill("50-188-25", "Administering Tube Feeding - Bolus/Gravity or Pump", ("Nurse",), "Mastered", ("tube feeding", "bolus", "pump", "enteral")),
    _skill("50-187-25", "Nasogastric Tube Placement and Removal", ("RN",), "Mastered", ("ng tube", "nasogastric", "placement")),
    _skill("50-186-25", "Nasogastric Tube Medication Administration", ("Nurse",), "Mastered", ("ng tube", "nasogastric", "medication")),
    _skill("50-184-25", "Jackson Pratt (JP) Drain Care", ("Nurse",), "Mastered", ("jp drain", "jackson pratt", "drain")),
    _skill("50-179-25", "PleurX Drain Care", ("Nurse",), "Mastered", ("pleurx", "drain", "pleural")),
    _skill("50-176-25", "Accessing and Flushing a Central Venous Catheter", ("Nurse",), "Mastered", ("central line", "cvc", "flushing")),
    _skill("50-175-25", "PICC Line Dressing Change", ("Nurse",), "Mastered", ("picc", "dressing", "change")),
    _skill("50-174-25", "Accessing and Flushing PICC Line", ("Nurse",), "Mastered", ("picc", "flushing", "access")),
    _skill("50-173-25", "Administering Medications through a PICC Line", ("Nurse",), "Mastered", ("picc", "medication", "iv")),
    _skill("50-172-25", "Blood Collection through a PICC Line", ("RN",), "Mastered", ("picc", "blood", "collection")),
    _skill("50-046-25", "Assessment of Feeding Tube", ("Nurse",), "Mastered", ("feeding tube", "assessment", "gtube", "peg")),
    _skill("50-019-25", "Oral Health Assessment", ("Nurse",), "Mastered", ("oral", "mouth", "dental", "assessment")),
    _skill("50-058-25", "Response to Choking", ("Nurse", "All Staff"), "Mastered", ("choking", "heimlich", "airway", "obstruction")),
    # Clinical Competency platform
    _skill("50-097-25", "CC-Point Click Care-MDS", ("Nurse",), "C", ("pcc", "mds", "documentation")),
    _skill("50-091-25", "CC- Gastrostomy Feeding Tube", ("Nurse",), "C", ("gtube", "gastrostomy", "feeding")),
    _skill("50-099-25", "CC-Point Click Care-Order Writing", ("Nurse",), "C", ("pcc", "orders", "documentation")),
    _skill("50-093-25", "CC-Transferring A Resident With The Use Of The Mechanical Lift", ("Nurse",), "C", ("mechanical lift", "transfer")),
    _skill("50-094-25", "CC-Nasopharyngeal and Oral Phararyngeal Suctioning", ("Nurse",), "C", ("suctioning", "nasopharyngeal", "oral")),
    _skill("50-096-25", "CC-Point Click Care-Progress Notes", ("Nurse",), "C", ("pcc", "progress notes", "documentation")),
    _skill("50-095-25", "CC-Point Click Care-UDAs", ("Nurse",), "C", ("pcc", "uda", "documentation")),
    _skill("50-098-25", "CC-Point Click Care-ADT/Dashboard", ("Nurse",), "C", ("pcc", "adt", "dashboard")),
    _skill("50-101-25", "CC-Blood Glucose Monitoring", ("Nurse",), "C", ("glucose", "blood sugar", "diabetes")),
    _skill("50-092-25", "CC-Clean Dressing", ("Nurse",), "C", ("dressing", "wound", "clean")),
    _skill("50-100-25", "CC-Colostomy – Ileostomy Care", ("Nurse",), "C", ("colostomy", "ileostomy", "ostomy")),
    _skill("50-090-25", "CC-Handwashing Competency", ("Nurse",), "C", ("handwashing", "hand hygiene", "infection control")),
    _skill("50-088-25", "CC-Tracheostomy Care", ("Nurse",), "C", ("tracheostomy", "trach", "airway")),
    _skill("50-089-25", "CC-MedPass", ("Nurse",), "C", ("medication", "med pass", "administration")),
    _skill("50-291-25", "CC-Orientation Checklist: RN Supervisor", ("RN",), "C", ("orientation", "rn", "supervisor")),
    _skill("50-290-25", "CC-Orientation Checklist- Licensed Nurse", ("LPN",), "C", ("orientation", "lpn", "licensed")),
    # Infection control / PPE
    _skill("PPE-DON-01", "PPE Donning (Gown, Gloves, Mask, Eye Protection)", ("CNA", "Nurse", "All Staff"), "Mastered", ("ppe", "donning", "gown", "gloves", "mask", "eye protection", "infection control"), skill_id="ppe-donning-01"),
    _skill("PPE-DOFF-01", "PPE Doffing (Safe Removal Sequence)", ("CNA", "Nurse", "All Staff"), "Mastered", ("ppe", "doffing", "removal", "sequence", "infection control", "contamination"), skill_id="ppe-doffing-01"),
    _skill("HH-WHO-01", "Hand Hygiene - WHO 5 Moments", ("CNA", "Nurse", "All Staff"), "Mastered", ("hand hygiene", "handwashing", "who", "5 moments", "infection control"), skill_id="hh-who-moments"),
    _skill("ISO-01", "Transmission-Based Precautions (Contact, Droplet, Airborne)", ("CNA", "Nurse", "All Staff"), "Mastered", ("isolation", "precautions", "contact", "droplet", "airborne", "transmission", "infection control"), skill_id="isolation-precautions"),
    _skill("EBP-01", "Enhanced Barrier Precautions (EBP) Application", ("CNA", "Nurse"), "Mastered", ("ebp", "enhanced barrier", "mdro", "precautions", "high contact"), skill_id="ebp-triggers"),
)
