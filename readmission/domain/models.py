"""
Domain models for readmission risk assessment.

These models represent the core clinical concepts and are framework-agnostic.
They use Pydantic for typing and serialization; field names are snake_case in
Python and camelCase on the wire (``previousAdmissions``, ``heartRate``, ...).
"""

from datetime import UTC, datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, computed_field
from pydantic.alias_generators import to_camel

# Unbounded above, 0.0 at minimum for non-negative inputs
RiskScore = float


class ClinicalModel(BaseModel):
    """Shared configuration: immutable, camelCase aliases, populate by name."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class Intervention(str, Enum):
    """Recommended care actions for high-risk patients."""

    DAILY_NURSE_CHECK_INS = "Daily nurse check-ins"
    MEDICATION_REVIEW = "Medication review"


class PatientData(ClinicalModel):
    """Patient attributes used for risk assessment.

    Counts are not range-checked; a negative admission count simply
    contributes a negative amount to the score.
    """

    id: str
    age: int
    previous_admissions: int
    chronic_conditions: list[str] = Field(default_factory=list)
    medications: list[str] = Field(default_factory=list)


class VitalSigns(ClinicalModel):
    blood_pressure: str = Field(description="Free-form reading, e.g. '120/80'")
    heart_rate: int
    temperature: float


class HealthMetrics(ClinicalModel):
    """Snapshot of a patient's vitals, current medications and symptoms."""

    vital_signs: VitalSigns
    medications: list[str] = Field(default_factory=list)
    symptoms: list[str] = Field(default_factory=list)


class CarePlan(ClinicalModel):
    """Risk score and the interventions it triggers for one patient."""

    patient_id: str
    risk_score: RiskScore
    interventions: list[str] = Field(default_factory=list)
    assessed_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @computed_field  # type: ignore[prop-decorator]
    @property
    def requires_intervention(self) -> bool:
        return bool(self.interventions)
