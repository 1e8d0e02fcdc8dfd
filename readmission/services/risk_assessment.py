"""
Readmission risk scoring.

The score is a weighted sum of prior admissions and chronic conditions:

    score = previous_admissions * admission_weight
            + len(chronic_conditions) * chronic_condition_weight

Age, medications and the patient id do not contribute.
"""

from readmission.config import ScoringConfig, get_config
from readmission.domain.models import PatientData, RiskScore
from readmission.observability import get_logger

logger = get_logger(__name__)


class RiskAssessor:
    """Converts patient attributes into a readmission risk score."""

    def __init__(self, config: ScoringConfig | None = None) -> None:
        self.config = config if config is not None else get_config().scoring
        self.logger = logger.bind(component="risk_assessor")

    def assess(self, patient: PatientData) -> RiskScore:
        score = 0.0
        score += patient.previous_admissions * self.config.admission_weight
        score += len(patient.chronic_conditions) * self.config.chronic_condition_weight

        self.logger.debug(
            "risk_assessed",
            patient_id=patient.id,
            previous_admissions=patient.previous_admissions,
            chronic_conditions=len(patient.chronic_conditions),
            risk_score=score,
        )
        return score
