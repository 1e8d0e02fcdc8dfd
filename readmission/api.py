"""
Public entry points.

Each call builds its components from the cached application config, so the
functions are safe to call from any number of callers at once.
"""

from readmission.domain.models import CarePlan, HealthMetrics, PatientData, RiskScore
from readmission.services.care_planning import CarePlanningService
from readmission.services.interventions import InterventionPlanner
from readmission.services.progress_tracking import ProgressStore, ProgressTracker
from readmission.services.risk_assessment import RiskAssessor


def assess_patient_risk(patient_data: PatientData) -> RiskScore:
    return RiskAssessor().assess(patient_data)


def get_interventions(risk_score: RiskScore) -> list[str]:
    return InterventionPlanner().plan(risk_score)


def track_patient_progress(
    patient_id: str, metrics: HealthMetrics, store: ProgressStore | None = None
) -> None:
    """Forward a metrics update to ``store`` (log-only by default). Never raises."""
    ProgressTracker(store).track(patient_id, metrics)


def plan_care(patient_data: PatientData) -> CarePlan:
    """Assess risk and derive interventions in one step."""
    return CarePlanningService().plan(patient_data)
