"""Readmission risk scoring, intervention planning and progress tracking.

The domain and service layers are kept free of I/O so they are easy to test
and reason about; persistence is supplied by the caller.
"""

from readmission.observability import configure_logging

configure_logging()

from readmission.api import (  # noqa: E402
    assess_patient_risk,
    get_interventions,
    plan_care,
    track_patient_progress,
)
from readmission.domain.models import (  # noqa: E402
    CarePlan,
    HealthMetrics,
    Intervention,
    PatientData,
    RiskScore,
    VitalSigns,
)

__all__ = [
    "CarePlan",
    "HealthMetrics",
    "Intervention",
    "PatientData",
    "RiskScore",
    "VitalSigns",
    "assess_patient_risk",
    "get_interventions",
    "plan_care",
    "track_patient_progress",
]
