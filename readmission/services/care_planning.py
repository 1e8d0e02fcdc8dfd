"""
Care planning pipeline.

Runs the one-way flow PatientData -> risk score -> interventions and packages
the outcome as a ``CarePlan``.
"""

from readmission.domain.models import CarePlan, PatientData
from readmission.observability import get_logger
from readmission.services.interventions import InterventionPlanner
from readmission.services.risk_assessment import RiskAssessor

logger = get_logger(__name__)


class CarePlanningService:
    def __init__(
        self,
        assessor: RiskAssessor | None = None,
        planner: InterventionPlanner | None = None,
    ) -> None:
        self.assessor = assessor if assessor is not None else RiskAssessor()
        self.planner = planner if planner is not None else InterventionPlanner()
        self.logger = logger.bind(component="care_planning_service")

    def plan(self, patient: PatientData) -> CarePlan:
        risk_score = self.assessor.assess(patient)
        interventions = self.planner.plan(risk_score)

        care_plan = CarePlan(
            patient_id=patient.id,
            risk_score=risk_score,
            interventions=interventions,
        )
        self.logger.info(
            "care_plan_generated",
            patient_id=patient.id,
            risk_score=risk_score,
            intervention_count=len(interventions),
        )
        return care_plan
