"""Maps a risk score to recommended interventions."""

from readmission.config import ScoringConfig, get_config
from readmission.domain.models import Intervention, RiskScore
from readmission.observability import get_logger

logger = get_logger(__name__)

# Returned in this fixed order
HIGH_RISK_INTERVENTIONS: tuple[Intervention, ...] = (
    Intervention.DAILY_NURSE_CHECK_INS,
    Intervention.MEDICATION_REVIEW,
)


class InterventionPlanner:
    """
    Single-tier intervention policy.

    Scores strictly above the threshold get the full high-risk set; everything
    else gets nothing. There are no intermediate tiers.
    """

    def __init__(self, config: ScoringConfig | None = None) -> None:
        self.config = config if config is not None else get_config().scoring
        self.logger = logger.bind(component="intervention_planner")

    def plan(self, risk_score: RiskScore) -> list[str]:
        interventions: list[str] = []
        if risk_score > self.config.intervention_threshold:
            interventions.extend(item.value for item in HIGH_RISK_INTERVENTIONS)

        self.logger.debug(
            "interventions_planned",
            risk_score=risk_score,
            threshold=self.config.intervention_threshold,
            count=len(interventions),
        )
        return interventions
