"""
Core services for readmission risk management.

This package contains the risk scoring, intervention planning, progress
tracking and care planning implementations.
"""

from .care_planning import CarePlanningService
from .interventions import HIGH_RISK_INTERVENTIONS, InterventionPlanner
from .progress_tracking import LoggingProgressStore, ProgressStore, ProgressTracker
from .result import Result
from .risk_assessment import RiskAssessor

__all__ = [
    "CarePlanningService",
    "HIGH_RISK_INTERVENTIONS",
    "InterventionPlanner",
    "LoggingProgressStore",
    "ProgressStore",
    "ProgressTracker",
    "Result",
    "RiskAssessor",
]
