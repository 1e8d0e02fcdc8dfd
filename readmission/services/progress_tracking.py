"""
Patient progress tracking.

This module owns only the boundary: updates are handed to a ``ProgressStore``
supplied by the host application. The default store persists nothing and
just emits a structured log event.
"""

from typing import Protocol

from readmission.domain.models import HealthMetrics
from readmission.observability import get_logger
from readmission.services.result import Result

logger = get_logger(__name__)


class ProgressStore(Protocol):
    """
    Persistence collaborator for health-metric updates.

    Storage, idempotence and conflict resolution belong to the implementation.
    """

    def update_patient_metrics(self, patient_id: str, metrics: HealthMetrics) -> None: ...


class LoggingProgressStore:
    """Inert store: records each update as a log event only."""

    def __init__(self) -> None:
        self.logger = logger.bind(component="logging_progress_store")

    def update_patient_metrics(self, patient_id: str, metrics: HealthMetrics) -> None:
        self.logger.info(
            "patient_metrics_received",
            patient_id=patient_id,
            heart_rate=metrics.vital_signs.heart_rate,
            temperature=metrics.vital_signs.temperature,
            medications=len(metrics.medications),
            symptoms=len(metrics.symptoms),
        )


class ProgressTracker:
    """Forwards health-metric updates to a store without ever raising."""

    def __init__(self, store: ProgressStore | None = None) -> None:
        self.store: ProgressStore = store if store is not None else LoggingProgressStore()
        self.logger = logger.bind(
            component="progress_tracker", store_type=type(self.store).__name__
        )

    def forward(self, patient_id: str, metrics: HealthMetrics) -> Result[None, Exception]:
        """Hand the update to the store, capturing any failure in the result."""
        try:
            self.store.update_patient_metrics(patient_id, metrics)
            return Result.ok(None)
        except Exception as e:
            self.logger.exception(
                "patient_metrics_update_failed", patient_id=patient_id, error=str(e)
            )
            return Result.err(e)

    def track(self, patient_id: str, metrics: HealthMetrics) -> None:
        self.forward(patient_id, metrics)
