"""Shared fixtures for the test suite."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from hypothesis import HealthCheck, settings

from readmission.config import get_config
from readmission.domain.models import HealthMetrics, PatientData, VitalSigns

# clean_config is autouse and resets process-wide state only
settings.register_profile(
    "readmission", suppress_health_check=[HealthCheck.function_scoped_fixture]
)
settings.load_profile("readmission")

_CONFIG_ENV_VARS = (
    "ENVIRONMENT",
    "ADMISSION_WEIGHT",
    "CHRONIC_CONDITION_WEIGHT",
    "INTERVENTION_THRESHOLD",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_config(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Run every test against default config with an empty get_config cache."""
    for name in _CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_config.cache_clear()
    yield
    get_config.cache_clear()


@pytest.fixture()
def low_risk_patient() -> PatientData:
    return PatientData(
        id="patient-001",
        age=54,
        previous_admissions=1,
        chronic_conditions=["hypertension"],
        medications=["lisinopril"],
    )


@pytest.fixture()
def high_risk_patient() -> PatientData:
    """12 admissions and 4 conditions: 6.0 + 1.2 = 7.2, above the threshold."""
    return PatientData(
        id="patient-002",
        age=78,
        previous_admissions=12,
        chronic_conditions=["COPD", "CHF", "diabetes", "CKD"],
        medications=["furosemide", "metformin", "tiotropium"],
    )


@pytest.fixture()
def health_metrics() -> HealthMetrics:
    return HealthMetrics(
        vital_signs=VitalSigns(blood_pressure="128/84", heart_rate=76, temperature=36.8),
        medications=["lisinopril"],
        symptoms=["fatigue"],
    )
