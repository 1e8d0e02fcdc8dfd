"""Domain models for patients, health metrics and care plans."""
