"""
Base database configuration.

Import all models here so Alembic can detect them for migrations.
"""

# Import all models for Alembic autogenerate
from snoozy.models.sleep_interval import SleepIntervalRecord  # noqa: F401
from snoozy.models.profile import AppSettingsRecord, BabyProfileRecord  # noqa: F401
