from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    log_level: str = "INFO"
    default_currency: str = "EUR"
    pricing_config_path: str = ""
    sensitivity_fields: list[str] = [
        "admin_salary",
        "admin_time_now",
        "reduction_in_msd_absence",
        "reduction_in_clinical_interventions",
    ]
    sensitivity_variations: list[float] = [-30, -20, -10, 0, 10, 20, 30]

    class Config:
        env_prefix = "DSE_ROI_"
        env_file = ".env"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging for a host application embedding the engine."""
    logging.basicConfig(level=(level or get_settings().log_level).upper())
