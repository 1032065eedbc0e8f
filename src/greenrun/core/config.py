# src/greenrun/core/config.py

import logging
import os

from dotenv import load_dotenv

# Load environment variables from a .env file located in the project root
dotenv_path = os.path.join(os.path.dirname(__file__), "..", "..", "..", ".env")
load_dotenv(dotenv_path=dotenv_path)

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Config:
    """
    Handles the application's configuration by loading values from environment variables.

    The defaults reproduce the published estimation model; overriding them is
    meant for experiments with other pricing or power assumptions.
    """

    # --- Carbon variables ---
    # Generic world-average placeholder used for regions missing from the table.
    DEFAULT_INTENSITY = float(os.getenv("DEFAULT_INTENSITY", 450))

    # --- Pay-per-use pricing (USD) ---
    COST_PER_VCPU_SECOND = float(os.getenv("COST_PER_VCPU_SECOND", "0.000024"))
    COST_PER_GB_SECOND = float(os.getenv("COST_PER_GB_SECOND", "0.0000025"))

    # --- Power model ---
    WATTS_PER_VCPU_AT_FULL = float(os.getenv("WATTS_PER_VCPU_AT_FULL", "12.0"))
    WATTS_PER_GB_MEMORY = float(os.getenv("WATTS_PER_GB_MEMORY", "0.35"))

    # --- Forecast ---
    DAYS_PER_MONTH = int(os.getenv("DAYS_PER_MONTH", "30"))

    # --- Logging variables ---
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # --- API variables ---
    API_HOST = os.getenv("API_HOST", "0.0.0.0")
    API_PORT = int(os.getenv("PORT", os.getenv("API_PORT", "8080")))

    @property
    def CORS_ALLOW_ORIGINS(self) -> list:
        # Resolved at access time so tests can change the env var after import.
        raw = os.getenv("CORS_ALLOW_ORIGINS", "*")
        return [origin.strip() for origin in raw.split(",") if origin.strip()] or ["*"]

    def validate_instance(self):
        for name in (
            "DEFAULT_INTENSITY",
            "COST_PER_VCPU_SECOND",
            "COST_PER_GB_SECOND",
            "WATTS_PER_VCPU_AT_FULL",
            "WATTS_PER_GB_MEMORY",
            "DAYS_PER_MONTH",
        ):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be strictly positive.")
        if self.LOG_LEVEL.upper() not in VALID_LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(VALID_LOG_LEVELS)}.")
        if not 0 < self.API_PORT < 65536:
            raise ValueError("API_PORT must be between 1 and 65535.")
        if self.DEFAULT_INTENSITY > 2000:
            logging.getLogger(__name__).warning(
                "DEFAULT_INTENSITY=%s gCO2e/kWh is unusually high.", self.DEFAULT_INTENSITY
            )


# Instantiate the config to be imported by other modules
config = Config()
config.validate_instance()
