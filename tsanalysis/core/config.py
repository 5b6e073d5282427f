"""Centralized configuration using Pydantic models."""
import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from config.anomaly import ANOMALY_METHODS, DEFAULT_METHOD, DEFAULT_THRESHOLD, AnomalyConfig

load_dotenv()

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class AnalysisSettings(BaseModel):
    window: int = Field(default=5, ge=1)
    alpha: float = Field(default=0.3, ge=0.0, le=1.0)
    method: str = DEFAULT_METHOD  # "zscore" or "iqr"
    threshold: float = DEFAULT_THRESHOLD

    @field_validator("method")
    @classmethod
    def _known_method(cls, v: str) -> str:
        if v not in ANOMALY_METHODS:
            raise ValueError(f"method must be one of {', '.join(ANOMALY_METHODS)}")
        return v

    def anomaly_config(self) -> AnomalyConfig:
        return AnomalyConfig(method=self.method, threshold=self.threshold)


class LoggingSettings(BaseModel):
    level: str = "INFO"  # "DEBUG", "INFO", "WARNING", "ERROR"

    @field_validator("level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"level must be one of {', '.join(LOG_LEVELS)}")
        return level


def _env(**names: str) -> dict:
    """Map field names to environment values, skipping unset variables."""
    values = {field: os.getenv(name) for field, name in names.items()}
    return {field: value for field, value in values.items() if value is not None}


class Settings(BaseModel):
    analysis: AnalysisSettings = AnalysisSettings()
    logging: LoggingSettings = LoggingSettings()

    @classmethod
    def load(cls) -> "Settings":
        """
        Load from environment variables (and .env, if present).

        Raw strings go straight to the models, so bad values raise ValidationError.
        """
        return cls(
            analysis=AnalysisSettings(**_env(
                window="TSA_WINDOW",
                alpha="TSA_ALPHA",
                method="TSA_METHOD",
                threshold="TSA_THRESHOLD",
            )),
            logging=LoggingSettings(**_env(level="TSA_LOG_LEVEL")),
        )
