"""Engine configuration with validation."""
from typing import Literal, List
from functools import lru_cache
from decimal import Decimal
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Engine settings, overridable through ``PMS_``-prefixed env vars."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="PMS_",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "PMS Engine"
    APP_VERSION: str = "1.0.0"
    APP_ENV: Literal["development", "staging", "production"] = "development"
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    LOG_FORMAT: Literal["json", "console"] = "json"

    # Category weights
    WEIGHT_TARGET_TOTAL: Decimal = Field(default=Decimal("100"), gt=0)
    WEIGHT_TOLERANCE: Decimal = Decimal("0.01")

    # Period score
    UNDER_PERFORMANCE_CUTOFF: Decimal = Field(default=Decimal("50"), ge=0, le=100)

    # Grade thresholds (lower bound of each band)
    GRADE_DEVELOPING: Decimal = Decimal("30")
    GRADE_PROGRESSIVE: Decimal = Decimal("50")
    GRADE_COMPETENT: Decimal = Decimal("66")
    GRADE_ACCOMPLISHED: Decimal = Decimal("80")
    GRADE_EXEMPLARY: Decimal = Decimal("90")

    @field_validator("WEIGHT_TOLERANCE")
    @classmethod
    def validate_tolerance(cls, v: Decimal) -> Decimal:
        if v <= 0:
            raise ValueError("WEIGHT_TOLERANCE must be positive")
        return v

    @model_validator(mode="after")
    def validate_grade_thresholds(self):
        """Grade bands must be strictly ascending."""
        thresholds = self.grade_thresholds
        if any(a >= b for a, b in zip(thresholds, thresholds[1:])):
            raise ValueError(f"Grade thresholds must be strictly ascending, got {thresholds}")
        return self

    @property
    def grade_thresholds(self) -> List[Decimal]:
        return [
            self.GRADE_DEVELOPING, self.GRADE_PROGRESSIVE, self.GRADE_COMPETENT,
            self.GRADE_ACCOMPLISHED, self.GRADE_EXEMPLARY,
        ]


@lru_cache
def get_settings() -> Settings:
    return Settings()
