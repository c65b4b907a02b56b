"""Application configuration using Pydantic settings."""

from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from report_delivery.models.delivery import DeliveryProvider
from report_delivery.models.report import ReportDecoration, ReportKind


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="REPORT_DELIVERY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="Report Delivery")
    app_version: str = Field(default="1.0.0")
    log_level: str = Field(default="WARNING")

    # Delivery
    default_provider: str = Field(default=DeliveryProvider.INTERNAL.value)
    default_order_id: str = Field(default="12345", min_length=1)

    # Reports
    report_kind: str = Field(default=ReportKind.SALES.value)
    report_decorations: List[str] = Field(
        default_factory=lambda: [
            ReportDecoration.DATE_FILTER.value,
            ReportDecoration.SORTING.value,
            ReportDecoration.WORD_EXPORT.value,
        ]
    )

    @field_validator("default_provider")
    @classmethod
    def validate_default_provider(cls, v: str) -> str:
        """Normalise provider key; unknown keys fall back like the factory does."""
        return DeliveryProvider.from_key(v).value

    @field_validator("report_kind")
    @classmethod
    def validate_report_kind(cls, v: str) -> str:
        """Validate base report kind."""
        allowed = [kind.value for kind in ReportKind]
        if v.lower() not in allowed:
            raise ValueError(f"Report kind must be one of {allowed}")
        return v.lower()

    @field_validator("report_decorations")
    @classmethod
    def validate_report_decorations(cls, v: List[str]) -> List[str]:
        """Validate decoration names, keeping their order."""
        allowed = [decoration.value for decoration in ReportDecoration]
        normalized = [name.lower() for name in v]
        unknown = [name for name in normalized if name not in allowed]
        if unknown:
            raise ValueError(f"Unknown report decorations {unknown}; allowed: {allowed}")
        return normalized


# Global settings instance
settings = Settings()
