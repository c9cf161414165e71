from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class FixerSettings(BaseSettings):
    """Runtime configuration for the RTL text fixer."""

    model_config = SettingsConfigDict(
        env_prefix="REPORT_RTL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Binding target that carries the displayed text
    text_property: str = Field(default="Text")

    # Element kinds to correct
    fix_labels: bool = Field(default=True)
    fix_table_cells: bool = Field(default=True)
    fix_sub_reports: bool = Field(default=True)

    # Leave text that already carries the embedding alone
    skip_wrapped: bool = Field(default=True)

    # CLI only
    log_level: str = Field(default="WARNING")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        if isinstance(v, str):
            return v.strip().upper()
        return v
