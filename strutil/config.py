from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from strutil.truncation import MAX_OUTPUT_BYTES, MAX_OUTPUT_LINES, TruncationBudget

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class StrutilSettings(BaseSettings):
    max_output_lines: int = Field(
        default = MAX_OUTPUT_LINES,
        ge = 0
    )
    max_output_bytes: int = Field(
        default = MAX_OUTPUT_BYTES,
        ge = 0
    )
    ellipsis_width: int = Field(
        default = 80,
        ge = 0
    )
    log_level: LogLevel = "WARNING"

    model_config = {
        "env_prefix": "STRUTIL_",
        "env_file": ".env",
        "extra": "ignore",
    }

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value

    def truncation_budget(
        self,
        max_lines: int | None = None,
        max_bytes: int | None = None,
    ) -> TruncationBudget:
        """Budget from settings, with explicit values taking precedence."""
        return TruncationBudget(
            max_lines = self.max_output_lines if max_lines is None else max_lines,
            max_bytes = self.max_output_bytes if max_bytes is None else max_bytes,
        )

def load_settings() -> StrutilSettings:
    return StrutilSettings()
