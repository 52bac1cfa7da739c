"""Configuration settings for the Effort Estimator."""

# Load .env into os.environ so EFFORT_ESTIMATOR_* overrides are picked up
from dotenv import load_dotenv
load_dotenv()

from pydantic_settings import BaseSettings
from pydantic import Field
from pathlib import Path

from contracts import PowerMode


class Settings(BaseSettings):
    """Global settings for the Effort Estimator.

    Settings can be overridden via environment variables with EFFORT_ESTIMATOR_ prefix.
    Example: EFFORT_ESTIMATOR_DEFAULT_HOURLY_RATE=120
    """

    # Parametric model
    default_model_id: str = Field(
        default="post_architecture",
        description="Catalog id of the parametric model used when the input names none"
    )
    power_mode: PowerMode = Field(
        default=PowerMode.REAL,
        description="Exponentiation mode for the effort equation (real or legacy_truncated)"
    )

    # Cost
    default_hourly_rate: float = Field(
        default=0.0,
        ge=0.0,
        description="Hourly rate used for cost ranges; 0 disables the cost section"
    )

    # Output
    output_dir: str = Field(
        default="./outputs",
        description="Directory where the CLI writes JSON reports"
    )
    json_indent: int = Field(
        default=2,
        ge=0,
        description="Indentation for JSON reports"
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Root log level used by the CLI (DEBUG shows per-step figures)"
    )

    model_config = {
        "env_prefix": "EFFORT_ESTIMATOR_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    def get_output_path(self) -> Path:
        """Get output path as Path object."""
        return Path(self.output_dir)


# Create singleton instance
settings = Settings()
