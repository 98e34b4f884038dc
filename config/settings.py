"""
Configuration management using Pydantic Settings.

Environment variables:
- LOG_LEVEL: Logging level for the CLI runner
- SPARSE_BY_DEFAULT: Produce sparse node lists unless --full is given
- INVENTORY_ID_TYPES: JSON list of unit identifier types that set the inventory number
- OUTPUT_INDENT: JSON indentation of CLI output
"""
from typing import List
from pydantic import Field
from pydantic_settings import BaseSettings

from core.constants import DEFAULT_OUTPUT_PARAMS, INVENTORY_ID_TYPES


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Logging
    log_level: str = Field(default="INFO", env="LOG_LEVEL")

    # Conversion
    sparse_by_default: bool = Field(default=False, env="SPARSE_BY_DEFAULT")
    inventory_id_types: List[str] = Field(
        default=list(INVENTORY_ID_TYPES),
        env="INVENTORY_ID_TYPES"
    )

    # Output
    output_indent: int = Field(default=DEFAULT_OUTPUT_PARAMS['indent'], env="OUTPUT_INDENT")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False

    def get_engine_config(self) -> dict:
        """Get conversion configuration as dictionary."""
        return {
            'sparse': self.sparse_by_default,
            'inventory_id_types': list(self.inventory_id_types),
        }


# Global settings instance
settings = Settings()
