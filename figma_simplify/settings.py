from pydantic_settings import BaseSettings
from pydantic import Field
from typing import Optional


class ExtractionSettings(BaseSettings):
    # Style ids
    style_id_length: int = Field(default=6, ge=1)
    style_id_alphabet: str = "ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
    style_id_max_attempts: int = Field(default=100, ge=1)

    # Traversal
    default_max_depth: Optional[int] = Field(default=None, ge=0)

    model_config = {
        "env_prefix": "FIGMA_SIMPLIFY_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore"
    }


settings = ExtractionSettings()
