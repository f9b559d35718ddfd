"""
Settings loaded from environment variables.

Every threshold of `ValidationConfig` can be overridden with
``LISTING_PHOTOS_<FIELD>``, for example ``LISTING_PHOTOS_MIN_WIDTH=640``.
"""

import os
from typing import Any, Dict, Literal, Mapping, Optional

from pydantic import BaseModel, Field, ValidationError

from .exceptions import ConfigurationError
from .models import ValidationConfig

ENV_PREFIX = "LISTING_PHOTOS_"

ProcessorName = Literal["serial", "multithread", "multiprocess", "asyncio"]

_TRUE_VALUES = ("1", "true", "yes", "on")


class Settings(BaseModel):
    """Runtime settings for listing photo validation."""

    enable_quality_validation: bool = Field(
        default=False, description="Screen uploads before they are stored"
    )
    processor: ProcessorName = Field(
        default="serial", description="Batch concurrency strategy"
    )
    max_workers: Optional[int] = Field(
        default=None, ge=1, description="Worker cap for concurrent strategies"
    )
    validation: ValidationConfig = Field(default_factory=ValidationConfig)


def parse_flag(value: str) -> bool:
    return value.strip().lower() in _TRUE_VALUES


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Load settings from environment variables.

    Args:
        environ: Mapping to read instead of ``os.environ``

    Returns:
        Loaded Settings instance

    Raises:
        ConfigurationError: If a variable holds an invalid value
    """
    environ = os.environ if environ is None else environ

    settings_dict: Dict[str, Any] = {}
    validation_dict: Dict[str, Any] = {}

    flag = environ.get(f"{ENV_PREFIX}ENABLE_QUALITY_VALIDATION")
    if flag:
        settings_dict["enable_quality_validation"] = parse_flag(flag)

    processor = environ.get(f"{ENV_PREFIX}PROCESSOR")
    if processor:
        settings_dict["processor"] = processor.strip().lower()

    max_workers = environ.get(f"{ENV_PREFIX}MAX_WORKERS")
    if max_workers:
        settings_dict["max_workers"] = max_workers

    for field_name in ValidationConfig.model_fields:
        value = environ.get(f"{ENV_PREFIX}{field_name.upper()}")
        if value:
            validation_dict[field_name] = value

    try:
        return Settings(validation=ValidationConfig(**validation_dict), **settings_dict)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid listing photo settings: {exc}") from exc
