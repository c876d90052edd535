# src/byuuml/config.py

import codecs
import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger(__name__)


class ParserConfig(BaseModel):
    """Configuration for document parsing.

    Immutable. Explicit. No magic defaults from environment.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    # Approximate: a document may exceed it by one before parsing fails.
    max_depth: int = Field(default=50, ge=1)
    chunk_size: int = Field(default=4096, gt=0)
    read_retries: int = Field(default=3, ge=0)
    encoding: str = "utf-8"
    errors: str = "strict"

    @field_validator("encoding")
    @classmethod
    def _known_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError:
            raise ValueError(f"Unknown encoding: {value}")
        return value

    @field_validator("errors")
    @classmethod
    def _known_error_handler(cls, value: str) -> str:
        try:
            codecs.lookup_error(value)
        except LookupError:
            raise ValueError(f"Unknown decode error handler: {value}")
        return value


def load_config(path: str | Path) -> ParserConfig:
    """Load a ParserConfig from a YAML mapping.

    An empty file yields the defaults. Unknown keys are rejected.
    """
    logger.debug("Loading parser config from %s", path)
    with open(path) as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Parser config in {path} must be a mapping")
    return ParserConfig(**data)
