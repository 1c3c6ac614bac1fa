"""Configuration management using python-dotenv."""

import os
from pathlib import Path
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, Field


def _find_dotenv() -> Path | None:
    """Find .env file by walking up from current directory."""
    current = Path.cwd()
    while current != current.parent:
        env_file = current / ".env"
        if env_file.exists():
            return env_file
        current = current.parent
    return None


# Load environment variables from .env file
_env_file = _find_dotenv()
if _env_file:
    load_dotenv(_env_file)


class NodeShapeConfig(BaseModel):
    """Configuration for schema/data generation and rendering."""

    id_prefix: str = Field(
        default_factory=lambda: os.getenv("NODESHAPE_ID_PREFIX", "node"),
        min_length=1,
        description="Prefix of generated node ids",
    )
    json_indent: int = Field(
        default_factory=lambda: int(os.getenv("NODESHAPE_JSON_INDENT", "2")),
        ge=0,
        description="Indentation of rendered JSON",
    )
    output_format: Literal["json", "yaml"] = Field(
        default_factory=lambda: os.getenv("NODESHAPE_OUTPUT_FORMAT", "json").lower(),
        description="Default rendering of serialized nodes",
    )
    log_level: str = Field(
        default_factory=lambda: os.getenv("NODESHAPE_LOG_LEVEL", "WARNING").upper(),
        description="Log level used by the CLI",
    )


def get_config() -> NodeShapeConfig:
    """Get the current configuration."""
    return NodeShapeConfig()
