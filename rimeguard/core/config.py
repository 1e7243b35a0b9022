"""Configuration loading for RimeGuard.

Settings come from an optional JSON file and from command-line arguments;
arguments given on the command line override the JSON values.
"""

import argparse
import json
from typing import Any, Literal

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from rimeguard.core.phrase_types import is_valid_phrase_type
from rimeguard.utils.helpers import expand_file_path


class Config(BaseModel):
    """Validated runtime configuration."""

    store: str | None = None
    batch: str | None = None
    output: str | None = None
    format: Literal["text", "json"] = "text"
    type_weights: dict[str, int] = Field(default_factory=dict)
    strict: bool = False
    verbose: bool = False
    debug: bool = False
    debug_codes: list[str] = Field(default_factory=list)

    @field_validator("debug_codes", mode="before")
    @classmethod
    def parse_string_set(cls, value: Any) -> Any:
        """Accept a comma-separated string as well as a list."""
        if isinstance(value, str):
            return [part.strip() for part in value.split(",") if part.strip()]
        return value

    @field_validator("type_weights", mode="before")
    @classmethod
    def parse_type_weights(cls, value: Any) -> Any:
        """Accept ``["Phrase=120", ...]`` as well as a mapping."""
        if isinstance(value, list):
            parsed = {}
            for entry in value:
                name, sep, weight = str(entry).partition("=")
                if not sep:
                    raise ValueError(f"Expected TYPE=WEIGHT, got '{entry}'")
                parsed[name.strip()] = weight.strip()
            return parsed
        return value

    @field_validator("type_weights")
    @classmethod
    def check_type_names(cls, value: dict[str, int]) -> dict[str, int]:
        """Reject weights for unknown phrase types."""
        unknown = sorted(name for name in value if not is_valid_phrase_type(name))
        if unknown:
            raise ValueError(f"Unknown phrase type(s): {', '.join(unknown)}")
        return value

    @model_validator(mode="after")
    def validate_cross_fields(self) -> "Config":
        """Debug output is only shown at verbose level or above."""
        if self.debug:
            self.verbose = True
        return self


def _load_json_config(config_path: str, parser: argparse.ArgumentParser) -> dict[str, Any]:
    """Read the JSON config file, reporting problems through the parser."""
    try:
        with open(expand_file_path(config_path), encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        parser.error(f"Cannot read config file {config_path}: {e}")
    if not isinstance(data, dict):
        parser.error(f"Config file {config_path} must contain a JSON object")
    return data


def load_config(
    config_path: str | None,
    args: argparse.Namespace,
    parser: argparse.ArgumentParser,
) -> Config:
    """Build the configuration from a JSON file and CLI arguments.

    Args:
        config_path: Optional path to a JSON config file
        args: Parsed command-line arguments; None values are treated as unset
        parser: Argument parser, used to report errors

    Returns:
        Validated Config
    """
    values: dict[str, Any] = _load_json_config(config_path, parser) if config_path else {}

    for field_name in Config.model_fields:
        cli_value = getattr(args, field_name, None)
        if cli_value is not None:
            values[field_name] = cli_value

    try:
        return Config(**values)
    except ValidationError as e:
        parser.error(f"Invalid configuration:\n{e}")
