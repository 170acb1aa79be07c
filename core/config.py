"""
Benchmark configuration for write-bench.
Handles defaults, value validation and JSON/YAML config files.
"""

import json
import os
from dataclasses import dataclass, fields

import yaml

from core.errors import ConfigError


@dataclass(frozen=True)
class BenchmarkConfig:
    """Parameters for one benchmark run."""
    block_size: int = 512     # bytes per write chunk
    file_size: int = 1024     # bytes per benchmark file
    num_jobs: int = 4         # concurrently running jobs
    num_tests: int = 4        # total jobs
    directory: str = "."
    sync: bool = True


CONFIG_KEYS = tuple(f.name for f in fields(BenchmarkConfig))


def _is_int(value):
    return isinstance(value, int) and not isinstance(value, bool)


def validate_config(values):
    """Validate benchmark parameters.

    Args:
        values: Mapping of BenchmarkConfig field names to values

    Returns list of error messages (empty = valid).
    """
    errors = []

    unknown = sorted(set(values) - set(CONFIG_KEYS))
    if unknown:
        errors.append(f"Unknown config key(s): {', '.join(unknown)}")

    for key in ("block_size", "file_size"):
        value = values.get(key)
        if key in values and (not _is_int(value) or value <= 0):
            errors.append(f"{key} must be greater than 0 (got {value!r})")

    for key in ("num_jobs", "num_tests"):
        value = values.get(key)
        if key in values and (not _is_int(value) or value < 1):
            errors.append(f"{key} must be at least 1 (got {value!r})")

    directory = values.get("directory")
    if "directory" in values and (not isinstance(directory, str) or not directory):
        errors.append(f"directory must be a non-empty path (got {directory!r})")

    sync = values.get("sync")
    if "sync" in values and not isinstance(sync, bool):
        errors.append(f"sync must be true or false (got {sync!r})")

    return errors


def build_config(values):
    """
    Build a BenchmarkConfig from a mapping, applying defaults.

    Raises:
        ConfigError: One or more values are invalid.
    """
    errors = validate_config(values)
    if errors:
        raise ConfigError(errors)
    return BenchmarkConfig(**values)


def load_config_file(path):
    """Load a config file (JSON or YAML).

    Auto-detects format by extension (.json, .yaml, .yml) or tries JSON then YAML.

    Returns:
        dict: Parsed config values.

    Raises:
        ConfigError: File missing, unparseable, or not a mapping.
    """
    if not os.path.isfile(path):
        raise ConfigError(f"Config file not found: {path}")

    try:
        with open(path, 'r', encoding='utf-8') as f:
            raw = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Could not read config file {path}: {e}") from e

    ext = os.path.splitext(path)[1].lower()

    if ext == '.json':
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in config file: {e}") from e
    elif ext in ('.yaml', '.yml'):
        try:
            data = yaml.safe_load(raw)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in config file: {e}") from e
    else:
        # Unknown extension: try JSON, then YAML
        try:
            data = json.loads(raw)
        except ValueError:
            try:
                data = yaml.safe_load(raw)
            except yaml.YAMLError as e:
                raise ConfigError(f"Could not parse config file as JSON or YAML: {path}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config must be a JSON/YAML object (dict): {path}")
    return data
