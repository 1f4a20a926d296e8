"""YAML config loading with env var expansion."""

import os
import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import DirDigestConfig

CONFIG_FILENAME = "dirdigest.yaml"


def config_search_paths(cli_path: str | None = None) -> list[Path]:
    """Candidate config files, highest priority first."""
    paths = [
        Path(cli_path) if cli_path else None,
        Path(".") / CONFIG_FILENAME,
        Path.home() / ".dirdigest" / "config.yaml",
    ]
    return [p for p in paths if p is not None]


def load_config(cli_path: str | None = None) -> DirDigestConfig:
    """Load config with resolution order: CLI > project-local > user-global > defaults.

    An explicit *cli_path* that does not exist is an error rather than a
    silent fall-through.
    """
    if cli_path and not Path(cli_path).is_file():
        raise ValueError(f"Config file not found: {cli_path}")

    for path in config_search_paths(cli_path):
        if path.exists():
            try:
                with open(path) as f:
                    raw = yaml.safe_load(f)
                if raw is None:
                    continue
                if not isinstance(raw, dict):
                    raise ValueError(f"Invalid config in {path}: expected a mapping")
                raw = _expand_env_vars(raw)
                return DirDigestConfig(**raw)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {path}: {e}") from e
            except ValidationError as e:
                raise ValueError(f"Invalid config in {path}: {e}") from e

    return DirDigestConfig()


def _expand_env_vars(obj: object) -> object:
    """Recursively expand ${VAR} references in strings."""
    if isinstance(obj, str):
        return re.sub(r"\$\{(\w+)\}", lambda m: os.environ.get(m.group(1), ""), obj)
    elif isinstance(obj, dict):
        return {k: _expand_env_vars(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [_expand_env_vars(v) for v in obj]
    return obj


# Default YAML template for `dirdigest config init`
DEFAULT_CONFIG_TEMPLATE = """\
# dirdigest.yaml

hashing:
  algorithm: "SHA256"          # SHA1 | SHA256 | SHA384 | SHA512 | MD5
  chunk_size: 65536            # bytes read per block
  workers: 1                   # >1 hashes files on a thread pool
  ignore_patterns: []          # e.g. [".git", "__pycache__"]

# Logging
log_level: "warning"           # debug | info | warning | error
"""
