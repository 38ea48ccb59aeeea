"""Load officepdf.yaml, expanding ${VAR} references before validation."""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import OfficePdfConfig

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "officepdf.yaml"

_ENV_REF = re.compile(r"\$\{(\w+)\}")


def config_search_path(cli_path: str | None = None) -> list[Path]:
    """Candidate config files, highest priority first."""
    paths = [Path(CONFIG_FILENAME), Path.home() / ".officepdf" / "config.yaml"]
    if cli_path:
        paths.insert(0, Path(cli_path))
    return paths


def load_config(cli_path: str | None = None) -> OfficePdfConfig:
    """Return the first usable config on the search path, or the defaults.

    An explicit ``cli_path`` that does not exist is an error; the implicit
    locations are simply skipped. Empty files fall through to the next one.
    """
    if cli_path and not Path(cli_path).is_file():
        raise ValueError(f"Config file not found: {cli_path}")

    for path in config_search_path(cli_path):
        if not path.is_file():
            continue
        try:
            raw = yaml.safe_load(path.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e
        if raw is None:
            continue
        if not isinstance(raw, dict):
            raise ValueError(f"Invalid config in {path}: expected a mapping")
        try:
            config = OfficePdfConfig(**_expand_env_vars(raw))
        except ValidationError as e:
            raise ValueError(f"Invalid config in {path}: {e}") from e
        logger.debug("loaded config from %s", path)
        return config

    return OfficePdfConfig()


def _expand_env_vars(obj: object) -> object:
    """Recursively expand ${VAR} references in strings; unset vars become ''."""
    if isinstance(obj, str):
        return _ENV_REF.sub(lambda m: os.environ.get(m.group(1), ""), obj)
    if isinstance(obj, dict):
        return {k: _expand_env_vars(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_expand_env_vars(v) for v in obj]
    return obj


# Default YAML template for `officepdf config init`
DEFAULT_CONFIG_TEMPLATE = """\
# officepdf.yaml

# Office automation
automation:
  isolated_instance: true      # true: private Office process | false: reuse a running one

# Batch behaviour
conversion:
  lazy_sessions: false         # start Word/PowerPoint only when a document needs it
  overwrite: true              # false: skip documents whose PDF already exists

# Directory scan
collector:
  skip_lock_files: true        # ignore Office owner files (~$name.docx)

# Output
output:
  dir_name: "PDF"              # used when the output path is left blank

# Wait for Enter before exiting
wait_for_exit: true

# Logging
log_level: "info"              # debug | info | warn | error
log_format: "text"             # text | json
"""
