# src/proptree/runner/config.py
"""Runner configuration schema and loading.

Uses Pydantic for validation and Dynaconf for multi-source loading.
Settings are frozen (immutable) after construction.

Precedence (highest to lowest):
1. overrides - explicit values passed by the caller
2. Environment variables (PROPTREE_CASES, PROPTREE_SEED, ...)
3. Config file (YAML)
4. Defaults from the Pydantic schema
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

ENVVAR_PREFIX = "PROPTREE"


class RunnerConfig(BaseModel):
    """Settings for one TestRunner.

    Example YAML:
        cases: 512
        max_shrink_iters: 10000
        seed: 1234
    """

    model_config = {"frozen": True, "extra": "forbid"}

    cases: int = Field(
        default=256,
        gt=0,
        description="Number of passing cases required for the property to pass",
    )
    max_global_rejects: int = Field(
        default=1024,
        ge=0,
        description="Rejected draws or assume() failures tolerated before aborting",
    )
    max_shrink_iters: int = Field(
        default=4096,
        ge=0,
        description="Upper bound on test evaluations during shrinking (0 disables shrinking)",
    )
    seed: int | None = Field(
        default=None,
        description="Seed for the entropy source; a random seed is drawn when unset",
    )
    verbose: bool = Field(
        default=False,
        description="Log every case outcome at info level instead of debug",
    )


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dicts, with override taking precedence.

    Returns:
        Merged configuration dict (new dict, does not mutate inputs).
    """
    result = dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_config(
    config_path: Path | None = None,
    *,
    overrides: dict[str, Any] | None = None,
) -> RunnerConfig:
    """Load runner settings from YAML and environment, then apply overrides.

    Environment variable format: PROPTREE_CASES=64. Values are parsed as
    TOML literals, so PROPTREE_VERBOSE=true yields a boolean.

    Args:
        config_path: Optional path to a YAML configuration file.
        overrides: Optional explicit values (highest precedence).

    Returns:
        Validated RunnerConfig instance.

    Raises:
        FileNotFoundError: If config_path is given but does not exist.
        pydantic.ValidationError: If the merged configuration is invalid.
    """
    from dynaconf import Dynaconf

    # Explicit check for file existence (Dynaconf silently accepts missing files)
    if config_path is not None and not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    dynaconf_settings = Dynaconf(
        envvar_prefix=ENVVAR_PREFIX,
        settings_files=[str(config_path)] if config_path is not None else [],
        environments=False,  # No [default]/[production] sections
        load_dotenv=False,  # Don't auto-load .env
        merge_enabled=True,
    )

    # Dynaconf returns uppercase keys; convert to lowercase for Pydantic
    # Also filter out internal Dynaconf settings
    internal_keys = {"LOAD_DOTENV", "ENVIRONMENTS", "SETTINGS_FILES"}
    raw_config = {k.lower(): v for k, v in dynaconf_settings.as_dict().items() if k not in internal_keys}

    if overrides is not None:
        raw_config = deep_merge(raw_config, overrides)

    return RunnerConfig(**raw_config)
