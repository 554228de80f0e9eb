from __future__ import annotations

from dataclasses import dataclass, field

from config import ConfigurationSet, config_from_dict, config_from_env, config_from_yaml

from top10qb.sheets._retry import RetryPolicy
from top10qb.sheets.client import PLACEHOLDER_SHEET_ID, SheetTabs, is_sheet_configured


class ConfigError(ValueError):
    """Raised when a configuration value cannot be interpreted."""


_DEFAULTS: dict[str, object] = {
    "sheet": {
        "id": PLACEHOLDER_SHEET_ID,
        "tabs": {
            "rankings": "Rankings",
            "dropped": "Dropped Out",
            "worst": "Worst QB",
            "log": "Log",
        },
    },
    "cache": {
        "ttl_seconds": 60,
    },
    "poll": {
        "interval_seconds": 120,
    },
    "http": {
        "timeout_seconds": 10,
        "retry_attempts": 3,
        "retry_max_wait_seconds": 10,
    },
}


@dataclass(frozen=True)
class SheetSettings:
    sheet_id: str = PLACEHOLDER_SHEET_ID
    tabs: SheetTabs = field(default_factory=SheetTabs)
    cache_ttl_seconds: float = 60.0
    poll_interval_seconds: float = 120.0
    http_timeout_seconds: float = 10.0
    retry: RetryPolicy = field(default_factory=RetryPolicy)

    @property
    def is_configured(self) -> bool:
        return is_sheet_configured(self.sheet_id)


def create_config(
    yaml_path: str = "top10qb.yaml",
    env_prefix: str = "TOP10QB",
    defaults: dict[str, object] | None = None,
    *,
    sheet_id: str | None = None,
) -> ConfigurationSet:
    """Create a layered configuration.

    Priority (highest to lowest): explicit overrides > env vars > YAML file > defaults dict.

    Args:
        yaml_path: Path to the YAML config file. A missing file is ignored.
        env_prefix: Prefix for environment variables, e.g. ``TOP10QB__SHEET__ID``.
        defaults: Default configuration values.
        sheet_id: Override the published sheet id.
    """
    if defaults is None:
        defaults = _DEFAULTS

    layers = [
        config_from_env(env_prefix, separator="__", lowercase_keys=True),
        config_from_yaml(yaml_path, read_from_file=True, ignore_missing_paths=True),
        config_from_dict(defaults),
    ]
    if sheet_id is not None:
        layers.insert(0, config_from_dict({"sheet": {"id": sheet_id}}))

    return ConfigurationSet(*layers)


def _number(cfg: ConfigurationSet, key: str) -> float:
    raw = cfg[key]
    try:
        value = float(str(raw))
    except ValueError as e:
        raise ConfigError(f"{key} must be a number, got {raw!r}") from e
    if value <= 0:
        raise ConfigError(f"{key} must be positive, got {raw!r}")
    return value


def _count(cfg: ConfigurationSet, key: str) -> int:
    raw = cfg[key]
    try:
        value = int(str(raw))
    except ValueError as e:
        raise ConfigError(f"{key} must be a whole number, got {raw!r}") from e
    if value < 1:
        raise ConfigError(f"{key} must be at least 1, got {raw!r}")
    return value


def load_sheet_settings(cfg: ConfigurationSet | None = None) -> SheetSettings:
    if cfg is None:
        cfg = create_config()
    tabs = SheetTabs(
        rankings=str(cfg["sheet.tabs.rankings"]),
        dropped=str(cfg["sheet.tabs.dropped"]),
        worst=str(cfg["sheet.tabs.worst"]),
        log=str(cfg["sheet.tabs.log"]),
    )
    return SheetSettings(
        sheet_id=str(cfg["sheet.id"]).strip(),
        tabs=tabs,
        cache_ttl_seconds=_number(cfg, "cache.ttl_seconds"),
        poll_interval_seconds=_number(cfg, "poll.interval_seconds"),
        http_timeout_seconds=_number(cfg, "http.timeout_seconds"),
        retry=RetryPolicy(
            attempts=_count(cfg, "http.retry_attempts"),
            max_wait_seconds=_number(cfg, "http.retry_max_wait_seconds"),
        ),
    )
