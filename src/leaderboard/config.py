from config import ConfigurationSet, config_from_dict, config_from_env, config_from_yaml

from leaderboard.domain.participant import ThresholdConfig
from leaderboard.exceptions import ConfigError

_DEFAULTS: dict[str, object] = {
    "thresholds": {
        "first": 95,
        "second": 85,
        "third": 75,
    },
}


def create_config(
    yaml_path: str = "leaderboard.yaml",
    env_prefix: str = "LEADERBOARD",
    defaults: dict[str, object] | None = None,
    *,
    first: int | None = None,
    second: int | None = None,
    third: int | None = None,
) -> ConfigurationSet:
    """Create a layered configuration.

    Priority (highest to lowest): explicit overrides > env vars > YAML file > defaults dict.

    Args:
        yaml_path: Path to the YAML config file. A missing file is ignored.
        env_prefix: Prefix for environment variables, e.g. LEADERBOARD__THRESHOLDS__FIRST.
        defaults: Default configuration values.
        first: Override the first-place minimum score.
        second: Override the second-place minimum score.
        third: Override the third-place minimum score.
    """
    if defaults is None:
        defaults = _DEFAULTS

    layers = [
        config_from_env(env_prefix, separator="__", lowercase_keys=True),
        config_from_yaml(yaml_path, read_from_file=True, ignore_missing_paths=True),
        config_from_dict(defaults),
    ]

    overrides = _build_overrides(first, second, third)
    if overrides:
        layers.insert(0, config_from_dict(overrides))

    return ConfigurationSet(*layers)


def _build_overrides(first: int | None, second: int | None, third: int | None) -> dict[str, object]:
    thresholds = {
        key: value for key, value in (("first", first), ("second", second), ("third", third)) if value is not None
    }
    if not thresholds:
        return {}
    return {"thresholds": thresholds}


def _parse_int(cfg: ConfigurationSet, key: str) -> int:
    raw = cfg[key]
    try:
        return int(str(raw))
    except ValueError:
        raise ConfigError(f"'{key}' must be an integer, got {raw!r}") from None


def load_thresholds(cfg: ConfigurationSet | None = None) -> ThresholdConfig:
    if cfg is None:
        cfg = create_config()
    return ThresholdConfig(
        first=_parse_int(cfg, "thresholds.first"),
        second=_parse_int(cfg, "thresholds.second"),
        third=_parse_int(cfg, "thresholds.third"),
    )
