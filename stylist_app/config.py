"""Configuration helpers for the outfit stylist app."""

from dataclasses import dataclass, field
from pathlib import Path
import os
from typing import Optional

from logic.settings import DEFAULT_SETTINGS, ScoringSettings

DEFAULT_LOCATION = "New York City"


@dataclass
class AppConfig:
    """Configuration values for the stylist app.

    Scoring constants are grouped in :class:`ScoringSettings`; this class only
    holds the values that vary between deployments.
    """

    default_location: str = DEFAULT_LOCATION
    default_count: int = 3
    weather_timeout_seconds: float = 5.0
    random_seed: Optional[int] = None
    log_level: str = "INFO"
    environment: str | None = None
    scoring: ScoringSettings = field(default_factory=lambda: DEFAULT_SETTINGS)

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Build a config from environment variables or an environment YAML file.

        Environment specific YAML lives in ``config/environments/<env>.yaml`` by
        default; environment variables take precedence over file values.
        """

        env_name = os.getenv("APP_ENV")
        config_path = os.getenv("APP_CONFIG_PATH")
        config_dir = Path(os.getenv("STYLIST_CONFIG_DIR", "config/environments"))
        yaml_config: dict = {}

        if config_path:
            path = Path(config_path)
        elif env_name:
            path = config_dir / f"{env_name}.yaml"
        else:
            path = None

        if path and path.exists():
            yaml_config = cls._load_yaml_config(path)

        def get_value(key: str, default: Optional[str] = None) -> Optional[str]:
            env_key = key.upper()
            return os.getenv(env_key, yaml_config.get(key, default))

        default_count = int(get_value("default_count", "3") or 3)
        if default_count <= 0:
            raise ValueError(f"default_count must be positive, got {default_count}")
        raw_seed = get_value("random_seed")

        return cls(
            default_location=str(get_value("default_location", DEFAULT_LOCATION) or DEFAULT_LOCATION),
            default_count=default_count,
            weather_timeout_seconds=float(get_value("weather_timeout_seconds", "5.0") or 5.0),
            random_seed=int(raw_seed) if raw_seed not in (None, "") else None,
            log_level=str(get_value("log_level", "INFO") or "INFO").upper(),
            environment=env_name,
        )

    @staticmethod
    def _load_yaml_config(path: Path) -> dict:
        """Parse a minimal YAML/INI-style config without external dependencies."""

        config: dict[str, str] = {}
        for line in path.read_text().splitlines():
            stripped = line.strip()
            if not stripped or stripped.startswith("#"):
                continue
            if ":" not in stripped:
                continue
            key, raw_value = stripped.split(":", 1)
            value = raw_value.strip()
            if (value.startswith("\"") and value.endswith("\"")) or (
                value.startswith("'") and value.endswith("'")
            ):
                value = value[1:-1]
            config[key.strip()] = value
        return config
