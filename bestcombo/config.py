"""Worker configuration loaded from environment variables."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, fields

__all__ = ["Config", "ConfigError", "load_config"]


class ConfigError(ValueError):
    """Raised when the environment does not hold a valid configuration."""


def _parse_bool(name: str, raw: str) -> bool:
    if raw == "true":
        return True
    if raw == "false":
        return False
    raise ConfigError(f"invalid boolean for {name!r}: {raw!r}")


@dataclass(frozen=True)
class Config:
    """Settings the best-combination worker needs."""

    mongodb_uri: str
    redis_url: str
    rabbitmq_url: str
    task_queue_name: str
    use_yearly_price: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Config:
        """Build a config from an environment mapping (``os.environ`` by default).

        Variable names are matched case-insensitively against the field names.
        """
        source = os.environ if environ is None else environ
        lowered = {key.lower(): value for key, value in source.items()}

        missing = [
            f.name
            for f in fields(cls)
            if f.name not in lowered and f.name != "use_yearly_price"
        ]
        if missing:
            raise ConfigError(f"missing configuration values: {', '.join(missing)}")

        use_yearly_price = False
        if "use_yearly_price" in lowered:
            use_yearly_price = _parse_bool("use_yearly_price", lowered["use_yearly_price"])

        return cls(
            mongodb_uri=lowered["mongodb_uri"],
            redis_url=lowered["redis_url"],
            rabbitmq_url=lowered["rabbitmq_url"],
            task_queue_name=lowered["task_queue_name"],
            use_yearly_price=use_yearly_price,
        )


def load_config(environ: Mapping[str, str] | None = None) -> Config:
    """Load the worker configuration from the environment."""
    return Config.from_env(environ)