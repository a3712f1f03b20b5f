"""Configuration loading from a JSON file and environment variables."""

from __future__ import annotations

import json
import os
import re
from dataclasses import dataclass, field, fields

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


@dataclass
class Config:
    """Monitor settings: intervals and timeouts in seconds, threshold in ms."""

    urls: list[str] = field(default_factory=list)
    check_interval: int = 30
    timeout_seconds: int = 5
    slow_threshold: int = 1000


def _apply_json(config: Config, data: object) -> None:
    if data is None:
        return
    if not isinstance(data, dict):
        raise ValueError(f"cannot load configuration from JSON {type(data).__name__}")
    names = {f.name.casefold(): f.name for f in fields(Config)}
    for key, value in data.items():
        name = names.get(key.casefold())
        if name is None or (value is None and name != "urls"):
            continue
        if name == "urls":
            value = [] if value is None else value
            if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                raise ValueError("field 'urls' must be a list of strings")
            value = list(value)
        elif isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"field {name!r} must be an integer")
        setattr(config, name, value)


def load_config(config_path: str | os.PathLike[str] | None = "") -> Config:
    """Load configuration from ``config_path``, then apply environment overrides.

    An unreadable file is ignored; invalid configuration JSON raises ValueError.
    Malformed integers in the environment are ignored.
    """
    config = Config()

    if config_path:
        try:
            with open(config_path, "rb") as handle:
                raw = handle.read()
        except OSError:
            raw = None
        if raw is not None:
            _apply_json(config, json.loads(raw))

    urls = os.environ.get("HEALTH_CHECK_URLS", "")
    if urls:
        config.urls = [urls]

    for variable, name in (
        ("CHECK_INTERVAL", "check_interval"),
        ("TIMEOUT_SECONDS", "timeout_seconds"),
        ("SLOW_THRESHOLD", "slow_threshold"),
    ):
        text = os.environ.get(variable, "")
        if _INT_PATTERN.fullmatch(text):
            setattr(config, name, int(text))

    return config