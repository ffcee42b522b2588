import json
from dataclasses import dataclass, asdict, fields, replace
from typing import Optional

from .constants import HISTORY_FILE, OUTPUT_FILE, DEFAULT_GAMES, BAR_WIDTH
from .errors import ConfigError


@dataclass
class GeneratorConfig:
    history_file: str = HISTORY_FILE
    output_file: str = OUTPUT_FILE
    games: int = DEFAULT_GAMES
    bar_width: int = BAR_WIDTH
    seed: Optional[int] = None

    def __post_init__(self):
        for name in ("history_file", "output_file"):
            if not isinstance(getattr(self, name), str):
                raise ConfigError(f"{name} must be a string (got {getattr(self, name)!r})")
        for name in ("games", "bar_width"):
            value = getattr(self, name)
            if not _is_int(value):
                raise ConfigError(f"{name} must be an integer (got {value!r})")
            if value < 1:
                raise ConfigError(f"{name} must be >= 1 (got {value})")
        if self.seed is not None:
            if not _is_int(self.seed):
                raise ConfigError(f"seed must be an integer (got {self.seed!r})")
            if self.seed < 0:
                raise ConfigError(f"seed must be >= 0 (got {self.seed})")

    def with_overrides(self, **kw):
        """Copy with every non-None keyword applied (used for CLI flags)."""
        return replace(self, **{k: v for k, v in kw.items() if v is not None})


def _is_int(value):
    # JSON true/false would otherwise pass as 1/0
    return isinstance(value, int) and not isinstance(value, bool)


def load_config(path) -> GeneratorConfig:
    try:
        with open(path, "r", encoding="utf-8") as f:
            d = json.load(f)
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {path}")
    except json.JSONDecodeError as e:
        raise ConfigError(f"Config file {path} is not valid JSON: {e}")
    if not isinstance(d, dict):
        raise ConfigError(f"Config file {path} must hold a JSON object")
    known = {f.name for f in fields(GeneratorConfig)}
    unknown = sorted(set(d) - known)
    if unknown:
        raise ConfigError(f"Unknown config keys in {path}: {unknown}")
    return GeneratorConfig(**d)


def save_config(cfg: GeneratorConfig, path):
    with open(path, "w", encoding="utf-8") as out:
        json.dump(asdict(cfg), out, indent=2)
