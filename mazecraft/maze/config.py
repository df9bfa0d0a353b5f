import os
from dataclasses import dataclass, field
from typing import Optional

_FALSEY = {"0", "false", "no", "off", ""}


def _env_int(name: str) -> Optional[int]:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return None
    return int(raw)


def _env_flag(name: str, default: bool) -> bool:
    if name not in os.environ:
        return default
    return os.environ.get(name, "").strip().lower() not in _FALSEY


@dataclass
class MazeConfig:
    width: int = 10
    height: int = 10
    seed: Optional[int] = None
    enable_metrics: bool = field(default_factory=lambda: _env_flag("MAZE_ENABLE_GENERATION_METRICS", True))
    corrected_wall_config: bool = field(default_factory=lambda: _env_flag("MAZE_CORRECTED_WALL_CONFIG", False))

    @classmethod
    def from_env(cls, **overrides) -> "MazeConfig":
        """Build a config from MAZE_WIDTH / MAZE_HEIGHT / MAZE_SEED, then apply non-None overrides."""
        cfg = cls()
        env_width = _env_int("MAZE_WIDTH")
        env_height = _env_int("MAZE_HEIGHT")
        env_seed = _env_int("MAZE_SEED")
        if env_width is not None:
            cfg.width = env_width
        if env_height is not None:
            cfg.height = env_height
        if env_seed is not None:
            cfg.seed = env_seed
        for key, value in overrides.items():
            if value is not None:
                setattr(cfg, key, value)
        return cfg


__all__ = ["MazeConfig"]
