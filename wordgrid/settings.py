import os
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class Settings:
    BASE_DIR: Path = field(default_factory=lambda: Path(__file__).resolve().parent.parent)

    DICTIONARY_PATH: Path = field(init=False)

    MIN_WORD_LENGTH: int = 4
    MAX_PATHS_PER_WORD: int = 3

    MAX_GRID_CELLS: int = 400
    SOLVE_TIMEOUT: float = 10.0  # seconds

    DEBUG: bool = False
    PORT: int = 10001

    def __post_init__(self):
        self.DICTIONARY_PATH = self.BASE_DIR / "dictionary.txt"

        # Override from environment
        for fld in self.__dataclass_fields__:
            env_val = os.environ.get(fld)
            if env_val is not None:
                setattr(self, fld, _coerce(getattr(self, fld), env_val))


# Fields that may be changed at runtime through the settings API
EDITABLE_FIELDS: dict[str, type] = {
    "DICTIONARY_PATH": Path,
    "MIN_WORD_LENGTH": int,
    "MAX_PATHS_PER_WORD": int,
    "MAX_GRID_CELLS": int,
    "SOLVE_TIMEOUT": float,
    "DEBUG": bool,
}


def _coerce(current, value):
    if isinstance(current, bool):
        if isinstance(value, bool):
            return value
        return str(value).lower() in ("1", "true", "yes")
    if isinstance(current, int):
        return int(value)
    if isinstance(current, float):
        return float(value)
    if isinstance(current, Path):
        return Path(value)
    return value


def get_editable_settings(cfg: Settings) -> dict:
    values = {}
    for name in EDITABLE_FIELDS:
        value = getattr(cfg, name)
        values[name] = str(value) if isinstance(value, Path) else value
    return values


def update_settings(cfg: Settings, **values) -> dict[str, str]:
    """Apply editable values to `cfg`. Returns {field: error} for rejected ones."""
    errors: dict[str, str] = {}
    for name, value in values.items():
        if name not in EDITABLE_FIELDS:
            if name in cfg.__dataclass_fields__:
                errors[name] = "not editable"
            else:
                errors[name] = "unknown setting"
            continue
        try:
            setattr(cfg, name, _coerce(getattr(cfg, name), value))
        except (TypeError, ValueError) as e:
            errors[name] = f"invalid value {value!r}: {e}"
    return errors


settings = Settings()
