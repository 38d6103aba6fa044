import dataclasses
import logging
import yaml
from datetime import datetime, time
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any, Dict, Optional

from .datatypes import Tariff, DEFAULT_TARIFF

logger = logging.getLogger(__name__)

CFG_PATH = Path(__file__).parent / 'data' / 'tariff.yaml'

_RATE_KEYS = ('base_rate', 'reduced_rate', 'discount_rate', 'promo_rate')
_TIME_KEYS = ('day_start', 'day_end')

class TariffConfigError(ValueError):
    """The tariff file has an unknown key or a value that cannot be used."""

def _to_rate(key: str, value: Any) -> Decimal:
    try:
        rate = Decimal(str(value))
    except InvalidOperation as e:
        raise TariffConfigError(f"{key}: {value!r} is not a number") from e
    if not rate.is_finite() or rate < 0:
        raise TariffConfigError(f"{key}: must be a non-negative number, got {value!r}")
    return rate

def _to_time(key: str, value: Any) -> time:
    if isinstance(value, time):
        return value
    try:
        return datetime.strptime(str(value), '%H:%M:%S').time()
    except ValueError as e:
        raise TariffConfigError(f"{key}: expected HH:MM:SS, got {value!r}") from e

def tariff_from_dict(cfg: Dict[str, Any], base: Tariff = DEFAULT_TARIFF) -> Tariff:
    """Build a Tariff from plain config values; missing keys keep `base`'s values."""
    known = {f.name for f in dataclasses.fields(Tariff)}
    unknown = sorted(set(cfg) - known)
    if unknown:
        raise TariffConfigError(f"Unknown tariff keys: {', '.join(unknown)}")

    values: Dict[str, Any] = {}
    for key, value in cfg.items():
        if key in _RATE_KEYS:
            values[key] = _to_rate(key, value)
        elif key in _TIME_KEYS:
            values[key] = _to_time(key, value)
        elif key == 'discount_threshold_minutes':
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise TariffConfigError(f"{key}: must be a non-negative integer, got {value!r}")
            values[key] = value
        else:
            values[key] = str(value)

    tariff = dataclasses.replace(base, **values)
    if tariff.day_start >= tariff.day_end:
        raise TariffConfigError(
            f"day_start {tariff.day_start} must be before day_end {tariff.day_end}")
    return tariff

def load_tariff(path: Optional[Path] = None) -> Tariff:
    """Load a tariff from YAML, the packaged default file when `path` is None."""
    cfg_path = Path(path) if path is not None else CFG_PATH
    if not cfg_path.exists():
        raise FileNotFoundError(f"Tariff config not found at {cfg_path}")

    logger.debug(f"Loading tariff from {cfg_path}")
    cfg = yaml.safe_load(cfg_path.read_text()) or {}
    section = cfg.get('tariff', cfg) if isinstance(cfg, dict) else cfg
    if not isinstance(section, dict):
        raise TariffConfigError(f"{cfg_path}: expected a mapping of tariff settings")

    tariff = tariff_from_dict(section)
    logger.info(f"Loaded tariff from {cfg_path}")
    return tariff
