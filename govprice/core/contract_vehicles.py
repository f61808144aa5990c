"""Burden-rate ceilings per contract vehicle, kept as YAML configuration."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Mapping

import yaml

from govprice.core.schema import ContractVehicleLimits

logger = logging.getLogger(__name__)

CONFIG_DIR = Path(__file__).resolve().parent.parent / "config"
DEFAULT_CONFIG_PATH = CONFIG_DIR / "contract_vehicles.yaml"


def _config_path() -> Path:
    env_path = os.getenv("GOVPRICE_CONTRACT_VEHICLES")
    if env_path:
        return Path(env_path).expanduser().resolve()
    return DEFAULT_CONFIG_PATH


def load_contract_vehicle_limits(path: Path | None = None) -> dict[str, ContractVehicleLimits]:
    """Read the vehicle table from ``path`` (or the configured default)."""

    path = path or _config_path()
    if not path.exists():
        logger.warning("contract vehicle table %s not found; no vehicle ceilings loaded", path)
        return {}
    with path.open("r", encoding="utf-8") as fp:
        payload = yaml.safe_load(fp) or {}
    vehicles = payload.get("vehicles") or {}
    return {str(name): ContractVehicleLimits(**limits) for name, limits in vehicles.items()}


CONTRACT_VEHICLE_LIMITS = load_contract_vehicle_limits()


def get_contract_vehicle_limits(
    name: str,
    table: Mapping[str, ContractVehicleLimits] | None = None,
) -> ContractVehicleLimits | None:
    source = CONTRACT_VEHICLE_LIMITS if table is None else table
    return source.get(name)
