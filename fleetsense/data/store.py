"""
Seed data layer — loads the fleet roster and reference data from JSON.

The data directory defaults to config.DATA_DIR; every loader also takes an
explicit directory so tests and alternative fleets can point elsewhere.
"""

from __future__ import annotations

import json
import logging
import os
from typing import Dict, List, Optional

from .. import config
from ..models.truck import Truck

logger = logging.getLogger(__name__)

TRUCKS_FILE          = "trucks.json"
LOCATIONS_FILE       = "locations.json"
RECOMMENDATIONS_FILE = "recommendations.json"
DASHBOARD_FILE       = "dashboard.json"


def _read_json(name: str, data_dir: Optional[str] = None):
    path = os.path.join(str(data_dir or config.DATA_DIR), name)
    if not os.path.exists(path):
        raise FileNotFoundError(f"Seed file not found: {path}")
    with open(path, "r", encoding="utf-8") as fh:
        return json.load(fh)


# ─────────────────────────────────────────────────────────────────── #
#  Fleet roster                                                        #
# ─────────────────────────────────────────────────────────────────── #

def load_trucks(data_dir: Optional[str] = None) -> Dict[str, Truck]:
    """Roster keyed by truck id, in file order."""
    raw: List[dict] = _read_json(TRUCKS_FILE, data_dir)
    trucks: Dict[str, Truck] = {}
    for record in raw:
        truck = Truck.from_dict(record)
        if truck.id in trucks:
            raise ValueError(f"Duplicate truck id '{truck.id}' in {TRUCKS_FILE}.")
        trucks[truck.id] = truck
    logger.info("Loaded %d truck(s)", len(trucks))
    return trucks


# ─────────────────────────────────────────────────────────────────── #
#  Reference data                                                      #
# ─────────────────────────────────────────────────────────────────── #

def load_locations(data_dir: Optional[str] = None) -> Dict[str, str]:
    """
    Place-name table. Keys are re-rendered at 4 decimals so "-96.797" in
    the file matches "-96.7970" at lookup time.
    """
    raw: Dict[str, str] = _read_json(LOCATIONS_FILE, data_dir)
    table: Dict[str, str] = {}
    for key, name in raw.items():
        try:
            lat, lng = (float(part) for part in key.split(","))
        except ValueError:
            raise ValueError(f"Bad coordinate key '{key}' in {LOCATIONS_FILE}.") from None
        table[f"{lat:.4f},{lng:.4f}"] = name
    return table


def load_recommendations(data_dir: Optional[str] = None) -> List[dict]:
    return _read_json(RECOMMENDATIONS_FILE, data_dir)


def load_dashboard_baseline(data_dir: Optional[str] = None) -> dict:
    return _read_json(DASHBOARD_FILE, data_dir)
