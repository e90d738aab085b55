# config.py
"""
Configuration for TileMaster.

Values come from the environment (or a local .env file) so the storage
location and the flat order rate can be changed without touching code.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env before the Config class reads os.environ
load_dotenv()


class Config:
    # JSON slot files (services.json, customers.json, orders.json) live here
    STORAGE_DIR = Path(os.environ.get("TILESERVICE_DATA_DIR", "data/storage"))

    # Daily rotated log files
    LOG_DIR = Path(os.environ.get("TILESERVICE_LOG_DIR", "data/logs"))
    LOG_LEVEL = os.environ.get("TILESERVICE_LOG_LEVEL", "INFO").upper()

    # Price per unit quantity used for every order total.
    # Not derived from the ordered service's own cost.
    FLAT_UNIT_RATE = float(os.environ.get("TILESERVICE_FLAT_UNIT_RATE", "100.0"))
