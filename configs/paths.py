"""
Configuration file for directory paths
"""
from __future__ import annotations

from pathlib import Path

# Define the base project directory
BASE_DIR = Path(__file__).parent.parent

# Log file written by configs.logging_config.setup_logging
LOG_FILE = BASE_DIR / 'fourbar.log'
