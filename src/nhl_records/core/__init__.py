"""
Core module for NHL records.

This module provides the foundational components:
- Configuration management (config.py)
- Record models (models.py)
- HTTP client infrastructure and errors (http.py)
- DataFrame conversion (frames.py)

Usage:
    from nhl_records.core import Settings, get_settings
    from nhl_records.core import Franchise, SkaterRecord
    from nhl_records.core.http import BaseApiClient, RecordsAPIError
"""

# Configuration
from .config import DEFAULT_BASE_URL, Settings, get_settings, setup_logging

# Errors
from .http import (
    ParseError,
    ProtocolError,
    RecordsAPIError,
    SchemaError,
    TransportError,
)

# Models
from .models import (
    Franchise,
    FranchiseRef,
    FranchiseTeamTotals,
    GoalieRecord,
    Player,
    SeasonRecord,
    SkaterRecord,
)

# Frames
from .frames import frame_to_records, records_to_frame

__all__ = [
    # Config
    "DEFAULT_BASE_URL",
    "Settings",
    "get_settings",
    "setup_logging",
    # Errors
    "RecordsAPIError",
    "TransportError",
    "ProtocolError",
    "ParseError",
    "SchemaError",
    # Models
    "Franchise",
    "FranchiseRef",
    "FranchiseTeamTotals",
    "GoalieRecord",
    "Player",
    "SeasonRecord",
    "SkaterRecord",
    # Frames
    "frame_to_records",
    "records_to_frame",
]
