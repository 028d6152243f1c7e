"""
NHL Records

A typed client for the public NHL records API (https://records.nhl.com/site/api)
and an aggregation layer that turns its franchise, team-totals, player-record
and roster endpoints into analytic tables.

Key Features:
- One synchronous GET per call, validated into pandas DataFrames
- Typed error taxonomy (transport, protocol, parse, schema)
- Contingency tables with margins, tenure binning, ratio rankings
- Tidy grouped totals for charting

Usage:
    from nhl_records import RecordsClient, FranchiseAnalytics

    with RecordsClient() as client:
        analytics = FranchiseAnalytics(client)
        canes = analytics.resolve("Hurricanes")
        table = analytics.tenure_table([canes.franchise_id])
"""

from .client import RecordsClient
from .core.config import Settings, get_settings, setup_logging
from .core.frames import frame_to_records, records_to_frame
from .core.http import (
    ParseError,
    ProtocolError,
    RecordsAPIError,
    SchemaError,
    TransportError,
)
from .aggregators.lookup import FranchiseLookupError
from .services.franchises import FranchiseAnalytics

__version__ = "0.1.0"

__all__ = [
    # Client
    "RecordsClient",
    "FranchiseAnalytics",
    # Config
    "Settings",
    "get_settings",
    "setup_logging",
    # Frames
    "frame_to_records",
    "records_to_frame",
    # Errors
    "RecordsAPIError",
    "TransportError",
    "ProtocolError",
    "ParseError",
    "SchemaError",
    "FranchiseLookupError",
]
