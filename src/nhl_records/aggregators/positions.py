"""Position code labels."""

import pandas as pd

POSITION_NAMES = {
    "C": "Center",
    "L": "Left Wing",
    "R": "Right Wing",
    "D": "Defenseman",
    "G": "Goalie",
}

# Row order for position-indexed tables
POSITION_ORDER = list(POSITION_NAMES.values())


def position_names(codes: pd.Series) -> pd.Series:
    """Map position codes to display names; unknown codes pass through."""
    return codes.map(lambda code: POSITION_NAMES.get(code, code))
