"""
nyc_schools — NYC high school directory and SAT results client.

Fetches the public school list and per-school SAT scores from NYC Open Data
and turns them into list items and detail rows for a presentation layer.

Usage:
    from nyc_schools import DataService, ListController

    with DataService() as service:
        schools = service.list_schools().result()
        scores = service.list_sat_scores("21K728").result()

    # Or from a shell
    $ nyc-schools show 21K728
"""

from nyc_schools.controllers import DetailController, ListController, State
from nyc_schools.errors import (
    DecodeFailure,
    InvalidRequestTarget,
    InvalidResponse,
    ServiceError,
    TransportFailure,
)
from nyc_schools.rows import build_rows
from nyc_schools.schema import SatScoreRecord, SchoolRecord
from nyc_schools.service import DataService

__all__ = [
    "DataService",
    "DecodeFailure",
    "DetailController",
    "InvalidRequestTarget",
    "InvalidResponse",
    "ListController",
    "SatScoreRecord",
    "SchoolRecord",
    "ServiceError",
    "State",
    "TransportFailure",
    "build_rows",
]
