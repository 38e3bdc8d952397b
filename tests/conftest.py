"""Shared fakes: a requests-like session and a data service with canned futures."""

import json
from concurrent.futures import Future

import pytest
import requests

from nyc_schools.schema import SatScoreRecord, SchoolRecord

SCHOOLS_JSON = [
    {
        "dbn": "21K728",
        "school_name": "Liberation Diploma Plus High School",
        "overview_paragraph": "The mission of Liberation Diploma Plus is...",
        "eligibility1": "For current 8th grade students",
        "primary_address_line_1": "2865 West 19th Street",
        "city": "Brooklyn",
        "zip": "11224",
        "state_code": "NY",
        "phone_number": "718-946-6812",
        "school_email": "scaraway@schools.nyc.gov",
        "website": "schools.nyc.gov/schoolportals/21/K728",
        "start_time": "8am",
        "end_time": "3pm",
    },
    {
        "dbn": "08X282",
        "school_name": "Women's Academy of Excellence",
        "city": "Bronx",
    },
]

SAT_JSON = [
    {
        "dbn": "21K728",
        "school_name": "LIBERATION DIPLOMA PLUS",
        "num_of_sat_test_takers": "10",
        "sat_math_avg_score": "411",
        "sat_critical_reading_avg_score": "332",
        "sat_writing_avg_score": "334",
    }
]


class FakeResponse:
    def __init__(self, status_code: int = 200, content: bytes = b""):
        self.status_code = status_code
        self.content = content


class FakeSession:
    """Stands in for requests.Session; records every GET."""

    def __init__(self, responses=None):
        self.headers = {}
        self.responses = list(responses or [])
        self.requested = []
        self.closed = False

    def get(self, url, timeout=None):
        self.requested.append(url)
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def close(self):
        self.closed = True


def json_response(data, status_code: int = 200) -> FakeResponse:
    return FakeResponse(status_code, json.dumps(data).encode())


def done(result=None, error: Exception | None = None) -> Future:
    future = Future()
    if error is not None:
        future.set_exception(error)
    else:
        future.set_result(result)
    return future


class FakeService:
    """DataService stand-in returning futures the test controls."""

    def __init__(self, schools=None, scores=None):
        self.schools = schools if schools is not None else done([])
        self.scores = scores if scores is not None else done([])
        self.sat_calls = []
        self.school_calls = 0

    def list_schools(self) -> Future:
        self.school_calls += 1
        return self.schools

    def list_sat_scores(self, dbn: str) -> Future:
        self.sat_calls.append(dbn)
        return self.scores


@pytest.fixture
def schools():
    return [SchoolRecord.from_dict(item) for item in SCHOOLS_JSON]


@pytest.fixture
def score():
    return SatScoreRecord.from_dict(SAT_JSON[0])


@pytest.fixture
def connection_error():
    return requests.ConnectionError("Name or service not known")
