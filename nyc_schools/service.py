"""Data service for the NYC Open Data school directory and SAT results.

Both endpoints are public Socrata resources returning JSON arrays:

    SCHOOLS_URL       2017 DOE High School Directory
    SAT_SCORES_URL    2012 SAT Results, filtered with ?dbn=<dbn>
"""

import json
import logging
from concurrent.futures import Executor, Future, ThreadPoolExecutor

import requests

from nyc_schools.errors import DecodeFailure
from nyc_schools.schema import SatScoreRecord, SchoolRecord
from nyc_schools.utils import DEFAULT_TIMEOUT, fetch

logger = logging.getLogger(__name__)

SCHOOLS_URL = "https://data.cityofnewyork.us/resource/s3k6-pzi2.json"
SAT_SCORES_URL = "https://data.cityofnewyork.us/resource/f9bf-2cp4.json"


def decode_records(body: bytes, record_type) -> list:
    """Decode a JSON array body into records of record_type.

    Individual fields are lenient (see SchoolRecord.from_dict); only a body
    that is not a JSON array of objects fails as a whole.
    """
    try:
        data = json.loads(body)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise DecodeFailure(f"Response body is not valid JSON: {e}") from e

    if not isinstance(data, list):
        raise DecodeFailure(f"Expected a JSON array, got {type(data).__name__}")

    records = []
    for i, item in enumerate(data):
        if not isinstance(item, dict):
            raise DecodeFailure(f"Element {i} is {type(item).__name__}, expected an object")
        records.append(record_type.from_dict(item))
    return records


class DataService:
    """Fetches schools and SAT scores.

    Create one at startup and hand it to the controllers. The list_*
    operations run on the executor and return futures; the fetch_*
    operations block the calling thread.
    """

    def __init__(
        self,
        *,
        session: requests.Session | None = None,
        executor: Executor | None = None,
        schools_url: str = SCHOOLS_URL,
        sat_scores_url: str = SAT_SCORES_URL,
        timeout: float | None = DEFAULT_TIMEOUT,
    ):
        self.session = session or requests.Session()
        self.session.headers.update({"Accept": "application/json"})
        self.executor = executor or ThreadPoolExecutor(
            max_workers=2, thread_name_prefix="nyc-schools"
        )
        self.schools_url = schools_url
        self.sat_scores_url = sat_scores_url
        self.timeout = timeout

    def fetch_schools(self) -> list[SchoolRecord]:
        body = fetch(self.schools_url, session=self.session, timeout=self.timeout)
        schools = decode_records(body, SchoolRecord)
        logger.info("Fetched %d schools", len(schools))
        return schools

    def fetch_sat_scores(self, dbn: str) -> list[SatScoreRecord]:
        if not dbn:
            raise ValueError("dbn must be a non-empty string")
        body = fetch(
            self.sat_scores_url,
            {"dbn": dbn},
            session=self.session,
            timeout=self.timeout,
        )
        scores = decode_records(body, SatScoreRecord)
        logger.info("Fetched %d SAT score records for %s", len(scores), dbn)
        return scores

    def list_schools(self) -> "Future[list[SchoolRecord]]":
        return self.executor.submit(self.fetch_schools)

    def list_sat_scores(self, dbn: str) -> "Future[list[SatScoreRecord]]":
        if not dbn:
            raise ValueError("dbn must be a non-empty string")
        return self.executor.submit(self.fetch_sat_scores, dbn)

    def close(self) -> None:
        self.executor.shutdown(wait=False)
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()
