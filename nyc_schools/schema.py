"""Record schemas for the NYC Open Data school directory and SAT results."""

from dataclasses import dataclass, asdict

# Wire name → attribute name
SCHOOL_FIELDS = {
    "dbn": "dbn",
    "school_name": "school_name",
    "overview_paragraph": "overview",
    "eligibility1": "eligibility",
    "primary_address_line_1": "address_line",
    "city": "city",
    "zip": "zip",
    "state_code": "state",
    "phone_number": "phone",
    "school_email": "email",
    "website": "website",
    "start_time": "start_time",
    "end_time": "end_time",
}

SAT_SCORE_FIELDS = {
    "dbn": "dbn",
    "school_name": "school_name",
    "num_of_sat_test_takers": "number_test_takers",
    "sat_math_avg_score": "math_score",
    "sat_critical_reading_avg_score": "reading_score",
    "sat_writing_avg_score": "writing_score",
}


def _pick(item: dict, mapping: dict[str, str]) -> dict[str, str | None]:
    """Rename wire keys; anything missing or not a string becomes None."""
    values = {}
    for wire_name, attr in mapping.items():
        value = item.get(wire_name)
        values[attr] = value if isinstance(value, str) else None
    return values


def _unpick(record, mapping: dict[str, str]) -> dict:
    data = asdict(record)
    return {
        wire_name: data[attr]
        for wire_name, attr in mapping.items()
        if data[attr] is not None
    }


@dataclass(frozen=True)
class SchoolRecord:
    dbn: str | None = None
    school_name: str | None = None
    overview: str | None = None
    eligibility: str | None = None
    address_line: str | None = None
    city: str | None = None
    state: str | None = None
    zip: str | None = None
    phone: str | None = None
    email: str | None = None
    website: str | None = None
    start_time: str | None = None
    end_time: str | None = None

    @classmethod
    def from_dict(cls, item: dict) -> "SchoolRecord":
        return cls(**_pick(item, SCHOOL_FIELDS))

    def to_dict(self) -> dict:
        """Serialize back to wire names, omitting absent fields."""
        return _unpick(self, SCHOOL_FIELDS)


@dataclass(frozen=True)
class SatScoreRecord:
    dbn: str | None = None
    school_name: str | None = None
    number_test_takers: str | None = None
    math_score: str | None = None
    reading_score: str | None = None
    writing_score: str | None = None

    @classmethod
    def from_dict(cls, item: dict) -> "SatScoreRecord":
        return cls(**_pick(item, SAT_SCORE_FIELDS))

    def to_dict(self) -> dict:
        return _unpick(self, SAT_SCORE_FIELDS)
