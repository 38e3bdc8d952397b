"""Display items for the list and detail screens."""

from dataclasses import dataclass
from typing import ClassVar, Union

from nyc_schools.schema import SatScoreRecord, SchoolRecord
from nyc_schools.utils import join_present


@dataclass(frozen=True)
class SchoolItem:
    """One row of the schools list."""

    dbn: str | None
    name: str | None

    @classmethod
    def from_school(cls, school: SchoolRecord) -> "SchoolItem":
        return cls(dbn=school.dbn, name=school.school_name)


@dataclass(frozen=True)
class OverviewRow:
    kind: ClassVar[str] = "overview"
    name: str | None
    overview: str | None


@dataclass(frozen=True)
class SatRow:
    kind: ClassVar[str] = "sat"
    test_takers: str | None
    math: str | None
    reading: str | None
    writing: str | None


@dataclass(frozen=True)
class EligibilityRow:
    kind: ClassVar[str] = "eligibility"
    text: str


@dataclass(frozen=True)
class AddressRow:
    kind: ClassVar[str] = "address"
    address: str
    phone: str | None
    email: str | None
    website: str | None
    hours: str | None


DisplayRow = Union[OverviewRow, SatRow, EligibilityRow, AddressRow]


def compose_address(school: SchoolRecord) -> str:
    return join_present(
        [school.address_line, school.city, school.state, school.zip], ", "
    )


def compose_hours(school: SchoolRecord) -> str | None:
    return join_present([school.start_time, school.end_time], " to ") or None


def build_rows(school: SchoolRecord | None, score: SatScoreRecord | None = None) -> list[DisplayRow]:
    """Derive the detail rows for a school and its (optional) SAT score."""
    if school is None:
        return []

    rows: list[DisplayRow] = [OverviewRow(name=school.school_name, overview=school.overview)]

    if score is not None:
        rows.append(SatRow(
            test_takers=score.number_test_takers,
            math=score.math_score,
            reading=score.reading_score,
            writing=score.writing_score,
        ))

    if school.eligibility:
        rows.append(EligibilityRow(text=school.eligibility))

    address = compose_address(school)
    hours = compose_hours(school)
    if address or hours or school.phone or school.email or school.website:
        rows.append(AddressRow(
            address=address,
            phone=school.phone or None,
            email=school.email or None,
            website=school.website or None,
            hours=hours,
        ))

    return rows
