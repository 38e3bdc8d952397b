from nyc_schools.schema import SAT_SCORE_FIELDS, SCHOOL_FIELDS, SatScoreRecord, SchoolRecord

from tests.conftest import SAT_JSON, SCHOOLS_JSON


def test_school_fields_are_renamed():
    school = SchoolRecord.from_dict(SCHOOLS_JSON[0])

    assert school.dbn == "21K728"
    assert school.school_name == "Liberation Diploma Plus High School"
    assert school.overview.startswith("The mission")
    assert school.eligibility == "For current 8th grade students"
    assert school.address_line == "2865 West 19th Street"
    assert school.state == "NY"
    assert school.phone == "718-946-6812"
    assert school.email == "scaraway@schools.nyc.gov"
    assert school.start_time == "8am"
    assert school.end_time == "3pm"


def test_sat_fields_are_renamed():
    score = SatScoreRecord.from_dict(SAT_JSON[0])

    assert score.number_test_takers == "10"
    assert score.math_score == "411"
    assert score.reading_score == "332"
    assert score.writing_score == "334"


def test_missing_fields_decode_to_none():
    school = SchoolRecord.from_dict({"dbn": "08X282"})

    assert school.dbn == "08X282"
    assert school.school_name is None
    assert school.website is None


def test_non_string_fields_decode_to_none():
    school = SchoolRecord.from_dict({"dbn": "08X282", "zip": 10451, "city": ["Bronx"]})

    assert school.zip is None
    assert school.city is None
    assert school.dbn == "08X282"


def test_to_dict_preserves_present_fields():
    for item in SCHOOLS_JSON:
        assert SchoolRecord.from_dict(item).to_dict() == item
    assert SatScoreRecord.from_dict(SAT_JSON[0]).to_dict() == SAT_JSON[0]


def test_unknown_wire_fields_are_ignored():
    school = SchoolRecord.from_dict({"dbn": "01M292", "borough": "MANHATTAN"})
    assert school.to_dict() == {"dbn": "01M292"}


def test_field_maps_cover_every_attribute():
    assert sorted(SCHOOL_FIELDS.values()) == sorted(SchoolRecord.__dataclass_fields__)
    assert sorted(SAT_SCORE_FIELDS.values()) == sorted(SatScoreRecord.__dataclass_fields__)
