import pytest

from roster.core.exceptions import ValidationError
from roster.schemas.attendance import BulkAttendanceRequest
from roster.schemas.base import parse_payload
from roster.schemas.participant import ParticipantCreate, ParticipantUpdate
from roster.schemas.program import ProgramCreate, ProgramUpdate
from roster.utils.phone import format_phone, is_valid_phone


def _fields(exc_info):
    return {e["field"] for e in exc_info.value.errors}


# Programs
def test_program_defaults_to_ten_weeks():
    program = parse_payload(ProgramCreate, {"name": "Monday Soccer"})
    assert program.attendance_weeks == 10


def test_program_accepts_camel_case_keys():
    program = parse_payload(ProgramCreate, {"name": "Futsal", "attendanceWeeks": 6})
    assert program.attendance_weeks == 6


@pytest.mark.parametrize("weeks", [0, 53, -1])
def test_program_week_count_out_of_range(weeks):
    with pytest.raises(ValidationError) as exc_info:
        parse_payload(ProgramCreate, {"name": "Futsal", "attendanceWeeks": weeks})
    assert _fields(exc_info) == {"attendanceWeeks"}


def test_program_blank_name_rejected():
    with pytest.raises(ValidationError) as exc_info:
        parse_payload(ProgramCreate, {"name": "   "})
    assert _fields(exc_info) == {"name"}


def test_program_update_is_partial():
    patch = parse_payload(ProgramUpdate, {"attendanceWeeks": 12})
    assert patch.model_dump(exclude_unset=True) == {"attendance_weeks": 12}


def test_program_update_rejects_null_name():
    with pytest.raises(ValidationError):
        parse_payload(ProgramUpdate, {"name": None})


# Participants
def test_participant_reports_every_bad_field():
    with pytest.raises(ValidationError) as exc_info:
        parse_payload(ParticipantCreate, {
            "fullName": "",
            "parentEmail": "not-an-email",
            "phoneNumber": "12345",
            "age": 2,
        })
    assert _fields(exc_info) == {"fullName", "parentEmail", "phoneNumber", "age"}


def test_participant_contact_details_are_optional():
    participant = parse_payload(ParticipantCreate, {
        "fullName": "Alex Smith",
        "parentEmail": "",
        "phoneNumber": "",
        "age": 9,
    })
    assert participant.parent_email is None
    assert participant.phone_number is None
    assert participant.program_ids == []


@pytest.mark.parametrize("age", [3, 99])
def test_participant_age_bounds_inclusive(age):
    assert parse_payload(ParticipantCreate, {"fullName": "A", "age": age}).age == age


@pytest.mark.parametrize("age", [2, 100])
def test_participant_age_out_of_range(age):
    with pytest.raises(ValidationError):
        parse_payload(ParticipantCreate, {"fullName": "A", "age": age})


def test_participant_program_ids_deduplicated():
    participant = parse_payload(ParticipantCreate, {
        "fullName": "A", "age": 5, "programIds": ["p1", "p2", "p1"]
    })
    assert participant.program_ids == ["p1", "p2"]


def test_participant_update_keeps_empty_program_list():
    patch = parse_payload(ParticipantUpdate, {"programIds": []})
    assert patch.model_dump(exclude_unset=True) == {"program_ids": []}


def test_participant_update_without_program_ids_leaves_them_unset():
    patch = parse_payload(ParticipantUpdate, {"age": 10})
    assert "program_ids" not in patch.model_dump(exclude_unset=True)


def test_participant_update_still_validates_supplied_fields():
    with pytest.raises(ValidationError) as exc_info:
        parse_payload(ParticipantUpdate, {"phoneNumber": "0512345678"})
    assert _fields(exc_info) == {"phoneNumber"}


def test_bulk_request_rejects_negative_week():
    with pytest.raises(ValidationError):
        parse_payload(BulkAttendanceRequest, {"updates": [
            {"participantId": "a", "programId": "b", "weekIndices": [-1]}
        ]})


# Phone numbers
@pytest.mark.parametrize("phone", [
    "0412 345 678",
    "+61 412 345 678",
    "61412345678",
    "(02) 9876-5432",
    "+61 3 9876 5432",
    "0898765432",
])
def test_valid_australian_numbers(phone):
    assert is_valid_phone(phone)


@pytest.mark.parametrize("phone", ["0512345678", "041234567", "+1 555 123 4567", "abc"])
def test_invalid_numbers(phone):
    assert not is_valid_phone(phone)


@pytest.mark.parametrize("raw,expected", [
    ("0412345678", "0412 345 678"),
    ("+61412345678", "+61 412 345 678"),
    ("(02) 98765432", "02 9876 5432"),
    ("+61298765432", "+61 2 9876 5432"),
    ("", ""),
])
def test_format_phone(raw, expected):
    assert format_phone(raw) == expected
