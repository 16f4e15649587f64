import pytest

from app.errors import ValidationError
from app.validator import validate


def test_required_fields_present():
    validate({"email": "user@example.com", "password": "x"}, {"email": "required", "password": "required"})


def test_missing_required_field_names_it():
    with pytest.raises(ValidationError) as exc_info:
        validate({"password": "x"}, {"email": "required", "password": "required"})
    assert exc_info.value.key == "email"
    assert exc_info.value.status_code == 400


def test_first_unmet_rule_wins():
    with pytest.raises(ValidationError) as exc_info:
        validate({}, {"email": "required", "password": "required"})
    assert exc_info.value.key == "email"


@pytest.mark.parametrize("value", ["", "   "])
def test_blank_value_is_rejected(value):
    with pytest.raises(ValidationError) as exc_info:
        validate({"email": value}, {"email": "required"})
    assert exc_info.value.message == '"email" não pode estar em branco.'


def test_none_counts_as_missing():
    with pytest.raises(ValidationError) as exc_info:
        validate({"email": None}, {"email": "required"})
    assert exc_info.value.message == '"email" é um campo obrigatório.'


def test_non_string_value_is_rejected():
    with pytest.raises(ValidationError) as exc_info:
        validate({"email": 42}, {"email": "required"})
    assert exc_info.value.message == '"email" deve ser do tipo String.'


def test_optional_field_may_be_absent():
    validate({}, {"session_id": "optional"})


def test_optional_field_when_present_must_not_be_blank():
    with pytest.raises(ValidationError) as exc_info:
        validate({"session_id": ""}, {"session_id": "optional"})
    assert exc_info.value.key == "session_id"


@pytest.mark.parametrize("data", [None, ["email"], "email=x"])
def test_non_mapping_input_is_rejected(data):
    with pytest.raises(ValidationError) as exc_info:
        validate(data, {"email": "required"})
    assert exc_info.value.key == "object"


def test_unknown_constraint_is_a_programming_error():
    with pytest.raises(ValueError):
        validate({"email": "x"}, {"email": "mandatory"})
