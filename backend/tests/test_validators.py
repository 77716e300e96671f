import pytest

from utils.validators import (
    CONTACT_RULES,
    INQUIRY_RULES,
    FieldError,
    ValidationError,
    inquiry_rules,
    normalize_value,
    validate_email,
    validate_form,
)


def error_fields(errors):
    return [error.field for error in errors]


class TestValidateEmail:
    @pytest.mark.parametrize("email", [
        "jo@x.com",
        "first.last+tag@sub.example.co.uk",
        "a_b-c%d@domain.io",
        "ev-sales@charge-point.example.com",
    ])
    def test_accepts_well_formed_addresses(self, email):
        assert validate_email(email)

    @pytest.mark.parametrize("email", [
        "",
        "plainaddress",
        "missing-at.example.com",
        "jo@x",
        "jo@@x.com",
        "jo smith@x.com",
        "a@..com",
        "a@-x.com",
        "a@x-.com",
        ".a@x.com",
        "a.@x.com",
        "a..b@x.com",
    ])
    def test_rejects_malformed_addresses(self, email):
        assert not validate_email(email)


class TestNormalizeValue:
    def test_strips_strings(self):
        assert normalize_value("  Jordan \n") == "Jordan"

    def test_numbers_become_strings(self):
        assert normalize_value(5550102000) == "5550102000"

    @pytest.mark.parametrize("value", [None, True, False, ["a"], {"a": 1}])
    def test_unusable_values_become_empty(self, value):
        assert normalize_value(value) == ""


class TestContactRules:
    def test_valid_submission_has_no_errors(self):
        cleaned, errors = validate_form(
            {"name": "Jo", "email": "jo@x.com", "message": "Hello there, team!"},
            CONTACT_RULES,
        )
        assert errors == []
        assert cleaned == {"name": "Jo", "email": "jo@x.com", "message": "Hello there, team!"}

    def test_short_message_only_flags_message(self):
        _, errors = validate_form(
            {"name": "Jo", "email": "jo@x.com", "message": "short"},
            CONTACT_RULES,
        )
        assert errors == [
            FieldError("message", "Message must be at least 10 characters", "short"),
        ]

    def test_length_checks_use_trimmed_values(self):
        _, errors = validate_form(
            {"name": "  J  ", "email": "jo@x.com", "message": "   123456789   "},
            CONTACT_RULES,
        )
        assert error_fields(errors) == ["name", "message"]
        assert errors[0].value == "J"

    def test_every_rule_is_evaluated(self):
        _, errors = validate_form({}, CONTACT_RULES)
        assert error_fields(errors) == ["name", "email", "message"]

    def test_two_bad_fields_give_two_errors(self):
        _, errors = validate_form(
            {"name": "Jordan", "email": "not-an-email", "message": "too short"},
            CONTACT_RULES,
        )
        assert error_fields(errors) == ["email", "message"]

    def test_company_is_optional_and_trimmed(self):
        data = {"name": "Jordan", "email": "jordan@x.com", "message": "Please call me back."}

        cleaned, errors = validate_form(dict(data, company="  Acme Fleet  "), CONTACT_RULES)
        assert errors == []
        assert cleaned["company"] == "Acme Fleet"

        cleaned, _ = validate_form(dict(data, company="   "), CONTACT_RULES)
        assert "company" not in cleaned

    def test_unknown_fields_are_dropped(self):
        cleaned, _ = validate_form(
            {"name": "Jordan", "email": "jordan@x.com", "message": "Please call me back.", "admin": True},
            CONTACT_RULES,
        )
        assert "admin" not in cleaned

    def test_non_mapping_input_is_treated_as_empty(self):
        _, errors = validate_form(["name", "email"], CONTACT_RULES)
        assert error_fields(errors) == ["name", "email", "message"]


class TestInquiryRules:
    def test_valid_submission_has_no_errors(self, valid_inquiry):
        cleaned, errors = validate_form(valid_inquiry, INQUIRY_RULES)
        assert errors == []
        assert cleaned["chargerType"] == "Level 2 Home Charger"
        assert "message" not in cleaned

    def test_missing_charger_type_is_reported(self, valid_inquiry):
        del valid_inquiry["chargerType"]
        _, errors = validate_form(valid_inquiry, INQUIRY_RULES)
        assert errors == [FieldError("chargerType", "Please select a charger type", "")]

    def test_short_phone_is_reported(self, valid_inquiry):
        valid_inquiry["phone"] = " 555-0102 "
        _, errors = validate_form(valid_inquiry, INQUIRY_RULES)
        assert error_fields(errors) == ["phone"]
        assert errors[0].message == "Phone number must be at least 10 characters"

    def test_phone_format_is_not_checked(self, valid_inquiry):
        valid_inquiry["phone"] = "call me after 5pm"
        _, errors = validate_form(valid_inquiry, INQUIRY_RULES)
        assert errors == []

    def test_optional_message_is_kept_when_present(self, valid_inquiry):
        valid_inquiry["message"] = "  Two chargers for a garage.  "
        cleaned, errors = validate_form(valid_inquiry, INQUIRY_RULES)
        assert errors == []
        assert cleaned["message"] == "Two chargers for a garage."

    def test_allowed_charger_types(self, valid_inquiry):
        rules = inquiry_rules(["Level 2 Home Charger", "DC Fast Charger"])

        _, errors = validate_form(valid_inquiry, rules)
        assert errors == []

        valid_inquiry["chargerType"] = "Toaster"
        _, errors = validate_form(valid_inquiry, rules)
        assert errors == [FieldError("chargerType", "Please select a valid charger type", "Toaster")]

    def test_allowed_charger_types_report_missing_value_once(self, valid_inquiry):
        valid_inquiry["chargerType"] = ""
        _, errors = validate_form(valid_inquiry, inquiry_rules(["DC Fast Charger"]))
        assert errors == [FieldError("chargerType", "Please select a charger type", "")]


def test_validation_error_carries_errors():
    errors = [FieldError("name", "Name must be at least 2 characters", "J")]
    exc = ValidationError(errors)
    assert exc.errors == errors
    assert "name" in str(exc)


def test_field_error_to_dict():
    error = FieldError("email", "Please provide a valid email", "nope")
    assert error.to_dict() == {
        "field": "email",
        "message": "Please provide a valid email",
        "value": "nope",
        "type": "field",
        "path": "email",
        "msg": "Please provide a valid email",
        "location": "body",
    }
