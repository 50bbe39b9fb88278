"""Tests for ValidationSet registration, full-form testing and aggregation."""

import logging
from unittest.mock import MagicMock

import pytest

from fireeye import (
    NO_TEST_CONFIGURATIONS,
    AggregateMode,
    BaseForm,
    EmptyValidatorList,
    InputType,
    MissingFieldId,
    NotATextField,
    TextField,
    UnresolvedField,
    UnsupportedKind,
    ValidationConfig,
    ValidationSet,
    ValidatorKind,
    build,
    custom,
)
from fireeye.rules.engine import test_field as check_field


def counting(message="Counted", result=True):
    calls = []

    def predicate(value):
        calls.append(value)
        return result

    return custom(predicate, message), calls


class TestRegistration:
    def test_empty_validator_list(self, validations):
        with pytest.raises(EmptyValidatorList):
            validations.add("name")
        with pytest.raises(EmptyValidatorList):
            validations.add_field(TextField("x"))

    @pytest.mark.parametrize("field_id", ["", 0, None])
    def test_empty_identifier(self, validations, field_id):
        with pytest.raises(MissingFieldId):
            validations.add(field_id, ValidatorKind.REQUIRED)

    def test_handle_without_identifier(self, validations):
        with pytest.raises(MissingFieldId):
            validations.add_field(TextField(None, "text"), ValidatorKind.REQUIRED)

    def test_unresolved_field(self, validations):
        with pytest.raises(UnresolvedField):
            validations.add("missing", ValidatorKind.REQUIRED)

    def test_not_a_text_field(self, validations):
        with pytest.raises(NotATextField):
            validations.add("submit", ValidatorKind.REQUIRED)

    def test_unsupported_kind_leaves_set_unchanged(self, validations):
        with pytest.raises(UnsupportedKind):
            validations.add("name", ValidatorKind.REQUIRED, "bogus")
        assert "name" not in validations
        assert len(validations) == 0

    def test_second_batch_appends(self, validations, form):
        validations.add("name", ValidatorKind.REQUIRED)
        validations.add("name", build("LENGTH", min=5), "digits")
        (binding,) = validations.bindings()
        assert [v.kind for v in binding.validators] == [
            ValidatorKind.REQUIRED,
            ValidatorKind.LENGTH,
            ValidatorKind.DIGITS,
        ]
        form.set("name", "")
        assert validations.test().message == "This field is required"
        form.set("name", "abc")
        assert validations.test().message == "Must be at least 5 characters"

    def test_add_field_by_handle(self, validations, form):
        handle = form.find_field("email")
        validations.add_field(handle, "required")
        validations.add("email", "email")
        assert validations.get_field("email") is handle
        assert len(validations.bindings()[0].validators) == 2

    def test_registration_order_is_preserved(self, validations):
        validations.add("note", "required")
        validations.add("name", "required")
        validations.add("email", "email")
        assert [b.field_id for b in validations.bindings()] == ["note", "name", "email"]


class TestFullTest:
    def test_no_configurations(self, validations):
        result = validations.test()
        assert result.passed is False
        assert result.message == NO_TEST_CONFIGURATIONS

    def test_all_pass(self, validations):
        validations.add("name", "required")
        validations.add("email", "required", "email")
        validations.add("id_card", "id_card")
        result = validations.test()
        assert result.passed is True
        assert result.message is None
        assert result.value == "11010519491231002X"

    def test_continuous_evaluates_every_field_once(self, validations):
        first, first_calls = counting("First", result=False)
        second, second_calls = counting("Second")
        validations.add("name", first)
        validations.add("email", second)
        result = validations.test(continuous=True)
        assert result.passed is False
        assert first_calls == ["Jane"]
        assert second_calls == ["jane@example.com"]

    def test_stops_at_first_failure_and_keeps_stale_values(self, validations, form):
        validations.add("name", "digits")
        validations.add("email", "email")
        validations.test()
        assert validations.get_value("email") == "jane@example.com"

        form.set("email", "changed@example.com")
        result = validations.test(continuous=False)
        assert result.passed is False
        assert result.message == "Must contain only digits"
        assert validations.get_value("email") == "jane@example.com"

    def test_non_continuous_skips_later_fields(self, validations):
        later, calls = counting()
        validations.add("name", "digits")
        validations.add("email", later)
        validations.test(continuous=False)
        assert calls == []

    def test_aggregate_reflects_last_evaluated_field(self, validations):
        validations.add("name", "digits")
        validations.add("email", "email")
        result = validations.test()
        assert result.passed is False
        assert result.message is None
        assert result.value == "jane@example.com"

    def test_aggregate_when_last_field_fails(self, validations):
        validations.add("name", "required")
        validations.add("email", "digits")
        result = validations.test()
        assert result.passed is False
        assert result.message == "Must contain only digits"
        assert result.value == "jane@example.com"

    def test_first_failure_mode(self, form):
        validations = ValidationSet(form, config=ValidationConfig(aggregate=AggregateMode.FIRST_FAILURE))
        validations.add("name", "digits")
        validations.add("email", "email")
        result = validations.test()
        assert result.passed is False
        assert result.message == "Must contain only digits"
        assert result.value == "Jane"

    def test_idempotent(self, validations):
        validations.add("name", "digits")
        validations.add("email", "email")
        assert validations.test() == validations.test()

    def test_results_mapping(self, validations):
        validations.add("name", "digits")
        validations.add("email", "email")
        validations.test()
        assert validations.results["name"].passed is False
        assert validations.results["email"].passed is True
        with pytest.raises(TypeError):
            validations.results["name"] = None

    def test_default_display_decorates_fields(self, validations, form):
        validations.add("name", "digits")
        validations.test()
        assert form.find_field("name").error == "Must contain only digits"
        form.set("name", "123")
        validations.test()
        assert form.find_field("name").error is None

    def test_custom_display(self, form):
        display = MagicMock()
        validations = ValidationSet(form, display=display)
        validations.add("name", "digits")
        validations.test()
        display.show.assert_called_once_with(form.find_field("name"), "Must contain only digits")


class TestValues:
    def test_get_value_is_snapshot(self, validations, form):
        validations.add("name", "required")
        assert validations.get_value("name") == ""
        validations.test()
        form.set("name", "Janet")
        assert validations.get_value("name") == "Jane"
        validations.test()
        assert validations.get_value("name") == "Janet"

    def test_get_value_unknown_field(self, validations):
        assert validations.get_value("nope") is None

    def test_get_extra_value_is_live(self, validations, form):
        assert validations.get_extra_value("note") == "free text"
        form.set("note", "edited")
        assert validations.get_extra_value("note") == "edited"

    def test_get_extra_value_unresolved(self, validations):
        with pytest.raises(UnresolvedField):
            validations.get_extra_value("nope")

    def test_form_set_creates_readable_field(self, validations, form):
        form.set("late", "added later")
        assert form.get_text(form.find_field("late")) == "added later"
        assert validations.get_extra_value("late") == "added later"
        assert not hasattr(form, "has")


class TestInputTypeHints:
    def test_excluded_fields_are_not_hinted(self, validations, form):
        validations.add("email", "email")
        validations.add("id_card", "id_card")
        applied = validations.apply_input_type_hints("email")
        assert applied == {"id_card": InputType.NUMBER}
        assert form.find_field("email").input_type is InputType.TEXT
        assert form.find_field("id_card").input_type is InputType.NUMBER

    def test_exclusion_does_not_affect_testing(self, validations, form):
        validations.add("email", "digits")
        validations.apply_input_type_hints("email")
        assert validations.test().passed is False


class TestDebug:
    def test_trace_only_when_enabled(self, validations, caplog):
        validations.add("name", "required")
        with caplog.at_level(logging.INFO, logger="fireeye.rules.engine"):
            quiet = validations.test()
            assert "Field tested" not in caplog.text
            validations.set_debug(True)
            traced = validations.test()
            assert "Field tested" in caplog.text
        assert validations.config.debug is True
        assert quiet == traced


class TestFieldOneShot:
    def test_pass_and_fail(self):
        form = BaseForm()
        good = form.add(TextField("id", "11010519491231002X"))
        bad = form.add(TextField("other", "11010519491231002x"))
        assert check_field(form, good, ValidatorKind.ID_CARD).passed is True
        result = check_field(form, bad, "id_card")
        assert result.passed is False
        assert result.message == "Invalid ID card number"
        assert bad.error == "Invalid ID card number"

    def test_rejects_non_text_field(self):
        form = BaseForm()
        button = form.add(TextField("ok", text_capable=False))
        with pytest.raises(NotATextField):
            check_field(form, button, "required")

    def test_does_not_touch_validation_sets(self, validations, form):
        validations.add("name", "required")
        check_field(form, form.find_field("name"), "digits")
        assert validations.get_value("name") == ""
        assert len(validations.bindings()[0].validators) == 1
