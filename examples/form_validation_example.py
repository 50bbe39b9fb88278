from __future__ import annotations

import logging

from fireeye import BaseForm, TextField, ValidationConfig, ValidationSet, ValidatorKind, build


def main() -> None:
    logging.basicConfig(level=logging.INFO)

    form = BaseForm(form_id="signup")
    form.add(TextField("name", "Jane Doe"))
    form.add(TextField("email", "jane@example"))
    form.add(TextField("id_card", "11010519491231002X"))
    form.add(TextField("age", "17"))
    form.add(TextField("note", "optional remark"))

    validations = ValidationSet(form, config=ValidationConfig(debug=True))
    validations.add("name", ValidatorKind.REQUIRED, build("LENGTH", min=2, max=32))
    validations.add("email", "required", "email")
    validations.add("id_card", ValidatorKind.ID_CARD)
    validations.add("age", build(ValidatorKind.NUMERIC, min=18, max=120))
    validations.apply_input_type_hints()

    result = validations.test()
    status = "PASS" if result.passed else "FAIL"
    print(f"Form {form.form_id}: [{status}] {result.message or ''}")
    for field_id, field_result in validations.results.items():
        field_status = "PASS" if field_result.passed else "FAIL"
        print(f"  [{field_status}] {field_id}={field_result.value!r} {field_result.message or ''}")
    print(f"Unvalidated note: {validations.get_extra_value('note')!r}")


if __name__ == "__main__":
    main()
