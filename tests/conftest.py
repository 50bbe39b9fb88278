"""Shared fixtures: an in-memory form and a validation set bound to it."""

import pytest

from fireeye import BaseForm, TextField, ValidationSet


@pytest.fixture
def form():
    form = BaseForm(form_id="signup")
    form.add(TextField("name", "Jane"))
    form.add(TextField("email", "jane@example.com"))
    form.add(TextField("id_card", "11010519491231002X"))
    form.add(TextField("note", "free text"))
    form.add(TextField("submit", "", text_capable=False))
    return form


@pytest.fixture
def validations(form):
    return ValidationSet(form)
