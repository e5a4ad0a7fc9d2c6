"""Input Schemas — field whitelists for create/update bodies.

Invariants:
    - id / user_id never survive validation
    - Names and payees are stripped and must be non-empty
    - Transaction amount must be an int (minor units), never a float
"""

import datetime

import pytest
from pydantic import ValidationError

from finboard.schemas.named import NamedResourceInput
from finboard.schemas.transaction import TransactionInput


def _txn(**overrides):
    body = {
        "amount": -1250,
        "payee": "Bakery",
        "date": "2026-04-02",
        "account_id": "acc-1",
    }
    body.update(overrides)
    return body


def test_named_input_ignores_server_fields():
    parsed = NamedResourceInput.model_validate(
        {"name": "Visa", "id": "x", "user_id": "y"},
    )
    assert parsed.model_dump() == {"name": "Visa"}


def test_named_input_rejects_whitespace_name():
    with pytest.raises(ValidationError):
        NamedResourceInput(name="   ")


def test_named_input_max_length():
    with pytest.raises(ValidationError):
        NamedResourceInput(name="x" * 256)


def test_transaction_input_parses_date_and_defaults():
    parsed = TransactionInput.model_validate(_txn())
    assert parsed.date == datetime.date(2026, 4, 2)
    assert parsed.notes is None
    assert parsed.category_id is None


def test_transaction_input_ignores_server_fields():
    parsed = TransactionInput.model_validate(_txn(id="x", user_id="y"))
    assert "id" not in parsed.model_dump()
    assert "user_id" not in parsed.model_dump()


def test_transaction_amount_must_be_int():
    with pytest.raises(ValidationError):
        TransactionInput.model_validate(_txn(amount=12.5))
    with pytest.raises(ValidationError):
        TransactionInput.model_validate(_txn(amount="1250"))


def test_blank_notes_and_category_become_none():
    parsed = TransactionInput.model_validate(_txn(notes="  ", category_id=""))
    assert parsed.notes is None
    assert parsed.category_id is None


def test_payee_is_stripped():
    assert TransactionInput.model_validate(_txn(payee=" Bakery ")).payee == "Bakery"
