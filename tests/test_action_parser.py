"""Tests for extracting structured actions from assistant replies"""
import pytest

from logidesk.errors import ActionParseError
from logidesk.models.actions import (
    CreateCarrierAction,
    CreateClientAction,
    CreateInvoiceAction,
    CreateTaskAction,
)
from logidesk.services.action_interpreter import action_to_dict, decode_action, extract_json_block, parse_action


def _reply(body: str) -> str:
    return f"Here is the suggestion:\n```json\n{body}\n```\nLet me know."


def test_create_task():
    action = parse_action(_reply(
        '{"action": "createTask", "task": {"title": "Call carrier", '
        '"dueDate": "2024-06-01", "priority": "High", "status": "todo"}}'
    ))

    assert isinstance(action, CreateTaskAction)
    assert action.payload.title == "Call carrier"
    assert action.task.priority == "high"
    assert action.task.due_date == "2024-06-01"


def test_create_client():
    action = parse_action(_reply(
        '{"action": "createClient", "client": {"name": "Agro LLC", "country": "Ukraine"}}'
    ))
    assert isinstance(action, CreateClientAction)
    assert action.client.country == "Ukraine"


def test_create_carrier():
    action = parse_action(_reply(
        '{"action": "createCarrier", "carrier": {"name": "FastTrans", '
        '"contactPerson": "Ivan", "serviceType": "Road"}}'
    ))
    assert isinstance(action, CreateCarrierAction)
    assert action.carrier.contact_person == "Ivan"


def test_create_invoice_round_trips_to_wire_form():
    action = parse_action(_reply(
        '{"action": "createInvoice", "invoice": {"clientName": "Agro LLC", '
        '"items": [{"description": "Freight", "quantity": 2, "price": 500}], '
        '"totalAmount": 1000, "date": "2024-06-01", "dueDate": "2024-06-15"}}'
    ))

    assert isinstance(action, CreateInvoiceAction)
    data = action_to_dict(action)
    assert data["action"] == "createInvoice"
    assert data["invoice"]["clientName"] == "Agro LLC"
    assert data["invoice"]["items"][0]["quantity"] == 2


def test_reply_without_block():
    assert parse_action("Just text, no action.") is None
    assert action_to_dict(None) is None


def test_invalid_json_is_ignored():
    assert parse_action(_reply('{"action": createTask}')) is None


def test_unknown_action_is_ignored():
    assert parse_action(_reply('{"action": "deleteEverything"}')) is None


def test_invalid_payload_is_ignored():
    assert parse_action(_reply('{"action": "createTask", "task": {"title": ""}}')) is None


def test_first_block_wins():
    text = _reply('{"action": "createClient", "client": {"name": "A"}}') + _reply(
        '{"action": "createClient", "client": {"name": "B"}}'
    )
    assert extract_json_block(text).count('"A"') == 1


def test_decode_reports_missing_action():
    with pytest.raises(ActionParseError):
        decode_action('{"task": {"title": "x"}}')
