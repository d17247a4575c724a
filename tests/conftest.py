"""
Shared fixtures. The completion provider and invoice API are always mocked.
"""

from unittest.mock import MagicMock

import pytest

from invoice_assistant.core.assistant import InvoiceAssistant
from invoice_assistant.core.completion import CompletionClient
from invoice_assistant.core.config import AssistantConfig
from invoice_assistant.core.invoices import InvoiceStore


@pytest.fixture
def config():
    return AssistantConfig(api_key="test-key", api_url="https://api.example.com")


@pytest.fixture
def completion():
    mock = MagicMock(spec=CompletionClient)
    mock.complete.return_value = ""
    return mock


@pytest.fixture
def store():
    mock = MagicMock(spec=InvoiceStore)
    mock.get_invoice.return_value = None
    mock.list_invoices.return_value = []
    return mock


@pytest.fixture
def assistant(config, completion, store):
    return InvoiceAssistant(config, completion=completion, store=store, logger=MagicMock())


@pytest.fixture
def sample_invoices():
    return [
        {"_id": "a1", "invoiceNumber": "INV-001", "total": 1200, "status": "Paid",
         "billTo": {"clientName": "Acme Corp"}, "dueDate": "2024-03-05T00:00:00.000Z"},
        {"_id": "a2", "invoiceNumber": "INV-002", "total": 350.5, "status": "Unpaid",
         "billTo": {"clientName": "Globex"}, "dueDate": "2024-04-01T00:00:00.000Z"},
        {"_id": "a3", "invoiceNumber": "INV-003", "total": 99.99, "status": "Pending",
         "billTo": {"clientName": "Initech"}, "dueDate": "2024-04-15"},
    ]
