import json
from unittest.mock import MagicMock, patch

import pytest

import cli
from invoice_assistant.core.assistant import InvoiceAssistant
from invoice_assistant.core.errors import NotFoundError


@pytest.fixture
def cli_env(monkeypatch):
    monkeypatch.setenv("OPENROUTER_API_KEY", "key")
    monkeypatch.setenv("API_URL", "https://api.example.com")
    assistant = MagicMock(spec=InvoiceAssistant)
    with patch.object(cli, "load_dotenv"), \
         patch.object(cli, "InvoiceAssistant", return_value=assistant):
        yield assistant


def test_parse_command(cli_env, capsys):
    cli_env.parse_invoice_from_text.return_value = {"clientName": "Acme"}

    with pytest.raises(SystemExit) as exc_info:
        cli.main(["parse", "Acme owes 5"])

    assert exc_info.value.code == 0
    assert json.loads(capsys.readouterr().out) == {"clientName": "Acme"}
    cli_env.parse_invoice_from_text.assert_called_once_with("Acme owes 5")


def test_parse_command_reads_file(cli_env, tmp_path):
    notes = tmp_path / "notes.txt"
    notes.write_text("Invoice Globex for 2 chairs", encoding="utf-8")
    cli_env.parse_invoice_from_text.return_value = {}

    with pytest.raises(SystemExit):
        cli.main(["parse", "--file", str(notes)])

    cli_env.parse_invoice_from_text.assert_called_once_with("Invoice Globex for 2 chairs")


def test_remind_command_error(cli_env, capsys):
    cli_env.generate_reminder_email.side_effect = NotFoundError("Invoice not found")

    with pytest.raises(SystemExit) as exc_info:
        cli.main(["remind", "missing"])

    assert exc_info.value.code == 1
    assert json.loads(capsys.readouterr().out) == {"message": "Invoice not found"}


def test_insights_command(cli_env, capsys):
    cli_env.get_dashboard_summary.return_value = {"insights": ["ok"]}

    with pytest.raises(SystemExit) as exc_info:
        cli.main(["insights", "user-1"])

    assert exc_info.value.code == 0
    cli_env.get_dashboard_summary.assert_called_once_with("user-1")
