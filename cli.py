"""
Command-line interface for the invoice assistant.

This module exposes the assistant operations (text parsing, reminder emails,
dashboard insights) from a terminal.
"""

import sys
import json
import argparse
from pathlib import Path

from dotenv import load_dotenv

from invoice_assistant.core.assistant import InvoiceAssistant
from invoice_assistant.core.config import AssistantConfig
from invoice_assistant.core.errors import AssistantError
from invoice_assistant.utils.logger import setup_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="invoice-assistant",
        description="AI helpers for invoices using an OpenAI-compatible completion API",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  invoice-assistant parse "Bill Acme Corp for 3 hours of consulting at 120/h"
  invoice-assistant parse --file notes.txt
  invoice-assistant remind 64f1c2e9a7
  invoice-assistant insights user_123

Environment Variables Required:
  OPENROUTER_API_KEY - API key for the completion provider
  API_URL - Base URL for the invoice API (e.g., https://api.example.com)

Optional:
  OPENROUTER_BASE_URL, AI_MODEL, AI_TIMEOUT, DEBUG_LOG
        """
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    parse_cmd = subparsers.add_parser("parse", help="Extract invoice data from free-form text")
    parse_cmd.add_argument("text", nargs="?", help="Text describing the invoice")
    parse_cmd.add_argument("--file", help="Read the text from a file instead")

    remind_cmd = subparsers.add_parser("remind", help="Write a payment reminder email for an invoice")
    remind_cmd.add_argument("invoice_id", help="Invoice ID")

    insights_cmd = subparsers.add_parser("insights", help="Summarize a user's invoices")
    insights_cmd.add_argument("user_id", help="Owner of the invoices")

    return parser


def run(args: argparse.Namespace, assistant: InvoiceAssistant):
    """Execute the selected command and return its JSON-serializable result."""
    if args.command == "parse":
        text = Path(args.file).read_text(encoding="utf-8") if args.file else args.text
        return assistant.parse_invoice_from_text(text)
    if args.command == "remind":
        return assistant.generate_reminder_email(args.invoice_id)
    return assistant.get_dashboard_summary(args.user_id)


def main(argv=None):
    """Main CLI entry point for the invoice assistant."""
    args = build_parser().parse_args(argv)
    load_dotenv()

    logger = setup_logger("invoice-assistant")

    try:
        config = AssistantConfig.from_env()
        assistant = InvoiceAssistant(config, logger=logger)
        result = run(args, assistant)
    except AssistantError as e:
        logger.error(f"Error: {e.message} {e.details or ''}")
        print(json.dumps(e.to_body(), indent=2))
        sys.exit(1)
    except Exception as e:
        logger.error(f"Error: {e}", exc_info=True)
        sys.exit(1)

    print(json.dumps(result, indent=2))
    sys.exit(0)


if __name__ == "__main__":
    main()
