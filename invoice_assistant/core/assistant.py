"""
AI assistant operations for the invoicing application.

This module contains the InvoiceAssistant class that turns free-form text into
invoice drafts, writes payment reminder emails and produces dashboard insights
by prompting a text-generation model.
"""

from typing import Any, Dict, Optional

from .completion import CompletionClient
from .config import AssistantConfig
from .errors import AssistantError, ExtractionError, NotFoundError, ValidationError
from .extractor import FailureKind, extract_json
from .invoices import InvoiceStore, summarize_invoices
from .prompts import (
    DASHBOARD_INSIGHTS_PARAMS,
    PARSE_INVOICE_PARAMS,
    REMINDER_EMAIL_PARAMS,
    build_insights_prompt,
    build_invoice_parse_prompt,
    build_reminder_prompt,
)

NO_DATA_INSIGHTS = ["No invoice data available to generate insights."]
FALLBACK_INSIGHTS = {
    FailureKind.NO_JSON_FOUND: ["Unable to generate insights from data."],
    FailureKind.MALFORMED_JSON: ["AI returned invalid JSON format. Please retry."],
}


class InvoiceAssistant:
    """
    Prompt-driven helpers for invoices.

    Operations:
    - parse_invoice_from_text: free-form text to an invoice draft
    - generate_reminder_email: payment reminder for a stored invoice
    - get_dashboard_summary: short insights over a user's invoices
    """

    def __init__(self, config: AssistantConfig, completion: Optional[CompletionClient] = None,
                 store: Optional[InvoiceStore] = None, logger: Optional[Any] = None):
        """
        Initialize the assistant.

        Args:
            config: Assistant configuration
            completion: Completion client (built from config if None)
            store: Invoice API client (built from config if None)
            logger: Logger instance for logging output
        """
        self.logger = logger
        self.completion = completion or CompletionClient(config)
        self.store = store or InvoiceStore(config.api_url)

    def _log(self, message: str, level: str = "info"):
        """Log message using the configured logger or print as fallback."""
        if self.logger:
            if level == "error":
                self.logger.error(message)
            elif level == "warning":
                self.logger.warning(message)
            elif level == "debug":
                self.logger.debug(message)
            else:
                self.logger.info(message)
        else:
            print(message)

    def parse_invoice_from_text(self, text: Optional[str]) -> Any:
        """
        Extract invoice fields (client, contact details, line items) from text.

        Args:
            text: Free-form text describing the invoice

        Returns:
            Parsed JSON value produced by the model
        """
        if not text:
            raise ValidationError("Text is required")

        message = "Failed to parse invoice data from text."
        try:
            response_text = self.completion.complete(build_invoice_parse_prompt(text), *PARSE_INVOICE_PARAMS)
        except AssistantError as e:
            raise AssistantError(message, e.details or e.message) from e

        result = extract_json(response_text)
        if not result.ok:
            self._log(f"Invoice parse failed: {result.reason} ({result.detail})", "warning")
            raise ExtractionError(message, result)

        self._log("Parsed invoice data from text")
        return result.value

    def generate_reminder_email(self, invoice_id: Optional[str]) -> Dict[str, str]:
        """
        Write a payment reminder email for an invoice.

        Args:
            invoice_id: Identifier of the stored invoice

        Returns:
            {"reminderText": <email text starting with "Subject:">}
        """
        if not invoice_id:
            raise ValidationError("Invoice ID is required")

        message = "Failed to generate reminder email."
        try:
            invoice = self.store.get_invoice(invoice_id)
            if invoice is None:
                raise NotFoundError("Invoice not found")

            reminder_text = self.completion.complete(build_reminder_prompt(invoice), *REMINDER_EMAIL_PARAMS)
        except NotFoundError:
            raise
        except AssistantError as e:
            raise AssistantError(message, e.details or e.message) from e
        except (TypeError, ValueError) as e:
            # malformed invoice fields (e.g. a non-numeric total)
            raise AssistantError(message, str(e)) from e

        self._log(f"Generated reminder email for invoice {invoice_id}")
        return {"reminderText": reminder_text}

    def get_dashboard_summary(self, user_id: str) -> Dict[str, Any]:
        """
        Produce 2-3 short insights about a user's invoices.

        Falls back to a placeholder insight when the model answer holds no
        usable JSON.

        Args:
            user_id: Owner of the invoices

        Returns:
            {"insights": [...]} as returned by the model, or a placeholder
        """
        message = "Failed to generate dashboard insights."
        try:
            invoices = self.store.list_invoices(user_id)
            if not invoices:
                return {"insights": list(NO_DATA_INSIGHTS)}

            summary = summarize_invoices(invoices)
            response_text = self.completion.complete(
                build_insights_prompt(summary.to_prompt_text()), *DASHBOARD_INSIGHTS_PARAMS
            )
        except AssistantError as e:
            raise AssistantError(message, e.details or e.message) from e
        except (TypeError, ValueError) as e:
            raise AssistantError(message, str(e)) from e

        self._log(f"AI raw response: {response_text}", "debug")

        result = extract_json(response_text)
        if not result.ok:
            self._log(f"Returning fallback insights: {result.reason} ({result.detail})", "warning")
            return {"insights": list(FALLBACK_INSIGHTS[result.kind])}

        return result.value
