"""
Invoice lookups against the application API and dashboard statistics.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import requests
from requests.utils import quote

from .errors import InvoiceStoreError
from .prompts import format_amount

RECENT_INVOICE_LIMIT = 5


class InvoiceStore:
    """Read-only client for the invoice endpoints of the application API."""

    def __init__(self, api_url: str, timeout: float = 30, session: Optional[requests.Session] = None):
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _get(self, path: str, params: Optional[Dict] = None) -> Optional[Any]:
        url = f"{self.api_url}{path}"
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
            if response.status_code == 404:
                return None
            response.raise_for_status()
            data = response.json()
        except requests.exceptions.RequestException as e:
            raise InvoiceStoreError("Failed to fetch invoices", str(e)) from e
        except ValueError as e:
            raise InvoiceStoreError("Invoice API returned invalid JSON", str(e)) from e

        if not isinstance(data, dict) or not data.get("success"):
            raise InvoiceStoreError("Invoice API returned success=false", str(data))

        return data.get("data")

    def get_invoice(self, invoice_id: str) -> Optional[Dict]:
        """
        Fetch a single invoice.

        Args:
            invoice_id: Invoice identifier

        Returns:
            Invoice record, or None if the API does not know the id
        """
        return self._get(f"/api/v1/invoices/{quote(str(invoice_id), safe='')}")

    def list_invoices(self, user_id: str) -> List[Dict]:
        """Fetch every invoice owned by a user."""
        return self._get("/api/v1/invoices", params={"user": user_id}) or []


@dataclass
class InvoiceSummary:
    total_invoices: int = 0
    paid_invoices: int = 0
    unpaid_invoices: int = 0
    total_revenue: float = 0.0
    total_outstanding: float = 0.0
    recent_invoices: List[Dict] = field(default_factory=list)

    def to_prompt_text(self) -> str:
        recent = ", ".join(
            f"Invoice #{inv.get('invoiceNumber')} for {format_amount(inv.get('total'))} ({inv.get('status')})"
            for inv in self.recent_invoices
        )
        return f"""
Total invoices: {self.total_invoices}
Paid invoices: {self.paid_invoices}
Unpaid invoices: {self.unpaid_invoices}
Total revenue: {format_amount(self.total_revenue)}
Outstanding amount: {format_amount(self.total_outstanding)}
Recent invoices: {recent}
"""


def summarize_invoices(invoices: List[Dict]) -> InvoiceSummary:
    """
    Aggregate invoice records into dashboard statistics.

    Invoices with status "Paid" count towards revenue; everything else is
    outstanding. Recent invoices are the first records in API order.
    """
    paid = [inv for inv in invoices if inv.get("status") == "Paid"]
    unpaid = [inv for inv in invoices if inv.get("status") != "Paid"]
    return InvoiceSummary(
        total_invoices=len(invoices),
        paid_invoices=len(paid),
        unpaid_invoices=len(unpaid),
        total_revenue=sum(float(inv.get("total") or 0) for inv in paid),
        total_outstanding=sum(float(inv.get("total") or 0) for inv in unpaid),
        recent_invoices=invoices[:RECENT_INVOICE_LIMIT],
    )
