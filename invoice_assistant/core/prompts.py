"""
Prompt templates and generation settings for each assistant operation.
"""

from datetime import datetime
from typing import Dict, Tuple

# (max_tokens, temperature) per operation
PARSE_INVOICE_PARAMS: Tuple[int, float] = (512, 0.5)
REMINDER_EMAIL_PARAMS: Tuple[int, float] = (256, 0.7)
DASHBOARD_INSIGHTS_PARAMS: Tuple[int, float] = (256, 0.4)


def format_amount(value) -> str:
    return f"{float(value or 0):.2f}"


def format_due_date(value) -> str:
    """Render an ISO-8601 date or datetime as M/D/YYYY."""
    if not value:
        return "N/A"
    if isinstance(value, datetime):
        due = value
    else:
        try:
            due = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
        except ValueError:
            return str(value)
    return f"{due.month}/{due.day}/{due.year}"


def build_invoice_parse_prompt(text: str) -> str:
    return f"""
You are an expert invoice data extraction AI. Analyze the following text and extract the relevant information to create an invoice.
The output MUST be a valid JSON object with this structure:

{{
  "clientName": "string",
  "email": "string (if available)",
  "address": "string (if available)",
  "items": [
    {{
      "name": "string",
      "quantity": "number",
      "unitPrice": "number"
    }}
  ]
}}

Here is the text to parse:
---
{text}
---
Return ONLY the JSON. No extra text.
"""


def build_reminder_prompt(invoice: Dict) -> str:
    bill_to = invoice.get("billTo") or {}
    return f"""
You are a polite accounting assistant. Write a friendly payment reminder email.

Details:
- Client Name: {bill_to.get("clientName", "")}
- Invoice Number: {invoice.get("invoiceNumber", "")}
- Amount Due: {format_amount(invoice.get("total"))}
- Due Date: {format_due_date(invoice.get("dueDate"))}

Keep it short and professional. Start with "Subject:".
"""


def build_insights_prompt(data_summary: str) -> str:
    return f"""
You are a friendly and insightful financial analyst.

Analyze this data summary and return 2–3 short, helpful insights.

Rules:
- Output ONLY valid JSON.
- The entire response must be one JSON object in this format:
  {{ "insights": ["string", "string", "string"] }}
- Do not include explanations, greetings, or markdown.

Data Summary:
{data_summary}
"""
