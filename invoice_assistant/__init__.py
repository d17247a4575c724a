"""
Invoice Assistant Service

AI helpers for an invoicing application: turns free-form text into invoice
drafts, writes payment reminder emails and summarizes invoice activity, using
an OpenAI-compatible completion API.
"""

__version__ = "0.1.0"
