"""
Best-effort JSON recovery from model output.

Models are asked to answer with a bare JSON object but often wrap it in prose
or markdown fences. ``extract_json`` tries the whole text first and then the
span between the first ``{`` and the last ``}``. It never raises: every
outcome is a ``Success`` or a ``Failure``.
"""

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Union


class FailureKind(Enum):
    NO_JSON_FOUND = "no JSON object found"
    MALFORMED_JSON = "malformed JSON in extracted span"


@dataclass(frozen=True)
class Success:
    value: Any

    ok = True


@dataclass(frozen=True)
class Failure:
    kind: FailureKind
    # Parser message for logs; two failures of the same kind compare equal.
    detail: Optional[str] = field(default=None, compare=False)

    ok = False

    @property
    def reason(self) -> str:
        return self.kind.value


ExtractionResult = Union[Success, Failure]


def _reject_constant(name: str):
    raise ValueError(f"{name} is not valid JSON")


def _parse(candidate: str) -> ExtractionResult:
    try:
        return Success(json.loads(candidate, parse_constant=_reject_constant))
    except (ValueError, RecursionError) as e:
        return Failure(FailureKind.MALFORMED_JSON, str(e))


def find_json_span(text: str) -> Optional[str]:
    """Return the text from the first '{' to the last '}' inclusive, or None."""
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end < start:
        return None
    return text[start:end + 1]


def extract_json(text: str) -> ExtractionResult:
    """
    Parse model response text into a JSON value.

    Args:
        text: Raw message content returned by the model (may be empty)

    Returns:
        Success(value) when the whole text or its extraction span parses,
        Failure(NO_JSON_FOUND) when there is no '{...}' span,
        Failure(MALFORMED_JSON) when the span does not parse
    """
    text = text or ""
    direct = _parse(text)
    if direct.ok:
        return direct

    span = find_json_span(text)
    if span is None:
        return Failure(FailureKind.NO_JSON_FOUND)

    return _parse(span)
