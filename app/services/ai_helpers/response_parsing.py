# /app/services/ai_helpers/response_parsing.py

"""
Helpers for turning raw AI text into Python data. Models are asked for bare
JSON but frequently wrap it in markdown code fences anyway.
"""

import json
import logging
import re
from typing import Any

from app.core.exceptions import GenerationError

logger = logging.getLogger(__name__)

_CODE_FENCE_PATTERN = re.compile(r"```(?:json)?", re.IGNORECASE)


def strip_code_fences(text: str) -> str:
    """Removes every ```json / ``` marker and the surrounding whitespace."""
    return _CODE_FENCE_PATTERN.sub("", text or "").strip()


def parse_json_response(text: str) -> Any:
    cleaned = strip_code_fences(text)
    try:
        return json.loads(cleaned)
    except json.JSONDecodeError as e:
        logger.error("Could not decode AI response as JSON (%s). Raw text: %.500s", e, cleaned)
        raise GenerationError("Failed to parse AI response. Try again.") from e
