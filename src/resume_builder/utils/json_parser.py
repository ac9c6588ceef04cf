"""Utility to extract JSON from LLM responses."""

from __future__ import annotations

import json
import re

# ```json ... ``` or ``` ... ``` spanning the whole text
FENCE_RE = re.compile(r"```(?:json\s*)?\s*([\s\S]*?)\s*```")


def strip_code_fences(text: str) -> str:
    """Remove a markdown code fence wrapping the whole text.

    Text that is not entirely enclosed in a fence is returned trimmed but
    otherwise unchanged.
    """
    text = text.strip()
    match = FENCE_RE.fullmatch(text)
    if match:
        return match.group(1).strip()
    return text


def extract_json(text: str) -> dict:
    """Parse fenced or bare LLM output as a JSON object.

    Raises:
        ValueError: the text is not valid JSON or not a JSON object.
            ``json.JSONDecodeError`` is a subclass and carries the position.
    """
    data = json.loads(strip_code_fences(text))
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object, got {type(data).__name__}")
    return data
