"""Extract the generated resume JSON from a Gemini response envelope."""

from __future__ import annotations

import json
import logging

from resume_builder.models.resume import ResumeResult
from resume_builder.utils.json_parser import extract_json

logger = logging.getLogger(__name__)


class EnvelopeError(Exception):
    """The envelope is valid JSON but lacks an expected field."""


def _first(node: object, key: str) -> object:
    """Return ``node[key][0]`` when it is a non-empty list, else None."""
    if not isinstance(node, dict):
        return None
    items = node.get(key)
    if not isinstance(items, list) or not items:
        return None
    return items[0]


def _log_prompt_feedback(feedback: object) -> None:
    logger.error("Prompt feedback: %s", json.dumps(feedback, indent=2))
    ratings = feedback.get("safetyRatings") if isinstance(feedback, dict) else None
    if isinstance(ratings, list):
        for rating in ratings:
            if isinstance(rating, dict):
                logger.error(
                    "Safety rating: category=%s, probability=%s",
                    rating.get("category"),
                    rating.get("probability"),
                )


def extract_text(envelope: object) -> str:
    """Walk ``candidates[0].content.parts[0].text``.

    Raises:
        EnvelopeError: a level is missing, with a message naming it.
    """
    candidate = _first(envelope, "candidates")
    if candidate is None:
        logger.error("Gemini response does not contain 'candidates' array or it is empty.")
        feedback = envelope.get("promptFeedback") if isinstance(envelope, dict) else None
        if feedback is not None:
            _log_prompt_feedback(feedback)
            raise EnvelopeError(
                "Gemini API feedback: " + json.dumps(feedback, separators=(",", ":"))
            )
        raise EnvelopeError("Unexpected response structure, no candidates.")

    content = candidate.get("content") if isinstance(candidate, dict) else None
    if content is None:
        logger.error("First candidate in Gemini response does not contain 'content'.")
        raise EnvelopeError("Missing 'content' in Gemini response.")

    part = _first(content, "parts")
    if part is None:
        logger.error("Content in Gemini response does not contain 'parts' array or it is empty.")
        raise EnvelopeError("Missing 'parts' in Gemini response content.")

    text = part.get("text") if isinstance(part, dict) else None
    if text is None:
        logger.error("First part in Gemini response does not contain 'text'.")
        raise EnvelopeError("Missing 'text' in Gemini response part.")
    return text if isinstance(text, str) else json.dumps(text)


def parse_gemini_response(response: str | None) -> ResumeResult:
    """Turn a raw Gemini response body into a ResumeResult. Never raises."""
    if response is None or not response.strip():
        logger.error("Gemini API returned an empty or null response.")
        return ResumeResult.failure("Empty or null response from Gemini API.")

    try:
        envelope = json.loads(response)
        logger.debug("Raw Gemini API response: %s", response)
        text = extract_text(envelope)
        logger.debug("Extracted raw text from Gemini:\n%s", text)
        data = extract_json(text)
    except EnvelopeError as e:
        return ResumeResult.failure(str(e))
    except (ValueError, RecursionError) as e:
        logger.error(
            "Error parsing Gemini response JSON structure or extracted text", exc_info=True
        )
        return ResumeResult.failure(
            f"Failed to parse Gemini response: {e}. Check if the LLM output is valid JSON."
        )

    logger.info("Successfully parsed Gemini response content.")
    return ResumeResult.success(data)
