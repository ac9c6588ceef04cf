"""Resume generation: prompt -> Gemini -> parsed ResumeResult."""

from __future__ import annotations

import logging

import httpx

from resume_builder.clients.gemini_client import GeminiClient
from resume_builder.config import AppConfig, load_config
from resume_builder.models.resume import ResumeResult
from resume_builder.pipeline.response_parser import parse_gemini_response
from resume_builder.templates.loader import load_template
from resume_builder.templates.renderer import render_template

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE = "resume_prompt.txt"


def build_prompt(description: str, template_name: str = DEFAULT_TEMPLATE) -> str:
    """Render the prompt template for a user description.

    Raises:
        ResourceNotFound: the template file is missing.
    """
    template = load_template(template_name)
    return render_template(template, {"userDescription": description})


class ResumeGenerator:
    def __init__(self, client: GeminiClient, template_name: str = DEFAULT_TEMPLATE):
        self.client = client
        self.template_name = template_name

    def generate(self, description: str) -> ResumeResult:
        """Generate a structured resume from a free-text description."""
        prompt = build_prompt(description, self.template_name)
        try:
            response = self.client.generate(prompt)
        except httpx.HTTPStatusError as e:
            return ResumeResult.failure(
                f"API call failed with status: {e.response.status_code}"
            )
        except Exception:
            logger.error("An unexpected error occurred during Gemini API call", exc_info=True)
            return ResumeResult.failure("An unexpected error occurred.")
        return parse_gemini_response(response)


def generate_resume(
    description: str,
    config: AppConfig | None = None,
    client: GeminiClient | None = None,
) -> ResumeResult:
    """Generate a resume, building the Gemini client from config if none is given."""
    config = config or load_config()
    if client is not None:
        return ResumeGenerator(client, config.prompt.template).generate(description)

    with GeminiClient(
        base_url=config.gemini.base_url,
        model=config.gemini.model,
        timeout=config.gemini.timeout,
        max_attempts=config.gemini.max_attempts,
    ) as owned:
        return ResumeGenerator(owned, config.prompt.template).generate(description)
