# app/utils/content_generator.py

import logging

from openai import OpenAI, OpenAIError

from app.utils.errors import UpstreamGenerationError
from app.utils.prompt_builder import SYSTEM_PROMPT, build_newsletter_prompt

logger = logging.getLogger(__name__)

MAX_TOKENS = 2000
TEMPERATURE = 0.8


class NewsletterContentGenerator:
    """Pede ao modelo o texto da newsletter de uma criança."""

    def __init__(self, client: OpenAI, model: str = "gpt-4o-mini"):
        self.client = client
        self.model = model

    def generate(self, child) -> str:
        prompt = build_newsletter_prompt(child)

        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
                max_tokens=MAX_TOKENS,
                temperature=TEMPERATURE,
            )
        except OpenAIError as e:
            logger.error("Model call failed for child %s: %s", child.id, e)
            raise UpstreamGenerationError(f"model call failed: {e}") from e

        # Resposta sem choices ou sem campo de texto é tratada como erro;
        # texto vazio é devolvido como veio
        choices = getattr(response, "choices", None)
        if not choices:
            logger.error("Model response for child %s has no choices", child.id)
            raise UpstreamGenerationError("model response has no choices")

        message = getattr(choices[0], "message", None)
        content = getattr(message, "content", None)
        if not isinstance(content, str):
            logger.error("Model response for child %s has no content", child.id)
            raise UpstreamGenerationError("model response has no content")

        logger.info("Generated %d characters for child %s", len(content), child.id)
        return content
