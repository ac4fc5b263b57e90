"""
Gemini plan generator.

The external text-generation collaborator: takes a GenerationRequest and
returns the model's Markdown text, or raises GenerationFailedError.
Uses the google-genai SDK's async client. No retries are added here: a
failed generation is surfaced to the user, who can simply try again.
"""

import logging
from typing import Any, Dict, Optional, Protocol

from google import genai
from google.genai import types

from php_blueprint.core.config import GEMINI_API_KEY
from php_blueprint.core.errors import GenerationFailedError
from php_blueprint.core.logger import truncate_for_log
from php_blueprint.models.generation import GenerationRequest

logger = logging.getLogger("blueprint.gemini")


class PlanGenerator(Protocol):
    """Anything that turns a GenerationRequest into plan text."""

    async def generate(self, request: GenerationRequest) -> str:
        ...


def build_generate_config(model_config: Dict[str, Any]) -> types.GenerateContentConfig:
    """
    Map the compiled model config onto the SDK's GenerateContentConfig.

    ``{"temperature", "topP", "thinkingConfig": {"thinkingBudget"}}``
    -> ``GenerateContentConfig(temperature, top_p, thinking_config)``
    """
    thinking = model_config.get("thinkingConfig")
    thinking_config = None
    if thinking:
        thinking_config = types.ThinkingConfig(thinking_budget=thinking["thinkingBudget"])

    return types.GenerateContentConfig(
        temperature=model_config.get("temperature"),
        top_p=model_config.get("topP"),
        thinking_config=thinking_config,
    )


class GeminiPlanClient:
    """
    PlanGenerator backed by Gemini.

    The SDK client is created on first use so that a missing API key only
    fails the generation, not application startup.
    """

    def __init__(self, api_key: Optional[str] = None, client: Optional[genai.Client] = None):
        self.api_key = api_key or GEMINI_API_KEY
        self._client = client
        if not self.api_key and client is None:
            logger.warning("GEMINI_API_KEY not set - plan generation will fail")

    @property
    def client(self) -> genai.Client:
        if self._client is None:
            self._client = genai.Client(api_key=self.api_key)
        return self._client

    async def generate(self, request: GenerationRequest) -> str:
        """
        Generate plan text for a request.

        Raises:
            GenerationFailedError: SDK/network/auth failure or empty response
        """
        logger.info(f"[GEMINI] Generating plan with {request.model} ({len(request.prompt)} chars of prompt)")
        try:
            response = await self.client.aio.models.generate_content(
                model=request.model,
                contents=request.prompt,
                config=build_generate_config(request.config),
            )
        except Exception as e:
            logger.error(f"[GEMINI] Error calling Gemini API: {e}")
            raise GenerationFailedError("Failed to communicate with the Gemini API.") from e

        text = getattr(response, "text", None)
        if not text:
            logger.error("[GEMINI] Gemini returned an empty response")
            raise GenerationFailedError("Gemini returned an empty response.")

        logger.debug(f"[GEMINI] Response: {truncate_for_log(text)}")
        return text
