"""
Tests for the Gemini plan client

Tests cover:
- Mapping the compiled model config onto GenerateContentConfig
- SDK call arguments
- Error and empty-response handling
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from php_blueprint.core.errors import GenerationFailedError
from php_blueprint.models.generation import GenerationRequest
from php_blueprint.services.gemini_client import GeminiPlanClient, build_generate_config


def _mock_client(response=None, error=None):
    client = MagicMock()
    client.aio.models.generate_content = AsyncMock(return_value=response, side_effect=error)
    return client


def _request(**config):
    return GenerationRequest(model="gemini-2.5-pro", prompt="Plan it", config=config)


class TestBuildGenerateConfig:
    """Tests for config mapping."""

    def test_sampling_parameters(self):
        config = build_generate_config({"temperature": 0.2, "topP": 0.9})

        assert config.temperature == 0.2
        assert config.top_p == 0.9
        assert config.thinking_config is None

    def test_thinking_budget(self):
        config = build_generate_config({
            "temperature": 0.1,
            "topP": 0.95,
            "thinkingConfig": {"thinkingBudget": 8192},
        })

        assert config.thinking_config.thinking_budget == 8192


class TestGeminiPlanClient:
    """Tests for generate()."""

    @pytest.mark.asyncio
    async def test_returns_response_text(self):
        client = _mock_client(response=MagicMock(text="# Plan"))
        gemini = GeminiPlanClient(api_key="test-key", client=client)

        plan = await gemini.generate(_request(temperature=0.1, topP=0.95))

        assert plan == "# Plan"
        kwargs = client.aio.models.generate_content.call_args.kwargs
        assert kwargs["model"] == "gemini-2.5-pro"
        assert kwargs["contents"] == "Plan it"
        assert kwargs["config"].top_p == 0.95

    @pytest.mark.asyncio
    async def test_sdk_error_becomes_generation_failed(self):
        client = _mock_client(error=RuntimeError("401 unauthorized"))
        gemini = GeminiPlanClient(api_key="test-key", client=client)

        with pytest.raises(GenerationFailedError):
            await gemini.generate(_request())

    @pytest.mark.asyncio
    async def test_empty_response_is_an_error(self):
        client = _mock_client(response=MagicMock(text=""))
        gemini = GeminiPlanClient(api_key="test-key", client=client)

        with pytest.raises(GenerationFailedError):
            await gemini.generate(_request())

    def test_injected_client_is_used(self):
        client = _mock_client()

        assert GeminiPlanClient(api_key="k", client=client).client is client
