"""
PHP Blueprint - Generation Models

- GenerationRequest: what is sent to the text-generation collaborator
- DebugSnapshot: session-only copy of the last prompt/config/response
- GenerationRecord: one entry of the durable history ledger
"""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field

from php_blueprint.models.spec import ProjectSpec


class GenerationRequest(BaseModel):
    """Request handed to a PlanGenerator."""
    model: str
    prompt: str
    config: Dict[str, Any] = Field(default_factory=dict)


class DebugSnapshot(BaseModel):
    """Exact prompt, config and raw output of the most recent generation."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    prompt: str
    config: Dict[str, Any]
    raw_response: str = Field(alias="rawResponse")


class GenerationRecord(BaseModel):
    """
    History ledger entry.

    Created only after a successful generation and never mutated afterwards.
    ``id`` and ``timestamp`` are ISO-8601 UTC instants (``...T12:00:00.000Z``).
    """

    model_config = ConfigDict(frozen=True)

    id: str
    spec: ProjectSpec
    plan: str
    timestamp: str

    def to_record(self) -> Dict[str, Any]:
        """Serialize with the spec in its camelCase wire shape."""
        return self.model_dump(mode="json", by_alias=True)
