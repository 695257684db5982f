from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional, Sequence, Tuple
import httpx
from interviewedge.core.config import Settings, settings as default_settings
from interviewedge.core.workflow import AgentRole

log = logging.getLogger(__name__)


class AgentGatewayError(RuntimeError):
    """Transport-level failure talking to the remote agent service."""


@dataclass(frozen=True)
class Envelope:
    """Uniform success/failure wrapper around one agent invocation.

    ``response`` and ``module_outputs`` are agent-defined and deliberately
    left untyped; see ``interviewedge.core.normalize`` for how they are read.
    """
    success: bool
    response: Any = None
    module_outputs: Any = None
    error: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Any) -> "Envelope":
        if not isinstance(payload, dict):
            return cls(success=False, error="Agent returned a malformed envelope")
        error = payload.get("error")
        return cls(
            success=bool(payload.get("success")),
            response=payload.get("response"),
            module_outputs=payload.get("module_outputs"),
            error=str(error) if error else None,
        )


@dataclass(frozen=True)
class UploadResult:
    success: bool
    asset_ids: List[str] = field(default_factory=list)


# (filename, content, content_type)
Attachment = Tuple[str, bytes, str]


@dataclass
class AgentGateway:
    api_base: str
    agent_ids: dict
    timeout: Optional[float] = None
    transport: Optional[httpx.AsyncBaseTransport] = None

    @classmethod
    def from_settings(cls, cfg: Settings | None = None, transport: httpx.AsyncBaseTransport | None = None) -> "AgentGateway":
        cfg = cfg or default_settings
        return cls(
            api_base=cfg.agent_api_base.rstrip("/"),
            agent_ids={role: cfg.agent_id_for(role) for role in AgentRole},
            timeout=cfg.agent_timeout_seconds,
            transport=transport,
        )

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout, transport=self.transport)

    async def invoke(self, role: AgentRole, prompt: str, asset_ids: Sequence[str] = ()) -> Envelope:
        if not prompt or not prompt.strip():
            raise ValueError("prompt must be non-empty")
        agent_id = self.agent_ids[role]
        url = f"{self.api_base}/agents/{agent_id}/invoke"
        body: dict = {"message": prompt}
        if asset_ids:
            body["assets"] = list(asset_ids)
        try:
            async with self._client() as client:
                r = await client.post(url, json=body)
                r.raise_for_status()
                payload = r.json()
        except httpx.HTTPError as e:
            raise AgentGatewayError(f"Agent {role.value} request failed: {e}") from e
        except ValueError as e:
            raise AgentGatewayError(f"Agent {role.value} returned an undecodable body: {e}") from e
        return Envelope.from_payload(payload)

    async def upload_attachments(self, files: Sequence[Attachment]) -> UploadResult:
        if not files:
            return UploadResult(success=True)
        url = f"{self.api_base}/assets"
        multipart = [("files", (name, content, content_type)) for name, content, content_type in files]
        try:
            async with self._client() as client:
                r = await client.post(url, files=multipart)
                r.raise_for_status()
                payload = r.json()
        except (httpx.HTTPError, ValueError) as e:
            raise AgentGatewayError(f"Attachment upload failed: {e}") from e
        if not isinstance(payload, dict):
            return UploadResult(success=False)
        asset_ids = payload.get("asset_ids")
        if not payload.get("success") or not isinstance(asset_ids, list):
            return UploadResult(success=False)
        return UploadResult(success=True, asset_ids=[str(a) for a in asset_ids])
