"""Unit tests for AgentGateway over a mocked HTTP transport (no network calls)."""
import json
import httpx
import pytest
from interviewedge.core.config import Settings
from interviewedge.core.gateway import AgentGateway, AgentGatewayError, Envelope, UploadResult
from interviewedge.core.workflow import AgentRole


def make_gateway(handler) -> AgentGateway:
    cfg = Settings(agent_api_base="http://agents.test/v1/", research_agent_id="r-123")
    return AgentGateway.from_settings(cfg, transport=httpx.MockTransport(handler))


def test_settings_resolve_every_role():
    """Every role maps to a configured agent id."""
    cfg = Settings()
    ids = {role: cfg.agent_id_for(role) for role in AgentRole}
    assert set(ids) == set(AgentRole)
    assert len(set(ids.values())) == len(AgentRole)


def test_from_settings_strips_trailing_slash():
    """Base URL trailing slash is dropped."""
    gw = make_gateway(lambda request: httpx.Response(200, json={}))
    assert gw.api_base == "http://agents.test/v1"
    assert gw.agent_ids[AgentRole.RESEARCH] == "r-123"
    assert gw.timeout is None


@pytest.mark.asyncio
async def test_invoke_posts_prompt_and_assets():
    """Invoke posts the prompt and asset ids."""
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={
            "success": True,
            "response": {"result": {"summary": "done"}, "message": "ok"},
            "module_outputs": {"artifact_files": []},
        })

    envelope = await make_gateway(handler).invoke(AgentRole.RESEARCH, "Research Acme", ["a1", "a2"])

    assert seen["url"] == "http://agents.test/v1/agents/r-123/invoke"
    assert seen["body"] == {"message": "Research Acme", "assets": ["a1", "a2"]}
    assert envelope.success is True
    assert envelope.response["result"] == {"summary": "done"}
    assert envelope.module_outputs == {"artifact_files": []}


@pytest.mark.asyncio
async def test_invoke_omits_assets_when_none():
    """No assets key when there are no attachments."""
    seen = {}

    def handler(request):
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"success": False, "error": "agent busy"})

    envelope = await make_gateway(handler).invoke(AgentRole.COPILOT, "hello")

    assert seen["body"] == {"message": "hello"}
    assert envelope == Envelope(success=False, error="agent busy")


@pytest.mark.asyncio
async def test_invoke_rejects_blank_prompt():
    """Blank prompts never reach the wire."""
    calls = []
    gw = make_gateway(lambda request: calls.append(request) or httpx.Response(200, json={}))
    with pytest.raises(ValueError):
        await gw.invoke(AgentRole.RESEARCH, "   ")
    assert calls == []


@pytest.mark.asyncio
async def test_http_error_status_raises_gateway_error():
    """HTTP error status raises AgentGatewayError."""
    gw = make_gateway(lambda request: httpx.Response(503, text="unavailable"))
    with pytest.raises(AgentGatewayError):
        await gw.invoke(AgentRole.DOCUMENTS, "prompt")


@pytest.mark.asyncio
async def test_transport_failure_raises_gateway_error():
    """Connection failure raises AgentGatewayError."""
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(AgentGatewayError):
        await make_gateway(handler).invoke(AgentRole.PREPARATION, "prompt")


@pytest.mark.asyncio
async def test_undecodable_body_raises_gateway_error():
    """Non-JSON body raises AgentGatewayError."""
    gw = make_gateway(lambda request: httpx.Response(200, text="<html>oops</html>"))
    with pytest.raises(AgentGatewayError):
        await gw.invoke(AgentRole.RESEARCH, "prompt")


@pytest.mark.asyncio
async def test_non_object_body_is_a_failed_envelope():
    """JSON that is not an object is a failed envelope."""
    gw = make_gateway(lambda request: httpx.Response(200, json=["unexpected"]))
    envelope = await gw.invoke(AgentRole.RESEARCH, "prompt")
    assert envelope.success is False
    assert envelope.error


@pytest.mark.asyncio
async def test_upload_returns_asset_ids():
    """Upload returns the service's asset ids."""
    seen = {}

    def handler(request):
        seen["url"] = str(request.url)
        seen["content_type"] = request.headers["content-type"]
        seen["body"] = request.content
        return httpx.Response(200, json={"success": True, "asset_ids": ["as-1", "as-2"]})

    result = await make_gateway(handler).upload_attachments([
        ("resume.pdf", b"%PDF-resume", "application/pdf"),
        ("jd.txt", b"job description", "text/plain"),
    ])

    assert result == UploadResult(success=True, asset_ids=["as-1", "as-2"])
    assert seen["url"] == "http://agents.test/v1/assets"
    assert seen["content_type"].startswith("multipart/form-data")
    assert b"resume.pdf" in seen["body"] and b"job description" in seen["body"]


@pytest.mark.asyncio
async def test_upload_rejected_by_service():
    """Upload rejected by the service gives a failed result."""
    gw = make_gateway(lambda request: httpx.Response(200, json={"success": False}))
    result = await gw.upload_attachments([("a.txt", b"x", "text/plain")])
    assert result.success is False
    assert result.asset_ids == []


@pytest.mark.asyncio
async def test_upload_nothing_makes_no_request():
    """Empty upload makes no request."""
    calls = []
    gw = make_gateway(lambda request: calls.append(request) or httpx.Response(500))
    assert await gw.upload_attachments([]) == UploadResult(success=True)
    assert calls == []


@pytest.mark.asyncio
async def test_upload_transport_failure_raises():
    """Upload connection failure raises AgentGatewayError."""
    gw = make_gateway(lambda request: httpx.Response(500))
    with pytest.raises(AgentGatewayError):
        await gw.upload_attachments([("a.txt", b"x", "text/plain")])
