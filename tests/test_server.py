"""
Tests for the HTTP endpoints
"""
import json
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from aiohttp import test_utils

from core.server import AssessmentServer
from models.errors import ServiceError
from services.assessment_client import AssessmentClient
from services.openai_service import OpenAIService
from tests.helpers import ASSESSMENT_TEXT, make_checklist, make_payload

ASSESS_URL = "/api/questionnaire/assess"


@pytest_asyncio.fixture
async def make_http_client():
    clients = []

    async def _make(server: AssessmentServer) -> test_utils.TestClient:
        client = test_utils.TestClient(test_utils.TestServer(server.build_app()))
        await client.start_server()
        clients.append(client)
        return client

    yield _make

    for client in clients:
        await client.close()


@pytest_asyncio.fixture
async def http(config, assessment_client, make_http_client):
    return await make_http_client(AssessmentServer(config, client=assessment_client))


@pytest_asyncio.fixture
async def http_without_key(unconfigured, composer, openai_client, make_http_client):
    client = AssessmentClient(OpenAIService(unconfigured, client=openai_client), composer)
    return await make_http_client(AssessmentServer(unconfigured, client=client))


@pytest.mark.asyncio
async def test_status_root(http):
    resp = await http.get("/")
    body = await resp.json()

    assert resp.status == 200
    assert body["message"] == "Backend server is running!"
    assert body["hasApiKey"] is True
    assert body["timestamp"].endswith("Z")


@pytest.mark.asyncio
async def test_health(http):
    resp = await http.get("/api/health")
    body = await resp.json()

    assert resp.status == 200
    assert body["status"] == "healthy"
    assert body["environment"]["hasApiKey"] is True
    assert body["environment"]["model"] == "gpt-4o"
    assert body["environment"]["pythonVersion"]


@pytest.mark.asyncio
async def test_health_reports_missing_key(http_without_key):
    body = await (await http_without_key.get("/api/health")).json()
    assert body["environment"]["hasApiKey"] is False


@pytest.mark.asyncio
async def test_assess_success(http, openai_client):
    resp = await http.post(ASSESS_URL, json=make_payload())
    body = await resp.json()

    assert resp.status == 200
    assert body["success"] is True
    assert body["assessment"] == ASSESSMENT_TEXT
    assert body["sdeTotal"] == 42000
    assert body["timestamp"].endswith("Z")
    assert set(body) == {"success", "assessment", "sdeTotal", "timestamp"}
    openai_client.chat.completions.create.assert_awaited_once()


@pytest.mark.asyncio
async def test_assess_recomputes_client_total(http, openai_client):
    payload = make_payload()
    payload["sdeCalculation"]["total"] = 1
    payload["sdeCalculation"]["ownerSalary"] = "10000"

    body = await (await http.post(ASSESS_URL, json=payload)).json()

    assert body["sdeTotal"] == 42000
    prompt = openai_client.chat.completions.create.await_args.kwargs["messages"][0]["content"]
    assert "**Total SDE: €42,000**" in prompt


@pytest.mark.asyncio
async def test_assess_without_key(http_without_key, openai_client):
    resp = await http_without_key.post(ASSESS_URL, json=make_payload())
    body = await resp.json()

    assert resp.status == 500
    assert body["success"] is False
    assert body["error"] == "OpenAI API key not found in environment variables"
    openai_client.chat.completions.create.assert_not_awaited()


@pytest.mark.asyncio
async def test_assess_upstream_failure(http, assessment_client):
    assessment_client.llm.generate = AsyncMock(side_effect=ServiceError("quota exceeded", status=429))

    resp = await http.post(ASSESS_URL, json=make_payload())
    body = await resp.json()

    assert resp.status == 500
    assert body["success"] is False
    assert body["error"] == "Failed to process business assessment"
    assert "429" in body["details"]
    assert "quota exceeded" in body["details"]
    assert body["timestamp"].endswith("Z")


@pytest.mark.asyncio
async def test_assess_missing_indicator(http, openai_client):
    checklist = make_checklist(True)
    del checklist["company"]["crmSystem"]

    resp = await http.post(ASSESS_URL, json=make_payload(assessmentChecklist=checklist))
    body = await resp.json()

    assert resp.status == 400
    assert body["success"] is False
    assert "company.crmSystem" in body["details"]
    openai_client.chat.completions.create.assert_not_awaited()


@pytest.mark.asyncio
async def test_assess_missing_business_type(http):
    payload = make_payload()
    payload["basicInfo"]["businessType"] = "  "

    resp = await http.post(ASSESS_URL, json=payload)
    body = await resp.json()

    assert resp.status == 400
    assert "businessType" in body["details"]


@pytest.mark.asyncio
async def test_assess_malformed_json(http):
    resp = await http.post(ASSESS_URL, data="{not json", headers={"Content-Type": "application/json"})
    body = await resp.json()

    assert resp.status == 400
    assert body["success"] is False


@pytest.mark.asyncio
async def test_assess_body_must_be_object(http):
    resp = await http.post(ASSESS_URL, json=[1, 2, 3])
    assert resp.status == 400


def _reject_constant(name):
    raise ValueError(f"non-standard JSON constant {name}")


async def strict_json(resp):
    return json.loads(await resp.text(), parse_constant=_reject_constant)


@pytest.mark.asyncio
async def test_assess_oversized_integer_counts_as_absent(http, openai_client):
    payload = make_payload()
    payload["sdeCalculation"]["netProfit"] = 10 ** 400

    resp = await http.post(ASSESS_URL, json=payload)
    body = await strict_json(resp)

    assert resp.status == 200
    assert body["sdeTotal"] == 12000


@pytest.mark.asyncio
async def test_assess_overflowing_total_is_rejected(http, openai_client):
    payload = make_payload()
    payload["sdeCalculation"]["netProfit"] = "1e308"
    payload["sdeCalculation"]["ownerSalary"] = "1e308"

    resp = await http.post(ASSESS_URL, json=payload)
    body = await strict_json(resp)

    assert resp.status == 400
    assert body["success"] is False
    assert "too large" in body["details"]
    openai_client.chat.completions.create.assert_not_awaited()


@pytest.mark.asyncio
async def test_prompt_probe(http, openai_client):
    resp = await http.post("/api/llm/test", json={"prompt": "Say hello"})
    body = await resp.json()

    assert resp.status == 200
    assert body["success"] is True
    assert body["response"] == ASSESSMENT_TEXT
    kwargs = openai_client.chat.completions.create.await_args.kwargs
    assert kwargs["messages"] == [{"role": "user", "content": "Say hello"}]


@pytest.mark.asyncio
async def test_prompt_probe_requires_prompt(http):
    resp = await http.post("/api/llm/test", json={"prompt": ""})
    assert resp.status == 400


@pytest.mark.asyncio
async def test_prompt_probe_without_key(http_without_key):
    resp = await http_without_key.post("/api/llm/test", json={"prompt": "Say hello"})
    assert resp.status == 500


@pytest.mark.asyncio
async def test_cors_preflight_for_allowed_origin(http):
    resp = await http.options(ASSESS_URL, headers={
        "Origin": "http://localhost:5173",
        "Access-Control-Request-Method": "POST",
    })

    assert resp.status == 204
    assert resp.headers["Access-Control-Allow-Origin"] == "http://localhost:5173"
    assert "POST" in resp.headers["Access-Control-Allow-Methods"]


@pytest.mark.asyncio
async def test_cors_ignores_unknown_origin(http):
    resp = await http.get("/", headers={"Origin": "https://evil.example"})
    assert resp.status == 200
    assert "Access-Control-Allow-Origin" not in resp.headers


@pytest.mark.asyncio
async def test_unexpected_error_is_json_500(http, assessment_client):
    assessment_client.submit = AsyncMock(side_effect=RuntimeError("boom"))

    resp = await http.post(ASSESS_URL, json=make_payload())
    body = await resp.json()

    assert resp.status == 500
    assert body["error"] == "Internal server error"
