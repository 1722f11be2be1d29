"""Tests for the publish and project metadata clients."""

from __future__ import annotations

import json

import httpx
import pytest

from integrations.errors import ErrorKind, MalformedResponse, TransportFailure
from integrations.github_publish import GitHubPublishClient, parse_publish_result
from integrations.project_metadata import ProjectMetadataClient
from schemas.workspace import ProjectMetadataRecord, PublishRequest

BASE_URL = "http://backend.test"


def _request() -> PublishRequest:
    return PublishRequest(repo_name="app", files={"/App.js": "x"}, branch="main")


def test_parse_publish_result_reads_camel_case() -> None:
    result = parse_publish_result(
        '{"success": true, "repoUrl": "https://github.com/acme/app", "repoName": "app"}'
    )

    assert result.success is True
    assert result.repo_url == "https://github.com/acme/app"
    assert result.repo_name == "app"


def test_parse_publish_result_missing_success_is_failure() -> None:
    result = parse_publish_result('{"error": "quota exceeded"}')

    assert result.success is False
    assert result.error == "quota exceeded"


@pytest.mark.parametrize("raw", ["<html>502</html>", "", "null", "[1, 2]"])
def test_parse_publish_result_rejects_non_objects(raw) -> None:
    with pytest.raises(MalformedResponse) as exc_info:
        parse_publish_result(raw)

    assert exc_info.value.kind == ErrorKind.MALFORMED_RESPONSE


async def test_publish_posts_wire_body() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"success": True, "repoName": "app"})

    client = GitHubPublishClient(BASE_URL, transport=httpx.MockTransport(handler))
    result = await client.publish(_request())

    assert result.success is True
    assert seen[0].method == "POST"
    assert seen[0].url.path == "/api/github-publish"
    assert json.loads(seen[0].content) == {
        "repoName": "app",
        "files": {"/App.js": "x"},
        "branch": "main",
    }


async def test_publish_reads_body_regardless_of_status() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, json={"success": False, "error": "Repo already exists"})

    client = GitHubPublishClient(BASE_URL, transport=httpx.MockTransport(handler))
    result = await client.publish(_request())

    assert result.success is False
    assert result.error == "Repo already exists"


async def test_publish_transport_error_is_classified() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    client = GitHubPublishClient(BASE_URL, transport=httpx.MockTransport(handler))

    with pytest.raises(TransportFailure) as exc_info:
        await client.publish(_request())

    assert exc_info.value.kind == ErrorKind.TRANSPORT_FAILURE


async def test_metadata_load_returns_record() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/api/projects/p1"
        return httpx.Response(
            200,
            json={"githubRepoUrl": "https://github.com/acme/app", "title": "ignored"},
        )

    client = ProjectMetadataClient(BASE_URL, transport=httpx.MockTransport(handler))
    record = await client.load("p1")

    assert record == ProjectMetadataRecord(githubRepoUrl="https://github.com/acme/app")


@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(404, json={"error": "missing"}),
        httpx.Response(200, text="not json"),
        httpx.Response(200, json=["not", "an", "object"]),
    ],
)
async def test_metadata_load_failures_return_none(response) -> None:
    client = ProjectMetadataClient(
        BASE_URL, transport=httpx.MockTransport(lambda request: response)
    )

    assert await client.load("p1") is None


async def test_metadata_load_without_id_makes_no_request() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={})

    client = ProjectMetadataClient(BASE_URL, transport=httpx.MockTransport(handler))

    assert await client.load(None) is None
    assert seen == []


async def test_metadata_save_patches_set_fields_only() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"ok": True})

    client = ProjectMetadataClient(BASE_URL, transport=httpx.MockTransport(handler))
    saved = await client.save("p1", ProjectMetadataRecord(githubBranch="develop"))

    assert saved is True
    assert seen[0].method == "PATCH"
    assert seen[0].headers["content-type"] == "application/json"
    assert json.loads(seen[0].content) == {"githubBranch": "develop"}


async def test_metadata_save_swallows_transport_errors() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    client = ProjectMetadataClient(BASE_URL, transport=httpx.MockTransport(handler))

    assert await client.save("p1", ProjectMetadataRecord(githubBranch="x")) is False


async def test_metadata_save_reports_error_status() -> None:
    client = ProjectMetadataClient(
        BASE_URL, transport=httpx.MockTransport(lambda request: httpx.Response(500))
    )

    assert await client.save("p1", ProjectMetadataRecord(githubBranch="x")) is False


async def test_validate_connection() -> None:
    up = GitHubPublishClient(
        BASE_URL, transport=httpx.MockTransport(lambda request: httpx.Response(204))
    )
    assert await up.validate_connection() is True

    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    down = GitHubPublishClient(BASE_URL, transport=httpx.MockTransport(refuse))
    assert await down.validate_connection() is False


async def test_metadata_unbuildable_url_is_silent() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={})

    client = ProjectMetadataClient(BASE_URL, transport=httpx.MockTransport(handler))

    assert await client.load("p\x001") is None
    assert await client.save("p\x001", ProjectMetadataRecord(githubBranch="x")) is False
    assert seen == []
