import json
from unittest import mock

import httpx
import pytest

from veryhttp.args import Get, Post
from veryhttp.client import Client
from veryhttp.dispatcher import dispatch
from veryhttp.error import ClientError
from veryhttp.kv import KeyValuePair


def echo_transport(requests):
    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(
            200,
            headers={"Content-Type": "application/json"},
            content=request.content or b"{}",
        )

    return httpx.MockTransport(handler)


@pytest.mark.asyncio
async def test_dispatch_get():
    requests: list = []
    async with Client(transport=echo_transport(requests)) as client:
        view = await dispatch(Get("https://example.com/get"), client)

    assert [r.method for r in requests] == ["GET"]
    assert view.status_code == 200


@pytest.mark.asyncio
async def test_dispatch_post_builds_json_body():
    requests: list = []
    command = Post(
        "https://example.com/echo",
        (KeyValuePair("name", "ada"), KeyValuePair("lang", "rust")),
    )
    async with Client(transport=echo_transport(requests)) as client:
        view = await dispatch(command, client)

    assert [r.method for r in requests] == ["POST"]
    assert json.loads(requests[0].content) == {"name": "ada", "lang": "rust"}
    assert json.loads(view.text) == {"name": "ada", "lang": "rust"}


@pytest.mark.asyncio
async def test_dispatch_post_duplicate_keys():
    requests: list = []
    command = Post(
        "https://example.com/echo",
        (
            KeyValuePair("a", "1"),
            KeyValuePair("b", "2"),
            KeyValuePair("a", "3"),
        ),
    )
    async with Client(transport=echo_transport(requests)) as client:
        await dispatch(command, client)

    assert json.loads(requests[0].content) == {"a": "3", "b": "2"}


@pytest.mark.asyncio
async def test_dispatch_post_empty_body():
    requests: list = []
    async with Client(transport=echo_transport(requests)) as client:
        await dispatch(Post("https://example.com/echo"), client)

    assert json.loads(requests[0].content) == {}


@pytest.mark.asyncio
async def test_dispatch_does_not_retry():
    client = mock.AsyncMock(spec=Client)
    client.get.side_effect = ClientError("GET https://example.com/: boom")

    with pytest.raises(ClientError):
        await dispatch(Get("https://example.com/"), client)
    assert client.get.await_count == 1
    client.post.assert_not_awaited()


@pytest.mark.asyncio
async def test_dispatch_unknown_command():
    client = mock.AsyncMock(spec=Client)
    with pytest.raises(TypeError):
        await dispatch("get https://example.com/", client)  # type: ignore[arg-type]
