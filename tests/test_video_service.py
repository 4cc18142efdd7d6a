"""Tests for the video script / video generation webhooks."""
import json

import httpx
import pytest
import respx

from content_hub.config import settings
from content_hub.errors import RequestFailed
from content_hub.services.video_service import VIDEO_SENT_MESSAGE, generate_script, generate_video


@respx.mock
async def test_script_returns_output():
    route = respx.post(settings.video_script_url).mock(
        return_value=httpx.Response(200, json={"Output": "Scene 1: pasta."})
    )
    assert await generate_script("Introduce a new Italian pasta recipe") == "Scene 1: pasta."
    assert json.loads(route.calls.last.request.content) == {"prompt": "Introduce a new Italian pasta recipe"}
    assert "Authorization" not in route.calls.last.request.headers


@respx.mock
async def test_script_empty_body_is_empty_script():
    respx.post(settings.video_script_url).mock(return_value=httpx.Response(200, text=""))
    assert await generate_script("idea") == ""


@respx.mock
async def test_script_error_prefers_output_field():
    respx.post(settings.video_script_url).mock(
        return_value=httpx.Response(500, json={"Output": "Model overloaded", "message": "other"})
    )
    with pytest.raises(RequestFailed) as exc:
        await generate_script("idea")
    assert exc.value.message == "Model overloaded"


@respx.mock
async def test_script_error_with_plain_text_body():
    respx.post(settings.video_script_url).mock(return_value=httpx.Response(502, text="Bad Gateway"))
    with pytest.raises(RequestFailed) as exc:
        await generate_script("idea")
    assert exc.value.message == "Bad Gateway"


@respx.mock
async def test_script_error_with_empty_body():
    respx.post(settings.video_script_url).mock(return_value=httpx.Response(500, text=""))
    with pytest.raises(RequestFailed) as exc:
        await generate_script("idea")
    assert exc.value.message == "Failed to generate script."


@respx.mock
async def test_video_message():
    route = respx.post(settings.video_generation_url).mock(
        return_value=httpx.Response(200, json={"message": "Queued"})
    )
    assert await generate_video("the script") == "Queued"
    assert json.loads(route.calls.last.request.content) == {"script": "the script"}


@respx.mock
async def test_video_empty_success_uses_default_message():
    respx.post(settings.video_generation_url).mock(return_value=httpx.Response(200, text=""))
    assert await generate_video("the script") == VIDEO_SENT_MESSAGE


@respx.mock
async def test_video_error_ignores_output_field():
    respx.post(settings.video_generation_url).mock(
        return_value=httpx.Response(400, json={"Output": "nope"})
    )
    with pytest.raises(RequestFailed) as exc:
        await generate_video("s")
    assert "nope" in exc.value.message
