"""
Free Dictionary API客户端 - 单元测试
"""

import httpx
import pytest

from services.daily_word.dictionary_api_client import DictionaryApiClient, extract_first_definition

BASE_URL = "https://dictionary.example/api/v2/entries/en"

SAMPLE = [
    {
        "word": "house",
        "meanings": [
            {
                "partOfSpeech": "noun",
                "definitions": [
                    {"definition": "A structure serving as an abode of human beings."},
                    {"definition": "A household."},
                ],
            },
            {
                "partOfSpeech": "verb",
                "definitions": [{"definition": "To keep within a structure."}],
            },
        ],
    }
]


def client_with(handler):
    return DictionaryApiClient(BASE_URL, transport=httpx.MockTransport(handler))


def test_extract_first_definition():
    """测试提取第一条释义"""
    assert extract_first_definition(SAMPLE) == "A structure serving as an abode of human beings."


def test_extract_handles_malformed():
    """测试结构异常时返回None"""
    assert extract_first_definition(None) is None
    assert extract_first_definition({"title": "No Definitions Found"}) is None
    assert extract_first_definition([]) is None
    assert extract_first_definition([{"meanings": [{"definitions": []}]}]) is None


@pytest.mark.asyncio
async def test_get_definition():
    """测试正常查询"""
    def handler(request):
        assert request.url.path.endswith("/house")
        return httpx.Response(200, json=SAMPLE)

    assert await client_with(handler).get_definition("house") == "A structure serving as an abode of human beings."


@pytest.mark.asyncio
async def test_not_found_returns_none():
    """测试404返回None"""
    def handler(request):
        return httpx.Response(404, json={"title": "No Definitions Found"})

    assert await client_with(handler).get_definition("qwerty") is None


@pytest.mark.asyncio
async def test_timeout_returns_none():
    """测试超时返回None"""
    def handler(request):
        raise httpx.ReadTimeout("slow", request=request)

    assert await client_with(handler).get_definition("house") is None


@pytest.mark.asyncio
async def test_server_error_returns_none():
    """测试5xx返回None"""
    def handler(request):
        return httpx.Response(500)

    assert await client_with(handler).get_word_info("house") is None
