"""
API路由 - 接口测试（使用 FastAPI TestClient，服务用假实现替换）
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from deps.dependencies import get_daily_word_service, get_word_info_service
from models.daily_word_models import DailyWordRecord
from models.word_info_models import PhrasePair, WordInfo
from routers import daily_word_router, pronunciation_router, word_router
from services.word_info.word_cache import WordCache


class FakeWordInfoService:
    def __init__(self):
        self.cache = WordCache()
        self.words = []

    async def get_info_word(self, word):
        self.words.append(word)
        return WordInfo(
            word=word.strip().lower(),
            audio="/static/audio.mp3",
            translation=["casa"],
            phrases=[PhrasePair(english="My house.", portuguese="Minha casa.")],
            ipa="/ˈhaʊs/",
            pronounce="raus",
        )


class FakeDailyWordService:
    async def generate_daily_word(self):
        return DailyWordRecord(
            date="2025/01/20",
            daily_word="house",
            definition="A building for living in",
            phonetic="raus",
            translated_definition=None,
        )


@pytest.fixture
def word_service():
    return FakeWordInfoService()


@pytest.fixture
def client(word_service):
    app = FastAPI()
    app.include_router(word_router.router)
    app.include_router(daily_word_router.router)
    app.include_router(pronunciation_router.router)
    app.dependency_overrides[get_word_info_service] = lambda: word_service
    app.dependency_overrides[get_daily_word_service] = lambda: FakeDailyWordService()
    return TestClient(app)


# ============ 单词信息 测试 ============

def test_get_word_info(client, word_service):
    """测试单词查询接口"""
    response = client.get("/api/words/House")

    assert response.status_code == 200
    data = response.json()
    assert data["word"] == "house"
    assert data["translation"] == ["casa"]
    assert data["phrases"] == [{"english": "My house.", "portuguese": "Minha casa."}]
    assert word_service.words == ["House"]


def test_blank_word_rejected(client):
    """测试空白单词"""
    response = client.get("/api/words/%20%20")
    assert response.status_code == 400


def test_cache_endpoints(client):
    """测试缓存统计和清空"""
    stats = client.get("/api/words/cache/stats").json()
    assert stats == {"cache_size": 0, "ttl_seconds": 86400.0}

    response = client.delete("/api/words/cache/clear")
    assert response.json()["success"] is True


# ============ 每日单词 测试 ============

def test_daily_word_uses_camel_case(client):
    """测试每日单词字段名"""
    response = client.get("/api/daily-word")

    assert response.status_code == 200
    assert response.json() == {
        "date": "2025/01/20",
        "dailyWord": "house",
        "definition": "A building for living in",
        "phonetic": "raus",
        "translatedDefinition": None,
    }


# ============ 发音评分 测试 ============

def test_score_pronunciation(client):
    """测试发音评分接口"""
    response = client.post(
        "/api/pronunciation/score",
        json={"spoken": "kat", "target": "cat", "confidence": 0.9},
    )

    assert response.status_code == 200
    assert response.json() == {
        "similarity": 66.7,
        "confidenceScore": 90.0,
        "total": 73.7,
        "verdict": "good, keep practicing",
    }


def test_score_rejects_invalid_confidence(client):
    """测试置信度超出范围"""
    response = client.post(
        "/api/pronunciation/score",
        json={"spoken": "cat", "target": "cat", "confidence": 1.5},
    )
    assert response.status_code == 422


def test_score_rejects_blank_target(client):
    """测试目标短语为空白"""
    response = client.post(
        "/api/pronunciation/score",
        json={"spoken": "cat", "target": "   ", "confidence": 0.5},
    )
    assert response.status_code == 400
