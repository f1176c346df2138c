# -*- coding: utf-8 -*-
"""
单词信息数据模型 - WordCoach V1.0
"""

from pydantic import BaseModel, Field
from typing import Optional, Tuple
from datetime import datetime


# 不可用时的占位值
TRANSLATION_UNAVAILABLE = "Tradução indisponível"
IPA_UNAVAILABLE = "IPA indisponível"
PRONOUNCE_UNAVAILABLE = "Pronúncia indisponível"


class PhrasePair(BaseModel):
    """英葡例句对"""
    english: str = Field(..., min_length=1, description="英文例句")
    portuguese: str = Field(..., min_length=1, description="葡萄牙语译文")

    class Config:
        frozen = True


class WordInfo(BaseModel):
    """单词完整信息"""
    word: str
    audio: Optional[str] = None  # 发音音频路径，生成失败为None
    translation: Tuple[str, ...] = Field(..., min_length=1)
    phrases: Tuple[PhrasePair, ...] = ()
    ipa: str
    pronounce: str

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "word": "house",
                "audio": "/static/audio.mp3",
                "translation": ["casa", "moradia"],
                "phrases": [
                    {"english": "This is my house.", "portuguese": "Esta é minha casa."}
                ],
                "ipa": "/haʊs/",
                "pronounce": "ráus"
            }
        }

    @classmethod
    def unavailable(cls, word: str) -> "WordInfo":
        """构造全部为占位值的默认结果"""
        return cls(
            word=word,
            audio=None,
            translation=(TRANSLATION_UNAVAILABLE,),
            phrases=(),
            ipa=IPA_UNAVAILABLE,
            pronounce=PRONOUNCE_UNAVAILABLE,
        )


class CacheEntry(BaseModel):
    """缓存条目"""
    data: WordInfo
    timestamp: datetime


class CacheStatsResponse(BaseModel):
    """缓存统计"""
    cache_size: int
    ttl_seconds: float
