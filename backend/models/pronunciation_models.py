# -*- coding: utf-8 -*-
"""
发音评分数据模型 - WordCoach V1.0
"""

from pydantic import BaseModel, Field
from typing import Literal


Verdict = Literal["excellent", "good, keep practicing", "try again"]


class PronunciationScoreRequest(BaseModel):
    """发音评分请求模型"""
    spoken: str = Field(..., description="语音识别出的文本")
    target: str = Field(..., min_length=1, description="目标短语")
    confidence: float = Field(..., ge=0, le=1, description="识别置信度 (0-1)")

    class Config:
        json_schema_extra = {
            "example": {
                "spoken": "kat",
                "target": "cat",
                "confidence": 0.9
            }
        }


class PronunciationScore(BaseModel):
    """发音评分结果模型"""
    similarity: float = Field(..., ge=0, le=100, description="文本相似度 (0-100)")
    confidence_score: float = Field(..., ge=0, le=100, alias="confidenceScore", description="置信度得分 (0-100)")
    total: float = Field(..., ge=0, le=100, description="综合得分 (0-100)")
    verdict: Verdict

    class Config:
        populate_by_name = True
