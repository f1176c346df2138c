# -*- coding: utf-8 -*-
"""
发音评分API路由 - WordCoach V1.0
根据浏览器语音识别结果为用户的发音打分
"""

import logging
from fastapi import APIRouter, HTTPException

from models.pronunciation_models import PronunciationScore, PronunciationScoreRequest
from services.pronunciation.similarity_scorer import score

logger = logging.getLogger(__name__)

# 创建路由器
router = APIRouter(prefix="/api/pronunciation", tags=["发音评分"])


@router.post("/score", response_model=PronunciationScore)
async def score_pronunciation(request: PronunciationScoreRequest):
    """
    评估用户发音

    综合两个维度打分：
    - 识别文本与目标短语的编辑距离相似度（70%）
    - 语音识别置信度（30%）

    Args:
        request: 评分请求，包含识别文本、目标短语和置信度

    Returns:
        PronunciationScore: 评分结果（保留一位小数）

    Raises:
        HTTPException: 400 - 目标短语为空
    """
    if not request.target.strip():
        raise HTTPException(status_code=400, detail="target不能为空")

    result = score(request.spoken, request.target, request.confidence)
    logger.info(f"🎯 发音评分: '{request.spoken}' vs '{request.target}' -> {result.total:.1f} ({result.verdict})")

    return PronunciationScore(
        similarity=round(result.similarity, 1),
        confidence_score=round(result.confidence_score, 1),
        total=round(result.total, 1),
        verdict=result.verdict
    )
