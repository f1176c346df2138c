# -*- coding: utf-8 -*-
"""
单词信息路由 - WordCoach V1.0
提供单词翻译、例句、音标和发音查询接口
"""

import logging
from fastapi import APIRouter, HTTPException, Depends

from deps.dependencies import get_word_info_service
from models.word_info_models import CacheStatsResponse, WordInfo
from services.word_info.word_info_service import WordInfoService

logger = logging.getLogger(__name__)

# 创建路由器
router = APIRouter(prefix="/api/words", tags=["words"])


@router.get("/cache/stats", response_model=CacheStatsResponse)
async def get_cache_stats(service: WordInfoService = Depends(get_word_info_service)):
    """获取缓存统计信息"""
    return CacheStatsResponse(
        cache_size=service.cache.size(),
        ttl_seconds=service.cache.ttl.total_seconds()
    )


@router.delete("/cache/clear")
async def clear_cache(service: WordInfoService = Depends(get_word_info_service)):
    """清空缓存"""
    service.cache.clear()
    return {"success": True, "message": "缓存已清空"}


@router.get("/{word}", response_model=WordInfo)
async def get_word_info(word: str, service: WordInfoService = Depends(get_word_info_service)):
    """
    查询单词信息

    流程：
    1. 检查缓存
    2. 并发获取翻译、例句、IPA音标、发音
    3. 合并结果并缓存

    Args:
        word: 要查询的英文单词

    Returns:
        WordInfo: 单词完整信息（上游不可用时字段为占位值）

    Raises:
        HTTPException: 400 - 单词为空
    """
    if not word or not word.strip():
        raise HTTPException(status_code=400, detail="单词不能为空")

    logger.info(f"📖 收到单词查询请求: {word}")
    return await service.get_info_word(word)
