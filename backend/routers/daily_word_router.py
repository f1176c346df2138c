# -*- coding: utf-8 -*-
"""
每日单词路由 - WordCoach V1.0
"""

from fastapi import APIRouter, Depends

from deps.dependencies import get_daily_word_service
from models.daily_word_models import DailyWordRecord
from services.daily_word.daily_word_service import DailyWordService

# 创建路由器
router = APIRouter(prefix="/api/daily-word", tags=["daily-word"])


@router.get("", response_model=DailyWordRecord)
async def get_daily_word(service: DailyWordService = Depends(get_daily_word_service)):
    """
    获取今天的每日单词

    同一天内多次调用返回相同的单词（缓存在JSON文件中）

    Returns:
        DailyWordRecord: 每日单词记录
    """
    return await service.generate_daily_word()
