# -*- coding: utf-8 -*-
"""
单词缓存 - WordCoach V1.0
内存版TTL缓存，过期条目在读取时惰性失效，下次成功查询时覆盖
"""

import logging
from datetime import datetime, timedelta
from typing import Callable, Dict, Optional

from models.word_info_models import CacheEntry, WordInfo

logger = logging.getLogger(__name__)

DEFAULT_TTL = timedelta(hours=24)


def normalize_word(word: str) -> str:
    """缓存键：小写并去除首尾空白"""
    return word.lower().strip()


class WordCache:
    """单词缓存管理器（内存版，带TTL）"""

    def __init__(self, ttl: timedelta = DEFAULT_TTL, clock: Callable[[], datetime] = datetime.now):
        """
        初始化缓存管理器

        Args:
            ttl: 条目有效期
            clock: 时间来源，测试时可注入
        """
        self._cache: Dict[str, CacheEntry] = {}
        self.ttl = ttl
        self._clock = clock

    def get(self, word: str) -> Optional[WordInfo]:
        """
        从缓存获取单词

        Args:
            word: 单词

        Returns:
            Optional[WordInfo]: 未过期的缓存数据，不存在或已过期返回None
        """
        key = normalize_word(word)
        entry = self._cache.get(key)
        if entry is None:
            return None

        if self._clock() - entry.timestamp >= self.ttl:
            logger.debug(f"⌛ 缓存已过期: {key}")
            return None

        return entry.data

    def set(self, word: str, data: WordInfo):
        """
        设置缓存（覆盖已有条目）

        Args:
            word: 单词
            data: 单词数据
        """
        key = normalize_word(word)
        self._cache[key] = CacheEntry(data=data, timestamp=self._clock())
        logger.info(f"💾 缓存单词: {key} (总数: {len(self._cache)})")

    def exists(self, word: str) -> bool:
        """检查单词是否有未过期的缓存"""
        return self.get(word) is not None

    def clear(self):
        """清空缓存"""
        self._cache.clear()
        logger.info("🗑️ 缓存已清空")

    def size(self) -> int:
        """获取缓存条目数（包括尚未被覆盖的过期条目）"""
        return len(self._cache)
