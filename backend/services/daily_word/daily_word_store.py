# -*- coding: utf-8 -*-
"""
每日单词缓存文件 - WordCoach V1.0
单个JSON文件，每天生成新单词时整体覆盖
"""

import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from models.daily_word_models import DailyWordRecord

logger = logging.getLogger(__name__)


class DailyWordStore:
    """每日单词存储"""

    def __init__(self, cache_file: str):
        """
        初始化存储

        Args:
            cache_file: 缓存文件路径
        """
        self.cache_file = Path(cache_file)

    def load(self) -> Optional[DailyWordRecord]:
        """
        读取缓存的每日单词

        Returns:
            Optional[DailyWordRecord]: 文件不存在、无法解析或字段不完整时返回None
        """
        try:
            data = json.loads(self.cache_file.read_text(encoding='utf-8'))
            return DailyWordRecord.model_validate(data)
        except FileNotFoundError:
            logger.info("ℹ️ 每日单词缓存不存在")
            return None
        except (OSError, ValueError, ValidationError) as e:
            logger.warning(f"⚠️ 每日单词缓存无效: {e}")
            return None

    def save(self, record: DailyWordRecord) -> bool:
        """
        保存每日单词（覆盖写入）

        Args:
            record: 每日单词记录

        Returns:
            bool: 是否保存成功
        """
        try:
            self.cache_file.parent.mkdir(parents=True, exist_ok=True)
            self.cache_file.write_text(
                json.dumps(record.to_json_dict(), indent=2, ensure_ascii=False),
                encoding='utf-8'
            )
            logger.info(f"💾 每日单词已保存: \"{record.daily_word}\"")
            return True
        except OSError as e:
            logger.error(f"❌ 保存每日单词失败: {e}")
            return False
