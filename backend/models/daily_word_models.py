# -*- coding: utf-8 -*-
"""
每日单词数据模型 - WordCoach V1.0
JSON字段名保持驼峰格式（与缓存文件和前端一致）
"""

from pydantic import BaseModel, Field
from typing import Optional

PHONETIC_UNAVAILABLE = "Phonetic not available"


class DailyWordRecord(BaseModel):
    """每日单词记录"""
    date: str = Field(..., description="日期，格式 YYYY/MM/DD")
    daily_word: str = Field(..., min_length=1, alias="dailyWord")
    definition: str = Field(..., min_length=1)
    phonetic: str = PHONETIC_UNAVAILABLE  # 旧缓存文件可能缺少该字段
    translated_definition: Optional[str] = Field(None, alias="translatedDefinition")

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "date": "2025/01/20",
                "dailyWord": "welcome",
                "definition": "An expression of greeting",
                "phonetic": "/ˈwelkəm/",
                "translatedDefinition": "Uma expressão de cumprimento"
            }
        }

    def to_json_dict(self) -> dict:
        """转换为缓存文件中的JSON结构"""
        return self.model_dump(by_alias=True)
