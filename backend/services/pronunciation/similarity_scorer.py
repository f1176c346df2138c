# -*- coding: utf-8 -*-
"""
发音相似度评分 - WordCoach V1.0
编辑距离相似度 + 语音识别置信度的综合评分
"""

import Levenshtein

from models.pronunciation_models import PronunciationScore

EXCELLENT_THRESHOLD = 85
GOOD_THRESHOLD = 70


def levenshtein_distance(a: str, b: str) -> int:
    """计算两个字符串的编辑距离（插入、删除、替换代价均为1）"""
    return Levenshtein.distance(a, b)


def calculate_similarity(spoken: str, target: str) -> float:
    """
    计算相似度 (0-100)

    Args:
        spoken: 识别出的文本
        target: 目标文本

    Returns:
        float: 100 * (最大长度 - 编辑距离) / 最大长度，最小为0
    """
    spoken = spoken.lower()
    target = target.lower()

    if spoken == target:
        return 100.0

    distance = levenshtein_distance(spoken, target)
    max_length = max(len(spoken), len(target))
    return max(0.0, (max_length - distance) / max_length * 100)


def verdict_for(total: float) -> str:
    """根据综合得分给出评价（边界值归入较低档）"""
    if total > EXCELLENT_THRESHOLD:
        return "excellent"
    if total > GOOD_THRESHOLD:
        return "good, keep practicing"
    return "try again"


def score(spoken: str, target: str, confidence: float) -> PronunciationScore:
    """
    综合评分

    Args:
        spoken: 识别出的文本
        target: 目标短语
        confidence: 识别置信度 (0-1)

    Returns:
        PronunciationScore: 相似度、置信度得分、综合得分和评价
    """
    similarity = calculate_similarity(spoken, target)
    confidence_score = confidence * 100
    # 相似度占70%，置信度占30%
    total = (similarity * 7 + confidence_score * 3) / 10

    return PronunciationScore(
        similarity=similarity,
        confidence_score=confidence_score,
        total=total,
        verdict=verdict_for(total),
    )
