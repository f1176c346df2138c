"""
发音相似度评分 - 单元测试
"""

import pytest

from services.pronunciation.similarity_scorer import (
    calculate_similarity,
    levenshtein_distance,
    score,
    verdict_for,
)


# ============ 编辑距离 测试 ============

def test_levenshtein_basic():
    """测试插入、删除、替换"""
    assert levenshtein_distance("kat", "cat") == 1
    assert levenshtein_distance("cat", "cats") == 1
    assert levenshtein_distance("cats", "cat") == 1
    assert levenshtein_distance("kitten", "sitting") == 3
    assert levenshtein_distance("", "abc") == 3
    assert levenshtein_distance("abc", "") == 3


def test_levenshtein_counts_characters_not_bytes():
    """测试非ASCII字符按单个字符计算"""
    assert levenshtein_distance("ação", "acao") == 2
    assert levenshtein_distance("café", "cafe") == 1


def test_similarity_case_insensitive():
    """测试大小写不影响相似度"""
    assert calculate_similarity("Hello World", "hello world") == 100


def test_similarity_never_negative():
    """测试完全不同的文本相似度为0"""
    assert calculate_similarity("abc", "xyz") == 0
    assert calculate_similarity("", "xyz") == 0


# ============ 综合评分 测试 ============

def test_score_identical():
    """测试完全一致"""
    result = score("cat", "cat", 1.0)

    assert result.similarity == 100
    assert result.confidence_score == 100
    assert result.total == 100
    assert result.verdict == "excellent"


def test_score_one_edit():
    """测试一个字符差异"""
    result = score("kat", "cat", 0.9)

    assert result.similarity == pytest.approx(66.667, abs=0.01)
    assert result.confidence_score == pytest.approx(90)
    assert result.total == pytest.approx(73.667, abs=0.01)
    assert result.verdict == "good, keep practicing"


def test_score_low():
    """测试低分"""
    result = score("dog", "cat", 0.5)
    assert result.verdict == "try again"


def test_verdict_boundaries():
    """测试边界值归入较低档"""
    assert verdict_for(85) == "good, keep practicing"
    assert verdict_for(85.01) == "excellent"
    assert verdict_for(70) == "try again"
    assert verdict_for(70.01) == "good, keep practicing"
