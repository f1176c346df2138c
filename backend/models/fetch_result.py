# -*- coding: utf-8 -*-
"""
抓取结果类型 - WordCoach V1.0
区分"正常数据"、"降级数据（附原因）"和"失败"
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class FetchStatus(str, Enum):
    """抓取状态"""
    OK = "ok"
    DEGRADED = "degraded"
    FAILED = "failed"


@dataclass(frozen=True)
class FetchResult(Generic[T]):
    """单个数据源的抓取结果"""
    status: FetchStatus
    value: Optional[T] = None
    reason: Optional[str] = None
    source: Optional[str] = None

    @classmethod
    def ok(cls, value: T, source: str) -> "FetchResult[T]":
        return cls(FetchStatus.OK, value, None, source)

    @classmethod
    def degraded(cls, value: T, source: str, reason: str) -> "FetchResult[T]":
        return cls(FetchStatus.DEGRADED, value, reason, source)

    @classmethod
    def failed(cls, reason: str, source: Optional[str] = None) -> "FetchResult[T]":
        return cls(FetchStatus.FAILED, None, reason, source)

    @property
    def is_ok(self) -> bool:
        return self.status == FetchStatus.OK
