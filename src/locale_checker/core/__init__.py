"""
로케일 검사기 핵심 모듈

데이터 모델과 예외 클래스를 제공합니다.
"""

from .models import (
    Namespace,
    Language,
    GlobalNamespaceRecord,
    SkipReason,
    SkippedEntry,
    LoadResult,
    MissingKey,
    NamespaceReport,
)
from .exceptions import (
    LocaleCheckerError,
    RootDirectoryError,
    CanonicalEncodeError,
    RewriteError,
)

__all__ = [
    "Namespace",
    "Language",
    "GlobalNamespaceRecord",
    "SkipReason",
    "SkippedEntry",
    "LoadResult",
    "MissingKey",
    "NamespaceReport",
    "LocaleCheckerError",
    "RootDirectoryError",
    "CanonicalEncodeError",
    "RewriteError",
]
