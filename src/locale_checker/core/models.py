"""
로케일 검사기 데이터 모델

언어, 네임스페이스, 전역 키 레코드 및 보고 항목의 구조를 정의합니다.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class SkipReason(Enum):
    """항목을 건너뛴 이유"""

    UNREADABLE_DIRECTORY = "unreadable_directory"
    UNREADABLE_FILE = "unreadable_file"
    INVALID_JSON = "invalid_json"
    NOT_A_MAPPING = "not_a_mapping"
    NON_STRING_VALUE = "non_string_value"
    ENCODE_FAILED = "encode_failed"


@dataclass(frozen=True)
class Namespace:
    """언어 디렉토리 안의 번역 파일 하나"""

    name: str
    data: dict[str, str]


@dataclass(frozen=True)
class Language:
    """언어 디렉토리 하나와 그 안의 네임스페이스들"""

    name: str
    namespaces: tuple[Namespace, ...] = ()

    def get_namespace(self, name: str) -> Namespace | None:
        """이름으로 네임스페이스 조회 (없으면 None)"""
        for namespace in self.namespaces:
            if namespace.name == name:
                return namespace
        return None


@dataclass
class GlobalNamespaceRecord:
    """모든 언어에서 모은 네임스페이스별 키 합집합"""

    name: str
    keys: list[str] = field(default_factory=list)

    def extend(self, keys) -> None:
        """키 추가 후 중복 제거 및 정렬"""
        self.keys = sorted(set(self.keys).union(keys))


@dataclass(frozen=True)
class SkippedEntry:
    """로딩 중 건너뛴 디렉토리 또는 파일"""

    path: Path
    reason: SkipReason
    detail: str = ""

    def describe(self) -> str:
        text = f"{self.path} ({self.reason.value})"
        if self.detail:
            text += f": {self.detail}"
        return text


@dataclass
class LoadResult:
    """트리 로딩 결과"""

    languages: tuple[Language, ...] = ()
    skipped: list[SkippedEntry] = field(default_factory=list)


@dataclass(frozen=True)
class MissingKey:
    """특정 언어에서 누락된 키"""

    namespace: str
    language: str
    key: str


@dataclass
class NamespaceReport:
    """네임스페이스 하나에 대한 검사 결과"""

    name: str
    missing: list[MissingKey] = field(default_factory=list)
    absent_in: list[str] = field(default_factory=list)

    @property
    def is_complete(self) -> bool:
        return not self.missing and not self.absent_in
