"""
로케일 검사기 예외 클래스

치명적 오류만 예외로 전파합니다. 개별 파일/디렉토리 오류는
SkippedEntry로 기록되고 예외가 되지 않습니다.
"""

from pathlib import Path


class LocaleCheckerError(Exception):
    """로케일 검사기 기본 예외"""

    pass


class RootDirectoryError(LocaleCheckerError):
    """루트 디렉토리를 읽을 수 없음"""

    def __init__(self, path: str | Path, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Cannot read locales directory {self.path}: {reason}")


class CanonicalEncodeError(LocaleCheckerError):
    """정렬된 JSON 인코딩 실패"""

    def __init__(self, path: str | Path, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Failed to encode {self.path}: {reason}")


class RewriteError(LocaleCheckerError):
    """정렬된 파일 쓰기 실패"""

    def __init__(self, path: str | Path, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Failed to rewrite {self.path}: {reason}")
