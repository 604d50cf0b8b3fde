"""
locale-checker test fixtures
로케일 트리 생성 헬퍼
"""
import json
from pathlib import Path

import pytest
from loguru import logger


def write_locale(root: Path, language: str, namespace: str, content) -> Path:
    """Write one namespace file. Non-string content is JSON encoded."""
    lang_dir = root / language
    lang_dir.mkdir(parents=True, exist_ok=True)
    path = lang_dir / namespace
    if isinstance(content, (bytes, str)):
        data = content if isinstance(content, bytes) else content.encode("utf-8")
    else:
        data = json.dumps(content, ensure_ascii=False).encode("utf-8")
    path.write_bytes(data)
    return path


@pytest.fixture
def locales_dir(tmp_path):
    """Empty locales root"""
    root = tmp_path / "locales"
    root.mkdir()
    return root


@pytest.fixture
def make_tree(locales_dir):
    """
    Build a locale tree from a nested dict:
    {"en": {"common.json": {"hello": "Hi"}}}
    """

    def _make(tree: dict) -> Path:
        for language, files in tree.items():
            (locales_dir / language).mkdir(exist_ok=True)
            for namespace, content in files.items():
                write_locale(locales_dir, language, namespace, content)
        return locales_dir

    return _make


@pytest.fixture
def scenario_tree(make_tree):
    """en has the full key set, fr lacks 'bye'"""
    return make_tree(
        {
            "en": {"common.json": {"hello": "Hi", "bye": "Bye"}},
            "fr": {"common.json": {"hello": "Salut"}},
        }
    )


@pytest.fixture
def locale_writer():
    """write_locale(root, language, namespace, content) helper"""
    return write_locale


@pytest.fixture(autouse=True)
def reset_logger():
    """cli.main()이 추가한 loguru 핸들러 정리"""
    yield
    logger.remove()
