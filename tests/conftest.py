"""
共享 fixture：内存参考数据集 / 报名表，并通过 dependency_overrides 注入 app。
文本提取器替换为直接读文件，测试不依赖 PDF 解析。
"""
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from skillmatch.api.app import app
from skillmatch.api.deps import dataset_store, signup_store, text_extractor
from skillmatch.storage.memory import MemoryTableStore

DATASET_ROWS = [
    {"JOB ROLES": "Backend Developer", "PROGRAMMING SKILLS": "Node,SQL", "FRAMEWORKS": "Express"},
    {"JOB ROLES": "Data Scientist", "PROGRAMMING SKILLS": "Python, R, SQL", "FRAMEWORKS": "Pandas, TensorFlow"},
    {"JOB ROLES": "Frontend Developer", "PROGRAMMING SKILLS": "JavaScript, CSS", "FRAMEWORKS": "React, Vue"},
]


def _read_plain_text(path: str) -> str:
    return Path(path).read_text(encoding="utf-8")


@pytest.fixture
def dataset() -> MemoryTableStore:
    return MemoryTableStore(DATASET_ROWS)


@pytest.fixture
def signups() -> MemoryTableStore:
    return MemoryTableStore()


@pytest.fixture
def uploads_dir(tmp_path, monkeypatch) -> Path:
    path = tmp_path / "uploads"
    monkeypatch.setenv("SKILLMATCH_UPLOADS_DIR", str(path))
    return path


@pytest.fixture
def client(dataset, signups, uploads_dir):
    app.dependency_overrides[dataset_store] = lambda: dataset
    app.dependency_overrides[signup_store] = lambda: signups
    app.dependency_overrides[text_extractor] = lambda: _read_plain_text
    yield TestClient(app)
    app.dependency_overrides.clear()
