"""
scripts/seed_dataset.py：写入内置示例职位、已存在时需 --force、CSV 缺列报错。
"""
import importlib.util
import sys
from pathlib import Path

import pandas as pd
import pytest

from skillmatch.storage.dataset import load_requirements
from skillmatch.storage.excel import ExcelTableStore
from skillmatch.storage.samples import SAMPLE_ROLES

SCRIPT = Path(__file__).resolve().parents[1] / "scripts" / "seed_dataset.py"


@pytest.fixture(scope="module")
def seed_dataset():
    spec = importlib.util.spec_from_file_location("seed_dataset", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def _run(seed_dataset, monkeypatch, *args):
    monkeypatch.setattr(sys, "argv", ["seed_dataset.py", *args])
    seed_dataset.main()


def test_seed_writes_sample_roles(seed_dataset, monkeypatch, tmp_path):
    output = tmp_path / "x.xlsx"
    _run(seed_dataset, monkeypatch, "--output", str(output))
    reqs = load_requirements(ExcelTableStore(output))
    assert len(reqs) == 5
    assert [r.job_role for r in reqs] == [row["JOB ROLES"] for row in SAMPLE_ROLES]
    assert reqs[0].required_skills == ["Node", "SQL", "Python"]


def test_seed_refuses_to_overwrite_without_force(seed_dataset, monkeypatch, tmp_path):
    output = tmp_path / "x.xlsx"
    _run(seed_dataset, monkeypatch, "--output", str(output))
    with pytest.raises(SystemExit) as exc:
        _run(seed_dataset, monkeypatch, "--output", str(output))
    assert exc.value.code == 1


def test_seed_force_overwrites_from_csv(seed_dataset, monkeypatch, tmp_path):
    output = tmp_path / "x.xlsx"
    source = tmp_path / "roles.csv"
    pd.DataFrame([
        {"JOB ROLES": "QA Engineer", "PROGRAMMING SKILLS": "Python", "FRAMEWORKS": "Pytest, Selenium"},
    ]).to_csv(source, index=False)
    _run(seed_dataset, monkeypatch, "--output", str(output))
    _run(seed_dataset, monkeypatch, "--output", str(output), "--source", str(source), "--force")
    reqs = load_requirements(ExcelTableStore(output))
    assert [r.job_role for r in reqs] == ["QA Engineer"]
    assert reqs[0].required_frameworks == ["Pytest", "Selenium"]


def test_seed_csv_missing_column_raises(seed_dataset, monkeypatch, tmp_path):
    source = tmp_path / "roles.csv"
    pd.DataFrame([{"JOB ROLES": "QA Engineer", "PROGRAMMING SKILLS": "Python"}]).to_csv(source, index=False)
    with pytest.raises(ValueError, match="FRAMEWORKS"):
        _run(seed_dataset, monkeypatch, "--output", str(tmp_path / "x.xlsx"), "--source", str(source))
    assert not (tmp_path / "x.xlsx").exists()
