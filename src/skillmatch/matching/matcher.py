"""
简历关键词匹配：在简历全文中做大小写不敏感的子串查找，按命中比例计算匹配度。

匹配度 = 50 × 技能命中率 + 50 × 框架命中率；某一类要求为空时该半边记 0。
纯函数，无副作用。
"""
from __future__ import annotations

from typing import Iterable

from skillmatch.matching.schemas import MatchResult, RoleRequirement

ROLE_NOT_FOUND = "Job role not found in the dataset"
FEEDBACK_PERFECT = "Great job! You are a perfect match for this role!"
FEEDBACK_PARTIAL = (
    "You have some of the required skills and frameworks. "
    "Consider improving the following areas: "
)
FEEDBACK_LOW = (
    "You need to improve your skills and frameworks significantly. "
    "Consider learning: "
)
NONE_LABEL = "None"


def find_requirement(job_role: str | None, requirements: Iterable[RoleRequirement]) -> RoleRequirement | None:
    """按职位名精确查找，返回第一条匹配。"""
    for req in requirements:
        if req.job_role == job_role:
            return req
    return None


def _partition(terms: list[str], haystack: str) -> tuple[list[str], list[str]]:
    found: list[str] = []
    missing: list[str] = []
    for term in terms:
        if term.lower() in haystack:
            found.append(term)
        else:
            missing.append(term)
    return found, missing


def _half(found: list[str], required: list[str]) -> float:
    if not required:
        return 0.0
    return len(found) / len(required) * 50


def _normalize(probability: float) -> int | float:
    """整数值输出为 int（100 而非 100.0）。"""
    return int(probability) if probability.is_integer() else probability


def build_feedback(probability: float, missing_skills: list[str], missing_frameworks: list[str]) -> str:
    """
    按阈值生成反馈：100 为满分祝贺；[50, 100) 与 < 50 两档都逐字列出缺失项。
    列表为空时也照样拼接（可能出现 ", " 开头或结尾），与 payload 中的 None 不同。
    """
    if probability == 100:
        return FEEDBACK_PERFECT
    listing = ", ".join(missing_skills) + ", " + ", ".join(missing_frameworks)
    if probability >= 50:
        return FEEDBACK_PARTIAL + listing
    return FEEDBACK_LOW + listing


def role_not_found(job_role: str | None) -> MatchResult:
    """职位不在数据集中：匹配度 0，三个描述字段均为固定提示。"""
    return MatchResult(
        job_role=job_role,
        probability=0,
        additional_skills=ROLE_NOT_FOUND,
        additional_frameworks=ROLE_NOT_FOUND,
        feedback=ROLE_NOT_FOUND,
    )


def match_resume(
    resume_text: str,
    job_role: str | None,
    requirements: Iterable[RoleRequirement],
) -> MatchResult:
    """对单份简历文本按指定职位的要求打分。"""
    req = find_requirement(job_role, requirements)
    if req is None:
        return role_not_found(job_role)

    haystack = (resume_text or "").lower()
    skills_found, missing_skills = _partition(req.required_skills, haystack)
    frameworks_found, missing_frameworks = _partition(req.required_frameworks, haystack)

    probability = _normalize(
        _half(skills_found, req.required_skills) + _half(frameworks_found, req.required_frameworks)
    )

    return MatchResult(
        job_role=job_role,
        probability=probability,
        additional_skills=", ".join(missing_skills) or NONE_LABEL,
        additional_frameworks=", ".join(missing_frameworks) or NONE_LABEL,
        feedback=build_feedback(probability, missing_skills, missing_frameworks),
        missing_skills=missing_skills,
        missing_frameworks=missing_frameworks,
    )
