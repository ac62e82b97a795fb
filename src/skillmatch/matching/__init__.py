"""
简历 vs 职位要求的关键词匹配：参考表行解析 + 打分 + 反馈。
"""
from .schemas import RoleRequirement, MatchResult, split_terms
from .matcher import ROLE_NOT_FOUND, build_feedback, find_requirement, match_resume

__all__ = [
    "RoleRequirement",
    "MatchResult",
    "split_terms",
    "ROLE_NOT_FOUND",
    "build_feedback",
    "find_requirement",
    "match_resume",
]
