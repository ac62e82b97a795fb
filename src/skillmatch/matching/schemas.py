"""
参考数据集与匹配结果的数据模型。
参考表列名固定：JOB ROLES / PROGRAMMING SKILLS / FRAMEWORKS（后两列为逗号分隔）。
"""
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

COLUMN_JOB_ROLE = "JOB ROLES"
COLUMN_SKILLS = "PROGRAMMING SKILLS"
COLUMN_FRAMEWORKS = "FRAMEWORKS"


def split_terms(value: Any) -> list[str]:
    """逗号分隔字符串 → 去空白的列表，丢弃空项。"""
    if value is None:
        return []
    return [term.strip() for term in str(value).split(",") if term.strip()]


class RoleRequirement(BaseModel):
    """单个职位的技能/框架要求（参考表中的一行）。"""
    job_role: str = Field(..., min_length=1, description="职位名称，查找时精确匹配")
    required_skills: list[str] = Field(default_factory=list, description="要求的编程技能，保持表中顺序")
    required_frameworks: list[str] = Field(default_factory=list, description="要求的框架，保持表中顺序")

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "RoleRequirement":
        """从原始表格行解析；JOB ROLES 为空时抛出 ValidationError。"""
        role = row.get(COLUMN_JOB_ROLE)
        return cls(
            job_role="" if role is None else str(role),
            required_skills=split_terms(row.get(COLUMN_SKILLS)),
            required_frameworks=split_terms(row.get(COLUMN_FRAMEWORKS)),
        )


class MatchResult(BaseModel):
    """
    简历与职位要求的匹配结果，即 POST /upload 的响应体。
    对外字段为 camelCase；缺失技能/框架列表另存于 missing_*，不参与序列化。
    """
    model_config = ConfigDict(populate_by_name=True)

    job_role: Optional[str] = Field(None, alias="jobRole", description="请求的职位")
    probability: Union[int, float] = Field(0, ge=0, le=100, description="匹配度 0–100：技能、框架各占 50；整数值以 int 输出")
    additional_skills: str = Field("None", alias="additionalSkills", description="缺失技能，逗号分隔；无缺失为 None")
    additional_frameworks: str = Field("None", alias="additionalFrameworks", description="缺失框架，逗号分隔；无缺失为 None")
    feedback: str = Field(..., description="按匹配度给出的反馈")
    missing_skills: list[str] = Field(default_factory=list, exclude=True)
    missing_frameworks: list[str] = Field(default_factory=list, exclude=True)
