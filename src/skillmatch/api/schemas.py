"""
HTTP 接口的请求与响应模型（报名、探活）。上传接口直接返回 MatchResult。
"""
from pydantic import BaseModel, Field


class SignupResponse(BaseModel):
    """POST /signup 成功响应。"""
    success: bool = Field(True, description="是否写入成功")
    message: str = Field("Signup recorded successfully", description="提示信息")


class HealthResponse(BaseModel):
    status: str = "ok"
    service: str = "skillmatch"
