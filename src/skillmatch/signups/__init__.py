# 报名记录：请求模型 + 追加落表

from .schemas import SignupRecord, SignupRequest
from .recorder import append_signup

__all__ = ["SignupRecord", "SignupRequest", "append_signup"]
