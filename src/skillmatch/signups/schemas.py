"""
报名（newsletter signup）请求与落表记录。
落表列名：First Name / Email / Phone / Signup Date / Time Zone。
"""
from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_TIME_ZONE = "Unknown"
SIGNUP_DATE_FORMAT = "%m/%d/%Y, %I:%M:%S %p"


def _now_local() -> str:
    return datetime.now().strftime(SIGNUP_DATE_FORMAT)


class SignupRequest(BaseModel):
    """POST /signup 请求体（JSON 或表单）；字段均可缺省，必填校验在 missing_fields 中做。"""
    model_config = ConfigDict(populate_by_name=True, extra="ignore", coerce_numbers_to_str=True)

    first_name: Optional[str] = Field(None, alias="firstName")
    email: Optional[str] = None
    phone: Optional[str] = None
    signup_date: Optional[str] = Field(None, alias="signupDate")
    time_zone: Optional[str] = Field(None, alias="timeZone")

    def missing_fields(self) -> list[str]:
        """为空或缺失的必填字段（firstName、email、phone）。"""
        required = {"firstName": self.first_name, "email": self.email, "phone": self.phone}
        return [name for name, value in required.items() if not value]

    def to_record(self) -> "SignupRecord":
        """补齐默认值：报名时间取当前本地时间，时区缺省为 Unknown。"""
        return SignupRecord(
            first_name=self.first_name or "",
            email=self.email or "",
            phone=self.phone or "",
            signup_date=self.signup_date or _now_local(),
            time_zone=self.time_zone or DEFAULT_TIME_ZONE,
        )


class SignupRecord(BaseModel):
    """一条报名记录，只追加、不修改。"""
    first_name: str
    email: str
    phone: str
    signup_date: str
    time_zone: str

    def to_row(self) -> dict[str, Any]:
        return {
            "First Name": self.first_name,
            "Email": self.email,
            "Phone": self.phone,
            "Signup Date": self.signup_date,
            "Time Zone": self.time_zone,
        }
