"""
HTTP 错误分类：客户端只看到固定文案，细节只写服务端日志。

- ValidationError：报名缺字段、上传缺文件 → 400
- ProcessingError：提取、匹配、存储失败 → 500
职位不存在不是错误，返回匹配度 0 的结果（见 skillmatch.matching.matcher.role_not_found）。
"""
from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse, PlainTextResponse
from loguru import logger

SIGNUP_FIELDS_REQUIRED = {"success": False, "error": "All fields are required"}
SIGNUP_SAVE_FAILED = {"success": False, "error": "Error saving signup data"}
UPLOAD_MISSING_FILE = {"error": "No file uploaded"}
UPLOAD_PROCESSING_FAILED = {"error": "Error processing request"}
UNHANDLED_ERROR_TEXT = "Something went wrong!"


class ApiError(Exception):
    """带固定响应体的接口错误。"""
    status_code = 500

    def __init__(self, payload: dict[str, Any], reason: str = ""):
        super().__init__(reason or payload.get("error", ""))
        self.payload = payload
        self.reason = reason


class ValidationError(ApiError):
    status_code = 400


class ProcessingError(ApiError):
    status_code = 500


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.reason or exc}")
    else:
        logger.warning(f"{request.method} {request.url.path} rejected: {exc.reason or exc}")
    return JSONResponse(exc.payload, status_code=exc.status_code)


async def unhandled_error_handler(request: Request, exc: Exception) -> PlainTextResponse:
    """
    兜底：未被业务捕获的异常统一 500 文本。
    该处理器运行在 CORSMiddleware 之外，允许的来源需在此补上 CORS 头，浏览器才能读到响应。
    """
    logger.opt(exception=exc).error(f"Unhandled error on {request.method} {request.url.path}")
    response = PlainTextResponse(UNHANDLED_ERROR_TEXT, status_code=500)
    origin = request.headers.get("origin")
    if origin and origin == getattr(request.app.state, "cors_origin", None):
        response.headers["Access-Control-Allow-Origin"] = origin
        response.headers["Vary"] = "Origin"
    return response
