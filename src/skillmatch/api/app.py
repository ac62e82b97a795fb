"""
skillmatch HTTP 入口：简历上传打分 + 报名记录。

- POST /upload：上传简历（multipart 字段 resume）+ 目标职位 jobRole，
  MarkItDown 提取全文后按参考数据集做关键词匹配，返回匹配度与反馈。
- POST /signup：报名信息追加到报名表（.xlsx）。
- GET /index1.html、/signup.html：public/ 下的静态页；其余静态资源由根路径挂载提供。

存储与文本提取器都以依赖项注入（见 deps.py），便于测试替换。
"""
import uuid
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import Depends, FastAPI, File, Form, Request, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles
from loguru import logger
from pydantic import ValidationError as PydanticValidationError
from starlette.concurrency import run_in_threadpool

from skillmatch.core.config import (
    ensure_runtime_dirs,
    get_cors_origin,
    get_host,
    get_port,
    get_public_dir,
    get_uploads_dir,
)
from skillmatch.core.logging import configure_logging
from skillmatch.matching.matcher import match_resume
from skillmatch.matching.schemas import MatchResult
from skillmatch.signups.recorder import append_signup
from skillmatch.signups.schemas import SignupRequest
from skillmatch.storage.base import TableStore
from skillmatch.storage.dataset import load_requirements

from .deps import TextExtractor, dataset_store, signup_store, text_extractor
from .errors import (
    SIGNUP_FIELDS_REQUIRED,
    SIGNUP_SAVE_FAILED,
    UPLOAD_MISSING_FILE,
    UPLOAD_PROCESSING_FAILED,
    ApiError,
    ProcessingError,
    ValidationError,
    api_error_handler,
    unhandled_error_handler,
)
from .schemas import HealthResponse, SignupResponse

# 无扩展名的上传按 PDF 处理
DEFAULT_UPLOAD_SUFFIX = ".pdf"

# 中间件与静态挂载在导入时构建，这两项只读一次；存储路径与上传目录每次请求重新读取
CORS_ORIGIN = get_cors_origin()
PUBLIC_DIR = get_public_dir()


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    ensure_runtime_dirs()
    logger.info(f"Server is running at http://localhost:{get_port()}")
    yield


app = FastAPI(
    title="skillmatch API",
    description="简历关键词匹配打分 + 报名记录",
    version="0.1.0",
    lifespan=lifespan,
)
app.state.cors_origin = CORS_ORIGIN

app.add_middleware(
    CORSMiddleware,
    allow_origins=[CORS_ORIGIN],
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_exception_handler(ApiError, api_error_handler)
app.add_exception_handler(Exception, unhandled_error_handler)


@app.get("/", response_class=PlainTextResponse)
def root():
    return "hello,world!"


@app.get("/health", response_model=HealthResponse)
def health():
    """探活。"""
    return HealthResponse()


def _serve_html(filename: str):
    path = PUBLIC_DIR / filename
    if not path.is_file():
        return PlainTextResponse(f"{filename} not found", status_code=404)
    return FileResponse(path, media_type="text/html")


@app.get("/index1.html")
def serve_index1():
    return _serve_html("index1.html")


@app.get("/signup.html")
def serve_signup():
    return _serve_html("signup.html")


async def _read_body(request: Request) -> dict:
    """报名请求体：JSON 或表单（urlencoded / multipart）；无法解析时视为空。"""
    content_type = request.headers.get("content-type", "")
    if "application/json" in content_type:
        try:
            body = await request.json()
        except ValueError:
            return {}
        return body if isinstance(body, dict) else {}
    if "form" in content_type:
        form = await request.form()
        return {k: v for k, v in form.items() if isinstance(v, str)}
    return {}


@app.post("/signup", response_model=SignupResponse)
async def signup(request: Request, store: TableStore = Depends(signup_store)):
    """
    报名：firstName、email、phone 必填；signupDate 缺省为当前时间，timeZone 缺省为 Unknown。
    缺字段 400，写表失败 500。
    """
    try:
        body = SignupRequest.model_validate(await _read_body(request))
    except PydanticValidationError as e:
        raise ValidationError(SIGNUP_FIELDS_REQUIRED, reason=f"invalid signup body: {e.error_count()} errors")
    missing = body.missing_fields()
    if missing:
        raise ValidationError(SIGNUP_FIELDS_REQUIRED, reason=f"missing fields: {', '.join(missing)}")

    try:
        await run_in_threadpool(append_signup, store, body.to_record())
    except Exception as e:
        logger.exception("Error saving signup data")
        raise ProcessingError(SIGNUP_SAVE_FAILED, reason=str(e)) from e
    return SignupResponse()


def _analyze_upload(path: Path, job_role: Optional[str], store: TableStore, extract: TextExtractor) -> MatchResult:
    resume_text = extract(str(path))
    requirements = load_requirements(store)
    return match_resume(resume_text, job_role, requirements)


@app.post("/upload", response_model=MatchResult)
async def upload(
    resume: Optional[UploadFile] = File(None, description="简历文件（PDF 为主）"),
    job_role: Optional[str] = Form(None, alias="jobRole", description="目标职位，需与参考表 JOB ROLES 完全一致"),
    store: TableStore = Depends(dataset_store),
    extract: TextExtractor = Depends(text_extractor),
):
    """
    简历打分：保存到上传目录 → 提取全文 → 读参考数据集 → 关键词匹配。
    无文件 400；处理中任何异常 500。临时文件无论成功失败都会删除。
    """
    if resume is None or not resume.filename:
        raise ValidationError(UPLOAD_MISSING_FILE, reason="No file uploaded")
    logger.info(f"File received: {resume.filename} ({resume.content_type}), jobRole={job_role!r}")

    uploads_dir = get_uploads_dir()
    suffix = Path(resume.filename).suffix.lower() or DEFAULT_UPLOAD_SUFFIX
    tmp_path = uploads_dir / f"{uuid.uuid4().hex}{suffix}"
    try:
        uploads_dir.mkdir(parents=True, exist_ok=True)
        tmp_path.write_bytes(await resume.read())
        result = await run_in_threadpool(_analyze_upload, tmp_path, job_role, store, extract)
    except Exception as e:
        logger.exception("Error processing request")
        raise ProcessingError(UPLOAD_PROCESSING_FAILED, reason=str(e)) from e
    finally:
        tmp_path.unlink(missing_ok=True)

    logger.info(f"Scored {resume.filename} for {job_role!r}: {result.probability:.1f}")
    return result


# 其余静态资源；须在所有路由之后挂载，否则会遮住同路径的接口
app.mount("/", StaticFiles(directory=PUBLIC_DIR, html=True, check_dir=False), name="public")


def main() -> None:
    """命令行入口：按配置的 host/port 启动 uvicorn。"""
    import uvicorn

    uvicorn.run(app, host=get_host(), port=get_port())
