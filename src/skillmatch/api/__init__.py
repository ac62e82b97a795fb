# HTTP 入口：FastAPI app 与依赖项
