"""
MarkItDown：上传的简历文件统一转文本，供关键词匹配使用。

主要处理 PDF 的文字层；Word、纯文本等按扩展名同样可转。扫描件没有文字层时结果为空。
"""
from __future__ import annotations

from pathlib import Path

from markitdown import MarkItDown
from markitdown._base_converter import DocumentConverterResult


_converter_instance: MarkItDown | None = None


def _converter() -> MarkItDown:
    """单例式获取转换器，避免重复初始化。"""
    global _converter_instance
    if _converter_instance is None:
        _converter_instance = MarkItDown()
    return _converter_instance


def convert_file(path: str | Path) -> DocumentConverterResult:
    """
    将本地文件转为 Markdown。
    path: 本地路径（.pdf / .docx / .txt 等），按扩展名选择转换器。
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"文件不存在: {path}")
    return _converter().convert(str(path))


def file_to_text(path: str | Path) -> str:
    """便捷：本地文件 → 全文字符串（MarkItDown 输出的 Markdown 即作为纯文本使用）。"""
    return convert_file(path).markdown or ""
