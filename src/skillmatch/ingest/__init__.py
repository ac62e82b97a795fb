# MarkItDown 简历文本提取

from .markitdown_convert import convert_file, file_to_text

__all__ = ["convert_file", "file_to_text"]
