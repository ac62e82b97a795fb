"""
skillmatch：简历关键词匹配打分服务。

上传简历与目标职位，按参考数据集中该职位要求的编程技能与框架做关键词匹配，
返回匹配度与改进建议；另提供报名记录落表。
"""

__version__ = "0.1.0"
