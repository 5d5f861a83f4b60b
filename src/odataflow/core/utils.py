"""
odataflow 工具函数模块

提供过滤表达式字面量格式化与查询参数值编码
"""

from decimal import Decimal
from typing import Any
from urllib.parse import quote

from odataflow.core.constants import QueryStringCharacters


def format_value(value: Any) -> str:
    """
    将值格式化为 OData 字面量。

    字符串原样包裹单引号（不转义内部的单引号，由调用方负责）；
    数值使用规范十进制表示：整数不补小数点，不加千分位，不丢精度。

    示例:
        >>> format_value("Bob")
        "'Bob'"
        >>> format_value(30)
        '30'
        >>> format_value(2.5)
        '2.5'
        >>> format_value(True)
        'true'

    Args:
        value: 待格式化的值

    Returns:
        格式化后的字面量字符串
    """
    if isinstance(value, str):
        return f"'{value}'"
    # bool 是 int 的子类，需先于数值判断
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return repr(value)
    if isinstance(value, Decimal):
        return format(value, "f")
    return str(value)


def encode_query_value(
    value: str, safe: str = QueryStringCharacters.DEFAULT_SAFE_CHARACTERS
) -> str:
    """
    对查询参数值进行百分号编码。

    Args:
        value: 原始参数值
        safe: 不需要编码的字符

    Returns:
        编码后的参数值
    """
    return quote(value, safe=safe)
