"""OData Flow 类型定义模块."""

from decimal import Decimal
from typing import TYPE_CHECKING, Callable, TypeVar, Union

if TYPE_CHECKING:
    from odataflow.builders.filter import FilterExpressionBuilder

# 字段名类型，可用 Literal["Name", "Age"] 参数化以获得静态检查
FieldT = TypeVar("FieldT", bound=str)

# 字面量值类型
LiteralValue = Union[str, int, float, Decimal, bool, None]

# filter/group 回调类型
FilterCallback = Callable[["FilterExpressionBuilder"], object]
