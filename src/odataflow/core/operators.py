"""OData Flow 操作符定义模块."""

from enum import Enum


class QueryOption(str, Enum):
    """支持的查询选项，序列化时加 $ 前缀."""

    SELECT = "select"
    EXPAND = "expand"
    ORDERBY = "orderby"
    TOP = "top"
    SKIP = "skip"
    COUNT = "count"
    FILTER = "filter"

    @property
    def param_name(self) -> str:
        """查询参数名，如 $select."""
        return f"${self.value}"


class ComparisonOperator(str, Enum):
    """比较操作符: <field> <op> <literal>."""

    EQ = "eq"
    NE = "ne"
    GT = "gt"
    GE = "ge"
    LT = "lt"
    LE = "le"


class FunctionOperator(str, Enum):
    """字符串函数操作符: <op>(<field>, '<value>')."""

    CONTAINS = "contains"
    ENDSWITH = "endswith"


class LogicOperator(str, Enum):
    """逻辑操作符."""

    AND = "and"
    OR = "or"
    NOT = "not"


class SortDirection(str, Enum):
    """排序方向."""

    ASC = "asc"
    DESC = "desc"
