"""OData Flow - OData Query String Building Toolkit.

这是一个以链式调用构建 OData 查询字符串的 Python 库，
无需手工拼接和转义 $select、$filter、$orderby 等查询参数。

主要功能:
    - QueryBuilder: 构建完整的 OData 查询地址
    - FilterExpressionBuilder: 构建 $filter 布尔表达式（支持分组嵌套）
    - FieldMapper: 字段名映射

使用示例:
    from odataflow import QueryBuilder

    query = (
        QueryBuilder("http://x/Users")
        .select(["Name", "Age"])
        .filter(lambda f: f.gt("Age", 30))
        .build()
    )
    # http://x/Users?$select=Name,Age&$filter=Age gt 30
"""

__version__ = "0.1.0"

# 导出构建器
from odataflow.builders import (
    ClauseReceiver,
    FilterExpressionBuilder,
    QueryBuilder,
    QueryBuilderConfig,
)

# 导出核心组件
from odataflow.core import (
    ComparisonOperator,
    FieldMapper,
    FunctionOperator,
    LogicOperator,
    QueryField,
    QueryOption,
    SortDirection,
    encode_query_value,
    format_value,
)

# 导出异常
from odataflow.exceptions import BuilderConfigError, ODataFlowError

__all__ = [
    # 版本
    "__version__",
    # 构建器
    "QueryBuilder",
    "QueryBuilderConfig",
    "FilterExpressionBuilder",
    "ClauseReceiver",
    # 操作符和枚举
    "QueryOption",
    "ComparisonOperator",
    "FunctionOperator",
    "LogicOperator",
    "SortDirection",
    # 核心组件
    "QueryField",
    "FieldMapper",
    "format_value",
    "encode_query_value",
    # 异常
    "ODataFlowError",
    "BuilderConfigError",
]
