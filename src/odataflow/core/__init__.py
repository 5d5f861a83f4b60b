"""核心模块导出."""

from odataflow.core.constants import FilterTemplates, QueryStringCharacters
from odataflow.core.fields import FieldMapper, QueryField
from odataflow.core.operators import (
    ComparisonOperator,
    FunctionOperator,
    LogicOperator,
    QueryOption,
    SortDirection,
)
from odataflow.core.utils import encode_query_value, format_value

__all__ = [
    "FilterTemplates",
    "QueryStringCharacters",
    "QueryOption",
    "ComparisonOperator",
    "FunctionOperator",
    "LogicOperator",
    "SortDirection",
    "QueryField",
    "FieldMapper",
    "format_value",
    "encode_query_value",
]
