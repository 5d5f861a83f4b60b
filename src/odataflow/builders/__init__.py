"""构建器模块导出."""

from odataflow.builders.filter import ClauseReceiver, FilterExpressionBuilder
from odataflow.builders.models import QueryBuilderConfig
from odataflow.builders.query import QueryBuilder

__all__ = [
    "QueryBuilder",
    "QueryBuilderConfig",
    "FilterExpressionBuilder",
    "ClauseReceiver",
]
