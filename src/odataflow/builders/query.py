"""OData 查询构建器模块."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Generic

from odataflow.builders.filter import FilterExpressionBuilder
from odataflow.builders.models import QueryBuilderConfig
from odataflow.core.constants import (
    CLAUSE_CONNECTIVES,
    COUNT_TRUE,
    QueryStringCharacters,
)
from odataflow.core.fields import FieldMapper
from odataflow.core.operators import LogicOperator, QueryOption, SortDirection
from odataflow.core.utils import encode_query_value
from odataflow.typing import FieldT, FilterCallback

logger = logging.getLogger(__name__)

_SORT_DIRECTIONS = tuple(direction.value for direction in SortDirection)


@dataclass
class _QueryFilterSlot:
    """顶层过滤表达式的 owner：把表达式按给定连接词累积到 QueryBuilder."""

    query: QueryBuilder
    connective: str

    def receive_clause(self, text: str) -> QueryBuilder:
        return self.query._append_filter_clause(text, self.connective)


class QueryBuilder(Generic[FieldT]):
    """
    OData 查询构建器.

    以链式调用累积 $select、$filter、$orderby 等查询选项，
    build() 按选项首次设置的顺序序列化为完整的查询地址。
    所有输入原样透传，不做校验。

    使用示例:
        builder = QueryBuilder("https://example.com/odata/Users")
        query = (
            builder.select(["Name", "Age"])
            .filter(lambda f: f.gt("Age", 30).and_().eq("Gender", "Male"))
            .order_by("Name", "desc")
            .top(10)
            .build()
        )
        # 输出: https://example.com/odata/Users?$select=Name,Age
        #       &$filter=Age gt 30 and Gender eq 'Male'&$orderby=Name desc&$top=10
    """

    def __init__(
        self,
        base_address: str,
        config: QueryBuilderConfig | None = None,
        field_mapper: FieldMapper | None = None,
    ):
        """
        初始化构建器.

        Args:
            base_address: 资源地址，构建后不可修改，不做校验
            config: 构建器配置，为空时使用默认配置（不编码、默认连接词 and）
            field_mapper: 字段映射器，为空时字段名原样输出
        """
        self._base_address = base_address
        self._config = config or QueryBuilderConfig()
        self._field_mapper = field_mapper
        self._options: dict[QueryOption, str] = {}
        # (连接词, 子句) 列表，首个子句的连接词不参与拼接
        self._filter_clauses: list[tuple[str, str]] = []

    @property
    def base_address(self) -> str:
        """资源地址."""
        return self._base_address

    @property
    def config(self) -> QueryBuilderConfig:
        """构建器配置."""
        return self._config

    @property
    def options(self) -> Mapping[str, str]:
        """当前已设置的查询选项（只读，键不含 $ 前缀）."""
        return MappingProxyType(
            {option.value: value for option, value in self._options.items()}
        )

    @property
    def filter_clauses(self) -> tuple[str, ...]:
        """已累积的 filter 子句（只读）."""
        return tuple(clause for _, clause in self._filter_clauses)

    def select(self, fields: Iterable[FieldT]) -> QueryBuilder[FieldT]:
        """
        指定返回字段.

        保持调用方给出的顺序，不去重；重复调用会覆盖之前的值。

        Args:
            fields: 字段名列表

        Returns:
            self，支持链式调用
        """
        return self._set_option(QueryOption.SELECT, self._join_fields(fields))

    def expand(self, fields: Iterable[FieldT]) -> QueryBuilder[FieldT]:
        """
        指定展开的导航属性.

        Args:
            fields: 字段名列表

        Returns:
            self，支持链式调用
        """
        return self._set_option(QueryOption.EXPAND, self._join_fields(fields))

    def order_by(
        self,
        field: FieldT,
        direction: SortDirection | str = SortDirection.ASC,
    ) -> QueryBuilder[FieldT]:
        """
        指定排序字段.

        Args:
            field: 排序字段
            direction: 排序方向 asc/desc，默认 asc；其他值原样输出

        Returns:
            self，支持链式调用
        """
        direction = getattr(direction, "value", direction)
        if direction not in _SORT_DIRECTIONS:
            logger.warning(f"Unknown sort direction '{direction}', passed through as is")
        return self._set_option(
            QueryOption.ORDERBY, f"{self._map_field(field)} {direction}"
        )

    def top(self, count: int) -> QueryBuilder[FieldT]:
        """指定返回记录数，不校验负数或非整数."""
        return self._set_option(QueryOption.TOP, str(count))

    def skip(self, count: int) -> QueryBuilder[FieldT]:
        """指定跳过记录数，不校验负数或非整数."""
        return self._set_option(QueryOption.SKIP, str(count))

    def count(self) -> QueryBuilder[FieldT]:
        """要求返回总记录数."""
        return self._set_option(QueryOption.COUNT, COUNT_TRUE)

    def filter(
        self,
        callback: FilterCallback,
        connective: LogicOperator | str | None = None,
    ) -> QueryBuilder[FieldT]:
        """
        添加一个 filter 子句.

        为本次调用创建新的过滤表达式构建器，交给 callback 填充后作为一个子句累积。
        多次调用不会覆盖：本次子句与前一个子句之间使用本次传入的连接词，
        第一次调用的连接词不起作用。回调抛出的异常原样向上传播，查询保持不变。

        Args:
            callback: 接收 FilterExpressionBuilder 的回调
            connective: 与前一个子句的连接词，默认取配置中的 default_connective

        Returns:
            self，支持链式调用

        示例:
            builder.filter(lambda f: f.gt("Age", 30)).filter(
                lambda f: f.eq("Age", 5), "or"
            )
            # $filter=Age gt 30 or Age eq 5
        """
        expression = self.begin_filter(connective)
        callback(expression)
        return expression.end()

    def begin_filter(
        self, connective: LogicOperator | str | None = None
    ) -> FilterExpressionBuilder[FieldT]:
        """
        创建顶层过滤表达式构建器，用于直接链式调用.

        调用返回构建器的 end() 后子句才会被累积，并返回当前 QueryBuilder。

        示例:
            builder.begin_filter().eq("Name", "Bob").end().top(5).build()

        Args:
            connective: 与前一个子句的连接词，默认取配置中的 default_connective

        Returns:
            过滤表达式构建器
        """
        if connective is None:
            connective = self._config.default_connective
        connective = getattr(connective, "value", connective)
        if connective not in CLAUSE_CONNECTIVES:
            logger.warning(
                f"Unknown filter connective '{connective}', passed through as is"
            )
        return FilterExpressionBuilder(
            _QueryFilterSlot(self, connective), self._field_mapper
        )

    def build(self) -> str:
        """
        构建完整的查询地址.

        格式: <base_address>?$<option>=<value>&...，选项按首次设置的顺序输出。
        只读取当前状态，可重复调用。

        Returns:
            查询地址字符串
        """
        query = QueryStringCharacters.PARAM_SEPARATOR.join(
            f"{option.param_name}{QueryStringCharacters.KEY_VALUE_SEPARATOR}"
            f"{self._encode(value)}"
            for option, value in self._options.items()
        )
        url = f"{self._base_address}{QueryStringCharacters.QUERY_SEPARATOR}{query}"
        logger.debug(f"构建查询: {url}")
        return url

    def __str__(self) -> str:
        return self.build()

    def __repr__(self) -> str:
        return f"<QueryBuilder: {self.build()}>"

    def _append_filter_clause(
        self, clause: str, connective: str
    ) -> QueryBuilder[FieldT]:
        """累积 filter 子句并重新计算 $filter 的值."""
        self._filter_clauses.append((connective, clause))
        parts = [self._filter_clauses[0][1]]
        for clause_connective, text in self._filter_clauses[1:]:
            parts.extend((clause_connective, text))
        logger.debug(f"累积 filter 子句 #{len(self._filter_clauses)}: {clause}")
        return self._set_option(
            QueryOption.FILTER, QueryStringCharacters.TOKEN_SEPARATOR.join(parts)
        )

    def _set_option(self, option: QueryOption, value: str) -> QueryBuilder[FieldT]:
        """设置查询选项，已存在时覆盖值但保留原有顺序."""
        self._options[option] = value
        return self

    def _encode(self, value: str) -> str:
        """按配置决定是否对参数值编码."""
        if not self._config.encode_values:
            return value
        return encode_query_value(value, safe=self._config.safe_characters)

    def _map_field(self, field: str) -> str:
        """通过字段映射器翻译字段名."""
        if self._field_mapper is None:
            return field
        return self._field_mapper.get_odata_field(field)

    def _join_fields(self, fields: Iterable[str]) -> str:
        """以逗号拼接字段列表."""
        if self._field_mapper is not None:
            fields = self._field_mapper.transform_fields(fields)
        return QueryStringCharacters.FIELD_SEPARATOR.join(fields)
