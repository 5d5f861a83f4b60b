"""过滤表达式构建器模块."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any, Generic, Protocol

from odataflow.core.constants import FilterTemplates, QueryStringCharacters
from odataflow.core.fields import FieldMapper
from odataflow.core.operators import ComparisonOperator, FunctionOperator, LogicOperator
from odataflow.core.utils import format_value
from odataflow.typing import FieldT, FilterCallback, LiteralValue

logger = logging.getLogger(__name__)


class ClauseReceiver(Protocol):
    """接收已完成表达式文本的一方.

    receive_clause 的返回值是链式调用继续作用的对象。
    """

    def receive_clause(self, text: str) -> Any: ...


class FilterExpressionBuilder(Generic[FieldT]):
    """
    $filter 表达式构建器.

    按调用顺序累积 token（谓词、连接词、括号子表达式），只追加不删除。
    render() 以单个空格拼接全部 token；finalize() 把结果交给 owner。
    不校验 token 序列是否合法，例如两个谓词之间缺少连接词也会原样输出。

    使用示例:
        builder = FilterExpressionBuilder(owner)
        builder.eq("Name", "Bob").and_().group(
            lambda g: g.eq("Age", 1).or_().eq("Age", 2)
        )

        builder.render()
        # 输出: Name eq 'Bob' and (Age eq 1 or Age eq 2)
    """

    def __init__(
        self,
        owner: ClauseReceiver,
        field_mapper: FieldMapper | None = None,
    ):
        """
        初始化构建器.

        Args:
            owner: 接收最终表达式的一方（QueryBuilder 槽位或父级构建器）
            field_mapper: 字段映射器，为空时字段名原样输出
        """
        self._owner = owner
        self._field_mapper = field_mapper
        self._tokens: list[str] = []
        self._delivered = False
        self._continuation: Any = None

    @property
    def tokens(self) -> tuple[str, ...]:
        """已累积的 token（只读）."""
        return tuple(self._tokens)

    def is_empty(self) -> bool:
        """检查是否尚未添加任何 token."""
        return not self._tokens

    def eq(
        self, field: FieldT, value: LiteralValue
    ) -> FilterExpressionBuilder[FieldT]:
        """等于: <field> eq <value>."""
        return self._compare(field, ComparisonOperator.EQ, value)

    def ne(
        self, field: FieldT, value: LiteralValue
    ) -> FilterExpressionBuilder[FieldT]:
        """不等于: <field> ne <value>."""
        return self._compare(field, ComparisonOperator.NE, value)

    def gt(
        self, field: FieldT, value: LiteralValue
    ) -> FilterExpressionBuilder[FieldT]:
        """大于: <field> gt <value>."""
        return self._compare(field, ComparisonOperator.GT, value)

    def ge(
        self, field: FieldT, value: LiteralValue
    ) -> FilterExpressionBuilder[FieldT]:
        """大于等于: <field> ge <value>."""
        return self._compare(field, ComparisonOperator.GE, value)

    def lt(
        self, field: FieldT, value: LiteralValue
    ) -> FilterExpressionBuilder[FieldT]:
        """小于: <field> lt <value>."""
        return self._compare(field, ComparisonOperator.LT, value)

    def le(
        self, field: FieldT, value: LiteralValue
    ) -> FilterExpressionBuilder[FieldT]:
        """小于等于: <field> le <value>."""
        return self._compare(field, ComparisonOperator.LE, value)

    def contains(self, field: FieldT, value: str) -> FilterExpressionBuilder[FieldT]:
        """
        包含: contains(<field>, '<value>').

        值总是加单引号，且不转义内部的单引号。
        """
        return self._function(FunctionOperator.CONTAINS, field, value)

    def ends_with(self, field: FieldT, value: str) -> FilterExpressionBuilder[FieldT]:
        """后缀匹配: endswith(<field>, '<value>')."""
        return self._function(FunctionOperator.ENDSWITH, field, value)

    def has(self, field: FieldT, value: str) -> FilterExpressionBuilder[FieldT]:
        """
        枚举标志: <field> has <value>.

        值视为枚举成员符号，原样输出，不加引号。
        """
        return self._append(
            FilterTemplates.HAS.format(field=self._map_field(field), value=value)
        )

    def in_(
        self, field: FieldT, values: Iterable[LiteralValue]
    ) -> FilterExpressionBuilder[FieldT]:
        """
        集合包含: <field> in (<v1>,<v2>,...).

        每个值按字面量规则格式化；空列表输出 "<field> in ()"。
        """
        formatted = QueryStringCharacters.VALUE_SEPARATOR.join(
            format_value(value) for value in values
        )
        return self._append(
            FilterTemplates.IN.format(field=self._map_field(field), values=formatted)
        )

    def and_(self) -> FilterExpressionBuilder[FieldT]:
        """追加连接词 and."""
        return self._append(LogicOperator.AND.value)

    def or_(self) -> FilterExpressionBuilder[FieldT]:
        """追加连接词 or."""
        return self._append(LogicOperator.OR.value)

    def not_(self) -> FilterExpressionBuilder[FieldT]:
        """追加取反关键字 not."""
        return self._append(LogicOperator.NOT.value)

    def group(self, callback: FilterCallback) -> FilterExpressionBuilder[FieldT]:
        """
        添加括号子表达式.

        创建以当前构建器为 owner 的子构建器并同步调用 callback 填充，
        回调返回后把 "(<子表达式>)" 作为一个 token 追加。嵌套深度不限。

        Args:
            callback: 接收子构建器的回调

        Returns:
            self，支持链式调用
        """
        child: FilterExpressionBuilder[FieldT] = FilterExpressionBuilder(
            self, self._field_mapper
        )
        callback(child)
        return self._append(FilterTemplates.GROUP.format(expression=child.render()))

    def render(self) -> str:
        """按追加顺序以单个空格拼接 token，不改变 token 列表."""
        return QueryStringCharacters.TOKEN_SEPARATOR.join(self._tokens)

    def finalize(self) -> str:
        """
        完成构建并把表达式交给 owner.

        owner 为父级构建器时，表达式作为一个不加括号的 token 追加到父级；
        owner 为 QueryBuilder 时，表达式作为一个 filter 子句累积。
        只交付一次，重复调用返回相同文本。

        Returns:
            表达式文本
        """
        text = self.render()
        if not self._delivered:
            self._delivered = True
            logger.debug(f"过滤表达式完成: {text}")
            self._continuation = self._owner.receive_clause(text)
        return text

    def end(self) -> Any:
        """完成构建并返回 owner 一侧，用于直接链式调用."""
        self.finalize()
        return self._continuation

    def receive_clause(self, text: str) -> FilterExpressionBuilder[FieldT]:
        """接收子构建器交付的表达式，原样作为一个 token 追加."""
        return self._append(text)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"<FilterExpressionBuilder: {self.render() or '(empty)'}>"

    def _append(self, token: str) -> FilterExpressionBuilder[FieldT]:
        """追加单个 token."""
        self._tokens.append(token)
        return self

    def _map_field(self, field: str) -> str:
        """通过字段映射器翻译字段名."""
        if self._field_mapper is None:
            return field
        return self._field_mapper.get_odata_field(field)

    def _compare(
        self, field: str, operator: ComparisonOperator, value: LiteralValue
    ) -> FilterExpressionBuilder[FieldT]:
        """构建比较谓词."""
        return self._append(
            FilterTemplates.COMPARISON.format(
                field=self._map_field(field),
                operator=operator.value,
                value=format_value(value),
            )
        )

    def _function(
        self, operator: FunctionOperator, field: str, value: str
    ) -> FilterExpressionBuilder[FieldT]:
        """构建字符串函数谓词."""
        return self._append(
            FilterTemplates.FUNCTION.format(
                operator=operator.value,
                field=self._map_field(field),
                value=value,
            )
        )
