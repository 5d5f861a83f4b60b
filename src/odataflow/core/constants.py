"""OData Flow 常量定义模块."""

from odataflow.core.operators import LogicOperator


class FilterTemplates:
    """过滤表达式模板."""

    COMPARISON = "{field} {operator} {value}"
    FUNCTION = "{operator}({field}, '{value}')"
    HAS = "{field} has {value}"
    IN = "{field} in ({values})"
    GROUP = "({expression})"


class QueryStringCharacters:
    """查询字符串相关字符常量."""

    # 基地址与参数之间的分隔符
    QUERY_SEPARATOR = "?"

    # 参数之间的分隔符
    PARAM_SEPARATOR = "&"

    # 参数名与值之间的分隔符
    KEY_VALUE_SEPARATOR = "="

    # select/expand 字段列表分隔符
    FIELD_SEPARATOR = ","

    # in 操作符值列表分隔符
    VALUE_SEPARATOR = ","

    # 过滤表达式 token 之间的分隔符
    TOKEN_SEPARATOR = " "

    # 开启值编码时保留不编码的字符
    DEFAULT_SAFE_CHARACTERS = ",()'$"


# count 选项的固定取值
COUNT_TRUE = "true"

# 多个 filter 子句之间允许的连接词
CLAUSE_CONNECTIVES = (LogicOperator.AND.value, LogicOperator.OR.value)
