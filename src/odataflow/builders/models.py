"""查询构建器配置模型定义模块.

提供构建器相关的数据模型，包括：
- QueryBuilderConfig: 查询构建器配置
"""

from dataclasses import dataclass

from odataflow.core.constants import CLAUSE_CONNECTIVES, QueryStringCharacters
from odataflow.core.operators import LogicOperator
from odataflow.exceptions import BuilderConfigError


@dataclass
class QueryBuilderConfig:
    """查询构建器配置模型.

    定义最终查询字符串的编码策略以及多次 filter 调用之间的默认连接词。

    Attributes:
        encode_values: 是否对参数值做百分号编码，默认 False（原样输出）
        safe_characters: 开启编码时保留不编码的字符
        default_connective: filter 未指定连接词时使用的连接词，只能是 and/or

    Raises:
        BuilderConfigError: 当默认连接词不合法时抛出

    Examples:
        >>> config = QueryBuilderConfig(encode_values=True)
        >>> config = QueryBuilderConfig(default_connective="or")
    """

    encode_values: bool = False
    safe_characters: str = QueryStringCharacters.DEFAULT_SAFE_CHARACTERS
    default_connective: LogicOperator | str = LogicOperator.AND

    def __post_init__(self) -> None:
        """校验构建器配置参数合法性."""
        connective = getattr(self.default_connective, "value", self.default_connective)
        connective = str(connective).strip().lower()
        if connective not in CLAUSE_CONNECTIVES:
            raise BuilderConfigError(
                f"default_connective 必须是 and 或 or，当前值: {self.default_connective}"
            )
        self.default_connective = connective
