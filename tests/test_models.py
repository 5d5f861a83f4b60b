"""QueryBuilderConfig 单元测试."""

import pytest

from odataflow import (
    BuilderConfigError,
    LogicOperator,
    ODataFlowError,
    QueryBuilderConfig,
)


class TestQueryBuilderConfig:
    """QueryBuilderConfig 测试类."""

    def test_defaults(self):
        """测试默认配置."""
        config = QueryBuilderConfig()
        assert config.encode_values is False
        assert config.default_connective == "and"
        assert config.safe_characters == ",()'$"

    def test_enum_connective_normalized(self):
        """测试枚举连接词归一化为字符串."""
        config = QueryBuilderConfig(default_connective=LogicOperator.OR)
        assert config.default_connective == "or"

    def test_connective_case_insensitive(self):
        """测试连接词大小写."""
        assert QueryBuilderConfig(default_connective=" OR ").default_connective == "or"

    @pytest.mark.parametrize("connective", ["not", "xor", "", LogicOperator.NOT])
    def test_invalid_connective(self, connective):
        """测试非法默认连接词."""
        with pytest.raises(BuilderConfigError, match="default_connective"):
            QueryBuilderConfig(default_connective=connective)

    def test_error_hierarchy(self):
        """测试异常继承关系."""
        assert issubclass(BuilderConfigError, ODataFlowError)
