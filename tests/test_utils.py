"""工具函数单元测试."""

from decimal import Decimal

import pytest

from odataflow.core.utils import encode_query_value, format_value


class TestFormatValue:
    """format_value 测试类."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("Bob", "'Bob'"),
            ("", "''"),
            ("it's", "'it's'"),
            (30, "30"),
            (-7, "-7"),
            (0, "0"),
            (30.0, "30"),
            (2.5, "2.5"),
            (1000000, "1000000"),
            (2**64, "18446744073709551616"),
            (Decimal("1.50"), "1.50"),
            (True, "true"),
            (False, "false"),
            (None, "null"),
        ],
    )
    def test_format(self, value, expected):
        """测试各类值的字面量格式."""
        assert format_value(value) == expected


class TestEncodeQueryValue:
    """encode_query_value 测试类."""

    def test_default_safe_characters(self):
        """测试默认保留字符不编码."""
        assert encode_query_value("Name eq 'A'") == "Name%20eq%20'A'"
        assert encode_query_value("Age in (1,2)") == "Age%20in%20(1,2)"

    def test_reserved_characters_encoded(self):
        """测试 & 和 = 被编码."""
        assert encode_query_value("a&b=c") == "a%26b%3Dc"

    def test_custom_safe(self):
        """测试自定义保留字符."""
        assert encode_query_value("a,b", safe="") == "a%2Cb"
