"""字段映射单元测试."""

from dataclasses import dataclass
from typing import TypedDict

from odataflow.core.fields import FieldMapper, QueryField


@dataclass
class Product:
    name: str
    unitPrice: float


class Customer(TypedDict):
    firstName: str
    city: str


class TestFieldMapper:
    """FieldMapper 测试类."""

    def test_explicit_fields(self):
        """测试显式字段配置."""
        mapper = FieldMapper([QueryField(field="name", odata_field="ProductName")])
        assert mapper.get_odata_field("name") == "ProductName"
        assert mapper.get_odata_field("other") == "other"
        assert "name" in mapper
        assert len(mapper) == 1

    def test_empty_mapper(self):
        """测试空映射器原样返回."""
        mapper = FieldMapper()
        assert mapper.get_odata_field("Name") == "Name"
        assert len(mapper) == 0

    def test_from_dataclass(self):
        """测试从 dataclass 生成映射."""
        mapper = FieldMapper.from_entity(Product)
        assert mapper.get_odata_field("unitPrice") == "unitPrice"
        assert len(mapper) == 2

    def test_from_dataclass_capitalized(self):
        """测试首字母大写映射."""
        mapper = FieldMapper.from_entity(Product, capitalize=True)
        assert mapper.transform_fields(["name", "unitPrice", "name"]) == [
            "Name",
            "UnitPrice",
            "Name",
        ]

    def test_from_typed_dict(self):
        """测试从 TypedDict 生成映射."""
        mapper = FieldMapper.from_entity(Customer, capitalize=True)
        assert mapper.get_odata_field("firstName") == "FirstName"
        assert mapper.get_odata_field("city") == "City"
