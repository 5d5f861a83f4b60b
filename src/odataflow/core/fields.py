"""字段映射模块."""

import dataclasses
import typing
from dataclasses import dataclass


@dataclass
class QueryField:
    """查询字段配置."""

    field: str  # 调用方使用的字段名
    odata_field: str  # 服务端实际字段名
    display: str = ""  # 显示名称


def _capitalize(name: str) -> str:
    """首字母大写，其余保持不变."""
    return name[:1].upper() + name[1:]


class FieldMapper:
    """字段映射器.

    将调用方字段名翻译为服务端字段名，未配置的字段原样返回。

    使用示例:
        @dataclass
        class User:
            name: str
            age: int

        mapper = FieldMapper.from_entity(User, capitalize=True)
        mapper.get_odata_field("name")  # "Name"
    """

    def __init__(self, fields: list[QueryField] | None = None):
        """
        初始化字段映射器.

        Args:
            fields: 字段配置列表
        """
        self._fields: dict[str, QueryField] = {f.field: f for f in (fields or [])}

    @classmethod
    def from_entity(cls, entity: type, capitalize: bool = False) -> "FieldMapper":
        """
        根据实体类的字段生成映射器.

        支持 dataclass 以及任何带类型注解的类（如 TypedDict）。

        Args:
            entity: 实体类
            capitalize: 是否将服务端字段名首字母大写

        Returns:
            字段映射器
        """
        if dataclasses.is_dataclass(entity):
            names = [f.name for f in dataclasses.fields(entity)]
        else:
            names = list(typing.get_type_hints(entity))

        return cls(
            [
                QueryField(
                    field=name,
                    odata_field=_capitalize(name) if capitalize else name,
                )
                for name in names
            ]
        )

    def get_odata_field(self, field: str) -> str:
        """
        获取服务端字段名.

        Args:
            field: 调用方字段名

        Returns:
            服务端字段名
        """
        if field in self._fields:
            return self._fields[field].odata_field
        return field

    def transform_fields(self, fields: typing.Iterable[str]) -> list[str]:
        """
        批量转换字段名，保持顺序且不去重.

        Args:
            fields: 调用方字段名列表

        Returns:
            服务端字段名列表
        """
        return [self.get_odata_field(field) for field in fields]

    def __contains__(self, field: object) -> bool:
        return field in self._fields

    def __len__(self) -> int:
        return len(self._fields)
