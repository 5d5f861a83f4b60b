"""过滤查询使用示例.

本示例展示如何使用 QueryBuilder 构建 OData 查询:
1. 基础选项: $select / $orderby / $top / $skip / $count
2. 分组嵌套: 用 group 控制优先级
3. 多次 filter: 子句之间的连接词
4. 字段映射与编码配置
"""

from dataclasses import dataclass

from odataflow import FieldMapper, QueryBuilder, QueryBuilderConfig


# ==================== 示例 1: 基础选项 ====================
def example_basic_options():
    """示例: 选择字段、排序和分页."""
    query = (
        QueryBuilder("https://example.com/odata/People")
        .select(["FirstName", "LastName", "Age"])
        .order_by("LastName")
        .top(20)
        .skip(40)
        .count()
        .build()
    )

    print("基础选项:")
    print(query)
    return query


# ==================== 示例 2: 分组嵌套 ====================
def example_grouping():
    """示例: Name eq 'Bob' and (Age eq 1 or Age eq 2)."""
    query = (
        QueryBuilder("https://example.com/odata/People")
        .filter(
            lambda f: f.eq("Name", "Bob")
            .and_()
            .group(lambda g: g.eq("Age", 1).or_().eq("Age", 2))
        )
        .build()
    )

    print("\n分组嵌套:")
    print(query)
    return query


# ==================== 示例 3: 多次 filter ====================
def example_multiple_filters():
    """示例: 第二个子句以 or 连接.

    注意子句之间不会自动加括号。
    """
    query = (
        QueryBuilder("https://example.com/odata/People")
        .filter(lambda f: f.gt("Age", 30))
        .filter(lambda f: f.contains("Email", "@example.com"), "or")
        .build()
    )

    print("\n多次 filter:")
    print(query)
    return query


# ==================== 示例 4: 字段映射与编码 ====================
@dataclass
class Person:
    firstName: str
    age: int


def example_mapping_and_encoding():
    """示例: 实体字段首字母大写并对参数值编码."""
    builder = QueryBuilder(
        "https://example.com/odata/People",
        config=QueryBuilderConfig(encode_values=True),
        field_mapper=FieldMapper.from_entity(Person, capitalize=True),
    )
    query = (
        builder.select(["firstName", "age"])
        .begin_filter()
        .in_("firstName", ["Ann", "Bo"])
        .end()
        .build()
    )

    print("\n字段映射与编码:")
    print(query)
    return query


if __name__ == "__main__":
    # 运行所有示例
    example_basic_options()
    example_grouping()
    example_multiple_filters()
    example_mapping_and_encoding()
