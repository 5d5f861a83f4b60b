"""OData Flow 异常定义模块."""


class ODataFlowError(Exception):
    """OData Flow 基础异常类."""

    pass


class BuilderConfigError(ODataFlowError):
    """构建器配置校验异常.

    当 QueryBuilderConfig 参数不合法时抛出，例如默认连接词不是 and/or。
    构建器本身的操作不做校验，不会抛出该异常。
    """

    pass
