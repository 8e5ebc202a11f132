"""统一业务异常模型。

所有跨模块抛出的业务级错误都应该继承自 BusinessError，
ChatHandler 在边界处统一捕获并转换为固定的 500 响应。
"""


class BusinessError(Exception):
    """业务异常基类。

    Attributes:
        code: 机器可读错误码（如 "API_ERROR"）。
        message: 面向运维的错误信息，不会返回给调用方。
        http_status: 上游返回的状态码（如有），默认 400。
        extra: 其他补充字段（例如 provider、model 等）。
    """

    def __init__(self, code: str, message: str, http_status: int = 400, **extra):
        self.code = code
        self.message = message
        self.http_status = http_status
        self.extra = extra
        super().__init__(message)


class MalformedRequestError(BusinessError):
    """请求体不是合法 JSON，或结构无法转换为 ChatPayload。"""


class NetworkError(BusinessError):
    """网络层错误，例如连接失败、超时等。"""


class ApiError(BusinessError):
    """推理后端返回非 2xx/429 错误时抛出。"""


class RateLimitError(BusinessError):
    """推理后端限流（HTTP 429）。本服务不做重试。"""


class ValidationError(BusinessError):
    """参数或配置校验失败。"""
