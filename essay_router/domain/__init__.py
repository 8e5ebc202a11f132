"""领域层模型与异常。

包含：
- models: 请求体 ChatPayload、ChatMessage 与 InferenceRequest。
- exceptions: 业务异常类型定义。
"""
