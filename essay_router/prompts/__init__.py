"""系统提示词加载工具。

按语言(locale) 从 prompts/<locale> 目录读取对应的 system prompt 文本，
用于构造 ChatMessage(role="system")。文本原样注入，不做模板替换，
其中的 {essay} 占位符由调用方自行处理。
"""

from pathlib import Path


PROMPTS_DIR = Path(__file__).resolve().parent

_PROMPT_FILES = {
    "essay-review": "essay_review_system.md",
}


def load_system_prompt(agent_type: str = "essay-review", locale: str = "zh") -> str:
    """根据场景和语言加载系统提示词文本。

    未知场景抛出 KeyError，文件缺失抛出 FileNotFoundError。
    """

    fname = PROMPTS_DIR / locale / _PROMPT_FILES[agent_type]
    return fname.read_text(encoding="utf-8")
