"""Translation prompt for an external translation agent.

The prompt is only written to disk; nothing here calls a model. The agent
that reads it is expected to answer with Markdown starting with a
translated level-1 heading.
"""

from __future__ import annotations

from collections.abc import Mapping

# Display names used inside the instructions. Codes not listed here are
# shown as-is; add entries to support more target languages.
LANGUAGE_NAMES: dict[str, str] = {
    "zh": "简体中文",
    "zh-TW": "繁體中文",
    "ja": "日本語",
    "ko": "한국어",
    "en": "English",
}

_INSTRUCTIONS = [
    "你是一个翻译助手。请把下面的 Markdown 内容翻译成{lang_name}。",
    "要求：",
    "- 保留 Markdown 结构（标题/列表/引用/表格/链接）。",
    "- 代码块、命令、URL、文件路径保持原样，不要翻译。",
    "- 术语以忠实原意为主，但整体表达要通顺自然（约 6/4：忠实/顺畅）。",
    '- **必须同时翻译标题**：请先输出一行 Markdown 一级标题（以 "# " 开头），作为译文标题。',
    "- 然后空一行，再输出译文正文（不要再重复标题）。",
    "- 只输出翻译结果本身，不要附加解释、不要加前后缀。",
]

SEPARATOR = "---"


def language_display_name(target_lang: str, language_names: Mapping[str, str] | None = None) -> str:
    names = LANGUAGE_NAMES if language_names is None else language_names
    return names.get(target_lang, target_lang)


def build_translate_prompt(
    markdown: str,
    target_lang: str,
    language_names: Mapping[str, str] | None = None,
) -> str:
    """Return instructions followed by the source Markdown, verbatim.

    Args:
        markdown:       Source article Markdown; it ends the prompt unchanged.
        target_lang:    Target language code, e.g. "zh".
        language_names: Optional code -> display name mapping replacing
                        LANGUAGE_NAMES.
    """
    lang_name = language_display_name(target_lang, language_names)
    lines = [line.format(lang_name=lang_name) for line in _INSTRUCTIONS]
    return "\n".join([*lines, "", SEPARATOR, markdown])
