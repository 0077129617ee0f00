from prompt_builder import LANGUAGE_NAMES, build_translate_prompt, language_display_name

SAMPLE_MD = "# Title\n\nSome text with `code` and a [link](https://example.com).\n\n```bash\nls -la /tmp\n```\n"


def test_prompt_ends_with_markdown_verbatim() -> None:
    prompt = build_translate_prompt(SAMPLE_MD, "zh")
    assert prompt.endswith(SAMPLE_MD)
    assert prompt.endswith("---\n" + SAMPLE_MD)


def test_prompt_uses_chinese_framing_for_zh() -> None:
    prompt = build_translate_prompt(SAMPLE_MD, "zh")
    first_line = prompt.splitlines()[0]
    assert first_line == "你是一个翻译助手。请把下面的 Markdown 内容翻译成简体中文。"


def test_prompt_lists_translation_rules() -> None:
    instructions = build_translate_prompt(SAMPLE_MD, "zh")[: -len(SAMPLE_MD)]

    assert "保留 Markdown 结构" in instructions
    assert "代码块、命令、URL、文件路径保持原样" in instructions
    assert "6/4" in instructions
    assert '以 "# " 开头' in instructions
    assert "然后空一行" in instructions
    assert "只输出翻译结果本身" in instructions


def test_unknown_language_passes_through_literally() -> None:
    prompt = build_translate_prompt(SAMPLE_MD, "pt-BR")
    assert "翻译成pt-BR。" in prompt.splitlines()[0]


def test_custom_language_mapping_overrides_defaults() -> None:
    prompt = build_translate_prompt(SAMPLE_MD, "fr", language_names={"fr": "法语"})
    assert "翻译成法语。" in prompt.splitlines()[0]


def test_custom_mapping_replaces_builtin_names() -> None:
    assert language_display_name("zh", {"fr": "法语"}) == "zh"


def test_default_mapping_has_simplified_chinese() -> None:
    assert LANGUAGE_NAMES["zh"] == "简体中文"
    assert language_display_name("zh") == "简体中文"
