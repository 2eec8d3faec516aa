"""Fixed stopword table used by the token filter."""

from __future__ import annotations

from typing import FrozenSet

CHINESE_STOPWORDS = (
    "的", "了", "在", "是", "我", "有", "和", "就", "不", "人",
    "都", "一", "一个", "上", "也", "很", "到", "说", "要", "去",
    "你", "会", "着", "没有", "看", "好", "自己", "这",
)

ASCII_PUNCTUATION = (
    ",", ".", "!", "?", ";", ":", "'", '"', "`", "~", "@", "#", "$", "%",
    "^", "&", "*", "(", ")", "-", "=", "+", "[", "]", "{", "}", "|", "/",
    "<", ">",
)

CJK_PUNCTUATION = (
    "。", "，", "！", "？", "、", "；", "：", "（", "）", "【", "】", "《", "》",
)

STOP_WORDS: FrozenSet[str] = frozenset(CHINESE_STOPWORDS + ASCII_PUNCTUATION + CJK_PUNCTUATION)


def is_stop_word(token: str) -> bool:
    """Return True when an already case-folded token is a stopword."""

    return token in STOP_WORDS
