from __future__ import annotations

import re

_SEPARATORS = re.compile(r"[-_.\s]+")
# acronym before a capitalised word, word, acronym, bare number.
# Digits end a word: foo2bar -> foo2, bar
_WORDS = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z]+[0-9]*|[A-Z]+[0-9]*|[0-9]+")


def split_words(text: str) -> list[str]:
    words: list[str] = []
    for seg in _SEPARATORS.split(text.strip()):
        if seg:
            words.extend(_WORDS.findall(seg))
    return words


def camelcase(text: str) -> str:
    """
    code-scanning -> codeScanning
    enterprise_admin -> enterpriseAdmin
    XMLHttp -> xmlHttp
    foo2bar -> foo2Bar
    """
    words = split_words(text)
    if not words:
        return ""
    head, rest = words[0].lower(), words[1:]
    return head + "".join(w[:1].upper() + w[1:].lower() for w in rest)
