"""Tokenizer: string -> TokenizedString."""

from __future__ import annotations

import re
from typing import Optional, Union

from proper_sort.core.config import NumericMode, settings
from proper_sort.core.exceptions import ConfigurationException
from proper_sort.core.logging import logger

from .compare import compare_tokens
from .kinds import TokenKind
from .numbers import classify_number, numeric_runs
from .ordering import Ordering
from .sizes import classify_size
from .tokens import NumberToken, SizeToken, TextToken, Token, TokenizedString

# ASCII 공백(space, \t, \n, \r, \f)으로만 분리
_WORD_RE = re.compile(r"[^ \t\n\r\f]+")


class Tokenizer:
    """숫자 모드가 고정된 토크나이저.

    분류 순서 (단어 단위):
    1. 직전 Text 토큰과 합친 두 단어가 사이즈면 병합 ("Extra Large")
    2. 단어 전체가 사이즈
    3. 단어 전체가 숫자
    4. 숫자/비숫자 경계로 분할 ("36T" -> 36, "T")
    """

    def __init__(self, numeric_mode: Union[NumericMode, str, None] = None):
        mode = settings.numeric_mode if numeric_mode is None else numeric_mode
        try:
            self.numeric_mode = NumericMode(mode)
        except ValueError as e:
            raise ConfigurationException("numeric_mode", f"unsupported value {mode!r}") from e
        logger.debug(f"Tokenizer created (numeric_mode={self.numeric_mode.value})")

    def __repr__(self) -> str:
        return f"Tokenizer(numeric_mode={self.numeric_mode.value!r})"

    def tokenize(self, text: str) -> TokenizedString:
        if not text:
            return TokenizedString(source="")

        tokens: list[Token] = []
        for match in _WORD_RE.finditer(text):
            word, start, end = match.group(), match.start(), match.end()

            if tokens and tokens[-1].kind is TokenKind.TEXT:
                merged = self._merge_size(tokens[-1], word, end)
                if merged is not None:
                    tokens[-1] = merged
                    continue

            rank = classify_size(word)
            if rank is not None:
                tokens.append(SizeToken(word, start, end, rank=rank))
                continue

            value = classify_number(word, self.numeric_mode)
            if value is not None:
                tokens.append(NumberToken(word, start, end, value=value))
                continue

            tokens.extend(self._split_word(word, start))

        return TokenizedString(source=text, tokens=tuple(tokens))

    def compare(self, a: str, b: str) -> Ordering:
        """Natural order of two strings under this tokenizer's numeric mode."""
        return compare_tokens(self.tokenize(a).tokens, self.tokenize(b).tokens)

    @staticmethod
    def _merge_size(previous: Token, word: str, end: int) -> Optional[SizeToken]:
        phrase = f"{previous.raw} {word}"
        rank = classify_size(phrase)
        if rank is None:
            return None
        return SizeToken(phrase, previous.start, end, rank=rank)

    def _split_word(self, word: str, start: int) -> list[Token]:
        parts: list[Token] = []
        for offset, run in numeric_runs(word, self.numeric_mode):
            run_start = start + offset
            run_end = run_start + len(run)
            value = classify_number(run, self.numeric_mode)
            if value is not None:
                parts.append(NumberToken(run, run_start, run_end, value=value))
            else:
                parts.append(TextToken(run, run_start, run_end))
        return parts


_default_tokenizer = Tokenizer()


def default_tokenizer() -> Tokenizer:
    """Process-wide tokenizer built from ``settings.numeric_mode``."""
    return _default_tokenizer


def tokenize(text: str) -> TokenizedString:
    """Tokenize with the process-wide numeric mode. Never raises."""
    return _default_tokenizer.tokenize(text)
