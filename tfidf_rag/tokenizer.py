"""Simple tokenizer for TF-IDF text processing."""

import re


class Tokenizer:
    """Lowercase, blank out non-word characters, drop short tokens.

    Tokens shorter than ``min_token_len`` characters are discarded, so the
    default keeps only tokens of three or more characters. No stemming and
    no stop-word list.
    """

    _NON_WORD_PATTERN = re.compile(r"[^\w\s]")
    _WHITESPACE_PATTERN = re.compile(r"\s+")

    def __init__(self, min_token_len=3):
        self.min_token_len = min_token_len

    def tokenize(self, text):
        """Return list of lowercase word tokens."""
        lowered = text.lower()
        blanked = self._NON_WORD_PATTERN.sub(" ", lowered)
        tokens = self._WHITESPACE_PATTERN.split(blanked)
        return [t for t in tokens if len(t) >= self.min_token_len]
