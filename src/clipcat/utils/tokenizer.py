# src/clipcat/utils/tokenizer.py
import tiktoken


class Tokenizer:
    """Token estimate for the statistics block, not an exact count."""
    _encoding = None
    _unavailable = False

    @classmethod
    def get_encoding(cls):
        if cls._encoding is None:
            try:
                cls._encoding = tiktoken.get_encoding("cl100k_base")
            except Exception:
                # Fallback
                cls._encoding = tiktoken.get_encoding("p50k_base")
        return cls._encoding

    @classmethod
    def count(cls, text: str) -> int:
        """Estimates token count for a given text."""
        if not cls._unavailable:
            try:
                encoding = cls.get_encoding()
                return len(encoding.encode(text, disallowed_special=()))
            except Exception:
                # Encodings are downloaded on first use; offline we estimate
                cls._unavailable = True
        return len(text) // 4
