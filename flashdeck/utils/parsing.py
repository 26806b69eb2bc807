"""Text parsing utilities for consistent text processing across the application."""

import html
import re
import unicodedata


class TextParser:
    """Centralized text cleanup for card fields and speech."""

    # HTML tag removal pattern
    HTML_TAG_PATTERN = re.compile(r'<[^>]+>')

    # Whitespace normalization pattern
    WHITESPACE_PATTERN = re.compile(r'\s+')

    @classmethod
    def normalize_unicode(cls, text: str) -> str:
        """
        Normalize text to NFC form for consistent Unicode handling.

        Prevents issues with characters like š being represented as
        either a single codepoint (NFC) or base + combining caron (NFD).

        Args:
            text: Input text

        Returns:
            NFC-normalized text
        """
        if not text:
            return ""
        return unicodedata.normalize('NFC', str(text))

    @classmethod
    def clean_field(cls, value) -> str:
        """Coerce a raw JSON field value to a trimmed, NFC-normalized string."""
        if value is None:
            return ""
        return cls.normalize_unicode(str(value)).strip()

    @classmethod
    def clean_for_tts(cls, text: str) -> str:
        """
        Clean text for TTS processing.

        Removes HTML, normalizes whitespace.

        Args:
            text: Raw text

        Returns:
            Cleaned text ready for TTS
        """
        if not text:
            return ""

        text = html.unescape(str(text))
        text = cls.HTML_TAG_PATTERN.sub('', text)
        text = cls.WHITESPACE_PATTERN.sub(' ', text).strip()

        return cls.normalize_unicode(text)
