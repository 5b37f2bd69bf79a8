"""Text helpers for accent- and case-insensitive matching."""

import unicodedata


def normalize_text(text: str) -> str:
    """Lower-case ``text`` and strip every combining (diacritical) mark.

    "Junín" and "JUNIN" both become "junin". Idempotent.
    """
    decomposed = unicodedata.normalize("NFD", text.lower())
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))
