"""Text helpers."""


def capitalize_first(text: str) -> str:
    """Uppercase the first character and leave the rest untouched."""
    if not text:
        return ""
    return text[0].upper() + text[1:]
