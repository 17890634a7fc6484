from __future__ import annotations


def capitalize(text: str) -> str:
    """Uppercase the first character only; the rest is left as-is.

    Unlike `str.capitalize`, "mr-mime" becomes "Mr-mime" and "pikachu-GMAX"
    keeps its casing after the first letter.
    """
    if not text:
        return text
    return text[0].upper() + text[1:]


def matches_search(name: str, term: str) -> bool:
    # Case-sensitive substring, empty term matches everything
    return term in name
