"""Argument helpers shared by the directive renderers."""

from __future__ import annotations


def word(s: str) -> str:
    """First whitespace-delimited token of ``s``; Doxygen reads no further."""
    parts = s.split(None, 1)
    return parts[0] if parts else ""


def optional(s: str) -> str:
    return f" {s}" if s else ""


def optionalf(fmt: str, s: str) -> str:
    return fmt % s if s else ""


def quoted(s: str) -> str:
    return optionalf(' "%s"', s)


def sized(indication: str, size: str) -> str:
    """`` width=10cm`` style size hint, only when both halves are given."""
    if indication and size:
        return f" {indication}={size}"
    return ""
