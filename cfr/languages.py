# cfr/languages.py
# Maps a source file (or a name typed by the user) to one of the supported toolchains.
from __future__ import annotations

from pathlib import Path

from .errors import UnsupportedLanguageError

EXTENSIONS = {
    ".go": "go",
    ".cpp": "cpp",
    ".cc": "cpp",
    ".cxx": "cpp",
    ".c++": "cpp",
    ".c": "c",
    ".rs": "rust",
    ".java": "java",
    ".py": "python",
}

ALIASES = {
    "golang": "go",
    "c++": "cpp",
    "cxx": "cpp",
    "rs": "rust",
    "py": "python",
    "python3": "python",
}

LANGUAGES = sorted(set(EXTENSIONS.values()))


def detect_language(path) -> str:
    ext = Path(path).suffix.lower()
    try:
        return EXTENSIONS[ext]
    except KeyError:
        raise UnsupportedLanguageError(
            f"cannot detect language of {path} (extension {ext or '<none>'!r})"
        ) from None


def normalize_language(name: str) -> str:
    s = (name or "").strip().lower()
    s = ALIASES.get(s, s)
    if s not in LANGUAGES:
        raise UnsupportedLanguageError(f"unsupported language: {name}")
    return s


def resolve_language(path, explicit: str | None = None) -> str:
    """Explicit name wins; otherwise go by the file extension."""
    if explicit:
        return normalize_language(explicit)
    return detect_language(path)
