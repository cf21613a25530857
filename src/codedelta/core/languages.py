"""Canonical language definitions.

Maps file extensions to the language families codedelta knows about and
records which of them delimit blocks with braces. Two consumers:

1. File discovery: only files with a known code extension are refactored
   when a directory is targeted, and ``analyze_changes`` skips non-code paths.
2. The logic-preservation guard: the brace balance check only applies to
   brace-delimited languages.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class Language:
    """Canonical definition for a language name.

    Attributes:
        name: Unique identifier (lowercase, e.g., "python", "javascript")
        extensions: File extensions including dot (e.g., ".py", ".js")
        brace_delimited: Blocks are delimited with ``{`` and ``}``
    """

    name: str
    extensions: frozenset[str]
    brace_delimited: bool = True


ALL_LANGUAGES: tuple[Language, ...] = (
    Language(
        name="javascript",
        extensions=frozenset({".js", ".jsx", ".ts", ".tsx"}),
    ),
    Language(
        name="python",
        extensions=frozenset({".py"}),
        brace_delimited=False,
    ),
    Language(name="java", extensions=frozenset({".java"})),
    Language(name="c_cpp", extensions=frozenset({".c", ".cpp"})),
    Language(name="csharp", extensions=frozenset({".cs"})),
    Language(name="go", extensions=frozenset({".go"})),
    Language(name="rust", extensions=frozenset({".rs"})),
)

LANGUAGES_BY_NAME: dict[str, Language] = {lang.name: lang for lang in ALL_LANGUAGES}

EXTENSION_TO_NAME: dict[str, str] = {
    ext: lang.name for lang in ALL_LANGUAGES for ext in lang.extensions
}

CODE_EXTENSIONS: frozenset[str] = frozenset(EXTENSION_TO_NAME)


def detect_language(path: str | Path) -> str | None:
    """Return the language name for a path, or None for unknown extensions.

    Extensions are matched case-insensitively.
    """
    return EXTENSION_TO_NAME.get(Path(path).suffix.lower())


def is_code_file(path: str | Path) -> bool:
    return detect_language(path) is not None


def is_brace_delimited(path: str | Path) -> bool:
    """True when the path's language uses ``{``/``}`` block delimiters."""
    name = detect_language(path)
    if name is None:
        return False
    return LANGUAGES_BY_NAME[name].brace_delimited
