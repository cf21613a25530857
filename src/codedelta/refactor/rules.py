"""Textual refactoring rules.

Each rule maps file content to rewritten content plus the 1-based line
numbers it touched. Rules are line oriented and regex based; they never
parse. Content is split on "\\n" and joined back the same way, so line
endings and a missing final newline survive untouched lines.

The registry keeps rules by name. The engine looks names up there and
applies them in the caller's order, each to the previous rule's output.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from codedelta.config.constants import (
    NAMING_CAMEL_CASE,
    NAMING_PASCAL_CASE,
    RULE_CONSISTENT_NAMING,
    RULE_FORMAT_CODE,
    RULE_ORGANIZE_IMPORTS,
    RULE_REMOVE_UNUSED_IMPORTS,
    STYLE_ARROW_FUNCTIONS,
    STYLE_EXPLICIT_TYPES,
    STYLE_PREFER_CONST,
)
from codedelta.refactor.models import CodePatterns, RefactoringKind


@dataclass
class RuleOutcome:
    content: str
    line_numbers: list[int] = field(default_factory=list)


@dataclass(frozen=True)
class Rule:
    name: str
    kind: RefactoringKind
    description: str
    apply: Callable[[str, CodePatterns], RuleOutcome]


def has_hint(hints: Iterable[str], phrase: str) -> bool:
    return any(phrase in hint for hint in hints)


# =============================================================================
# consistent-naming
# =============================================================================

_SNAKE_DECLARATION = re.compile(
    r"\b(const|let|var|function)(\s+)([a-z_]+[A-Z_][a-zA-Z0-9_]*)\b"
)
_TYPE_DECLARATION = re.compile(r"\b(class|interface|type)(\s+)([a-z][a-zA-Z0-9_]*)\b")
_UNDERSCORE_LETTER = re.compile(r"_([a-z])")


def to_camel_case(name: str) -> str:
    converted = _UNDERSCORE_LETTER.sub(lambda m: m.group(1).upper(), name)
    return converted[:1].lower() + converted[1:]


def to_pascal_case(name: str) -> str:
    converted = _UNDERSCORE_LETTER.sub(lambda m: m.group(1).upper(), name)
    return converted[:1].upper() + converted[1:]


def _rename_declarations(
    line: str, pattern: re.Pattern[str], convert: Callable[[str], str]
) -> str:
    def replace(match: re.Match[str]) -> str:
        keyword, space, name = match.groups()
        return f"{keyword}{space}{convert(name)}"

    return pattern.sub(replace, line)


def apply_consistent_naming(content: str, patterns: CodePatterns) -> RuleOutcome:
    """Rename declarations to camelCase / PascalCase. Usages are left alone."""
    camel = has_hint(patterns.naming_patterns, NAMING_CAMEL_CASE)
    pascal = has_hint(patterns.naming_patterns, NAMING_PASCAL_CASE)
    if not (camel or pascal):
        return RuleOutcome(content)

    lines = content.split("\n")
    changed: list[int] = []
    for i, line in enumerate(lines):
        new_line = line
        if camel:
            new_line = _rename_declarations(new_line, _SNAKE_DECLARATION, to_camel_case)
        if pascal:
            new_line = _rename_declarations(new_line, _TYPE_DECLARATION, to_pascal_case)
        if new_line != line:
            lines[i] = new_line
            changed.append(i + 1)

    return RuleOutcome("\n".join(lines), changed)


# =============================================================================
# remove-unused-imports
# =============================================================================

_IMPORT = re.compile(r"import\s+(?:\{([^}]+)\}|(\w+))\s+from")


def imported_names(line: str) -> list[str] | None:
    """Names bound by an import line, or None if the line is not one.

    ``{ a as b }`` binds ``b``; ``{ type T }`` binds ``T``.
    """
    match = _IMPORT.search(line)
    if match is None:
        return None
    brace_list, default = match.groups()
    if default is not None:
        return [default]
    return [item.split()[-1] for item in brace_list.split(",") if item.strip()]


def _is_referenced(name: str, text: str) -> bool:
    return re.search(rf"(?<![\w$]){re.escape(name)}(?![\w$])", text) is not None


def apply_remove_unused_imports(content: str, patterns: CodePatterns) -> RuleOutcome:  # noqa: ARG001
    """Drop import lines that bind a name the rest of the file never uses.

    A name counts as used when it appears as a whole word on any line that is
    not itself an import line. One unused name is enough to drop the line.
    """
    lines = content.split("\n")
    parsed = [imported_names(line) for line in lines]
    body = "\n".join(line for line, names in zip(lines, parsed) if names is None)

    kept: list[str] = []
    removed: list[int] = []
    for i, (line, names) in enumerate(zip(lines, parsed)):
        if names is not None and not all(_is_referenced(n, body) for n in names):
            removed.append(i + 1)
            continue
        kept.append(line)

    if not removed:
        return RuleOutcome(content)
    return RuleOutcome("\n".join(kept), removed)


# =============================================================================
# organize-imports
# =============================================================================


def _is_top_level_import(line: str) -> bool:
    return line.startswith("import ")


def _import_statements(lines: list[str]) -> tuple[list[list[str]], list[str]]:
    """Split lines into top-level import statements and everything else.

    An import line that opens a brace without closing it runs on through the
    line that closes it, so a multi-line named import moves as one unit.
    """
    statements: list[list[str]] = []
    rest: list[str] = []
    i = 0
    while i < len(lines):
        line = lines[i]
        i += 1
        if not _is_top_level_import(line):
            rest.append(line)
            continue
        statement = [line]
        if line.count("{") > line.count("}"):
            while i < len(lines) and "}" not in statement[-1]:
                statement.append(lines[i])
                i += 1
        statements.append(statement)
    return statements, rest


def apply_organize_imports(content: str, patterns: CodePatterns) -> RuleOutcome:  # noqa: ARG001
    """Hoist and sort top-level imports, then one blank line, then the rest.

    Statements sort by their full text. Idempotent. Content without
    top-level imports is returned unchanged.
    """
    statements, rest = _import_statements(content.split("\n"))
    if not statements:
        return RuleOutcome(content)

    imports = [line for statement in sorted(statements, key="\n".join) for line in statement]
    while rest and not rest[0].strip():
        rest.pop(0)

    organized = "\n".join([*imports, "", *rest])
    if organized == content:
        return RuleOutcome(content)
    return RuleOutcome(organized, list(range(1, len(imports) + 1)))


# =============================================================================
# format-code
# =============================================================================

_LET_STRING = re.compile(r"""\blet\s+(\w+)\s*=\s*(["'`])""")
_LET_NUMBER = re.compile(r"\blet\s+(\w+)\s*=\s*(\d+(?:\.\d+)?)\b")
_LET_DECLARATION = re.compile(r"\blet\s+(\w+)")
_LET_KEYWORD = re.compile(r"\blet\b")
_ANONYMOUS_FUNCTION = re.compile(r"\bfunction\s*\(([^)]*)\)\s*\{")


def _add_type_annotation(line: str) -> str:
    if "let" not in line or ":" in line or "=" not in line:
        return line
    line = _LET_STRING.sub(r"let \1: string = \2", line, count=1)
    return _LET_NUMBER.sub(r"let \1: number = \2", line, count=1)


def is_reassigned(name: str, text: str) -> bool:
    """True when text contains an assignment or increment of ``name``."""
    markers = (
        f"{name} =",
        f"{name}+=",
        f"{name}-=",
        f"{name} +=",
        f"{name} -=",
        f"{name}++",
        f"{name}--",
    )
    return any(marker in text for marker in markers)


def _prefer_const(lines: list[str], index: int, line: str) -> str:
    declaration = _LET_DECLARATION.search(line)
    if declaration is None or "=" not in line[declaration.end() :]:
        return line
    name = declaration.group(1)
    # The rest of the declaring line counts too: for (let i = 0; ...; i++)
    remainder = "\n".join([line[declaration.end() :], *lines[index + 1 :]])
    if is_reassigned(name, remainder):
        return line
    return _LET_KEYWORD.sub("const", line, count=1)


def apply_format_code(content: str, patterns: CodePatterns) -> RuleOutcome:
    styles = patterns.coding_styles
    explicit_types = has_hint(styles, STYLE_EXPLICIT_TYPES)
    prefer_const = has_hint(styles, STYLE_PREFER_CONST)
    arrow_functions = has_hint(styles, STYLE_ARROW_FUNCTIONS)

    lines = content.split("\n")
    changed: list[int] = []
    for i, line in enumerate(lines):
        new_line = line
        if explicit_types:
            new_line = _add_type_annotation(new_line)
        if prefer_const and "let " in new_line:
            new_line = _prefer_const(lines, i, new_line)
        if arrow_functions:
            new_line = _ANONYMOUS_FUNCTION.sub(r"(\1) => {", new_line, count=1)
        if new_line != line:
            lines[i] = new_line
            changed.append(i + 1)

    return RuleOutcome("\n".join(lines), changed)


# =============================================================================
# Registry
# =============================================================================

RULES: dict[str, Rule] = {
    rule.name: rule
    for rule in (
        Rule(
            name=RULE_CONSISTENT_NAMING,
            kind=RefactoringKind.RENAME,
            description="Applied consistent naming patterns",
            apply=apply_consistent_naming,
        ),
        Rule(
            name=RULE_REMOVE_UNUSED_IMPORTS,
            kind=RefactoringKind.IMPORT,
            description="Removed unused imports",
            apply=apply_remove_unused_imports,
        ),
        Rule(
            name=RULE_ORGANIZE_IMPORTS,
            kind=RefactoringKind.IMPORT,
            description="Organized imports",
            apply=apply_organize_imports,
        ),
        Rule(
            name=RULE_FORMAT_CODE,
            kind=RefactoringKind.FORMAT,
            description="Applied code formatting",
            apply=apply_format_code,
        ),
    )
}


def get_rule(name: str) -> Rule | None:
    return RULES.get(name)
