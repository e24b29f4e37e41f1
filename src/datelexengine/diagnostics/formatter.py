"""Diagnostic formatting service.

Renders Diagnostic records (and the exceptions that carry them) as Rust
compiler-style blocks, single lines, or JSON objects.

Python 3.12+. Zero external dependencies.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum
from typing import Final

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]

# (Diagnostic attribute, label in the Rust-style block), in display order
_DETAIL_FIELDS: Final[tuple[tuple[str, str], ...]] = (
    ("operation", "operation"),
    ("argument_name", "argument"),
    ("expected_type", "expected"),
    ("received_type", "received"),
)


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Multi-line block (default)
    SIMPLE = "simple"  # CODE: message
    JSON = "json"  # One JSON object per diagnostic


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Attributes:
        output_format: Output style (rust, simple, json)
        sanitize: Truncate messages and hints to max_content_length
        max_content_length: Maximum message/hint length when sanitizing

    Example:
        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(ErrorTemplate.format_not_found("ISO")))
        FORMAT_NOT_FOUND: Named format 'ISO' is not registered
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    max_content_length: int = 100

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic in the configured style."""
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return f"{diagnostic.code.name}: {self._clip(diagnostic.message)}"
            case OutputFormat.JSON:
                return json.dumps(self._as_dict(diagnostic), ensure_ascii=False)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Format multiple diagnostics separated by blank lines."""
        return "\n\n".join(self.format(d) for d in diagnostics)

    def format_error(self, error: BaseException) -> str:
        """Format an exception, using its diagnostic when it carries one.

        Exceptions without a diagnostic render as their class name and
        message, so callers can log any failure through one formatter.
        """
        diagnostic = getattr(error, "diagnostic", None)
        if isinstance(diagnostic, Diagnostic):
            return self.format(diagnostic)
        return f"{type(error).__name__}: {self._clip(str(error))}"

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        severity = "warning" if diagnostic.severity == "warning" else "error"
        lines = [f"{severity}[{diagnostic.code.name}]: {self._clip(diagnostic.message)}"]
        lines.extend(
            f"  = {label}: {value}"
            for attr, label in _DETAIL_FIELDS
            if (value := getattr(diagnostic, attr))
        )
        if diagnostic.hint:
            lines.append(f"  = help: {self._clip(diagnostic.hint)}")
        return "\n".join(lines)

    def _as_dict(self, diagnostic: Diagnostic) -> dict[str, str | int]:
        data: dict[str, str | int] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": self._clip(diagnostic.message),
            "severity": diagnostic.severity,
        }
        for attr, _ in _DETAIL_FIELDS:
            if value := getattr(diagnostic, attr):
                data[attr] = value
        if diagnostic.hint:
            data["hint"] = self._clip(diagnostic.hint)
        return data

    def _clip(self, text: str) -> str:
        if self.sanitize and len(text) > self.max_content_length:
            return text[: self.max_content_length] + "..."
        return text
