"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.12+. Zero external dependencies.
"""

from collections.abc import Iterable

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


def _type_name(value: object) -> str:
    return type(value).__name__


def _value_repr(value: object, limit: int = 40) -> str:
    try:
        text = repr(value)
    except ValueError:
        # int repr beyond sys.get_int_max_str_digits()
        return f"<{_type_name(value)} too large to display>"
    return text if len(text) <= limit else text[: limit - 3] + "..."


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    """

    @staticmethod
    def template_not_string(operation: str, value: object) -> Diagnostic:
        """Format template is not a string.

        Args:
            operation: Public operation that received the template
            value: The offending template value

        Returns:
            Diagnostic for TEMPLATE_NOT_STRING
        """
        received = _type_name(value)
        return Diagnostic(
            code=DiagnosticCode.TEMPLATE_NOT_STRING,
            message=f"{operation}() expected a string template, got {received}",
            hint="Pass the format template as a str, e.g. 'YYYY-MM-dd'",
            operation=operation,
            argument_name="template",
            expected_type="str",
            received_type=received,
        )

    @staticmethod
    def date_type_invalid(operation: str, value: object) -> Diagnostic:
        """Date argument has an unsupported type.

        Args:
            operation: Public operation that received the value
            value: The offending date value

        Returns:
            Diagnostic for DATE_TYPE_INVALID
        """
        received = _type_name(value)
        return Diagnostic(
            code=DiagnosticCode.DATE_TYPE_INVALID,
            message=f"{operation}() expected a date value, got {received}",
            hint="Pass a datetime, a date, epoch milliseconds or an ISO 8601 string",
            operation=operation,
            argument_name="value",
            expected_type="datetime | date | int | float | str | None",
            received_type=received,
        )

    @staticmethod
    def date_value_invalid(operation: str, value: object, reason: str) -> Diagnostic:
        """Date argument has a supported type but does not denote a valid date.

        Args:
            operation: Public operation that received the value
            value: The offending date value
            reason: Why conversion failed

        Returns:
            Diagnostic for DATE_VALUE_INVALID
        """
        return Diagnostic(
            code=DiagnosticCode.DATE_VALUE_INVALID,
            message=f"{operation}() received an invalid date {_value_repr(value)}: {reason}",
            hint="Strings must be ISO 8601; numbers must be finite epoch milliseconds",
            operation=operation,
            argument_name="value",
            received_type=_type_name(value),
        )

    @staticmethod
    def language_code_invalid(value: object) -> Diagnostic:
        """Language code is not a string.

        Args:
            value: The offending code

        Returns:
            Diagnostic for LANGUAGE_CODE_INVALID
        """
        received = _type_name(value)
        return Diagnostic(
            code=DiagnosticCode.LANGUAGE_CODE_INVALID,
            message=f"Language code must be a non-empty string, got {received}",
            hint="Use BCP 47 or POSIX language codes (e.g., 'en', 'fr', 'pt_BR')",
            operation="lang",
            argument_name="code",
            expected_type="str",
            received_type=received,
        )

    @staticmethod
    def format_name_invalid(value: object) -> Diagnostic:
        """Named format name is not a string.

        Args:
            value: The offending name

        Returns:
            Diagnostic for FORMAT_NAME_INVALID
        """
        received = _type_name(value)
        return Diagnostic(
            code=DiagnosticCode.FORMAT_NAME_INVALID,
            message=f"Format name must be a string, got {received}",
            operation="register",
            argument_name="name",
            expected_type="str",
            received_type=received,
        )

    @staticmethod
    def format_spec_invalid(name: str, value: object) -> Diagnostic:
        """Named format spec is neither a template nor a language mapping.

        Args:
            name: Format name being registered
            value: The offending spec

        Returns:
            Diagnostic for FORMAT_SPEC_INVALID
        """
        received = _type_name(value)
        return Diagnostic(
            code=DiagnosticCode.FORMAT_SPEC_INVALID,
            message=f"Format '{name}' must be a template string or a language mapping, got {received}",
            hint="Use 'YYYY-MM-dd' or {'en': 'MMMM d, YYYY', 'fr': 'd MMMM YYYY'}",
            operation="register",
            argument_name="spec",
            expected_type="str | Mapping[str, str]",
            received_type=received,
        )

    @staticmethod
    def language_not_found(code: str) -> Diagnostic:
        """No locale table registered for a language.

        Args:
            code: The unknown language code

        Returns:
            Diagnostic for LANGUAGE_NOT_FOUND
        """
        return Diagnostic(
            code=DiagnosticCode.LANGUAGE_NOT_FOUND,
            message=f"No locale table registered for language '{code}'",
            hint="Register the language first with lang(code, table)",
        )

    @staticmethod
    def template_language_missing(
        name: str, code: str, fallback: str, available: Iterable[str]
    ) -> Diagnostic:
        """Per-language named format has neither the current nor the fallback language.

        Args:
            name: Format name
            code: Current language code
            fallback: Fallback language code
            available: Languages the format does define

        Returns:
            Diagnostic for TEMPLATE_LANGUAGE_MISSING
        """
        languages = ", ".join(sorted(available)) or "none"
        return Diagnostic(
            code=DiagnosticCode.TEMPLATE_LANGUAGE_MISSING,
            message=(
                f"Format '{name}' has no template for language '{code}' "
                f"or fallback '{fallback}'"
            ),
            hint=f"Defined languages: {languages}",
        )

    @staticmethod
    def format_not_found(name: str) -> Diagnostic:
        """Named format is not registered.

        Args:
            name: The unknown format name

        Returns:
            Diagnostic for FORMAT_NOT_FOUND
        """
        return Diagnostic(
            code=DiagnosticCode.FORMAT_NOT_FOUND,
            message=f"Named format '{name}' is not registered",
            hint="Call register(name, template) before using the format",
        )

    @staticmethod
    def token_unknown(token: str) -> Diagnostic:
        """Resolver received a name outside the token vocabulary.

        Args:
            token: The unknown token name

        Returns:
            Diagnostic for TOKEN_UNKNOWN
        """
        return Diagnostic(
            code=DiagnosticCode.TOKEN_UNKNOWN,
            message=f"Unknown format token '{token}'",
            hint="Tokens are produced by tokenize(); do not build them by hand",
        )

    @staticmethod
    def cldr_locale_unknown(code: str, reason: str) -> Diagnostic:
        """Babel has no CLDR data for the requested locale.

        Args:
            code: The requested locale code
            reason: Error reported by Babel

        Returns:
            Diagnostic for CLDR_LOCALE_UNKNOWN
        """
        return Diagnostic(
            code=DiagnosticCode.CLDR_LOCALE_UNKNOWN,
            message=f"No CLDR locale data for '{code}': {reason}",
            hint="Use BCP 47 locale codes (e.g., 'en_US', 'de_DE', 'lv_LV')",
        )

    @staticmethod
    def table_field_unknown(field_name: str, known: Iterable[str]) -> Diagnostic:
        """Locale fragment names a field LocaleTable does not have.

        Args:
            field_name: The unknown field
            known: Valid field names

        Returns:
            Diagnostic for TABLE_FIELD_UNKNOWN
        """
        return Diagnostic(
            code=DiagnosticCode.TABLE_FIELD_UNKNOWN,
            message=f"Unknown locale table field '{field_name}'",
            hint=f"Valid fields: {', '.join(known)}",
        )

    @staticmethod
    def table_field_length(field_name: str, expected: int, received: int) -> Diagnostic:
        """Locale table array has the wrong number of entries.

        Args:
            field_name: Field being validated
            expected: Required length
            received: Actual length

        Returns:
            Diagnostic for TABLE_FIELD_LENGTH
        """
        return Diagnostic(
            code=DiagnosticCode.TABLE_FIELD_LENGTH,
            message=f"Locale table field '{field_name}' needs {expected} entries, got {received}",
        )

    @staticmethod
    def table_field_type(field_name: str, value: object) -> Diagnostic:
        """Locale table array is not a sequence of strings.

        Args:
            field_name: Field being validated
            value: The offending value

        Returns:
            Diagnostic for TABLE_FIELD_TYPE
        """
        received = _type_name(value)
        return Diagnostic(
            code=DiagnosticCode.TABLE_FIELD_TYPE,
            message=f"Locale table field '{field_name}' must be a sequence of strings",
            argument_name=field_name,
            expected_type="Sequence[str]",
            received_type=received,
        )

    @staticmethod
    def table_fragment_type(value: object) -> Diagnostic:
        """Locale fragment is neither a mapping nor a LocaleTable.

        Args:
            value: The offending fragment

        Returns:
            Diagnostic for TABLE_FRAGMENT_TYPE
        """
        received = _type_name(value)
        return Diagnostic(
            code=DiagnosticCode.TABLE_FRAGMENT_TYPE,
            message=f"Locale fragment must be a mapping or a LocaleTable, got {received}",
            hint="Use {'months': [...], 'weekdays': [...]} or LocaleTable.from_cldr(code)",
            operation="lang",
            argument_name="fragment",
            expected_type="Mapping[str, Sequence[str]] | LocaleTable",
            received_type=received,
        )

    @staticmethod
    def template_entry_invalid(code: object, template: object) -> Diagnostic:
        """Per-language template mapping holds a non-string code or template.

        Args:
            code: Language code key
            template: Template value stored under code

        Returns:
            Diagnostic for FORMAT_SPEC_INVALID
        """
        bad = template if isinstance(code, str) else code
        return Diagnostic(
            code=DiagnosticCode.FORMAT_SPEC_INVALID,
            message=(
                f"Per-language templates map language codes to template strings, "
                f"got {_value_repr(code)}: {_value_repr(template)}"
            ),
            argument_name="templates",
            expected_type="Mapping[str, str]",
            received_type=_type_name(bad),
        )

    @staticmethod
    def template_language_duplicate(code: str, spellings: Iterable[str]) -> Diagnostic:
        """Two keys of a per-language mapping normalize to the same code.

        Args:
            code: Normalized language code
            spellings: Original keys that collide

        Returns:
            Diagnostic for FORMAT_LANGUAGE_DUPLICATE
        """
        keys = ", ".join(repr(s) for s in spellings)
        return Diagnostic(
            code=DiagnosticCode.FORMAT_LANGUAGE_DUPLICATE,
            message=f"Language codes {keys} all normalize to '{code}'",
            hint="Give each language exactly one template",
        )
