"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from jsonparsec.constants import INTEGER_MAX, INTEGER_MIN
from jsonparsec.enums import ValueKind

from .codes import DiagnosticCode, ParseDiagnostic

__all__ = ["ErrorTemplate", "describe_found"]

_KEY_HINT = "member keys can only be strings"

# Article-prefixed descriptions used by "expected a string, found ..."
_KIND_DESCRIPTIONS: dict[ValueKind, str] = {
    ValueKind.STRING: "a string",
    ValueKind.NUMBER: "a number",
    ValueKind.ARRAY: "an array",
    ValueKind.OBJECT: "an object",
    ValueKind.TRUE: "keyword `true`",
    ValueKind.FALSE: "keyword `false`",
    ValueKind.NULL: "keyword `null`",
}


def describe_found(found: str) -> str:
    """Render a source excerpt for the "found ..." part of a message.

    Args:
        found: Excerpt of the source at the failure point (may be empty)

    Returns:
        The excerpt in backticks, or "end of input" for an empty excerpt
    """
    return f"`{found}`" if found else "end of input"


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This solves EM101/EM102 violations while providing:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases

    Every template returns a fresh ParseDiagnostic whose span is relative to
    the failure position, so callers may specialize it with set_message().
    """

    @staticmethod
    def expected_literal(expected: str, found: str) -> ParseDiagnostic:
        """Literal text did not match.

        Args:
            expected: The literal that was required
            found: Source excerpt at the failure point

        Returns:
            ParseDiagnostic for EXPECTED_LITERAL
        """
        return ParseDiagnostic(
            code=DiagnosticCode.EXPECTED_LITERAL,
            message=f"expected `{expected}`, found {describe_found(found)}",
            end=len(found),
        )

    @staticmethod
    def expected_digit(found: str) -> ParseDiagnostic:
        """Character is not a digit of the requested base.

        Args:
            found: The offending character (empty at end of input)

        Returns:
            ParseDiagnostic for EXPECTED_DIGIT
        """
        if found:
            msg = f"`{found}` is not a digit"
        else:
            msg = "expected a digit, found end of input"
        return ParseDiagnostic(
            code=DiagnosticCode.EXPECTED_DIGIT,
            message=msg,
            end=len(found),
        )

    @staticmethod
    def unclosed_string(length: int) -> ParseDiagnostic:
        """String literal reached a newline or end of input before its closing quote.

        Args:
            length: Characters from the opening quote to where scanning stopped

        Returns:
            ParseDiagnostic for UNCLOSED_STRING
        """
        return ParseDiagnostic(
            code=DiagnosticCode.UNCLOSED_STRING,
            message="unclosed string delimiter",
            end=length,
            hint='add the closing `"` on the same line',
        )

    @staticmethod
    def integer_out_of_range(literal: str) -> ParseDiagnostic:
        """Integer literal does not fit the fixed-width integer.

        Args:
            literal: The digits (with sign) as written

        Returns:
            ParseDiagnostic for INTEGER_OUT_OF_RANGE
        """
        return ParseDiagnostic(
            code=DiagnosticCode.INTEGER_OUT_OF_RANGE,
            message=f"integer literal `{literal}` is out of range",
            end=len(literal),
            hint=f"integers must lie between {INTEGER_MIN} and {INTEGER_MAX}",
        )

    @staticmethod
    def invalid_keyword(token: str) -> ParseDiagnostic:
        """Identifier-like token that is not true, false or null.

        Args:
            token: The offending token

        Returns:
            ParseDiagnostic for INVALID_KEYWORD
        """
        return ParseDiagnostic(
            code=DiagnosticCode.INVALID_KEYWORD,
            message=f"expected true, false or null, found `{token}`",
            end=len(token),
        )

    @staticmethod
    def invalid_value(found: str) -> ParseDiagnostic:
        """No value alternative applies at this position.

        Args:
            found: Source excerpt at the failure point

        Returns:
            ParseDiagnostic for INVALID_VALUE
        """
        return ParseDiagnostic(
            code=DiagnosticCode.INVALID_VALUE,
            message=f"invalid value, found {describe_found(found)}",
            end=len(found),
            hint="a value is a number, a string, an array, an object, true, false or null",
        )

    @staticmethod
    def unexpected_character(found: str) -> ParseDiagnostic:
        """Array element followed by something other than ',' or ']'.

        Args:
            found: The offending character (empty at end of input)

        Returns:
            ParseDiagnostic for UNEXPECTED_CHARACTER
        """
        if found:
            msg = f"unexpected character `{found}`"
        else:
            msg = "unexpected end of input"
        return ParseDiagnostic(
            code=DiagnosticCode.UNEXPECTED_CHARACTER,
            message=msg,
            end=len(found),
            hint="array elements are separated by ',' and closed by ']'",
        )

    @staticmethod
    def array_trailing_comma() -> ParseDiagnostic:
        """Array closed directly after a comma.

        Returns:
            ParseDiagnostic for TRAILING_COMMA
        """
        return ParseDiagnostic(
            code=DiagnosticCode.TRAILING_COMMA,
            message="trailing comma not allowed, found `]`",
            end=1,
            hint="remove the ',' before ']'",
        )

    @staticmethod
    def object_trailing_comma() -> ParseDiagnostic:
        """Object closed where a member key was expected after a comma.

        Returns:
            ParseDiagnostic for TRAILING_COMMA
        """
        return ParseDiagnostic(
            code=DiagnosticCode.TRAILING_COMMA,
            message="trailing comma not allowed, expected a string, found `}`",
            end=1,
            hint="remove the ',' before '}'",
        )

    @staticmethod
    def invalid_member_key(kind: ValueKind, length: int) -> ParseDiagnostic:
        """Member key is a value of the wrong type.

        Args:
            kind: Kind of the value found in key position
            length: Source length of that value

        Returns:
            ParseDiagnostic for INVALID_MEMBER_KEY
        """
        return ParseDiagnostic(
            code=DiagnosticCode.INVALID_MEMBER_KEY,
            message=f"expected a string, found {_KIND_DESCRIPTIONS[kind]}",
            end=length,
            hint=_KEY_HINT,
        )

    @staticmethod
    def expected_member_key(found: str) -> ParseDiagnostic:
        """Member key position holds something that is not a value at all.

        Args:
            found: Source excerpt at the failure point

        Returns:
            ParseDiagnostic for INVALID_MEMBER_KEY
        """
        return ParseDiagnostic(
            code=DiagnosticCode.INVALID_MEMBER_KEY,
            message=f"expected a string, found {describe_found(found)}",
            end=len(found),
            hint=_KEY_HINT,
        )

    @staticmethod
    def expected_colon(found: str) -> ParseDiagnostic:
        """Member key not followed by ':'.

        Args:
            found: Source excerpt at the failure point

        Returns:
            ParseDiagnostic for EXPECTED_COLON
        """
        return ParseDiagnostic(
            code=DiagnosticCode.EXPECTED_COLON,
            message=f"expected a ':', found {describe_found(found)}",
            end=len(found),
        )

    @staticmethod
    def missing_value(found: str) -> ParseDiagnostic:
        """Nothing value-like follows a member's ':'.

        Args:
            found: Source excerpt at the failure point

        Returns:
            ParseDiagnostic for MISSING_VALUE
        """
        return ParseDiagnostic(
            code=DiagnosticCode.MISSING_VALUE,
            message=f"missing a value after ':', found {describe_found(found)}",
            end=len(found),
        )

    @staticmethod
    def expected_closing_brace(found: str) -> ParseDiagnostic:
        """Object members not followed by '}'.

        Args:
            found: Source excerpt at the failure point

        Returns:
            ParseDiagnostic for EXPECTED_CLOSING_BRACE
        """
        return ParseDiagnostic(
            code=DiagnosticCode.EXPECTED_CLOSING_BRACE,
            message=f"expected '}}', found {describe_found(found)}",
            end=len(found),
        )

    @staticmethod
    def missing_comma(length: int) -> ParseDiagnostic:
        """A string follows an object member where '}' or ',' was expected.

        Args:
            length: Source length of the string found

        Returns:
            ParseDiagnostic for MISSING_COMMA
        """
        return ParseDiagnostic(
            code=DiagnosticCode.MISSING_COMMA,
            message="expected '}', found a string",
            end=length,
            hint="a ',' is probably missing before this member",
        )

    @staticmethod
    def expected_object(found: str) -> ParseDiagnostic:
        """Document does not start with an object.

        Args:
            found: Source excerpt at the failure point

        Returns:
            ParseDiagnostic for EXPECTED_OBJECT
        """
        return ParseDiagnostic(
            code=DiagnosticCode.EXPECTED_OBJECT,
            message=f"expected an object, found {describe_found(found)}",
            end=len(found),
            hint="a document must start with '{'",
        )

    @staticmethod
    def nesting_depth_exceeded(max_depth: int) -> ParseDiagnostic:
        """Arrays and objects nested deeper than the configured limit.

        Args:
            max_depth: The configured limit

        Returns:
            ParseDiagnostic for NESTING_DEPTH_EXCEEDED
        """
        return ParseDiagnostic(
            code=DiagnosticCode.NESTING_DEPTH_EXCEEDED,
            message=f"maximum nesting depth ({max_depth}) exceeded",
            end=1,
            hint="flatten the document or raise max_nesting_depth",
        )

    @staticmethod
    def trailing_input(found: str) -> ParseDiagnostic:
        """Input remains after a complete object.

        Args:
            found: Source excerpt of the remainder

        Returns:
            ParseDiagnostic for TRAILING_INPUT
        """
        return ParseDiagnostic(
            code=DiagnosticCode.TRAILING_INPUT,
            message=f"unexpected trailing input {describe_found(found)}",
            end=len(found),
            hint="a document holds exactly one object",
        )
