import logging
from typing import Dict, Optional

from xls_wrapper import __name__ as xls_wrapper_name
from xls_wrapper.constants import BUILTIN_FORMATS, FIRST_CUSTOM_FORMAT_CODE, MAX_FORMAT_SECTIONS
from xls_wrapper.exceptions import FormatError

logger = logging.getLogger(xls_wrapper_name)
debug = logger.debug

__all__ = ["FormatTable"]


class FormatTable:
    """Number formats of a document: the built-in formats every workbook
    has plus any custom formats registered by the document.
    """

    def __init__(self, custom_formats: Optional[Dict[int, str]] = None):
        self._builtin_codes = {v: k for k, v in BUILTIN_FORMATS.items()}
        self._custom = {}
        self._custom_codes = {}
        self._next_code = FIRST_CUSTOM_FORMAT_CODE
        if custom_formats is not None:
            for code, pattern in custom_formats.items():
                self._custom[code] = pattern
                self._custom_codes[pattern] = code
                self._next_code = max(self._next_code, code + 1)

    @property
    def custom_formats(self) -> Dict[int, str]:
        """Dict[int, str]: custom format codes mapped to their patterns."""
        return dict(self._custom)

    def builtin_format(self, pattern: str) -> Optional[int]:
        """Return the built-in code for ``pattern`` or ``None`` if there is none."""
        return self._builtin_codes.get(pattern)

    def add_format(self, pattern: str) -> int:
        """Return the code of a custom format, registering it if it is new.

        Raises
        ------
        FormatError:
            If the pattern is malformed.
        """
        if pattern in self._custom_codes:
            return self._custom_codes[pattern]
        validate_format(pattern)
        code = self._next_code
        self._next_code += 1
        self._custom[code] = pattern
        self._custom_codes[pattern] = code
        debug("add_format: code=%d, pattern='%s'", code, pattern)
        return code

    def format_code(self, pattern: str) -> int:
        """Return the built-in code for ``pattern``, registering a custom
        format when it is not built-in.
        """
        code = self.builtin_format(pattern)
        if code is None:
            code = self.add_format(pattern)
        return code

    def pattern(self, code: int) -> str:
        if code in BUILTIN_FORMATS:
            return BUILTIN_FORMATS[code]
        if code in self._custom:
            return self._custom[code]
        raise IndexError(f"no number format with code {code}")

    def __contains__(self, code: int) -> bool:
        return code in BUILTIN_FORMATS or code in self._custom


def validate_format(pattern: str) -> None:
    """Raise a FormatError if a number format pattern cannot be stored."""
    if not isinstance(pattern, str) or len(pattern) == 0:
        raise FormatError("number format must be a non-empty string")

    sections = 1
    in_quotes = False
    in_brackets = False
    escaped = False
    for char in pattern:
        if escaped:
            escaped = False
        elif in_quotes:
            in_quotes = char != '"'
        elif char == "\\":
            escaped = True
        elif char == '"':
            in_quotes = True
        elif in_brackets:
            if char == "[":
                raise FormatError(f"nested '[' in number format '{pattern}'")
            in_brackets = char != "]"
        elif char == "[":
            in_brackets = True
        elif char == "]":
            raise FormatError(f"unbalanced ']' in number format '{pattern}'")
        elif char == ";":
            sections += 1

    if in_quotes:
        raise FormatError(f"unterminated string in number format '{pattern}'")
    if in_brackets:
        raise FormatError(f"unbalanced '[' in number format '{pattern}'")
    if escaped:
        raise FormatError(f"trailing escape in number format '{pattern}'")
    if sections > MAX_FORMAT_SECTIONS:
        raise FormatError(
            f"number format '{pattern}' has more than {MAX_FORMAT_SECTIONS} sections"
        )
