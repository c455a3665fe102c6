"""Configuration utilities for SCRIVENER.

Settings are read from the environment each time they are requested, so tests
can override them with ``monkeypatch.setenv``.

Variables:
    SCRIVENER_LINE_SEPARATOR: ``lf``, ``crlf`` or ``cr``. Defaults to the
        platform separator (`os.linesep`).
    SCRIVENER_FSYNC: Whether transactional file sinks ``fsync`` before
        publishing. Accepts ``1/0``, ``true/false``, ``yes/no``, ``on/off``.
        Defaults to true.
"""

import os

LINE_SEPARATOR_ENV = "SCRIVENER_LINE_SEPARATOR"
FSYNC_ENV = "SCRIVENER_FSYNC"

LINE_SEPARATORS = {"lf": "\n", "crlf": "\r\n", "cr": "\r"}
TRUE_WORDS = frozenset({"1", "true", "yes", "on"})
FALSE_WORDS = frozenset({"0", "false", "no", "off"})


class InvalidSettingError(ValueError):
    """Raised when an environment variable holds an unusable value.

    Attributes:
        variable (str): Name of the environment variable.
        value (str): The rejected value.
    """

    def __init__(self, variable: str, value: str, expected: str) -> None:
        super().__init__(f"Invalid value {value!r} for {variable}; expected {expected}")
        self.variable = variable
        self.value = value


def get_line_separator() -> str:
    """Return the line separator that host devices expect.

    Returns:
        The separator named by `SCRIVENER_LINE_SEPARATOR`, or `os.linesep`.

    Raises:
        InvalidSettingError: If the variable names an unknown separator.
    """
    if not (name := os.environ.get(LINE_SEPARATOR_ENV)):
        return os.linesep
    try:
        return LINE_SEPARATORS[name.strip().lower()]
    except KeyError:
        raise InvalidSettingError(
            LINE_SEPARATOR_ENV, name, "one of " + ", ".join(LINE_SEPARATORS)
        ) from None


def get_fsync_default() -> bool:
    """Return whether transactional file sinks should ``fsync`` on commit.

    Raises:
        InvalidSettingError: If `SCRIVENER_FSYNC` is not a recognised boolean word.
    """
    if not (raw := os.environ.get(FSYNC_ENV)):
        return True
    word = raw.strip().lower()
    if word in TRUE_WORDS:
        return True
    if word in FALSE_WORDS:
        return False
    raise InvalidSettingError(FSYNC_ENV, raw, "a boolean such as 'true' or 'false'")
