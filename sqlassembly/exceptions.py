from typing import Any, Optional

__all__ = (
    "ForbiddenSectionError",
    "ImproperConfigurationError",
    "MissingSectionError",
    "SQLAssemblyError",
    "SQLBuilderError",
    "SectionValidationError",
    "SerializationError",
)


class SQLAssemblyError(Exception):
    """Base exception class from which all sqlassembly exceptions inherit."""

    detail: str

    def __init__(self, *args: Any, detail: str = "") -> None:
        """Initialize ``SQLAssemblyError``.

        Args:
            *args: args are converted to :class:`str` before passing to :class:`Exception`
            detail: detail of the exception.
        """
        str_args = [str(arg) for arg in args if arg]
        if not detail:
            if str_args:
                detail, *str_args = str_args
            elif hasattr(self, "detail"):
                detail = self.detail
        self.detail = detail
        super().__init__(*str_args)

    def __repr__(self) -> str:
        if self.detail:
            return f"{self.__class__.__name__} - {self.detail}"
        return self.__class__.__name__

    def __str__(self) -> str:
        return " ".join((*self.args, self.detail)).strip()


class ImproperConfigurationError(SQLAssemblyError):
    """Improper Configuration error.

    Raised when a builder is handed a model or config it cannot work with.
    """


class SerializationError(SQLAssemblyError):
    """Encoding or decoding of an object failed."""


class SQLBuilderError(SQLAssemblyError):
    """Issues Building or Generating SQL statements."""

    def __init__(self, message: Optional[str] = None) -> None:
        if message is None:
            message = "Issues building SQL statement."
        super().__init__(message)


class SectionValidationError(SQLBuilderError):
    """A statement's sections violate its statement type's policy."""

    section: str

    def __init__(self, section: str, message: str) -> None:
        self.section = section
        super().__init__(message)


class MissingSectionError(SectionValidationError):
    """A section required by the statement type was never populated."""

    def __init__(self, section: str) -> None:
        super().__init__(section, f'"{section}" missing in query.')


class ForbiddenSectionError(SectionValidationError):
    """A section the statement type forbids was populated."""

    def __init__(self, section: str) -> None:
        super().__init__(section, f'"{section}" cannot be in query.')
