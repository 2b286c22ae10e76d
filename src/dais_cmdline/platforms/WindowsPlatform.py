import logging
from .BasePlatform import BasePlatform
from ..types.exceptions import UnsafeQuotingError

logger = logging.getLogger(__name__)

class WindowsPlatform(BasePlatform):
    name = "windows"
    stderr_null_target = "NUL"

    def __init__(self, strict: bool = False):
        self._strict = strict

    @property
    def strict(self) -> bool:
        return self._strict

    def quote(self, value: str) -> str:
        # cmd.exe gets no escaping inside double quotes
        if '"' in value:
            if self._strict:
                raise UnsafeQuotingError(value)
            logger.warning("Double-quoting a value that contains '\"', the result is not shell-safe: %s", value)
        return f'"{value}"'

    def __repr__(self) -> str:
        return f"WindowsPlatform(strict={self._strict})"
