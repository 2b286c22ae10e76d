import logging
from functools import cached_property
from typing import Any, Iterable, Mapping
from .builder import CommandBuilder, build
from .config import CommandLineConfig, get_default_config, get_path, set_path
from .executor import BaseExecutor, ExecutionResult, SubprocessExecutor
from .platforms import BasePlatform, UnixPlatform, WindowsPlatform, detect_platform, is_unix_like
from .runner import CommandRunner
from .types import CommandOptions
from .types.exceptions import (
    CommandLineError,
    CommandNotFoundError,
    ReservedParameterError,
    UnexpectedExitStatusError,
    UnresolvedParameterError,
    UnsafeQuotingError,
)

class CommandLine:
    def __init__(self,
                 executable: str,
                 template: str = "",
                 parameters: Mapping[str, Any] | None = None,
                 *,
                 swallow_stderr: bool = False,
                 expected_outcodes: Iterable[int] | None = None,
                 config: CommandLineConfig | None = None,
                 platform: BasePlatform | None = None,
                 executor: BaseExecutor | None = None,
                 logger: logging.Logger | None = None,
                 ):
        self.executable = executable
        self.template = template
        self.parameters = dict(parameters or {})
        self.options = CommandOptions.create(swallow_stderr, expected_outcodes)
        self.exit_status: int | None = None
        self._builder = CommandBuilder(config, platform)
        self._runner = CommandRunner(executor, logger)

    @property
    def swallow_stderr(self) -> bool:
        return self.options.swallow_stderr

    @property
    def expected_outcodes(self) -> frozenset[int]:
        return self.options.expected_outcodes

    @cached_property
    def command(self) -> str:
        return self._builder.build(
            self.executable,
            self.template,
            self.parameters,
            self.options.swallow_stderr)

    def run(self) -> Any:
        return self._runner.run(self)

    def __repr__(self) -> str:
        return f"CommandLine({self.executable!r}, {self.template!r})"

__all__ = [
    "CommandLine",
    "CommandBuilder",
    "CommandRunner",
    "CommandLineConfig",
    "CommandOptions",
    "build",
    "set_path",
    "get_path",
    "get_default_config",

    "BasePlatform",
    "UnixPlatform",
    "WindowsPlatform",
    "is_unix_like",
    "detect_platform",

    "BaseExecutor",
    "ExecutionResult",
    "SubprocessExecutor",

    "CommandLineError",
    "ReservedParameterError",
    "UnresolvedParameterError",
    "UnsafeQuotingError",
    "UnexpectedExitStatusError",
    "CommandNotFoundError",
]
