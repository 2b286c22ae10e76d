from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any
from .executor import BaseExecutor, SubprocessExecutor
from .types.exceptions import CommandNotFoundError, UnexpectedExitStatusError

if TYPE_CHECKING:
    from . import CommandLine

# what POSIX shells return when the program cannot be found
COMMAND_NOT_FOUND = 127

class CommandRunner:
    def __init__(self,
                 executor: BaseExecutor | None = None,
                 logger: logging.Logger | None = None,
                 ):
        self._executor = executor or SubprocessExecutor()
        self._logger = logger or logging.getLogger(__name__)

    def run(self, command: CommandLine) -> Any:
        full_command = command.command
        self._logger.info("Command :: %s", full_command)

        result = self._executor.execute(full_command)
        command.exit_status = result.returncode

        if command.options.accepts(result.returncode):
            return result.output
        if result.returncode == COMMAND_NOT_FOUND:
            raise CommandNotFoundError(full_command, result.returncode, command.options.expected_outcodes)
        raise UnexpectedExitStatusError(full_command, result.returncode, command.options.expected_outcodes)
