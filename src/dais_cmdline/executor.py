import subprocess
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

@dataclass
class ExecutionResult:
    output: Any
    returncode: int

class BaseExecutor(ABC):
    @abstractmethod
    def execute(self, command: str) -> ExecutionResult: ...

class SubprocessExecutor(BaseExecutor):
    """
    Runs the string through the platform shell and captures stdout.
    Bytes that are not valid UTF-8 come back as lone surrogates, so
    `output.encode("utf-8", "surrogateescape")` recovers them exactly.
    """

    def execute(self, command: str) -> ExecutionResult:
        with subprocess.Popen(
            command,
            shell=True,
            stdout=subprocess.PIPE,
            encoding="utf-8",
            errors="surrogateescape",
        ) as proc:
            output, _ = proc.communicate()
        return ExecutionResult(output=output, returncode=proc.returncode)
