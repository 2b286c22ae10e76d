class CommandLineError(Exception): ...

class ReservedParameterError(CommandLineError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(
            "You have an argument named :swallow_stderr or :expected_outcodes. "
            "Don't use that, as it's reserved for CommandLine to use")

class UnresolvedParameterError(CommandLineError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"No value given for interpolation :{name}")

class UnsafeQuotingError(CommandLineError):
    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Refusing to double-quote a value containing '\"': {value}")

class UnexpectedExitStatusError(CommandLineError):
    def __init__(self, command: str, exit_status: int, expected: frozenset[int]):
        self.command = command
        self.exit_status = exit_status
        self.expected = expected
        codes = ", ".join(str(code) for code in sorted(expected))
        super().__init__(f"Command '{command}' returned {exit_status}. Expected {codes}")

class CommandNotFoundError(UnexpectedExitStatusError): ...
