from dataclasses import dataclass, field
from .exceptions import ReservedParameterError

SWALLOW_STDERR = "swallow_stderr"
EXPECTED_OUTCODES = "expected_outcodes"
RESERVED_NAMES = frozenset({SWALLOW_STDERR, EXPECTED_OUTCODES})

@dataclass(frozen=True)
class Token:
    """A piece of a parsed template: literal text, or a parameter reference."""
    text: str
    name: str | None = None

    @property
    def is_parameter(self) -> bool:
        return self.name is not None

@dataclass(frozen=True)
class CommandOptions:
    swallow_stderr: bool = False
    expected_outcodes: frozenset[int] = field(default_factory=lambda: frozenset({0}))

    @classmethod
    def create(cls,
               swallow_stderr: bool = False,
               expected_outcodes=None,
               ) -> "CommandOptions":
        if expected_outcodes is None:
            return cls(swallow_stderr=swallow_stderr)
        return cls(swallow_stderr=swallow_stderr,
                   expected_outcodes=frozenset(int(code) for code in expected_outcodes))

    def accepts(self, exit_status: int) -> bool:
        return exit_status in self.expected_outcodes

def validate_parameter_names(names) -> None:
    for name in names:
        if name in RESERVED_NAMES:
            raise ReservedParameterError(name)
