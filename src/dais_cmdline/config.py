import threading
from dataclasses import dataclass, replace

@dataclass(frozen=True)
class CommandLineConfig:
    path: str | None = None

    def with_path(self, path: str | None) -> "CommandLineConfig":
        return replace(self, path=path)

    def resolve_executable(self, executable: str) -> str:
        if not self.path:
            return executable
        return self.path.rstrip("/") + "/" + executable

# --- --- --- --- --- ---

# process-wide default: written by one thread (usually at startup), read by many
_default_config = CommandLineConfig()
_default_lock = threading.Lock()

def get_default_config() -> CommandLineConfig:
    return _default_config

def set_path(path: str | None) -> None:
    global _default_config
    with _default_lock:
        _default_config = _default_config.with_path(path)

def get_path() -> str | None:
    return _default_config.path
