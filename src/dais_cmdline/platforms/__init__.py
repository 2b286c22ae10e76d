import os
from .BasePlatform import BasePlatform
from .UnixPlatform import UnixPlatform
from .WindowsPlatform import WindowsPlatform

NULL_DEVICE = "/dev/null"

def is_unix_like(probe_path: str | None = None) -> bool:
    """The null device only exists on unix-like systems."""
    return os.path.exists(probe_path or NULL_DEVICE)

def detect_platform(strict: bool = False) -> BasePlatform:
    if is_unix_like():
        return UnixPlatform()
    else:
        return WindowsPlatform(strict=strict)

__all__ = [
    "BasePlatform",
    "UnixPlatform",
    "WindowsPlatform",
    "is_unix_like",
    "detect_platform",
]
