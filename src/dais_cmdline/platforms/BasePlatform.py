from abc import ABC, abstractmethod

class BasePlatform(ABC):
    name: str
    stderr_null_target: str

    @abstractmethod
    def quote(self, value: str) -> str: ...

    def stderr_redirect(self) -> str:
        return f" 2>{self.stderr_null_target}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
