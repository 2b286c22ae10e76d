from .BasePlatform import BasePlatform

class UnixPlatform(BasePlatform):
    name = "unix"
    stderr_null_target = "/dev/null"

    def quote(self, value: str) -> str:
        # close the quote, emit an escaped quote, reopen
        return "'" + value.replace("'", "'\\''") + "'"
