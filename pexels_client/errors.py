class PexelsError(Exception):
    def __init__(self, action: str, cause: BaseException | None = None) -> None:
        self.action = action
        self.cause = cause
        super().__init__(self._message())

    def _message(self) -> str:
        if self.cause is None:
            return f"error {self.action}"
        return f"error {self.action}: {self.cause}"


class NetworkError(PexelsError):
    pass


class HttpStatusError(PexelsError):
    def __init__(self, action: str, status_code: int) -> None:
        self.status_code = status_code
        super().__init__(action)

    def _message(self) -> str:
        return f"error {self.action}: received non-OK response: {self.status_code}"


class DecodeError(PexelsError):
    pass


class ConfigError(PexelsError):
    pass
