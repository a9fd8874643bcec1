"""The error raised for failed server calls."""

from __future__ import annotations

DEFAULT_CLIENT_ERROR_CODE = "SDK.NacosError"


class NacosError(Exception):
    """An error with a server or client error code and an optional cause."""

    def __init__(
        self,
        error_code: str = "",
        err_msg: str = "",
        origin_error: BaseException | None = None,
    ) -> None:
        super().__init__(err_msg)
        self._error_code = error_code
        self.err_msg = err_msg
        self.origin_error = origin_error
        if origin_error is not None:
            self.__cause__ = origin_error

    def error_code(self) -> str:
        """Return the error code, or the client default when none was given."""
        return self._error_code or DEFAULT_CLIENT_ERROR_CODE

    def __str__(self) -> str:
        message = f"[{self.error_code()}] {self.err_msg}"
        if self.origin_error is not None:
            return f"{message}\ncaused by:\n{self.origin_error}"
        return message