"""Shared exceptions."""


class AnyExporterException(Exception):
    """Base exception for all errors raised by the exporter."""

    def __init__(self, message: str = "An error occurred"):
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message
