"""Error type raised for invalid scene files, and its report format."""


class SceneError(ValueError):
    """A scene description or its files could not be accepted."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


def error_text(message: str) -> str:
    """Return the text printed to report ``message`` to the user."""
    return f"Error\n{message}\n"