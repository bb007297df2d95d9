"""Message provider holding the configured greeting."""

from greeter.schemas.common import Message


class MessageProvider:
    """Read-only holder for the greeting; safe to share across concurrent requests."""

    def __init__(self, value: str):
        """Wrap the configured value in an immutable Message."""
        self._message = Message(value=value)

    def get(self) -> str:
        """Return the configured greeting unchanged."""
        return self._message.value

    def __repr__(self) -> str:
        return f"MessageProvider({self._message.value!r})"
