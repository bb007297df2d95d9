from greeter.schemas.common import Message

__all__ = [
    "Message",
]
