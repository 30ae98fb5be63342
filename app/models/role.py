from enum import IntEnum


class Role(IntEnum):
    """Participant role. Integer values are what the API reports."""
    UNREGISTERED = 0
    ADMINISTRATOR = 1
    HOST = 2
    GUEST = 3

    def is_registered(self) -> bool:
        return self is not Role.UNREGISTERED
