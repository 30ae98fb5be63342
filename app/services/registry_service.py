import logging

from app.core.exceptions import AlreadyRegisteredError
from app.models.role import Role
from app.repositories.ledger_repo import LedgerRepository

logger = logging.getLogger(__name__)


class RegistryService:
    """One-time role assignment. A role, once set, never changes."""

    def __init__(self, repo: LedgerRepository):
        self.repo = repo

    def role_of(self, identity: str) -> Role:
        return self.repo.get_role(identity)

    def assign_administrator(self, identity: str) -> None:
        """Grant the administrator role. Only the ledger constructor calls this."""
        self._assign(identity, Role.ADMINISTRATOR)

    def register_as_host(self, identity: str) -> None:
        self._assign(identity, Role.HOST)

    def register_as_guest(self, identity: str) -> None:
        self._assign(identity, Role.GUEST)

    def _assign(self, identity: str, role: Role) -> None:
        current = self.repo.get_role(identity)
        if current is not Role.UNREGISTERED:
            raise AlreadyRegisteredError(
                f"{identity} is already registered as {current.name.lower()}"
            )
        self.repo.set_role(identity, role)
        logger.debug("Assigned role %s to %s", role.name, identity)
