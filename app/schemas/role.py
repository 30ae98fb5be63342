from pydantic import BaseModel

from app.models.role import Role


class RoleResponse(BaseModel):
    identity: str
    role: Role
    role_name: str

    @classmethod
    def for_identity(cls, identity: str, role: Role) -> "RoleResponse":
        return cls(identity=identity, role=role, role_name=role.name.lower())
