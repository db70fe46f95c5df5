"""Security user parsed from the pipe-delimited user info string."""

from __future__ import annotations

from pydantic import BaseModel, Field


def _split_roles(segment: str) -> list[str]:
    return [role.strip() for role in segment.split(",") if role.strip()]


class User(BaseModel):
    """Already-authenticated user of the current request."""

    name: str = Field(description="User name")
    backend_roles: list[str] = Field(default_factory=list, description="Roles from the authentication backend")
    roles: list[str] = Field(default_factory=list, description="Security roles")
    requested_tenant: str | None = Field(default=None, description="Tenant selected for the request")

    @classmethod
    def parse(cls, user_string: str | None) -> User | None:
        """Parse "name|backend_role1,backend_role2|role1,role2|tenant".

        Trailing segments are optional and empty segments yield empty lists, so
        "myuser||myrole" is user myuser with role myrole and no backend roles.
        """
        if user_string is None or not user_string.strip():
            return None

        parts = user_string.split("|")
        name = parts[0].strip()
        if not name:
            return None

        backend_roles = _split_roles(parts[1]) if len(parts) > 1 else []
        roles = _split_roles(parts[2]) if len(parts) > 2 else []
        tenant = parts[3].strip() if len(parts) > 3 and parts[3].strip() else None
        return cls(name=name, backend_roles=backend_roles, roles=roles, requested_tenant=tenant)

    def to_user_string(self) -> str:
        """Render back to the pipe-delimited form."""
        return "|".join(
            [self.name, ",".join(self.backend_roles), ",".join(self.roles), self.requested_tenant or ""]
        ).rstrip("|")
