"""
Principal

The authenticated caller of a use case, resolved once per request.
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class Principal:
    """
    Identity of the caller as issued by the identity provider.

    is_super_admin is a capability carried by the principal itself; the
    authorization gate never looks it up from global state.
    """

    user_id: UUID
    email: str
    is_super_admin: bool = False
