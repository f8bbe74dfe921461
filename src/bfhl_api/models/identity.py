"""
Static identity fields echoed in every successful /bfhl response.

IdentityConfig is a frozen dataclass built once from settings at startup and
injected into the route handler; it is never read from the environment ad hoc.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class IdentityConfig:
    """
    Immutable identity snapshot.
    
    Attributes:
        user_id: User identifier, conventionally ``fullname_ddmmyyyy``
        email: Contact email
        roll_number: College registration number
    """
    
    user_id: str
    email: str
    roll_number: str
    
    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "user_id": self.user_id,
            "email": self.email,
            "roll_number": self.roll_number,
        }
