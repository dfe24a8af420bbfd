from .hobby_membership_service import HobbyMembershipService

__all__ = ["HobbyMembershipService"]
