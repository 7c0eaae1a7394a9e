from accounts.services.identity_service import IdentityService

__all__ = ["IdentityService"]
