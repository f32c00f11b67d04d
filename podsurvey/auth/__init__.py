"""Admin authentication."""

from podsurvey.auth.identity import AdminSession, IdentityProvider, admin_identity, require_admin_guard

__all__ = ["AdminSession", "IdentityProvider", "admin_identity", "require_admin_guard"]
