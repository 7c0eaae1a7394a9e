from accounts.handlers.views import LoginView, LogoutView, MeView, RegisterView, identity_for

__all__ = ["LoginView", "LogoutView", "MeView", "RegisterView", "identity_for"]
