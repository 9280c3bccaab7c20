"""Interface layer errors."""


class InterfaceError(Exception):
    """Base interface error."""

    pass


class AuthenticationRequiredError(InterfaceError):
    """Raised when a route needs an actor and the request carries no valid token."""

    def __init__(self, action: str):
        self.action = action
        super().__init__(f"Authentication required to {action}")
