"""Base class for the auth and invitation domain services."""


class Service:
    """Base class for the magic link, invitation and user services.

    A service owns a unit of work and runs each operation in one
    transaction across the user, magic link and invitation repositories.
    """

    pass
