"""Base class for domain services."""


class Service:
    """Marker base for forum domain services.

    Services own the forum's rules (validation, ownership checks, the
    vote toggle) and talk to storage only through repository interfaces.
    """
