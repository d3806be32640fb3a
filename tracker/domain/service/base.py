"""Base class for domain services."""


class Service:
    """Marker base for domain services.

    Services hold only their collaborators (repositories, other services
    and settings) and keep no per-call state.
    """
