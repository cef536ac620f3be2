"""Base service class for domain services."""


class Service:
    """Marker base for domain services.

    Services hold the rules that span entities: toggling votes on questions,
    ranking a topic's questions, checking who may do what.
    """
