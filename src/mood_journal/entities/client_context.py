"""Per-request client context."""

from dataclasses import dataclass

ANONYMOUS_CLIENT = "anonymous"


@dataclass(frozen=True)
class ClientContext:
    """Identity of the caller, passed explicitly to services that scope data.

    The hosting platform authenticates the caller before the request reaches
    this service; ``client_id`` is the opaque identifier it forwards.
    """

    client_id: str = ANONYMOUS_CLIENT
