"""
Exception classes for the Footle backend.

Centralized location for all custom exceptions to avoid circular imports.
"""


class GatewayError(Exception):
    """The Sorare GraphQL API returned errors instead of data."""

    pass


class InsufficientRosterError(RuntimeError):
    """A roster build discovered fewer candidates than requested."""

    def __init__(self, found: int, target: int) -> None:
        super().__init__(
            f"Only {found} eligible players discovered, {target} required"
        )
        self.found = found
        self.target = target


class EmptyRosterError(ValueError):
    """Daily selection was attempted over an empty roster."""

    pass


class SnapshotNotFoundError(LookupError):
    """No roster snapshot has been saved under the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(
            f"No snapshot named '{name}'. Run `python -m scripts.build_roster` first."
        )
        self.name = name


class SecretUnavailableError(RuntimeError):
    """Today's secret player could not be fetched from the API."""

    pass
