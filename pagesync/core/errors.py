"""Registry errors. The store itself clamps its inputs and raises nothing."""


class UnknownResourceError(KeyError):
    """No live store is registered under the requested resource name."""

    def __init__(self, resource: str) -> None:
        super().__init__(resource)
        self.resource = resource

    def __str__(self) -> str:
        return f"No pagination store for resource '{self.resource}'"


class ResourceExistsError(ValueError):
    """A live store is already registered under the resource name."""

    def __init__(self, resource: str) -> None:
        super().__init__(f"Pagination store for resource '{resource}' already exists")
        self.resource = resource
