# domain/errors.py


class RoutingError(ValueError):
    """Base class for malformed graph or search requests."""


class MissingNode(RoutingError):
    def __init__(self, node_id: str, role: str = "node"):
        self.node_id, self.role = node_id, role
        super().__init__(f"{role} {node_id!r} is not in the graph")


class InvalidReference(RoutingError):
    def __init__(self, a: str, b: str):
        self.a, self.b = a, b
        super().__init__(f"cannot connect {a!r} and {b!r}: endpoint missing")
