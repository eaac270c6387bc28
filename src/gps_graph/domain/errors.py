# domain/errors.py


class GraphError(Exception):
    """Base class for every failure raised by the graph engine."""


class NotFound(GraphError, LookupError):
    pass


class InvalidArgument(GraphError, ValueError):
    pass


class Unreachable(GraphError):
    def __init__(self, source_id: int, target_id: int):
        super().__init__(f"no path from location {source_id} to location {target_id}")
        self.source_id, self.target_id = source_id, target_id
