class NodeNotFound(LookupError):
    """
    Requested OSM node could not be resolved, whatever the underlying cause.
    """

    def __init__(self, node_id: int) -> None:
        super().__init__(node_id)

        self.node_id = node_id

    def __str__(self) -> str:
        return f"OSM node {self.node_id} not found."


class NodeFetchError(NodeNotFound):
    """
    Specific reason a node could not be resolved. Logged by the fetcher
    and collapsed into plain NodeNotFound for the caller.
    """


class TransportFailure(NodeFetchError):
    """
    Request did not produce a response (connection error, timeout, TLS failure).
    """

    def __init__(self, node_id: int, cause: Exception) -> None:
        super().__init__(node_id)

        self.cause = cause

    def __str__(self) -> str:
        return f"Request for OSM node {self.node_id} failed: {self.cause}"


class UnexpectedStatus(NodeFetchError):
    """
    OSM API answered with a status other than 200.
    """

    def __init__(self, node_id: int, status_code: int) -> None:
        super().__init__(node_id)

        self.status_code = status_code

    def __str__(self) -> str:
        return f"Unexpected status {self.status_code} for OSM node {self.node_id}."


class UnexpectedContentType(NodeFetchError):
    """
    OSM API answered 200 with a body that is not XML.
    """

    def __init__(self, node_id: int, content_type: str) -> None:
        super().__init__(node_id)

        self.content_type = content_type

    def __str__(self) -> str:
        return (
            f"Unexpected non-XML response for OSM node {self.node_id}: "
            f"content-type={self.content_type}"
        )


class MalformedPayload(NodeFetchError):
    """
    Payload could not be decoded into a node.
    """

    def __init__(self, node_id: int, message: str) -> None:
        super().__init__(node_id)

        self.message = message

    def __str__(self) -> str:
        return f"Malformed payload for OSM node {self.node_id}: {self.message}"
