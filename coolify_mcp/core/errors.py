# ---------------------------------
# TYPED EXCEPTIONS
# ---------------------------------


class ToolDispatchError(RuntimeError):
    """Raised when a tool call cannot be turned into a backend request."""


class UnknownToolError(ToolDispatchError):
    """Raised when a tool name is not in the registry."""

    def __init__(self, name: str) -> None:
        super().__init__(f'Unknown tool: {name}')
        self.name = name


class ToolArgumentError(ToolDispatchError):
    """Raised when an argument needed to build the request path is missing."""


class ToolCallFailed(RuntimeError):
    """Raised out of a protocol handler so the client sees an error result.

    The message is the JSON error text produced by the dispatcher.
    """
