class ProbeError(Exception):
    """Base class for everything arbprobe raises on purpose."""


class EndpointConnectionError(ProbeError):
    """The endpoint URL cannot be used to build a provider."""


class RpcError(ProbeError):
    """A single JSON-RPC call failed: transport, timeout, bad payload or an error object."""

    def __init__(self, method: str, message: str, code: int | None = None):
        self.method = method
        self.message = message
        self.code = code
        super().__init__(str(self))

    def __str__(self):
        if self.code is None:
            return f'{self.method}: {self.message}'
        return f'{self.method}: {self.message} (code {self.code})'


class DecodeError(ProbeError, ValueError):
    """A value could not be parsed or formatted."""
