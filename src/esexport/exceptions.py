"""Exception hierarchy for esexport."""


class EsExportError(Exception):
    """Base exception for all esexport errors."""
    pass


class InvalidArgumentError(EsExportError):
    """
    The caller supplied an unusable argument.
    
    Raised before any request is sent, so the engine never saw
    anything. Check the endpoint URL, index name and batch size.
    """
    pass


class TransportError(EsExportError):
    """
    A request could not be sent or its response could not be read.
    
    Common causes:
    - Engine unreachable or proxy misconfigured
    - Request timeout (see ESEXPORT_TIMEOUT_MS)
    - Response body that is not a JSON search response
    
    The underlying exception is chained as __cause__.
    """
    
    def __init__(
        self,
        message: str,
        request_body: str | None = None,
        response_body: str | None = None,
    ):
        super().__init__(message)
        self.request_body = request_body
        self.response_body = response_body


class EngineError(EsExportError):
    """
    The engine answered, but rejected the search or scroll request.
    
    The message is rendered from the engine's error payload. The
    engine status code, the offending request body and the raw
    response body are available on this exception.
    """
    
    def __init__(
        self,
        message: str,
        status: int | None = None,
        request_body: str | None = None,
        response_body: str | None = None,
    ):
        super().__init__(message)
        self.status = status
        self.request_body = request_body
        self.response_body = response_body


class ProtocolError(EsExportError):
    """
    The engine returned a response that breaks the scroll contract.
    
    Typically hits were reported without a scroll cursor to fetch the
    next batch with.
    """
    
    def __init__(
        self,
        message: str,
        request_body: str | None = None,
        response_body: str | None = None,
    ):
        super().__init__(message)
        self.request_body = request_body
        self.response_body = response_body
