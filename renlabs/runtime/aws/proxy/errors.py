class ProxyError(Exception):
    """Base for failures that abort an invocation before the handler runs."""


class UnsupportedEventType(ProxyError):
    def __init__(self, message='unsupported lambda event type'):
        super().__init__(message)


class MalformedPayload(ProxyError):
    pass


class InvalidRequestTarget(ProxyError):
    pass
