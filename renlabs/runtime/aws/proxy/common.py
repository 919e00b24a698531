import logging

from pydantic import ValidationError

from .errors import MalformedPayload

logger = logging.getLogger(__name__)

_MISSING = object()


def lookup(event, dotted, default=_MISSING):
    """Walk 'a.b.c' through nested dicts. Only key presence matters, so a
    present-but-null leaf is found."""
    node = event
    for part in dotted.split('.'):
        if not isinstance(node, dict) or part not in node:
            return default
        node = node[part]
    return node


def has(event, dotted):
    return lookup(event, dotted) is not _MISSING


class EventProcessor:
    """
    Detect, decode and encode one Lambda event shape. Subclasses set
    `model` to the pydantic event model and fill in the overridables.
    Instances hold no per-invocation state.
    """

    name = None
    model = None

    def can_process(self, event):
        """Inspect only the distinguishing fields of the raw event dict."""
        raise RuntimeError("To be overridden in subclass")

    def request_from_event(self, parsed, context):
        raise RuntimeError("To be overridden in subclass")

    def response_dict(self, writer):
        raise RuntimeError("To be overridden in subclass")

    def logging_level(self, parsed):
        """Level to use while handling this event, or None to leave it."""
        return None

    def parse(self, event):
        try:
            return self.model.model_validate(event)
        except ValidationError as e:
            raise MalformedPayload(f'{self.name} event: {e}') from e

    def decode(self, parsed, context=None):
        request = self.request_from_event(parsed, context)
        logger.debug(f'{__name__} {self.name} request: {request!r}, headers: {request.headers.to_wsgi_list()!r}')
        return request

    def encode(self, writer):
        return self.response_dict(writer)

    def __repr__(self):
        return f'<{self.__class__.__name__} {self.name}>'
