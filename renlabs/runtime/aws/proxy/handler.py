# see __init__.py for note about LEVEL
import json
import logging

from .apigateway_common import logging_level
from .errors import MalformedPayload
from .registry import DEFAULT_REGISTRY
from .response import ResponseWriter

logger = logging.getLogger(__name__)


def load_payload(payload):
    try:
        event = json.loads(payload)
    except ValueError as e:
        raise MalformedPayload(f'payload is not JSON: {e}') from e
    if not isinstance(event, dict):
        raise MalformedPayload(f'payload is not a JSON object: {type(event).__name__}')
    return event


class Handler:
    """
    Run fn(request, writer) for each Lambda invocation, translating the
    event whatever HTTP trigger sent it and replying in the same shape.

    fn receives a .request.Request and a .response.ResponseWriter; its
    return value is ignored. Exceptions from detection or decoding
    (.errors) and from fn itself propagate to the caller.
    """

    def __init__(self, fn, registry=None):
        self.fn = fn
        self.registry = registry if registry is not None else DEFAULT_REGISTRY

    def handle(self, event, context=None):
        """Python Lambda runtime convention: event dict in, reply dict out."""
        logger.debug(f'{__name__} event: {json.dumps(event, default=str)}')
        processor = self.registry.resolve(event)
        parsed = processor.parse(event)
        with logging_level(processor.logging_level(parsed)):
            request = processor.decode(parsed, context)
            writer = ResponseWriter()
            self.fn(request, writer)
            writer.finalize()
            return processor.encode(writer)

    __call__ = handle

    def invoke(self, payload, context=None):
        """Raw JSON payload (bytes or str) in, raw JSON reply bytes out."""
        return json.dumps(self.handle(load_payload(payload), context)).encode('utf-8')

    def __repr__(self):
        return f'<{self.__class__.__name__} {self.fn!r}>'


def wrap(fn, registry=None):
    """Also usable as a decorator: lambda_handler = wrap(fn)."""
    return Handler(fn, registry)
