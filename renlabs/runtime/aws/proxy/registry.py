# see __init__.py for note about LEVEL
import logging

from .apigatewayv1 import APIGatewayV1Processor
from .apigatewayv2 import APIGatewayV2Processor
from .elb import ELBProcessor
from .errors import UnsupportedEventType

logger = logging.getLogger(__name__)


class Registry:
    """
    Ordered, fixed set of event processors. resolve() returns the first
    whose can_process() accepts the event, so order is the tie-break
    should two predicates ever both match.
    """

    def __init__(self, processors):
        self._processors = tuple(processors)

    def __iter__(self):
        return iter(self._processors)

    def __len__(self):
        return len(self._processors)

    def resolve(self, event):
        for p in self._processors:
            if p.can_process(event):
                logger.debug(f'{__name__} event resolved to {p.name}')
                return p
        raise UnsupportedEventType()

    def __repr__(self):
        return f'<{self.__class__.__name__} {[p.name for p in self._processors]}>'


# most specific first: the elb marker, then the v2 version field, then v1
DEFAULT_REGISTRY = Registry([
    ELBProcessor(),
    APIGatewayV2Processor(),
    APIGatewayV1Processor(),
])
