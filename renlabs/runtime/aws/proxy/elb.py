# see __init__.py for note about LEVEL
import logging
from urllib.parse import unquote_plus

from .apigateway_common import (
    body_from_event,
    body_from_writer,
    headers_from_writer,
    log_response)
from .common import EventProcessor, has
from .events import ALBTargetGroupEvent, ALBTargetGroupResponse
from .request import Request, reconcile_args, reconcile_headers

logger = logging.getLogger(__name__)


def _unquote_params(params):
    """The load balancer forwards query keys and values undecoded, still
    form-encoded ('+' for space)."""
    if params is None:
        return None
    return {unquote_plus(k): (unquote_plus(v) if isinstance(v, str) else [unquote_plus(x) for x in v])
            for k, v in params.items()}


class ELBProcessor(EventProcessor):
    """Application Load Balancer target group, single- or multi-value mode."""

    name = 'elb'
    model = ALBTargetGroupEvent

    def can_process(self, event):
        return has(event, 'requestContext.elb')

    def request_from_event(self, parsed, context):
        return Request(
            parsed.httpMethod,
            parsed.path,
            args=reconcile_args(_unquote_params(parsed.queryStringParameters),
                                _unquote_params(parsed.multiValueQueryStringParameters)),
            headers=reconcile_headers(parsed.headers, parsed.multiValueHeaders),
            data=body_from_event(parsed),
            event=parsed,
            context=context)

    def response_dict(self, writer):
        headers1, headersN = headers_from_writer(writer.headers)
        body, is_base64 = body_from_writer(writer.data)
        rd = ALBTargetGroupResponse(
            statusCode=writer.status_code,
            statusDescription=writer.status,
            headers=headers1,
            multiValueHeaders=headersN,
            body=body,
            isBase64Encoded=is_base64).model_dump()
        return log_response(self.name, rd)
