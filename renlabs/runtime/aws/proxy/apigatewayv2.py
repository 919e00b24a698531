# see __init__.py for note about LEVEL
import logging
from urllib.parse import parse_qsl

from werkzeug.datastructures import MultiDict

from .apigateway_common import (
    body_from_event,
    body_from_writer,
    headers_from_writer,
    log_response,
    stage_level)
from .common import EventProcessor, has
from .events import APIGatewayV2HTTPEvent, APIGatewayV2HTTPResponse
from .request import Request, reconcile_args, reconcile_headers, validate_target

logger = logging.getLogger(__name__)


class APIGatewayV2Processor(EventProcessor):
    """API Gateway HTTP API, payload format 2.0.

    The 2.0 format has no multi-value maps: repeated query parameters are
    recovered from rawQueryString, and request cookies arrive in their own
    array rather than in headers. Set-Cookie response headers likewise go
    out in the reply's cookies array.
    """

    name = 'apigateway-v2'
    model = APIGatewayV2HTTPEvent

    def can_process(self, event):
        return has(event, 'version') and not has(event, 'requestContext.elb')

    def logging_level(self, parsed):
        return stage_level(parsed)

    def request_from_event(self, parsed, context):
        if parsed.rawQueryString is not None:
            validate_target(parsed.rawPath, parsed.rawQueryString)
            args = MultiDict(parse_qsl(parsed.rawQueryString, keep_blank_values=True))
        else:
            args = reconcile_args(parsed.queryStringParameters, None)

        cookie = [('Cookie', '; '.join(parsed.cookies))] if parsed.cookies else []
        headers = reconcile_headers(parsed.headers, None, extra=cookie)

        return Request(
            parsed.requestContext.http.method,
            parsed.rawPath,
            args=args,
            headers=headers,
            data=body_from_event(parsed),
            event=parsed,
            context=context)

    def response_dict(self, writer):
        headers1, headersN = headers_from_writer(writer.headers, exclude=('Set-Cookie',))
        body, is_base64 = body_from_writer(writer.data)
        rd = APIGatewayV2HTTPResponse(
            statusCode=writer.status_code,
            headers=headers1,
            multiValueHeaders=headersN,
            body=body,
            isBase64Encoded=is_base64,
            cookies=writer.headers.getlist('Set-Cookie')).model_dump()
        return log_response(self.name, rd)
