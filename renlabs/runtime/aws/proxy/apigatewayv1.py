# see __init__.py for note about LEVEL
import logging

from .apigateway_common import (
    body_from_event,
    body_from_writer,
    headers_from_writer,
    log_response,
    stage_level)
from .common import EventProcessor, has
from .events import APIGatewayProxyEvent, APIGatewayProxyResponse
from .request import Request, reconcile_args, reconcile_headers

logger = logging.getLogger(__name__)


class APIGatewayV1Processor(EventProcessor):
    """API Gateway REST API, AWS_PROXY integration."""

    name = 'apigateway-v1'
    model = APIGatewayProxyEvent

    def can_process(self, event):
        return not has(event, 'version') and has(event, 'requestContext.apiId')

    def logging_level(self, parsed):
        return stage_level(parsed)

    def request_from_event(self, parsed, context):
        return Request(
            parsed.httpMethod,
            parsed.path,
            args=reconcile_args(parsed.queryStringParameters,
                                parsed.multiValueQueryStringParameters),
            headers=reconcile_headers(parsed.headers, parsed.multiValueHeaders),
            data=body_from_event(parsed),
            event=parsed,
            context=context)

    def response_dict(self, writer):
        headers1, headersN = headers_from_writer(writer.headers)
        body, is_base64 = body_from_writer(writer.data)
        rd = APIGatewayProxyResponse(
            statusCode=writer.status_code,
            headers=headers1,
            multiValueHeaders=headersN,
            body=body,
            isBase64Encoded=is_base64).model_dump()
        return log_response(self.name, rd)
