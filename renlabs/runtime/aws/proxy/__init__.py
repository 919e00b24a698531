"""\
Run an ordinary HTTP request handler as an AWS Lambda function, handling
the differences between how the various HTTP triggers present requests
and expect responses:

 - API Gateway REST API, AWS_PROXY integration (payload 1.0)
 - API Gateway HTTP API (payload 2.0)
 - Application Load Balancer target group

The handler is fn(request, writer). It sees the same Request whichever
trigger fired, and what it writes is encoded back into the reply shape
that trigger expects:

    from renlabs.runtime.aws.proxy import wrap

    @wrap
    def lambda_handler(request, writer):
        writer.headers['X-Out'] = '2'
        writer.write(f'{request.method} {request.path}')

WSGI applications can be served the same way, see .wsgi.

"""

# LEVEL set at Lambda affects logging outside of request context.
# LEVEL set as an API Gateway stage variable affects logging during request
# processing.
import logging
logging.basicConfig(datefmt='')
from .config import env_level
logger = logging.getLogger(__name__)
logger.setLevel(env_level())

# Import more symbols than necessary (convenience package imports). Cost of
# doing so is tiny as they're already loaded.
from .errors import (
    ProxyError,
    UnsupportedEventType,
    MalformedPayload,
    InvalidRequestTarget )
from .request import Request, get_event, reconcile
from .response import ResponseWriter
from .common import EventProcessor
from .apigatewayv1 import APIGatewayV1Processor
from .apigatewayv2 import APIGatewayV2Processor
from .elb import ELBProcessor
from .registry import Registry, DEFAULT_REGISTRY
from .handler import Handler, wrap
from .wsgi import wsgi_handler, wsgi_lambda_handler
