"""\
Serve a WSGI application through Handler: the canonical request becomes a
WSGI environ (werkzeug's EnvironBuilder), and the app's status, headers
and body iterable are copied into the ResponseWriter.

    from renlabs.runtime.aws.proxy.wsgi import wsgi_handler
    lambda_handler = wrap(wsgi_handler(app))

The trigger event and Lambda context are in the environ under
'aws.lambda.event' and 'aws.lambda.context'.
"""

# see __init__.py for note about LEVEL
import logging

from werkzeug.test import EnvironBuilder, run_wsgi_app

from .handler import Handler

logger = logging.getLogger(__name__)


def base_url_for(request):
    """scheme://host[/stage]. A REST API stage that prefixes
    requestContext.path becomes the script root."""
    rctx = getattr(request.event, 'requestContext', None)
    host = request.headers.get('Host') or getattr(rctx, 'domainName', None) or 'localhost'
    scheme = request.headers.get('X-Forwarded-Proto', 'https')
    estage = getattr(rctx, 'stage', None)
    epath = getattr(rctx, 'path', None)
    if estage and estage != '$default' and epath == f'/{estage}{request.path}':
        maybe_slash_stage = f'/{estage}'
    else:
        maybe_slash_stage = ''
    return f'{scheme}://{host}{maybe_slash_stage}'


def wsgi_handler(app_object):
    def handler(request, writer):
        b = EnvironBuilder(
            path=request.path,
            base_url=base_url_for(request),
            query_string=request.query_string,
            method=request.method,
            headers=request.headers.copy(),
            data=request.data or None,
            environ_overrides={
                'aws.lambda.event': request.event,
                'aws.lambda.context': request.context,
            })
        try:
            environ = b.get_environ()
            logger.debug(f'{__name__} environ: {environ}')
            app_iter, status, headers = run_wsgi_app(app_object, environ)
            try:
                writer.set_status(int(status.split(None, 1)[0]))
                for k, v in headers.items():
                    writer.headers.add(k, v)
                for chunk in app_iter:
                    writer.write(chunk)
            finally:
                close = getattr(app_iter, 'close', None)
                if close is not None:
                    close()
        finally:
            b.close()
    handler.app_object = app_object
    return handler


def wsgi_lambda_handler(app_object, event, context):
    return Handler(wsgi_handler(app_object))(event, context)
