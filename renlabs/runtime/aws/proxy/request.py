import re
from urllib.parse import urlencode

from werkzeug.datastructures import Headers, MultiDict

from .errors import InvalidRequestTarget, MalformedPayload

# control characters anywhere, or a '%' not starting a two-digit hex escape
_INVALID_TARGET = re.compile(r'[\x00-\x1f\x7f]|%(?![0-9A-Fa-f]{2})')


def reconcile(single, multi):
    """Merge the single- and multi-value maps a trigger sends for the same
    headers or query parameters into one ordered list of (key, value).

    A multi-value map is only used when it has more than one key, and then
    exclusively. Otherwise the single-value map is used, each value being
    the sole value for its key. This mirrors what upstream triggers have
    been observed to send; a multi-value map holding exactly one
    (possibly repeated) key is ignored.
    """
    if multi and len(multi) > 1:
        return [(k, v) for k, vv in multi.items() for v in vv]
    return list((single or {}).items())


def reconcile_headers(single, multi, extra=()):
    """extra (key, value) pairs are appended after reconciling."""
    try:
        return Headers(reconcile(single, multi) + list(extra))
    except ValueError as e:
        # werkzeug refuses values containing newlines
        raise MalformedPayload(f'invalid header: {e}') from e


def reconcile_args(single, multi):
    return MultiDict(reconcile(single, multi))


def validate_target(path, query_string=''):
    if _INVALID_TARGET.search(path) or _INVALID_TARGET.search(query_string):
        raise InvalidRequestTarget(f'invalid request target: {path!r}')


class Request:
    """
    The request a wrapped handler sees, whatever trigger delivered it.

    headers is a werkzeug Headers (ordered, case-insensitive keys), args a
    werkzeug MultiDict. event is the validated trigger event (one of the
    models in .events) and context the Lambda context object, if any.
    """

    def __init__(self, method, path, args=None, headers=None, data=b'',
                 event=None, context=None):
        self.method = method.upper()
        self.path = path
        self.args = args if args is not None else MultiDict()
        self.headers = headers if headers is not None else Headers()
        self.data = data
        self.event = event
        self.context = context
        validate_target(path)

    @property
    def query_string(self):
        return urlencode(list(self.args.items(multi=True)))

    @property
    def url(self):
        """Request target: path plus encoded query, if any."""
        qs = self.query_string
        return f'{self.path}?{qs}' if qs else self.path

    def get_data(self, as_text=False):
        return self.data.decode('utf-8', 'replace') if as_text else self.data

    def __repr__(self):
        return f'<{self.__class__.__name__} {self.method} {self.url!r}>'


def get_event(request):
    return request.event
