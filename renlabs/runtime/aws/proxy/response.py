import io
import logging

from werkzeug.datastructures import Headers
from werkzeug.http import HTTP_STATUS_CODES

from .sniff import detect_content_type

logger = logging.getLogger(__name__)


def status_line(code):
    return f'{code} {HTTP_STATUS_CODES.get(code, "UNKNOWN")}'


class ResponseWriter:
    """
    Buffers what a handler writes during one invocation.

    The status is fixed by the first of set_status() or write(); later
    set_status() calls are ignored. On the first write, if the handler set
    neither Content-Type nor Transfer-Encoding, a Content-Type is sniffed
    from that first chunk. Once the invocation finalizes the writer, any
    further write is an error.
    """

    def __init__(self):
        self._status_code = 200
        self._headers = Headers()
        self._buffer = io.BytesIO()
        self._wrote_header = False
        self._finalized = False

    @property
    def status_code(self):
        return self._status_code

    @property
    def status(self):
        return status_line(self._status_code)

    @property
    def headers(self):
        return self._headers

    @property
    def data(self):
        return self._buffer.getvalue()

    @property
    def finalized(self):
        return self._finalized

    def get_data(self, as_text=False):
        data = self.data
        return data.decode('utf-8', 'replace') if as_text else data

    def set_status(self, code):
        if self._finalized:
            raise RuntimeError('status set on a finalized response')
        if self._wrote_header:
            logger.debug(f'{__name__} status already {self._status_code}, ignoring {code}')
            return
        self._status_code = int(code)
        self._wrote_header = True

    def write(self, data):
        if self._finalized:
            raise RuntimeError('write to a finalized response')
        if isinstance(data, str):
            data = data.encode('utf-8')
        self._commit_header(data)
        return self._buffer.write(data)

    def _commit_header(self, data):
        if self._wrote_header:
            return
        if 'Content-Type' not in self._headers and not self._headers.get('Transfer-Encoding'):
            self._headers['Content-Type'] = detect_content_type(data)
        self.set_status(200)

    def finalize(self):
        self._finalized = True

    def __repr__(self):
        return f'<{self.__class__.__name__} {self.status!r} {len(self.data)} bytes>'
