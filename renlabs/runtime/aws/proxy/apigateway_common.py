"""Pieces shared by the proxy-style shapes (API Gateway v1/v2, ALB)."""

import base64
import logging
from contextlib import contextmanager

from .config import coerce_level
from .errors import MalformedPayload

logger = logging.getLogger(__name__)

PACKAGE_LOGGER = logging.getLogger(__name__.rpartition('.')[0])


def stage_level(parsed):
    level = (getattr(parsed, 'stageVariables', None) or {}).get('LEVEL')
    return coerce_level(level, None) if level else None


@contextmanager
def logging_level(level, target=PACKAGE_LOGGER):
    """Set target to level for the duration of the block.

    The logger is process-wide, so this assumes one invocation at a time
    per process, as Lambda runs them. Overlapping invocations in one
    process may restore each other's levels out of order.
    """
    if level is None:
        yield
        return
    save_level = target.level
    target.setLevel(level)
    try:
        yield
    finally:
        target.setLevel(save_level)


def body_from_event(parsed):
    body = parsed.body
    if not body:
        return b''
    if parsed.isBase64Encoded:
        try:
            return base64.b64decode(body, validate=True)
        except ValueError as e:
            raise MalformedPayload(f'body is not valid base64: {e}') from e
    return body.encode('utf-8')


def headers_from_writer(headers, exclude=()):
    """(single, multi) projections of a Headers. Keys keep the casing of
    their first occurrence; single takes Headers.get() for each key."""
    exclude = {k.lower() for k in exclude}
    keys = {}
    multi = {}
    for k, v in headers.items():
        if k.lower() in exclude:
            continue
        key = keys.setdefault(k.lower(), k)
        multi.setdefault(key, []).append(v)
    single = {key: headers.get(key) for key in multi}
    return single, multi


def body_from_writer(data):
    """(body, isBase64Encoded). Text when the bytes are UTF-8."""
    try:
        return data.decode('utf-8'), False
    except UnicodeDecodeError:
        return base64.b64encode(data).decode('ascii'), True


def log_response(name, rd):
    d = dict(rd)
    body = d.get('body') or ''
    if len(body) > 25:
        d['body'] = body[:20] + '...'
    logger.info(f'{__name__} {name} response dict: {d!r}')
    if body:
        logger.debug(f'{__name__} ... Full body: {body!r}')
    return rd
