import gzip
import json
import zlib

from curl_cffi import CurlError
from curl_cffi.requests import AsyncSession

from settings import IMPERSONATE, REQUEST_TIMEOUT
from tools.errors import NetworkError, UnexpectedStatus, DecodeError

GZIP_MAGIC = b'\x1f\x8b'


def get_proxies(proxy):
    if not proxy:
        return None
    if '://' not in proxy:
        proxy = f'http://{proxy}'
    return {
        "http": proxy,
        "https": proxy
    }


def create_session(proxy=None):
    return AsyncSession(
        proxies=get_proxies(proxy),
        impersonate=IMPERSONATE,
        timeout=REQUEST_TIMEOUT,
    )


def decode_json(response):
    body = response.content
    encoding = (response.headers.get('content-encoding') or '').lower()
    # curl usually inflates already, only touch bodies that still carry the gzip header
    if 'gzip' in encoding and body[:2] == GZIP_MAGIC:
        try:
            body = gzip.decompress(body)
        except (OSError, EOFError, zlib.error) as e:
            raise DecodeError(f'gzip decode failed: {e}') from e

    try:
        return json.loads(body)
    except (ValueError, UnicodeDecodeError) as e:
        raise DecodeError(f'{e}: Status = {response.status_code}. Response = {body[:200]!r}') from e


async def post_json(sess, url, headers, json_data, timeout=REQUEST_TIMEOUT):
    try:
        response = await sess.post(url, headers=headers, json=json_data, timeout=timeout)
    except (CurlError, OSError) as e:
        raise NetworkError(f'request to {url} failed: {e}') from e

    if response.status_code != 200:
        raise UnexpectedStatus(response.status_code, response.text)

    res = decode_json(response)
    if not isinstance(res, dict):
        raise DecodeError(f'expected a json object from {url}, got {type(res).__name__}')

    return res
