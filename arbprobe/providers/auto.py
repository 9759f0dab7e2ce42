# MIT License
#
# Copyright (c) 2018 Evgeny Medvedev, evge.medvedev@gmail.com
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.



from urllib.parse import urlparse

from web3 import HTTPProvider

from arbprobe.errors import EndpointConnectionError

DEFAULT_TIMEOUT = 60


def get_provider_from_uri(uri_string, timeout=DEFAULT_TIMEOUT):
    """
    Builds an HTTP provider without touching the network.

    web3's own retry on connection errors is switched off.
    """
    if not isinstance(uri_string, str):
        raise EndpointConnectionError(f'Provider uri must be a string, got {uri_string!r}')

    uri_string = uri_string.strip()
    try:
        uri = urlparse(uri_string)
        # raises on a non-numeric or out of range port
        uri.port
    except ValueError as e:
        raise EndpointConnectionError(f'Malformed provider uri {uri_string!r}: {e}') from e

    if uri.scheme not in ('http', 'https'):
        raise EndpointConnectionError(f'Unknown uri scheme {uri_string!r}')
    if not uri.hostname:
        raise EndpointConnectionError(f'Provider uri {uri_string!r} has no host')

    return HTTPProvider(
        uri_string,
        request_kwargs={'timeout': timeout},
        exception_retry_configuration=None,
    )
