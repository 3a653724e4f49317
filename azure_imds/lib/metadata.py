# Copyright 2021 The Azure IMDS Client Authors. All rights reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.


import http.client
import os
from urllib import error, parse, request

from pydantic import BaseModel, ConfigDict, field_validator

from ..exceptions import DecodeError, ReadError, RequestError, TransportError
from ..parsers.imds import ImdsParser

DEFAULT_HOST = '169.254.169.254'
DEFAULT_PATH = '/metadata/instance'
SUPPORTED_API_VERSIONS = ('2019-03-11', '2019-06-01')
DEFAULT_API_VERSION = SUPPORTED_API_VERSIONS[-1]

# IMDS rejects requests without this header
HEADERS = {'Metadata': 'True'}

# URLError reasons that mean the request itself is malformed
URL_BUILD_ERRORS = ('unknown url type', 'no host given')


class ImdsConfig(BaseModel):
    ''' Where to find the metadata service and which API version to ask for

    host is a netloc, so it may carry a port (e.g. 127.0.0.1:8080).
    '''

    model_config = ConfigDict(frozen=True, extra='forbid')

    host: str = DEFAULT_HOST
    path: str = DEFAULT_PATH
    api_version: str = DEFAULT_API_VERSION
    scheme: str = 'http'

    @field_validator('host')
    @classmethod
    def check_host(cls, v):
        if not v:
            raise ValueError('host must not be empty')
        return v

    @field_validator('api_version')
    @classmethod
    def check_api_version(cls, v):
        if v not in SUPPORTED_API_VERSIONS:
            raise ValueError(f'api_version must be one of {", ".join(SUPPORTED_API_VERSIONS)}, got {v!r}')
        return v

    @classmethod
    def from_environ(cls, environ=None):
        environ = os.environ if environ is None else environ
        return cls(
            host=environ.get('IMDS_HOST', DEFAULT_HOST),
            path=environ.get('IMDS_PATH', DEFAULT_PATH),
            api_version=environ.get('IMDS_API_VERSION', DEFAULT_API_VERSION),
        )

    def url(self, path='', fmt='json'):
        query = parse.urlencode({'format': fmt, 'api-version': self.api_version})
        return f'{self.scheme}://{self.host}{self.path}{path}?{query}'


# IMDS is link-local and must never go through a proxy
_opener = request.build_opener(request.ProxyHandler({}))


def _get(url, logger=None):
    '''GET url from the metadata service and return the raw body

    Raises RequestError, TransportError or ReadError. Nothing is retried.

    '''
    if logger is not None:
        logger.debug({'message': 'Requesting instance metadata', 'url': url})

    try:
        req = request.Request(url, method='GET', headers=HEADERS)
    except ValueError as e:
        raise RequestError(f'Could not build metadata request for {url}: {e}') from e

    try:
        resp = _opener.open(req)
    except error.HTTPError as e:
        e.close()
        raise TransportError(f'Metadata service returned HTTP {e.code} for {url}', status=e.code) from e
    except error.URLError as e:
        # urllib reports unsupported schemes and missing hosts as a URLError too
        if isinstance(e.reason, str) and e.reason.startswith(URL_BUILD_ERRORS):
            raise RequestError(f'Could not build metadata request for {url}: {e.reason}') from e
        raise TransportError(f'Could not reach metadata service at {url}: {e.reason}') from e
    except http.client.InvalidURL as e:
        raise RequestError(f'Could not build metadata request for {url}: {e}') from e
    except (http.client.HTTPException, OSError) as e:
        raise TransportError(f'Could not reach metadata service at {url}: {e}') from e

    with resp:
        try:
            body = resp.read()
        except (http.client.HTTPException, OSError) as e:
            raise ReadError(f'Could not read metadata response from {url}: {e}') from e

        if logger is not None:
            logger.debug({'message': 'Received instance metadata', 'url': url, 'status': resp.status, 'bytes': len(body)})

    return body


def fetch_metadata(config=None, logger=None):
    ''' Fetch and decode the instance document '''
    config = config or ImdsConfig()
    body = _get(config.url(), logger)
    return ImdsParser.parse_message(body)


def get_metadata_by_path(path, config=None, logger=None):
    ''' Fetch a single value, e.g. /compute/location, as text '''
    config = config or ImdsConfig()
    if not path.startswith('/'):
        path = f'/{path}'

    body = _get(config.url(path, fmt='text'), logger)
    try:
        return body.decode('utf-8')
    except UnicodeDecodeError as e:
        raise DecodeError(f'Metadata value at {path} is not UTF-8 text: {e}') from e
