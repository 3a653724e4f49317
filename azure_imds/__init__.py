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


from .exceptions import DecodeError
from .exceptions import ImdsError
from .exceptions import MalformedTagError
from .exceptions import ReadError
from .exceptions import RequestError
from .exceptions import TransportError
from .lib.metadata import ImdsConfig
from .lib.metadata import SUPPORTED_API_VERSIONS
from .lib.metadata import fetch_metadata
from .lib.metadata import get_metadata_by_path
from .parsers.models import Metadata
from .parsers.tags import parse_tags

__all__ = [
    'DecodeError',
    'ImdsConfig',
    'ImdsError',
    'MalformedTagError',
    'Metadata',
    'ReadError',
    'RequestError',
    'SUPPORTED_API_VERSIONS',
    'TransportError',
    'fetch_metadata',
    'get_metadata_by_path',
    'parse_tags',
]
