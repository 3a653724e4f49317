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


import json

from pydantic import ValidationError

from ..exceptions import DecodeError
from .models import Metadata


class ImdsParser:
    ''' Decodes /metadata/instance response bodies '''

    @classmethod
    def _load(cls, body):
        if isinstance(body, (bytes, bytearray)):
            body = body.decode('utf-8')
        return json.loads(body)

    @classmethod
    def match(cls, body):
        try:
            data = cls._load(body)
        except (json.JSONDecodeError, UnicodeDecodeError, TypeError):
            return False

        return isinstance(data, dict) and any(k in data for k in ('compute', 'network'))

    @classmethod
    def parse_message(cls, body):

        try:
            data = cls._load(body)
        except (json.JSONDecodeError, UnicodeDecodeError, TypeError) as e:
            raise DecodeError(f'Response body is not valid JSON: {e}') from e

        try:
            return Metadata.model_validate(data)
        except ValidationError as e:
            raise DecodeError(f'Response body is not an instance document: {e}') from e
