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


from ..exceptions import MalformedTagError


TAG_SEPARATOR = ';'
KEY_VALUE_SEPARATOR = ':'


def parse_tags(raw, strict=False):
    '''Turn a compute.tags string into a dict

    raw looks like `env:prod;team:infra`. Each tag is split on its first ":",
    so values may contain colons. Empty tags are ignored. A tag without a
    separator is skipped, or raises MalformedTagError when strict is set.
    Later duplicates win.

    '''
    tags = {}

    for token in raw.split(TAG_SEPARATOR):
        if not token:
            continue

        key, sep, value = token.partition(KEY_VALUE_SEPARATOR)
        if not sep:
            if strict:
                raise MalformedTagError(token)
            continue

        tags[key] = value

    return tags
