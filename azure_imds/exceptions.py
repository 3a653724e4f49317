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


class ImdsError(Exception):
    ''' Base class for every error raised by this package '''


class RequestError(ImdsError):
    ''' The metadata request could not be built or sent '''


class TransportError(ImdsError):
    ''' The metadata service could not be reached, or answered with an error status '''

    def __init__(self, message, status=None):
        super().__init__(message)
        self.status = status


class ReadError(TransportError):
    ''' The response body could not be read in full '''


class DecodeError(ImdsError):
    ''' The response body is not JSON shaped like an instance document '''


class MalformedTagError(ImdsError, ValueError):

    def __init__(self, token):
        super().__init__(f'Tag is missing a ":" separator: {token!r}')
        self.token = token
