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


import google.auth


# Only needed when logs are shipped to Cloud Logging. Replace this class to
# source credentials some other way.
class CredentialsBroker:

    def __init__(self):
        self._creds = None

    def get_credentials(self):
        if self._creds is None:
            self._creds, _ = google.auth.default()
        return self._creds
