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

import google.cloud.logging
from google.protobuf import json_format


class Logger:

    ''' Log structured entries to the console or to Cloud Logging '''

    def __init__(self, log_name, stackdriver=False, project_id=None, credentials=None, debugging=False):

        self.log_name = log_name
        self.stackdriver = stackdriver
        self.debugging = debugging

        if stackdriver:
            client = google.cloud.logging.Client(project=project_id, credentials=credentials)
            self.sd_logger = client.logger(log_name)

    def _safe_log_struct(self, data, severity):
        ''' Log struct to Cloud Logging, stringifying anything protobuf can't encode '''
        try:
            self.sd_logger.log_struct(data, severity=severity)
        except json_format.ParseError:
            data = json.loads(json.dumps(data, default=str))
            self.sd_logger.log_struct(data, severity=severity)

    def _print(self, data, severity):
        if isinstance(data, dict):
            print(json.dumps({'log': self.log_name, 'severity': severity, **data}, default=str, sort_keys=True))
        else:
            print(data)

    def __call__(self, data, severity='DEFAULT'):
        if self.stackdriver:
            try:

                if isinstance(data, dict):
                    self._safe_log_struct(data, severity)

                else:
                    self.sd_logger.log_text(data, severity=severity)

            except Exception as e:
                # Cloud Logging is unavailable, fall back to stdout
                print(f'Error writing logs to Cloud Logging: {str(e)}')
                self._print(data, severity)

        else:
            self._print(data, severity)

    # Separate function for debug logs
    def debug(self, data):
        if self.debugging:
            self(data, severity='DEBUG')
