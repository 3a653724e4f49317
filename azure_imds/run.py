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


import os
import sys
import traceback

from azure_imds.exceptions import ImdsError
from azure_imds.lib.credentials import CredentialsBroker
from azure_imds.lib.logger import Logger
from azure_imds.lib.metadata import ImdsConfig
from azure_imds.lib.metadata import fetch_metadata


def exc_info(exception):
    return {
        'event': 'exception',
        'details': str(exception),
        'trace': traceback.format_exc(),
    }


def build_logger(environ):
    app_name = environ.get('APP_NAME', 'azure-imds')
    project_id = environ.get('PROJECT_ID')
    stackdriver_logging = environ.get('STACKDRIVER_LOGGING', '').lower() == 'true'
    debug_logging = environ.get('DEBUG_LOGGING', '').lower() == 'true'

    credentials = None
    if stackdriver_logging:
        credentials = CredentialsBroker().get_credentials()

    return Logger(
        app_name,
        stackdriver_logging,
        project_id,
        credentials,
        debug_logging,
    )


def main(environ=None):
    environ = os.environ if environ is None else environ

    logger = build_logger(environ)

    try:
        config = ImdsConfig.from_environ(environ)
    except ValueError as e:
        logger({'message': 'Invalid metadata service configuration', **exc_info(e)}, severity='ERROR')
        return 2

    running_config = {
        'url': config.url(),
        'api_version': config.api_version,
        'stackdriver_logging': "enabled" if logger.stackdriver else "disabled",
        'debug_logging': "enabled" if logger.debugging else "disabled",
    }
    logger.debug(running_config)

    try:
        metadata = fetch_metadata(config, logger)
    except ImdsError as e:
        logger({
            'message': 'Failed to fetch instance metadata',
            'error_type': type(e).__name__,
            **exc_info(e),
        }, severity='ERROR')
        return 1

    logger({'event': 'metadata', 'metadata': metadata.to_dict()})
    return 0


if __name__ == "__main__":
    sys.exit(main())
