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


import threading
from http.server import BaseHTTPRequestHandler, HTTPServer
from urllib.parse import urlsplit

import pytest


class StubImds:
    ''' A local stand-in for the metadata service

    routes maps a request path (without the query) to (status, body).
    Every request is recorded as (path, query, headers).
    '''

    def __init__(self):
        self.routes = {}
        self.requests = []

        stub = self

        class Handler(BaseHTTPRequestHandler):

            def do_GET(self):
                url = urlsplit(self.path)
                stub.requests.append((url.path, url.query, dict(self.headers)))

                status, body = stub.routes.get(url.path, (404, b'{"error": "Not found"}'))
                if isinstance(body, str):
                    body = body.encode('utf-8')

                self.send_response(status)
                self.send_header('Content-Length', str(len(body)))
                self.end_headers()
                self.wfile.write(body)

            def log_message(self, *args):
                pass

        self.server = HTTPServer(('127.0.0.1', 0), Handler)
        self.thread = threading.Thread(target=self.server.serve_forever, daemon=True)

    @property
    def host(self):
        return '%s:%d' % self.server.server_address

    def start(self):
        self.thread.start()

    def stop(self):
        self.server.shutdown()
        self.server.server_close()


@pytest.fixture
def imds_server():
    stub = StubImds()
    stub.start()
    yield stub
    stub.stop()


@pytest.fixture
def closed_port():
    ''' A local port with nothing listening on it '''
    server = HTTPServer(('127.0.0.1', 0), BaseHTTPRequestHandler)
    port = server.server_address[1]
    server.server_close()
    return port
