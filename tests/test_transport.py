import unittest
from unittest import mock

import requests

from qcos.errors import TransportError
from qcos.transport import DEFAULT_TIMEOUT, RequestsTransport


class TestRequestsTransport(unittest.TestCase):
    def setUp(self) -> None:
        self.session = mock.Mock(spec=requests.Session)
        self.transport = RequestsTransport(self.session, timeout=5)

    def test_send(self) -> None:
        resp = mock.Mock(status_code=200, headers={'Content-Type': 'application/xml'}, content=b'<ok/>')
        self.session.request.return_value = resp

        result = self.transport.send('PUT', 'https://example.com/a', {'Host': 'example.com'}, b'data')

        self.session.request.assert_called_once_with(
            'PUT',
            'https://example.com/a',
            headers={'Host': 'example.com'},
            data=b'data',
            timeout=5
        )
        self.assertEqual(result.status_code, 200)
        self.assertEqual(result.headers, {'Content-Type': 'application/xml'})
        self.assertEqual(result.body, b'<ok/>')

    def test_connection_error(self) -> None:
        cause = requests.ConnectionError('connection refused')
        self.session.request.side_effect = cause

        with self.assertRaises(TransportError) as ctx:
            self.transport.send('GET', 'https://example.com/a', {})
        self.assertIs(ctx.exception.cause, cause)

    def test_timeout(self) -> None:
        self.session.request.side_effect = requests.Timeout('read timed out')

        with self.assertRaises(TransportError):
            self.transport.send('GET', 'https://example.com/a', {})

    def test_defaults(self) -> None:
        transport = RequestsTransport()

        self.assertIsInstance(transport.session, requests.Session)
        self.assertEqual(transport.timeout, DEFAULT_TIMEOUT)
        transport.close()


if __name__ == '__main__':
    unittest.main(verbosity=2)
