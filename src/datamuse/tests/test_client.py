"""Tests for DatamuseClient and the public package API."""

import unittest

import datamuse
from datamuse import DatamuseClient, EndPoint, RequestBuilder, Vocabulary
from datamuse.adapter.external.httpx_transport import HttpxTransport
from datamuse.adapter.fake.transport import FakeTransport


class TestDatamuseClient(unittest.IsolatedAsyncioTestCase):
    """Test client construction and lifecycle."""

    async def test_default_transport(self):
        """Test the client defaults to the httpx transport."""
        client = DatamuseClient()
        self.assertIsInstance(client._transport, HttpxTransport)
        await client.aclose()

    async def test_new_query(self):
        """Test new_query() returns a builder bound to the client's transport."""
        transport = FakeTransport(body='[{"word": "rose", "score": 5}]')
        client = DatamuseClient(transport)

        builder = client.new_query(Vocabulary.SPANISH, EndPoint.WORDS)
        words = await builder.sounds_like("rosa").list()

        self.assertIsInstance(builder, RequestBuilder)
        self.assertEqual(builder.vocabulary, Vocabulary.SPANISH)
        self.assertEqual(builder.endpoint, EndPoint.WORDS)
        self.assertEqual(transport.requested_urls, ["https://api.datamuse.com/words?v=es&sl=rosa"])
        self.assertEqual(words[0].word, "rose")

    async def test_builders_are_independent(self):
        """Test two builders from one client do not share parameters."""
        client = DatamuseClient(FakeTransport())
        first = client.new_query(Vocabulary.ENGLISH, EndPoint.WORDS).means_like("cap")
        second = client.new_query(Vocabulary.ENGLISH, EndPoint.WORDS).sounds_like("flat")

        self.assertEqual(first.build().params, (("ml", "cap"),))
        self.assertEqual(second.build().params, (("sl", "flat"),))

    async def test_context_manager_closes_transport(self):
        """Test leaving the async context closes the transport."""
        transport = FakeTransport()
        async with DatamuseClient(transport):
            pass
        self.assertTrue(transport.closed)


class TestPublicApi(unittest.TestCase):
    """Test the package re-exports."""

    def test_all_names_importable(self):
        """Test every name in __all__ is exported."""
        for name in datamuse.__all__:
            with self.subTest(name=name):
                self.assertTrue(hasattr(datamuse, name))
