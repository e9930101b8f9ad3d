import unittest

from charstream.constants import (
    EOF,
    NULL_STRING,
    WHITESPACE_CHARS,
    BLANK_CHAR,
    EOL_CHAR,
    StreamId
)
from charstream.errors import (
    Errors,
    StreamClosedError,
    IndexRangeError,
    IllegalArgumentError
)


class ConstantsTest(unittest.TestCase):
    def test_eof_is_not_a_character(self):
        self.assertIsNot(EOF, NULL_STRING)
        self.assertNotIsInstance(EOF, str)

    def test_whitespace(self):
        self.assertIn(BLANK_CHAR, WHITESPACE_CHARS)
        self.assertNotIn(EOL_CHAR, WHITESPACE_CHARS)

    def test_stream_ids(self):
        self.assertEqual(StreamId.STDNULL, -1)
        self.assertEqual(StreamId(0), StreamId.STDIN)
        self.assertEqual([s.name for s in StreamId],
                         ["STDNULL", "STDIN", "STDOUT", "STDERR"])


class ErrorsTest(unittest.TestCase):
    def test_kinds(self):
        self.assertEqual(StreamClosedError().what, "stream-closed")
        self.assertEqual(IndexRangeError("x").what, Errors.INDEX_RANGE)
        self.assertEqual(IllegalArgumentError("x").what, "illegal-argument")

    def test_message(self):
        e = IndexRangeError("pushback failure")

        self.assertEqual(str(e), "pushback failure")
        self.assertEqual(e.message, "pushback failure")
        self.assertEqual(repr(e),
                         "IndexRangeError(index-range, 'pushback failure')")


if __name__ == "__main__":
    unittest.main()
