import unittest

from charstream.buffer import StringBufferReader
from charstream.errors import IndexRangeError, IllegalArgumentError


class MarkStackTest(unittest.TestCase):
    def test_default_depth(self):
        r = StringBufferReader("hello")

        self.assertEqual(r.mark_depth, 1)
        with self.assertRaises(IndexRangeError):
            r.push_mark()
        with self.assertRaises(IndexRangeError):
            r.pop_mark()
        self.assertEqual(r.mark_depth, 1)

    def test_invalid_depth(self):
        with self.assertRaises(IllegalArgumentError):
            StringBufferReader("hello", max_mark_depth=0)

    def test_nested_rollback(self):
        r = StringBufferReader("abcdefgh", max_mark_depth=3)
        r.skip(1)
        r.push_mark()
        r.skip(2)
        r.push_mark()
        r.skip(3)

        self.assertEqual(r.mark_depth, 3)
        self.assertEqual(r.pop_mark(), 3)
        self.assertEqual(r.offset, 3)
        self.assertEqual(r.pop_mark(), 1)
        self.assertEqual(r.offset, 1)
        self.assertEqual(r.mark_depth, 1)

    def test_pop_without_restore(self):
        r = StringBufferReader("abcdef", max_mark_depth=2)
        r.skip(1)
        r.push_mark()
        r.skip(3)

        self.assertEqual(r.pop_mark(restore=False), 1)
        self.assertEqual(r.offset, 4)

    def test_mark_and_reset_use_top_slot(self):
        r = StringBufferReader("abcdef", max_mark_depth=2)
        r.skip(1)
        r.mark()
        r.push_mark()
        r.skip(2)
        r.mark()
        r.skip(1)
        r.reset()

        self.assertEqual(r.offset, 3)

        r.pop_mark(restore=False)
        r.reset()
        self.assertEqual(r.offset, 1)

    def test_overflow(self):
        r = StringBufferReader("abc", max_mark_depth=2)
        r.push_mark()

        with self.assertRaises(IndexRangeError):
            r.push_mark()
        self.assertEqual(r.mark_depth, 2)

    def test_push_negative_limit(self):
        r = StringBufferReader("abc", max_mark_depth=2)

        with self.assertRaises(IllegalArgumentError):
            r.push_mark(-1)
        self.assertEqual(r.mark_depth, 1)

    def test_open_drops_marks(self):
        r = StringBufferReader("abcdef", max_mark_depth=3)
        r.skip(2)
        r.push_mark()
        r.push_mark()

        r.open("xyz")
        self.assertEqual(r.mark_depth, 1)
        r.skip(2)
        r.reset()
        self.assertEqual(r.offset, 0)


if __name__ == "__main__":
    unittest.main()
