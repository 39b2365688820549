"""
Tests for seek validation, end-of-data signalling and the exception hierarchy.
"""

import unittest

from seekbuf import EndOfDataError, InvalidArgumentError, SeekableBuffer, SeekBufferException, Whence


class TestSeekValidation(unittest.TestCase):
    """Test the bounds each seek origin enforces."""

    def setUp(self):
        self.buf = SeekableBuffer(b"foobar")
        self.buf.seek(2)

    def assertRejected(self, offset, whence):
        with self.assertRaises(InvalidArgumentError) as cm:
            self.buf.seek(offset, whence)
        self.assertEqual(self.buf.tell(), 2, "cursor must not move on a failed seek")
        return cm.exception

    def test_start_at_length(self):
        """Test that seeking from the start to the data length is rejected."""
        err = self.assertRejected(6, Whence.START)
        self.assertEqual(err.offset, 6)
        self.assertEqual(err.whence, Whence.START)
        self.assertIn("invalid offset 6", str(err))

    def test_start_past_length(self):
        """Test that seeking from the start beyond the data is rejected."""
        self.assertRejected(100, Whence.START)

    def test_start_last_byte(self):
        """Test that the last byte is a valid start target."""
        self.assertEqual(self.buf.seek(5, Whence.START), 5)

    def test_start_forward_on_empty(self):
        """Test that any forward seek from the start of an empty buffer is rejected."""
        buf = SeekableBuffer()
        with self.assertRaises(InvalidArgumentError):
            buf.seek(1, Whence.START)
        self.assertEqual(buf.tell(), 0)

    def test_start_negative(self):
        """Test that a negative target from the start is rejected."""
        self.assertRejected(-1, Whence.START)

    def test_current_to_length(self):
        """Test that moving forward from the cursor to the data length is rejected."""
        self.assertRejected(4, Whence.CURRENT)

    def test_current_below_zero(self):
        """Test that moving backward from the cursor below zero is rejected."""
        self.assertRejected(-3, Whence.CURRENT)

    def test_end_below_zero(self):
        """Test that a target before the first byte from the end is rejected."""
        err = self.assertRejected(-7, Whence.END)
        self.assertEqual(err.offset, -7)

    def test_end_to_start(self):
        """Test that the whole length back from the end reaches position 0."""
        self.assertEqual(self.buf.seek(-6, Whence.END), 0)

    def test_end_has_no_upper_bound(self):
        """Test that the end origin allows positions past the data, unlike start and current."""
        self.assertEqual(self.buf.seek(10, Whence.END), 16)

    def test_invalid_whence(self):
        """Test that an unknown whence is rejected and reported."""
        err = self.assertRejected(0, 3)
        self.assertEqual(err.whence, 3)
        self.assertEqual(err.offset, 0)
        self.assertIn("invalid whence 3", str(err))

    def test_invalid_whence_negative(self):
        """Test that a negative whence is rejected."""
        self.assertRejected(1, -1)

    def test_non_integer_offset(self):
        """Test that a non-integer offset is a type error."""
        with self.assertRaises(TypeError):
            self.buf.seek(1.5)
        self.assertEqual(self.buf.tell(), 2)

    def test_non_integer_offset_with_unknown_whence(self):
        """Test that the offset type is checked before the whence value."""
        with self.assertRaises(TypeError):
            self.buf.seek(1.5, 3)
        self.assertEqual(self.buf.tell(), 2)

    def test_float_whence(self):
        """Test that a float whence is a type error even when it equals a valid origin."""
        with self.assertRaises(TypeError):
            self.buf.seek(1, 1.0)
        self.assertEqual(self.buf.tell(), 2)

    def test_bool_whence(self):
        """Test that a bool whence is a type error rather than CURRENT or START."""
        with self.assertRaises(TypeError):
            self.buf.seek(1, True)
        with self.assertRaises(TypeError):
            self.buf.seek(0, False)
        self.assertEqual(self.buf.tell(), 2)


class TestEndOfData(unittest.TestCase):
    """Test end-of-data reporting."""

    def test_message_names_position(self):
        buf = SeekableBuffer(b"foo")
        buf.seek(0, Whence.END)
        with self.assertRaises(EndOfDataError) as cm:
            buf.readinto(bytearray(4))
        self.assertIn("position 3", str(cm.exception))

    def test_recoverable_by_seeking(self):
        """Test that reading works again after seeking back."""
        buf = SeekableBuffer(b"foo")
        buf.read()
        with self.assertRaises(EndOfDataError):
            buf.readinto(bytearray(1))

        buf.seek(-1, Whence.END)
        dest = bytearray(1)
        self.assertEqual(buf.readinto(dest), 1)
        self.assertEqual(bytes(dest), b"o")


class TestExceptionHierarchy(unittest.TestCase):
    """Test that errors can be caught by the package base class or the builtin they specialize."""

    def test_end_of_data_is_eof_error(self):
        with self.assertRaises(EOFError):
            SeekableBuffer().readinto(bytearray(1))

    def test_invalid_argument_is_value_error(self):
        with self.assertRaises(ValueError):
            SeekableBuffer().seek(1)

    def test_package_base_class(self):
        for exc in (EndOfDataError("eof"), InvalidArgumentError("bad", 1, 0)):
            self.assertIsInstance(exc, SeekBufferException)

    def test_message_is_str_of_exception(self):
        err = InvalidArgumentError("invalid offset 9", 9, Whence.START)
        self.assertEqual(str(err), "invalid offset 9")
        self.assertEqual(err.args, ("invalid offset 9",))


if __name__ == "__main__":
    unittest.main(verbosity=2)
