import os
import tempfile
import unittest

from polyquad.common import (
    InvalidArgument, fresh_name, AtomicWriteableFile, read_lines)

def read_file(filename):
    with open(filename, "r") as f:
        return f.read()

class TestCommonUtils(unittest.TestCase):

    def test_invalid_argument_is_value_error(self):
        assert issubclass(InvalidArgument, ValueError)

    def test_fresh_names_are_distinct(self):
        names = {fresh_name("items") for i in range(100)}
        self.assertEqual(len(names), 100)
        assert all(n.startswith("_items") for n in names)

    def test_fresh_name_omits(self):
        n = fresh_name()
        taken = {"_name{}".format(i) for i in range(1000)}
        self.assertNotIn(fresh_name(omit=taken), taken)
        self.assertNotEqual(fresh_name(), n)

    def test_atomic_writeable_file(self):
        fd, path = tempfile.mkstemp(text=True)
        self.addCleanup(os.remove, path)
        with os.fdopen(fd, "w") as f:
            f.write("contents0")

        # (1) normal writing works
        with AtomicWriteableFile(path) as f:
            f.write("contents1")
        assert read_file(path) == "contents1"

        # (2) if an error happens, no writing happens
        class CustomExc(Exception):
            pass
        try:
            with AtomicWriteableFile(path) as f:
                f.write("con")
                raise CustomExc()
        except CustomExc:
            pass
        assert read_file(path) == "contents1"

    def test_read_lines(self):
        fd, path = tempfile.mkstemp(text=True)
        self.addCleanup(os.remove, path)
        with os.fdopen(fd, "w") as f:
            f.write("0, 1\n1,2\n3\n")
        self.assertEqual(read_lines(path), ["0, 1", "1,2", "3"])

if __name__ == '__main__':
    unittest.main()
