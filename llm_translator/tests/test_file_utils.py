import unittest

from llm_translator.utils import file_extension, format_file_size, validate_file_size, validate_file_type


class TestFileUtils(unittest.TestCase):
    def test_file_extension(self):
        self.assertEqual(file_extension("report.PDF"), "pdf")
        self.assertEqual(file_extension("archive.tar.gz"), "gz")
        self.assertEqual(file_extension("noext"), "")
        self.assertEqual(file_extension(None), "")

    def test_validate_file_type(self):
        self.assertTrue(validate_file_type("a.md"))
        self.assertTrue(validate_file_type("a.DOCX"))
        self.assertFalse(validate_file_type("a.exe"))
        self.assertTrue(validate_file_type("a.exe", [".exe"]))

    def test_validate_file_size(self):
        self.assertTrue(validate_file_size(10 * 1024 * 1024))
        self.assertFalse(validate_file_size(10 * 1024 * 1024 + 1))
        self.assertTrue(validate_file_size(1024, max_size_mb=0.001))

    def test_format_file_size(self):
        self.assertEqual(format_file_size(0), "0 Bytes")
        self.assertEqual(format_file_size(500), "500 Bytes")
        self.assertEqual(format_file_size(1024), "1 KB")
        self.assertEqual(format_file_size(1536), "1.5 KB")
        self.assertEqual(format_file_size(5 * 1024 * 1024), "5 MB")


if __name__ == "__main__":
    unittest.main()
