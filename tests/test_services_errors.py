import unittest

from subtitle_toolkit.services.errors import (
    ConfigError,
    FormatError,
    NotFoundError,
    SubtitleToolkitError,
    ValidationError,
)


class TestServicesErrors(unittest.TestCase):
    def test_all_errors_share_base_class(self):
        for error in (ConfigError, FormatError, NotFoundError, ValidationError):
            self.assertTrue(issubclass(error, SubtitleToolkitError))

    def test_builtin_compatibility(self):
        self.assertTrue(issubclass(ValidationError, ValueError))
        self.assertTrue(issubclass(FormatError, ValueError))
        self.assertTrue(issubclass(NotFoundError, FileNotFoundError))
        self.assertTrue(issubclass(NotFoundError, OSError))


if __name__ == "__main__":
    unittest.main()
