import unittest

from maven_semver.versioning.classifier import BumpCategory
from maven_semver.versioning.version_model import (
    Version,
    VersionParseError,
    bump,
    is_semantic,
    parse_version,
)


class TestParseVersion(unittest.TestCase):
    def test_parse_valid_versions(self) -> None:
        self.assertEqual(parse_version("1.2.3"), Version(1, 2, 3))
        self.assertEqual(parse_version("0.0.0"), Version(0, 0, 0))
        self.assertEqual(parse_version("10.20.300"), Version(10, 20, 300))

    def test_leading_zeros_are_normalised(self) -> None:
        version = parse_version("01.002.3")
        self.assertEqual(version, Version(1, 2, 3))
        self.assertEqual(str(version), "1.2.3")

    def test_rejects_non_semantic_input(self) -> None:
        for text in ["1.2", "1.2.3.4", "..", "1..2", "1.2.", "v1.2.3", "1.2.3-SNAPSHOT", "1.2.3+build", " 1.2.3", "a.b.c", ""]:
            with self.subTest(text=text):
                with self.assertRaises(VersionParseError):
                    parse_version(text)
                self.assertFalse(is_semantic(text))

    def test_rejects_non_ascii_digits(self) -> None:
        self.assertFalse(is_semantic("١.2.3"))

    def test_is_semantic(self) -> None:
        self.assertTrue(is_semantic("3.0.0"))


class TestVersion(unittest.TestCase):
    def test_str_is_canonical(self) -> None:
        self.assertEqual(str(Version(0, 1, 0)), "0.1.0")

    def test_version_is_immutable(self) -> None:
        version = Version(1, 0, 0)
        with self.assertRaises(AttributeError):
            version.major = 2  # type: ignore[misc]

    def test_rejects_negative_components(self) -> None:
        with self.assertRaises(ValueError):
            Version(-1, 0, 0)
        with self.assertRaises(ValueError):
            Version(1, True, 0)  # type: ignore[arg-type]


class TestBump(unittest.TestCase):
    def test_bump_each_category(self) -> None:
        current = Version(1, 2, 3)
        self.assertEqual(bump(current, BumpCategory.MAJOR), Version(2, 0, 0))
        self.assertEqual(bump(current, BumpCategory.MINOR), Version(1, 3, 0))
        self.assertEqual(bump(current, BumpCategory.PATCH), Version(1, 2, 4))

    def test_none_is_identity(self) -> None:
        for version in [Version(0, 0, 0), Version(1, 2, 3), Version(9, 0, 41)]:
            with self.subTest(version=version):
                self.assertEqual(bump(version, BumpCategory.NONE), version)

    def test_reset_invariants(self) -> None:
        for version in [Version(0, 0, 0), Version(1, 2, 3), Version(4, 0, 7)]:
            with self.subTest(version=version):
                major = bump(version, BumpCategory.MAJOR)
                self.assertEqual((major.minor, major.patch), (0, 0))
                self.assertEqual(bump(version, BumpCategory.MINOR).patch, 0)

    def test_bump_does_not_modify_input(self) -> None:
        current = Version(1, 2, 3)
        bump(current, BumpCategory.MAJOR)
        self.assertEqual(current, Version(1, 2, 3))


if __name__ == "__main__":
    unittest.main()
