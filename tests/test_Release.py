# vim: set fileencoding=utf-8 :
"""Test L{aptparser.release.Release}"""

import datetime
import unittest

from . import context

from aptparser.errors import MissingKeyError, ValueCoercionError
from aptparser.release import Release, ReleaseHash


class TestRelease(unittest.TestCase):
    def test_chariz(self):
        release = Release(filename=context.data_file('chariz.release'))

        self.assertEqual(release.architectures, ['iphoneos-arm'])
        self.assertEqual(release.components, ['main'])
        self.assertIsNone(release.no_support_for_architecture_all)
        self.assertEqual(release.description,
                         "Check out what's new and download purchases from the Chariz marketplace!")
        self.assertEqual(release.origin, 'Chariz')
        self.assertEqual(release.label, 'Chariz')
        self.assertEqual(release.suite, 'stable')
        self.assertEqual(release.version, '0.9')
        self.assertEqual(release.codename, 'hbang')
        self.assertEqual(release.date, 'Sat, 05 Feb 2022 10:08:22 UTC')
        self.assertEqual(release.valid_until, 'Sat, 12 Feb 2022 10:08:22 UTC')
        self.assertTrue(release.acquire_by_hash)
        self.assertIsNone(release.not_automatic)
        self.assertIsNone(release.but_automatic_upgrades)
        self.assertIsNone(release.signed_by)
        self.assertIsNone(release.packages_require_authorization)

        self.assertEqual(release.md5sum, [
            ReleaseHash(hash='0b7f4a3f1bf6e2a5c1b7e8a6f0c1b2d3', size=1024, filename='Packages'),
            ReleaseHash(hash='1c8e5b4e2cf7f3b6d2c8f9b7e1d2c3e4', size=512, filename='Packages.gz'),
        ])
        self.assertIsNone(release.sha1sum)
        self.assertEqual([h.filename for h in release.sha256sum], ['Packages', 'Packages.gz'])
        self.assertIsNone(release.sha512sum)
        self.assertEqual(sorted(release.hashes.keys()), ['MD5Sum', 'SHA256'])

    def test_dates(self):
        release = Release(filename=context.data_file('chariz.release'))
        utc = datetime.timezone.utc
        self.assertEqual(release.date_time, datetime.datetime(2022, 2, 5, 10, 8, 22, tzinfo=utc))
        self.assertEqual(release.valid_until_time,
                         datetime.datetime(2022, 2, 12, 10, 8, 22, tzinfo=utc))

    def test_missing_date(self):
        release = Release("Architectures: amd64\nComponents: main\n")
        self.assertIsNone(release.date_time)
        self.assertIsNone(release.valid_until_time)

    def test_invalid_date(self):
        release = Release("Architectures: amd64\nComponents: main\nDate: someday\n")
        with self.assertRaises(ValueCoercionError):
            release.date_time

    def test_hash_triples(self):
        release = Release("Architectures: amd64 arm64\nComponents: main contrib\n"
                          "MD5Sum: abc123 100 Packages\ndef456 200 Packages.gz\n")
        self.assertEqual(release.architectures, ['amd64', 'arm64'])
        self.assertEqual(release.components, ['main', 'contrib'])
        self.assertEqual(release.md5sum, [ReleaseHash('abc123', 100, 'Packages'),
                                          ReleaseHash('def456', 200, 'Packages.gz')])

    def test_invalid_hash_size(self):
        self.assertRaises(ValueCoercionError, Release,
                          "Architectures: amd64\nComponents: main\n"
                          "SHA256: abc123 many Packages\n")

    def test_incomplete_hash_triple(self):
        self.assertRaises(ValueCoercionError, Release,
                          "Architectures: amd64\nComponents: main\n"
                          "SHA1: abc123 100 Packages def456 200\n")

    def test_booleans(self):
        release = Release("Architectures: amd64\nComponents: main\n"
                          "NotAutomatic: yes\nButAutomaticUpgrades: yes\n"
                          "No-Support-for-Architecture-all: Packages\n"
                          "Packages-Require-Authorization: no\n"
                          "Signed-By: 0123456789ABCDEF\n")
        self.assertTrue(release.not_automatic)
        self.assertTrue(release.but_automatic_upgrades)
        self.assertFalse(release.no_support_for_architecture_all)
        self.assertFalse(release.packages_require_authorization)
        self.assertEqual(release.signed_by, '0123456789ABCDEF')

    def test_description_last(self):
        """A synopsis only description ending the file loses its newline"""
        release = Release("Architectures: amd64\nComponents: main\nDescription: a repo\n")
        self.assertEqual(release.description, 'a repo')
        self.assertEqual(release['Description'], 'a repo\n')

    def test_missing_required(self):
        with self.assertRaises(MissingKeyError) as ctx:
            Release("Components: main\n")
        self.assertEqual(ctx.exception.key, 'Architectures')
        with self.assertRaises(MissingKeyError) as ctx:
            Release("Architectures: all\n")
        self.assertEqual(ctx.exception.key, 'Components')

    def test_skip_validation(self):
        release = Release("Origin: Debian\n", skip_validation=True)
        self.assertEqual(release.architectures, [])
        self.assertEqual(release.components, [])
        self.assertEqual(release.get('origin'), 'Debian')
        self.assertIn('ORIGIN', release)
