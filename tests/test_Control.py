# vim: set fileencoding=utf-8 :
"""Test L{aptparser.control.Control}"""

import unittest

from . import context

from aptparser.control import Control, NoControlError
from aptparser.errors import MissingKeyError, StructuralError, ValueCoercionError


class TestControl(unittest.TestCase):
    def test_clang(self):
        control = Control(context.read_data('clang.control'))

        self.assertEqual(control.package, 'clang')
        self.assertEqual(control.source, 'llvm-defaults (0.54)')
        self.assertEqual(control.version, '1:13.0-54')
        self.assertEqual(control.section, 'devel')
        self.assertEqual(control.priority, 'optional')
        self.assertEqual(control.architecture, 'amd64')
        self.assertIsNone(control.is_essential)

        self.assertEqual(control.depends, ['clang-13 (>= 13~)'])
        self.assertIsNone(control.pre_depends)
        self.assertIsNone(control.recommends)
        self.assertIsNone(control.suggests)
        self.assertEqual(control.replaces, ['clang (<< 3.2-1~exp2)',
                                            'clang-3.2',
                                            'clang-3.3',
                                            'clang-3.4 (<< 1:3.4.2-7~exp1)',
                                            'clang-3.5 (<< 1:3.5~+rc1-3~exp1)'])
        self.assertIsNone(control.enhances)
        self.assertEqual(control.breaks, ['clang-3.2',
                                          'clang-3.3',
                                          'clang-3.4 (<< 1:3.4.2-7~exp1)',
                                          'clang-3.5 (<< 1:3.5~+rc1-3~exp1)'])
        self.assertIsNone(control.conflicts)

        self.assertEqual(control.installed_size, 24)
        self.assertEqual(control.maintainer,
                         'Ubuntu Developers <ubuntu-devel-discuss@lists.ubuntu.com>')
        self.assertEqual(control.description,
                         "C, C++ and Objective-C compiler (LLVM based), clang binary\n"
                         "Clang project is a C, C++, Objective C and Objective C++ front-end "
                         "for the LLVM compiler. Its goal is to offer a replacement to the "
                         "GNU Compiler Collection (GCC).\n\n"
                         "Clang implements all of the ISO C++ 1998, 11 and 14 standards and "
                         "also provides most of the support of C++17.\n\n"
                         "This is a dependency package providing the default clang compiler.")
        self.assertIsNone(control.homepage)
        self.assertIsNone(control.built_using)
        self.assertIsNone(control.package_type)
        self.assertIsNone(control.tags)

        self.assertEqual(control.get('Original-Maintainer'),
                         'LLVM Packaging Team <pkg-llvm-team@lists.alioth.debian.org>')
        self.assertEqual(control['bugs'], 'https://bugs.launchpad.net/ubuntu/+filebug')
        self.assertIsNone(control['X-Does-Not-Exist'])

    def test_signalreborn(self):
        control = Control(filename=context.data_file('signalreborn.control'))

        self.assertEqual(control.package, 'com.amywhile.signalreborn')
        self.assertIsNone(control.source)
        self.assertEqual(control.version, '2.2.1-2')
        self.assertEqual(control.section, 'Applications')
        self.assertIsNone(control.priority)
        self.assertEqual(control.architecture, 'iphoneos-arm')
        self.assertEqual(control.depends, ['firmware (>= 12.2) | org.swift.libswift'])
        self.assertEqual(control.replaces, ['com.charliewhile.signalreborn'])
        self.assertEqual(control.breaks, ['com.charliewhile.signalreborn'])
        self.assertEqual(control.conflicts, ['com.charliewhile.signalreborn'])
        self.assertEqual(control.installed_size, 1536)
        self.assertEqual(control.maintainer, 'Amy While <support@anamy.gay>')
        self.assertEqual(control.description, 'Visualise your nearby cell towers')
        self.assertEqual(control.tags, ['compatible_min::ios11.0'])

        self.assertEqual(control.get('Name'), 'SignalReborn')
        self.assertEqual(control.get('Author'), 'Amy While <support@anamy.gay>')
        self.assertEqual(control.get('Icon'), 'https://img.chariz.cloud/icon/signal/icon@3x.png')
        self.assertEqual(control.get('Depiction'), 'https://chariz.com/get/signal')
        self.assertEqual(control.path, context.data_file('signalreborn.control'))

    def test_crlf(self):
        control = Control(context.read_data('crlf.control'))
        self.assertEqual(control.package, 'dos-line-endings')
        self.assertEqual(control.description,
                         'control file written on Windows\nwith a detail line')

    def test_essential(self):
        control = Control("Package: base-files\nVersion: 12\nArchitecture: amd64\nEssential: yes\n")
        self.assertTrue(control.is_essential)

    def test_missing_required(self):
        for missing in ['Package', 'Version', 'Architecture']:
            fields = dict(Package='foo', Version='1', Architecture='all')
            del fields[missing]
            data = '\n'.join('%s: %s' % item for item in fields.items())
            with self.assertRaises(MissingKeyError) as ctx:
                Control(data)
            self.assertEqual(ctx.exception.key, missing)
            self.assertEqual(ctx.exception.data, data)

    def test_skip_validation(self):
        control = Control("Package: foo\n", skip_validation=True)
        self.assertEqual(control.package, 'foo')
        self.assertIsNone(control.version)
        self.assertIsNone(control.architecture)

    def test_invalid_installed_size(self):
        self.assertRaises(ValueCoercionError, Control,
                          "Package: foo\nVersion: 1\nArchitecture: all\nInstalled-Size: lots\n")

    def test_structural_error(self):
        self.assertRaises(StructuralError, Control, "garbage\nPackage: foo")

    def test_fields(self):
        control = Control("package: foo\nVersion: 1\nArchitecture: all\nX-Custom: bar\n")
        self.assertEqual(control.package, 'foo')
        self.assertIn('x-custom', control)
        self.assertEqual(control.fields.canonical('PACKAGE'), 'package')
        self.assertEqual(len(control.fields), 4)
        self.assertEqual(str(control), '<Control foo 1>')

    def test_no_control(self):
        self.assertRaises(NoControlError, Control, filename='/does/not/exist')
        self.assertRaises(NoControlError, Control)
