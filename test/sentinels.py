# python
"""
Utilities module tests (Unset sentinel and small helpers).

This module verifies:
- Unset singleton identity, falsy semantics, representation and finality.
- coalesce() replacing only Unset.
- rename() in direct and decorator forms.
- mirror() read-only properties over private backing fields.
- basename() over POSIX and Windows program paths.
"""
import unittest
from unittest import TestCase

from optbind.utils import *


class UnsetTest(TestCase):

    def testSingleton(self):
        self.assertIs(UnsetType(), Unset)

    def testFalsyButNotNone(self):
        self.assertFalse(Unset)
        self.assertIsNot(Unset, None)
        self.assertNotEqual(Unset, 0)

    def testRepr(self):
        self.assertEqual(repr(Unset), "Unset")

    def testFinal(self):
        with self.assertRaises(TypeError):
            type("Sub", (UnsetType,), {})


class HelpersTest(TestCase):

    def testCoalesce(self):
        self.assertEqual(coalesce(Unset, "fallback"), "fallback")
        self.assertIsNone(coalesce(Unset))
        self.assertEqual(coalesce(0, "fallback"), 0)
        self.assertIsNone(coalesce(None, "fallback"))

    def testRenameDirect(self):
        def function():
            pass

        self.assertIs(rename(function, "renamed"), function)
        self.assertEqual(function.__name__, "renamed")
        self.assertEqual(function.__qualname__, "renamed")

    def testRenameDecorator(self):
        @rename("decorated")
        def function():
            pass

        self.assertEqual(function.__name__, "decorated")

    def testRenameRejectsBadArguments(self):
        with self.assertRaises(TypeError):
            rename(1, "name")
        with self.assertRaises(TypeError):
            rename(print, 1)
        with self.assertRaises(TypeError):
            rename()

    def testMirror(self):
        class Holder:
            level = mirror("level")

            def __init__(self):
                self._level = 3

        holder = Holder()
        self.assertEqual(holder.level, 3)
        self.assertEqual(Holder.level.fget.__name__, "level")
        with self.assertRaises(AttributeError):
            holder.level = 4

    def testBasename(self):
        self.assertEqual(basename("/usr/local/bin/tool"), "tool")
        self.assertEqual(basename("C:\\Program Files\\tool.exe"), "tool.exe")
        self.assertEqual(basename("relative/dir\\mixed"), "mixed")
        self.assertEqual(basename("tool"), "tool")
        self.assertEqual(basename(""), "")
        with self.assertRaises(TypeError):
            basename(None)


if __name__ == "__main__":
    unittest.main()
