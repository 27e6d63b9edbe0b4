# python
"""
Binders module behavioral tests (Variable storage, conversion, binder variants).

Scope
- Validate Variable defaults and declared-type validation.
- Validate exact numeric conversion (whole token, ASCII, no sign/space/underscore leniency).
- Validate each binder variant: flag, value, optional, list (including caller-owned lists).

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from optbind import (
    OptionKind,
    Variable,
    FlagBinder,
    ValueBinder,
    OptionalBinder,
    ListBinder,
    Binder,
    bind,
    convert,
)


class TestVariable(TestCase):
    """Behavioral tests for Variable storage."""

    def testDefaultsPerDeclaredType(self):
        self.assertIs(Variable(bool).value, False)
        self.assertEqual(Variable(str).value, "")
        self.assertEqual(Variable(int).value, 0)
        self.assertEqual(Variable(float).value, 0.0)
        self.assertIsNone(Variable(int | None).value)
        self.assertEqual(Variable(list[int]).value, [])

    def testDefaultTypeIsStr(self):
        self.assertIs(Variable().type, str)

    def testExplicitInitialValueIsKept(self):
        self.assertEqual(Variable(int, 7).value, 7)
        self.assertEqual(Variable(str, "x").value, "x")

    def testCallerListIsUsedInPlace(self):
        storage = ["seed"]
        variable = Variable(list[str], storage)
        self.assertIs(variable.value, storage)

    def testFreshListPerVariable(self):
        self.assertIsNot(Variable(list[str]).value, Variable(list[str]).value)

    def testUnsupportedTypesRejected(self):
        for declared in (dict, bytes, list[bool], bool | None, list, int | str | None):
            with self.subTest(declared=declared):
                with self.assertRaises(TypeError):
                    Variable(declared)

    def testListRequiresMutableSequence(self):
        with self.assertRaises(TypeError):
            Variable(list[str], "abc")


class TestConvert(TestCase):
    """Exact, locale-independent conversion."""

    def testIntegers(self):
        self.assertEqual(convert(int, "42"), 42)
        self.assertEqual(convert(int, "-12"), -12)
        self.assertEqual(convert(int, "007"), 7)

    def testIntegerGarbageRejected(self):
        for text in ("", "+5", " 5", "5 ", "1_000", "5px", "0x10", "1.0", "٣", "-"):
            with self.subTest(text=text):
                with self.assertRaises(ValueError):
                    convert(int, text)

    def testFloats(self):
        self.assertEqual(convert(float, "1.5"), 1.5)
        self.assertEqual(convert(float, "-2e3"), -2000.0)
        self.assertEqual(convert(float, ".5"), 0.5)
        self.assertEqual(convert(float, "5."), 5.0)
        self.assertEqual(convert(float, "3"), 3.0)
        self.assertEqual(convert(float, "inf"), float("inf"))
        self.assertEqual(convert(float, "-Infinity"), float("-inf"))
        self.assertNotEqual(convert(float, "nan"), convert(float, "nan"))

    def testFloatGarbageRejected(self):
        for text in ("", "+1.5", "1.5.2", "e5", "1e", " 1", "1,5", "infinite"):
            with self.subTest(text=text):
                with self.assertRaises(ValueError):
                    convert(float, text)

    def testStringsVerbatim(self):
        self.assertEqual(convert(str, " spaced "), " spaced ")
        self.assertEqual(convert(str, ""), "")


class TestBinders(TestCase):
    """Each binder variant writes only into caller storage."""

    def testBindSelectsVariant(self):
        self.assertIsInstance(bind(Variable(bool)), FlagBinder)
        self.assertIsInstance(bind(Variable(int)), ValueBinder)
        self.assertIsInstance(bind(Variable(float | None)), OptionalBinder)
        self.assertIsInstance(bind(Variable(list[int])), ListBinder)
        self.assertIsInstance(bind([]), ListBinder)

    def testBinderIsAbstract(self):
        with self.assertRaises(TypeError):
            Binder()

    def testBinderKinds(self):
        self.assertIs(bind(Variable(bool)).kind, OptionKind.FLAG)
        self.assertIs(bind(Variable(str)).kind, OptionKind.VALUE)
        self.assertIs(bind(Variable(int | None)).kind, OptionKind.VALUE)
        self.assertIs(bind(Variable(list[str])).kind, OptionKind.LIST)

    def testBindRejectsOtherTargets(self):
        for target in (1, "text", None, {}):
            with self.subTest(target=target):
                with self.assertRaises(TypeError):
                    bind(target)

    def testFlagDefaultApply(self):
        flag = Variable(bool)
        bind(flag).default_apply()
        self.assertIs(flag.value, True)

    def testValueBinderCannotDefaultApply(self):
        with self.assertRaises(TypeError):
            bind(Variable(int)).default_apply()

    def testValueOverwrites(self):
        level = Variable(int, 3)
        binder = bind(level)
        self.assertTrue(binder.parse_apply("5"))
        self.assertTrue(binder.parse_apply("9"))
        self.assertEqual(level.value, 9)

    def testFailedParseLeavesValueUntouched(self):
        level = Variable(int, 3)
        self.assertFalse(bind(level).parse_apply("5x"))
        self.assertEqual(level.value, 3)

    def testOptionalCreatedOnParse(self):
        level = Variable(int | None)
        binder = bind(level)
        self.assertFalse(binder.parse_apply("abc"))
        self.assertIsNone(level.value)
        self.assertTrue(binder.parse_apply("4"))
        self.assertEqual(level.value, 4)

    def testListAppendsInOrder(self):
        numbers = Variable(list[int])
        binder = bind(numbers)
        self.assertTrue(binder.parse_apply("1"))
        self.assertFalse(binder.parse_apply("two"))
        self.assertTrue(binder.parse_apply("3"))
        self.assertEqual(numbers.value, [1, 3])

    def testListOfOptionalsAppendsContainedValues(self):
        numbers = Variable(list[int | None])
        bind(numbers).parse_apply("8")
        self.assertEqual(numbers.value, [8])

    def testListFollowsReassignedValue(self):
        files = Variable(list[str])
        binder = bind(files)
        files.value = []
        self.assertTrue(binder.parse_apply("a"))
        self.assertEqual(files.value, ["a"])

        replacement = ["kept"]
        files.value = replacement
        binder.parse_apply("b")
        self.assertEqual(files.value, ["kept", "b"])
        self.assertIs(files.value, replacement)

    def testCallerOwnedListReceivesValues(self):
        storage = []
        bind(Variable(list[str], storage)).parse_apply("a")
        bind(storage).parse_apply("b")
        self.assertEqual(storage, ["a", "b"])


if __name__ == "__main__":
    unittest.main()
