"""Unit tests for scanner state transitions."""

import unittest
from shellwords.states import (
    START,
    Commented,
    DoubleQuoted,
    SingleQuoted,
    Step,
    Unquoted,
    finish,
    is_space,
    step,
)


class TestUnquoted(unittest.TestCase):
    """Test transitions outside quotes."""

    def test_whitespace_before_word(self):
        """Test that whitespace with no word in progress is skipped."""
        self.assertEqual(Step(START), step(START, " "))
        self.assertEqual(Step(START), step(START, "　"))

    def test_whitespace_ends_word(self):
        """Test that whitespace flushes a started word."""
        self.assertEqual(
            Step(START, flush=True), step(Unquoted(started=True), "\t")
        )

    def test_information_separator(self):
        """Test that U+001F starts a word rather than ending one."""
        self.assertEqual(Step(Unquoted(started=True), "\x1f"), step(START, "\x1f"))
        self.assertFalse(is_space("\x1c"))
        self.assertTrue(is_space("　"))

    def test_plain_character(self):
        """Test that ordinary characters start a word."""
        self.assertEqual(Step(Unquoted(started=True), "x"), step(START, "x"))

    def test_backslash(self):
        """Test that backslash waits for the next character."""
        self.assertEqual(Step(Unquoted(escaping=True)), step(START, "\\"))
        self.assertEqual(
            Step(Unquoted(started=True, escaping=True)),
            step(Unquoted(started=True), "\\"),
        )

    def test_escaped_character(self):
        """Test that an escaped character is appended literally."""
        state = Unquoted(escaping=True)
        for char in (" ", "\\", "'", '"', "\n", "#"):
            with self.subTest(char=repr(char)):
                self.assertEqual(Step(Unquoted(started=True), char), step(state, char))

    def test_quotes_open(self):
        """Test that quote characters switch state without text."""
        self.assertEqual(Step(SingleQuoted()), step(START, "'"))
        self.assertEqual(Step(DoubleQuoted()), step(Unquoted(started=True), '"'))

    def test_hash(self):
        """Test that # only starts a comment when enabled at a word start."""
        self.assertEqual(Step(Unquoted(started=True), "#"), step(START, "#"))
        self.assertEqual(Step(Commented()), step(START, "#", comments=True))
        self.assertEqual(
            Step(Unquoted(started=True), "#"),
            step(Unquoted(started=True), "#", comments=True),
        )


class TestSingleQuoted(unittest.TestCase):
    """Test transitions inside single quotes."""

    def test_everything_literal(self):
        """Test that every character but the quote is kept."""
        for char in ("\\", "$", "`", '"', " ", "\n", "#"):
            with self.subTest(char=repr(char)):
                self.assertEqual(
                    Step(SingleQuoted(), char), step(SingleQuoted(), char)
                )

    def test_close(self):
        """Test that the closing quote continues the word."""
        self.assertEqual(Step(Unquoted(started=True)), step(SingleQuoted(), "'"))


class TestDoubleQuoted(unittest.TestCase):
    """Test transitions inside double quotes."""

    def test_ordinary_characters(self):
        """Test that whitespace and single quotes are kept."""
        for char in (" ", "\t", "'", "#", "$"):
            with self.subTest(char=repr(char)):
                self.assertEqual(
                    Step(DoubleQuoted(), char), step(DoubleQuoted(), char)
                )

    def test_close(self):
        """Test that the closing quote continues the word."""
        self.assertEqual(Step(Unquoted(started=True)), step(DoubleQuoted(), '"'))

    def test_backslash(self):
        """Test that backslash waits for the next character."""
        self.assertEqual(
            Step(DoubleQuoted(escaping=True)), step(DoubleQuoted(), "\\")
        )

    def test_escapable(self):
        """Test that $, `, \" and \\ lose their backslash."""
        state = DoubleQuoted(escaping=True)
        for char in ("$", "`", '"', "\\"):
            with self.subTest(char=char):
                self.assertEqual(Step(DoubleQuoted(), char), step(state, char))

    def test_line_continuation(self):
        """Test that backslash-newline produces nothing."""
        self.assertEqual(
            Step(DoubleQuoted()), step(DoubleQuoted(escaping=True), "\n")
        )

    def test_not_escapable(self):
        """Test that other characters keep their backslash."""
        state = DoubleQuoted(escaping=True)
        for char in ("n", "e", " ", "'"):
            with self.subTest(char=char):
                self.assertEqual(Step(DoubleQuoted(), "\\" + char), step(state, char))


class TestCommented(unittest.TestCase):
    """Test transitions inside a comment."""

    def test_skips_until_newline(self):
        """Test that comment text is dropped up to the newline."""
        self.assertEqual(Step(Commented()), step(Commented(), "x"))
        self.assertEqual(Step(Commented()), step(Commented(), "'"))
        self.assertEqual(Step(START), step(Commented(), "\n"))


class TestFinish(unittest.TestCase):
    """Test end-of-input handling."""

    def test_unquoted(self):
        """Test that only a started word is flushed."""
        self.assertEqual(Step(START), finish(START))
        self.assertEqual(Step(START, flush=True), finish(Unquoted(started=True)))

    def test_dangling_backslash(self):
        """Test that an unquoted dangling backslash is dropped."""
        self.assertEqual(Step(START), finish(Unquoted(escaping=True)))
        self.assertEqual(
            Step(START, flush=True), finish(Unquoted(started=True, escaping=True))
        )

    def test_open_quotes_close(self):
        """Test that open quotes are closed implicitly."""
        self.assertEqual(Step(START, flush=True), finish(SingleQuoted()))
        self.assertEqual(Step(START, flush=True), finish(DoubleQuoted()))
        self.assertEqual(
            Step(START, "\\", flush=True), finish(DoubleQuoted(escaping=True))
        )

    def test_comment(self):
        """Test that a comment at end of input yields nothing."""
        self.assertEqual(Step(START), finish(Commented()))


class TestDispatch(unittest.TestCase):
    """Test state dispatch."""

    def test_unknown_state(self):
        """Test that an unknown state is rejected."""
        with self.assertRaises(TypeError):
            step(object(), "x")


if __name__ == "__main__":
    unittest.main()
