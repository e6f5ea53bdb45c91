import io
import os
import sys
import tempfile
import unittest
from unittest.mock import patch

import interpreter
from syntax import Limits
from script_errors import ScriptOpenError
from script_state import ScriptState


class InterpreterTestCase(unittest.TestCase):
    def setUp(self):
        self.interp = interpreter.Interpreter()
        self.out = io.TextIOWrapper(io.BytesIO(), encoding="utf-8", newline="\n")
        self.err = io.StringIO()

    def output_bytes(self):
        self.out.flush()
        return self.out.buffer.getvalue()

    def output(self):
        return self.output_bytes().decode("utf-8")

    def run_script(self, lines, inputs=None):
        with patch.object(sys, "stdout", self.out), patch.object(sys, "stderr", self.err):
            if inputs is None:
                return self.interp.run_lines(lines)
            with patch("builtins.input", side_effect=inputs):
                return self.interp.run_lines(lines)


class TestBlockComments(unittest.TestCase):
    def test_is_block_comment(self):
        self.assertTrue(interpreter.is_block_comment("..."))
        self.assertTrue(interpreter.is_block_comment("  ...  "))
        self.assertFalse(interpreter.is_block_comment(". ..."))

    def test_read_until_block_end_consumes_closing_line(self):
        lines = iter(["a", "b", "...", "c"])
        self.assertEqual(["a", "b"], interpreter.read_until_block_end(lines))
        self.assertEqual(["c"], list(lines))

    def test_read_until_block_end_unterminated(self):
        lines = iter(["a", "b"])
        self.assertEqual(["a", "b"], interpreter.read_until_block_end(lines))


class TestInterpreter(InterpreterTestCase):
    def test_end_to_end_arithmetic(self):
        errors = self.run_script(["var x=10", "var y=$x*2", "Result: $y"])
        self.assertEqual(0, errors)
        self.assertEqual("Result: 20.000000\n", self.output())
        self.assertEqual("", self.err.getvalue())

    def test_blank_and_comment_lines_do_nothing(self):
        self.run_script(["", ". comment", "..."])
        self.assertEqual("", self.output())

    def test_bad_line_does_not_stop_script(self):
        errors = self.run_script(["Hi $who", "var x", "-gone", "after"])
        self.assertEqual(3, errors)
        self.assertEqual("after\n", self.output())
        self.assertEqual(
            "Error: Undefined variable who\n"
            "Error: Invalid variable declaration format.\n"
            "Error: Undefined variable gone\n",
            self.err.getvalue()
        )

    def test_function_sees_later_variables(self):
        self.run_script([
            "func greet Hello, $name!",
            "call greet",
            "var name=World",
            "call greet",
        ])
        self.assertEqual("Hello, World!\n", self.output())
        self.assertEqual("Error: Undefined variable name\n", self.err.getvalue())

    def test_call_undefined_function(self):
        self.run_script(["call nope"])
        self.assertEqual("", self.output())
        self.assertEqual("Error: Undefined function nope\n", self.err.getvalue())

    def test_if_does_not_skip_next_line(self):
        self.run_script(["var a=0", "if $a", "next", "if 3", "last"])
        self.assertEqual("next\nCondition met, execute next line\nlast\n", self.output())

    def test_delete_then_use(self):
        self.run_script(["var a=1", "-a", "$a"])
        self.assertEqual("", self.output())
        self.assertEqual("Error: Undefined variable a\n", self.err.getvalue())

    def test_input_then_echo(self):
        self.run_script(["input name -> Name: ", "Hi $name"], inputs=["Ada"])
        self.assertEqual("Name: Hi Ada\n", self.output())

    def test_input_eof(self):
        errors = self.run_script(["input name", "done"], inputs=EOFError)
        self.assertEqual(1, errors)
        self.assertEqual("Enter value for name: done\n", self.output())
        self.assertEqual("Error: Error reading input\n", self.err.getvalue())

    def test_capacity_error_reported(self):
        self.interp = interpreter.Interpreter(ScriptState(Limits(max_variables=2)))
        self.run_script(["var a=1", "var b=2", "var c=3", "var a=4", "$a$b"])
        self.assertEqual("42\n", self.output())
        self.assertEqual("Error: Too many variables\n", self.err.getvalue())

    def test_escapes_after_interpolation(self):
        self.run_script(["var esc=\\x41", "$esc\\033[0m"])
        self.assertEqual("A\x1b[0m\n", self.output())

    def test_high_hex_escapes_are_raw_bytes(self):
        self.run_script(["\\xFF\\xe9", "\\033[0m"])
        self.assertEqual(b"\xff\xe9\n\x1b[0m\n", self.output_bytes())

    def test_unreachable_names_are_rejected(self):
        errors = self.run_script(["var a b=5", "var 1x=2", "func 9f body", "input a-b"])
        self.assertEqual(4, errors)
        self.assertEqual([], self.interp.state.vars.names())
        self.assertEqual([], self.interp.state.funcs.names())
        self.assertEqual(
            "Error: Invalid variable name: a b\n"
            "Error: Invalid variable name: 1x\n"
            "Error: Invalid function name: 9f\n"
            "Error: Invalid variable name: a-b\n",
            self.err.getvalue()
        )

    def test_block_comments_off_by_default(self):
        self.run_script(["...", "shown", "..."])
        self.assertEqual("shown\n", self.output())

    def test_block_comments_enabled(self):
        self.interp = interpreter.Interpreter(block_comments=True)
        self.run_script(["before", "...", "hidden", "var x=1", "...", "after"])
        self.assertEqual("before\nafter\n", self.output())
        self.assertIsNone(self.interp.state.get_var("x"))


class TestRunFile(InterpreterTestCase):
    def setUp(self):
        super().setUp()
        self.tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmpdir.cleanup)

    def write_file(self, name: str, content: str) -> str:
        path = os.path.join(self.tmpdir.name, name)
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(content)
        return path

    def test_run_file_strips_line_endings(self):
        path = self.write_file("s.sol", "var a=1\r\nvar b=2\n$a $b\n")
        with patch.object(sys, "stdout", self.out), patch.object(sys, "stderr", self.err):
            errors = self.interp.run_file(path)
        self.assertEqual(0, errors)
        self.assertEqual("1 2\n", self.output())

    def test_run_file_keeps_trailing_spaces(self):
        path = self.write_file("s.sol", "func f a $x \nvar x=1\ncall f\n")
        with patch.object(sys, "stdout", self.out):
            self.interp.run_file(path)
        self.assertEqual("a 1 \n", self.output())

    def test_run_file_missing(self):
        with self.assertRaises(ScriptOpenError) as ctx:
            self.interp.run_file(os.path.join(self.tmpdir.name, "missing.sol"))
        self.assertIn("Could not open file", str(ctx.exception))


if __name__ == "__main__":
    unittest.main()
