""" Current state of a running script. """
from syntax import Limits, VAR_SIGIL
from escapes import decode_escapes
from script_errors import BufferOverflow, UndefinedFunction, UndefinedVariable
from symbol_table import FunctionStore, VariableStore


class ScriptState:
    def __init__(self, limits: Limits | None = None):
        self.limits = limits or Limits()
        self.vars = VariableStore(self.limits.max_variables,
                                  self.limits.max_name_length,
                                  self.limits.max_value_length)
        self.funcs = FunctionStore(self.limits.max_functions,
                                   self.limits.max_name_length,
                                   self.limits.max_body_length)

    def set_var(self, name, value):
        self.vars.set(name, value)

    def get_var(self, name):
        return self.vars.get(name)

    def delete_var(self, name):
        self.vars.delete(name)

    def define_function(self, name, body):
        self.funcs.define(name, body)

    def invoke(self, name: str) -> bytes:
        """ Expand a function body against the current variables. """
        body = self.funcs.get(name)
        if body is None:
            raise UndefinedFunction(name)
        return decode_escapes(self.interpolate(body))

    def interpolate(self, text: str) -> str:
        """
        Replace each `$name` with the value of variable `name`.

        Raises UndefinedVariable on the first unknown name; `text` itself
        is never modified.
        """
        result = ""
        i = 0
        n = len(text)

        while i < n:
            if text[i] != VAR_SIGIL or not (i + 1 < n and _is_letter(text[i + 1])):
                result += text[i]
                i += 1
            else:
                i += 1
                name = ""
                while i < n and _is_letter_or_digit(text[i]):
                    name += text[i]
                    i += 1
                value = self.get_var(name)
                if value is None:
                    raise UndefinedVariable(name)
                result += value

            if len(result) > self.limits.buffer_size:
                raise BufferOverflow(f"Interpolated text exceeds {self.limits.buffer_size} characters")

        return result


def _is_letter(c):
    return c.isascii() and c.isalpha()


def _is_letter_or_digit(c):
    return c.isascii() and c.isalnum()
