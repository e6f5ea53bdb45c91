""" Registry of script commands. """
import sys

from syntax import CONDITION_MET, DEFAULT_PROMPT, OUTPUT_ENCODING
from escapes import decode_escapes
from evaluator import evaluate_expression, format_number, has_operator
from script_errors import InputReadFailure

BUILTINS = {}


def builtin(kind):
    """Decorator to register builtins"""
    def wrapper(func):
        BUILTINS[kind] = func
        return func
    return wrapper


def write_bytes(data: bytes, end=b"\n"):
    """ Write raw bytes to stdout after any pending text output. """
    sys.stdout.flush()
    sys.stdout.buffer.write(data + end)
    sys.stdout.buffer.flush()


@builtin("var")
def builtin_var(cmd, state):
    value = state.interpolate(cmd.text)
    if has_operator(value):
        value = format_number(evaluate_expression(value))
    state.set_var(cmd.name, value)
    return 0


@builtin("delete")
def builtin_delete(cmd, state):
    state.delete_var(cmd.name)
    return 0


@builtin("if")
def builtin_if(cmd, state):
    """
    Print a fixed message when the condition is non-zero.
    Later lines run either way.
    """
    condition = state.interpolate(cmd.text)
    if evaluate_expression(condition) != 0:
        print(CONDITION_MET)
    return 0


@builtin("func")
def builtin_func(cmd, state):
    # stored raw; expanded on every call
    state.define_function(cmd.name, cmd.text)
    return 0


@builtin("call")
def builtin_call(cmd, state):
    write_bytes(state.invoke(cmd.name))
    return 0


@builtin("input")
def builtin_input(cmd, state):
    if cmd.prompt is not None:
        prompt = decode_escapes(state.interpolate(cmd.prompt))
    else:
        prompt = DEFAULT_PROMPT.format(cmd.name).encode(OUTPUT_ENCODING)
    write_bytes(prompt, end=b"")

    try:
        value = input()
    except EOFError:
        raise InputReadFailure()

    state.set_var(cmd.name, value)
    return 0


@builtin("echo")
def builtin_echo(cmd, state) -> int:
    write_bytes(decode_escapes(state.interpolate(cmd.text)))
    return 0
