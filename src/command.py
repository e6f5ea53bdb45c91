""" Command to be executed. """
from script_state import ScriptState


class Executable:
    """ Base class for executable types. """
    def execute(self, state):
        raise NotImplementedError


class Command:
    """ A classified script line. """
    def __init__(self, kind, name=None, text=None, prompt=None):
        self.kind = kind
        self.name = name        # variable or function name, if any
        self.text = text        # value, body, condition or literal text
        self.prompt = prompt    # custom prompt for `input`, or None

    def __eq__(self, other):
        if not isinstance(other, Command):
            return NotImplemented
        return (self.kind, self.name, self.text, self.prompt) == \
            (other.kind, other.name, other.text, other.prompt)

    def __repr__(self):
        return f"Command({self.kind!r}, name={self.name!r}, text={self.text!r}, prompt={self.prompt!r})"


class CommandNode(Executable):
    """ Implement a single script line as a parsed node. """
    def __init__(self, cmd: Command, executor):
        self.cmd = cmd
        self.executor = executor

    def execute(self, state: ScriptState) -> int:
        return self.executor(self.cmd, state) or 0
