""" Bounded, insertion-ordered tables for variables and functions. """
from script_errors import BufferOverflow, CapacityExceeded, UndefinedVariable


class BoundedTable:
    """
    Name -> text mapping with a maximum entry count.

    Overwriting an existing name keeps its position; removing a name keeps
    the relative order of the rest.
    """
    kind = "entry"

    def __init__(self, max_entries, max_name_length, max_text_length):
        self.entries = {}
        self.max_entries = max_entries
        self.max_name_length = max_name_length
        self.max_text_length = max_text_length

    def __len__(self):
        return len(self.entries)

    def __contains__(self, name):
        return name in self.entries

    def names(self) -> list[str]:
        return list(self.entries)

    def get(self, name: str) -> str | None:
        return self.entries.get(name)

    def put(self, name: str, text: str):
        if len(name) > self.max_name_length:
            raise BufferOverflow(f"{self.kind} name too long: {name[:16]}...")
        if len(text) > self.max_text_length:
            raise BufferOverflow(f"{self.kind} {name} exceeds {self.max_text_length} characters")
        if name not in self.entries and len(self.entries) >= self.max_entries:
            raise CapacityExceeded(f"Too many {self.kind}s")
        self.entries[name] = text


class VariableStore(BoundedTable):
    kind = "variable"

    def set(self, name: str, value: str):
        self.put(name, value)

    def delete(self, name: str):
        if name not in self.entries:
            raise UndefinedVariable(name)
        del self.entries[name]


class FunctionStore(BoundedTable):
    kind = "function"

    def define(self, name: str, body: str):
        self.put(name, body)
