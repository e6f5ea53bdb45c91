""" Classify script lines into commands. """
from command import Command, CommandNode, Executable
from syntax import (COMMENT, FUNC_BEGIN, FUNC_CALL, IF_BEGIN, INPUT_VAR,
                    VAR_DECLARE, VAR_DELETE, VAR_NAME_RX)
from script_errors import MalformedAssignment, MalformedCommand
from lexer import first_token, split_assignment, split_prompt


def parse_line(line: str) -> Command | None:
    """
    Classify one line. Prefixes are tried in a fixed order and the first
    match wins, so `-5` is always a deletion. Names that are created here
    must be `$`-reachable: a letter, then letters or digits. Returns None
    for blank lines and comments.
    """
    if not line:
        return None

    if line.startswith(COMMENT):
        return None

    if line.startswith(VAR_DECLARE):
        parts = split_assignment(line[len(VAR_DECLARE):])
        if parts is None or not parts[0]:
            raise MalformedAssignment()
        name, value = parts
        if not VAR_NAME_RX.match(name):
            raise MalformedAssignment(f"Invalid variable name: {name}")
        return Command("var", name=name, text=value)

    if line.startswith(VAR_DELETE):
        return Command("delete", name=line[len(VAR_DELETE):].strip())

    if line.startswith(IF_BEGIN):
        condition, _ = first_token(line[len(IF_BEGIN):])
        return Command("if", text=condition)

    if line.startswith(FUNC_BEGIN):
        name, body = first_token(line[len(FUNC_BEGIN):])
        if not name:
            raise MalformedCommand("Invalid function definition format.")
        if not VAR_NAME_RX.match(name):
            raise MalformedCommand(f"Invalid function name: {name}")
        return Command("func", name=name, text=body)

    if line.startswith(FUNC_CALL):
        name, _ = first_token(line[len(FUNC_CALL):])
        if not name:
            raise MalformedCommand("Missing function name.")
        return Command("call", name=name)

    if line.startswith(INPUT_VAR):
        name, rest = first_token(line[len(INPUT_VAR):])
        if not name:
            raise MalformedCommand("Missing variable name.")
        if not VAR_NAME_RX.match(name):
            raise MalformedCommand(f"Invalid variable name: {name}")
        return Command("input", name=name, prompt=split_prompt(rest))

    return Command("echo", text=line)


def parse_top_level(line: str, executor) -> list[Executable]:
    cmd = parse_line(line)
    if cmd is None:
        return []
    return [CommandNode(cmd, executor)]
