""" Drive a script through the parser and runner, one line at a time. """
from syntax import BLOCK_COMMENT
from script_errors import ScriptOpenError, SolitudeError
from line_parser import parse_top_level
from script_runner import execute_command, report_error
from script_state import ScriptState


def is_block_comment(line: str) -> bool:
    return line.strip() == BLOCK_COMMENT


def read_until_block_end(lines) -> list[str]:
    """
    Consume lines up to and including the closing `...`.
    Returns the skipped lines.
    """
    skipped = []
    for line in lines:
        if is_block_comment(line):
            break
        skipped.append(line)
    return skipped


def read_script(path):
    """ Yield the lines of a script file without their line endings. """
    try:
        f = open(path, "r", encoding="utf-8", errors="replace")
    except OSError:
        raise ScriptOpenError(path)

    with f:
        for line in f:
            yield line.rstrip("\r\n")


class Interpreter:
    def __init__(self, state: ScriptState | None = None, block_comments=False):
        self.state = state or ScriptState()
        self.block_comments = block_comments
        self.errors = 0

    def process_line(self, line: str) -> int:
        try:
            nodes = parse_top_level(line, execute_command)
        except SolitudeError as e:
            report_error(e)
            nodes = []
            status = 1
        else:
            status = 0

        for node in nodes:
            status = node.execute(self.state)

        if status != 0:
            self.errors += 1
        return status

    def run_lines(self, lines):
        lines = iter(lines)
        for line in lines:
            if self.block_comments and is_block_comment(line):
                read_until_block_end(lines)
                continue
            self.process_line(line)
        return self.errors

    def run_file(self, path):
        """ Run a script file. Raises ScriptOpenError if it cannot be read. """
        return self.run_lines(read_script(path))
