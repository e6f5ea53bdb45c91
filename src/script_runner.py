""" Execute a parsed script command. """
import sys

from command import Command
from script_errors import SolitudeError
from script_builtins import BUILTINS
from script_state import ScriptState


def report_error(err: SolitudeError):
    print(f"Error: {err}", file=sys.stderr)


def execute_command(cmd: Command, script_state: ScriptState) -> int:
    """
    Run one command. Errors are reported and give status 1; the rest of
    the script keeps running.
    """
    try:
        return BUILTINS[cmd.kind](cmd, script_state) or 0
    except SolitudeError as e:
        report_error(e)
        return 1
