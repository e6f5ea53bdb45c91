import re

# Line prefixes, checked in this order by the parser.
COMMENT = "."
BLOCK_COMMENT = "..."
VAR_DECLARE = "var "
VAR_DELETE = "-"
IF_BEGIN = "if "
FUNC_BEGIN = "func "
FUNC_CALL = "call "
INPUT_VAR = "input "
INPUT_PROMPT_SPLIT = "->"

VAR_SIGIL = "$"
OPERATORS = "+-*/"

VAR_NAME_RX = re.compile(r"^[A-Za-z][A-Za-z0-9]*$")
# decimal or float literal with optional sign and exponent
NUMBER_RX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
HEX_PAIR_RX = re.compile(r"^[0-9A-Fa-f]{2}$")

ESC = b"\x1b"
OUTPUT_ENCODING = "utf-8"
NUMBER_FORMAT = "{:.6f}"
CONDITION_MET = "Condition met, execute next line"
DEFAULT_PROMPT = "Enter value for {}: "


class Limits:
    """ Capacity bounds for an interpreter instance. """
    def __init__(self, max_name_length=64, max_value_length=256, max_variables=100,
                 max_body_length=1024, max_functions=10, buffer_size=2048):
        self.max_name_length = max_name_length
        self.max_value_length = max_value_length
        self.max_variables = max_variables
        self.max_body_length = max_body_length
        self.max_functions = max_functions
        # largest text interpolation may produce
        self.buffer_size = buffer_size
