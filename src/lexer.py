""" Token helpers for splitting a command line. """
from syntax import INPUT_PROMPT_SPLIT


def first_token(text: str) -> tuple[str, str]:
    """ Split off the first whitespace-delimited token; returns (token, rest). """
    parts = text.split(None, 1)
    if not parts:
        return "", ""
    if len(parts) == 1:
        return parts[0], ""
    return parts[0], parts[1]


def split_assignment(text: str) -> tuple[str, str] | None:
    """ Split `NAME=VALUE` on the first `=`; None if there is no `=`. """
    if "=" not in text:
        return None
    name, value = text.split("=", 1)
    return name.strip(), value.strip()


def split_prompt(rest: str) -> str | None:
    """ Return PROMPT from `-> PROMPT`, or None if rest is not a prompt. """
    rest = rest.lstrip()
    if not rest.startswith(INPUT_PROMPT_SPLIT):
        return None
    prompt = rest[len(INPUT_PROMPT_SPLIT):].lstrip()
    return prompt or None
