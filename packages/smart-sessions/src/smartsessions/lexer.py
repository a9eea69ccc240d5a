"""Shell-like command line lexer for the discovery command.

PUBLIC API:
  - split_command: Split a command string into argv tokens
"""

__all__ = ["split_command"]

QUOTES = ("'", '"')
ESCAPE = "\\"


def split_command(command: str) -> list[str]:
    """Split command into argv tokens.

    Rules:
        Whitespace:  separates tokens outside quotes
        Quotes:      ' or " group text, the quote characters are dropped
        Escape:      backslash keeps itself and the next character verbatim
        End:         an unterminated quote flushes what was collected, if anything

    Args:
        command: Command string from configuration

    Returns:
        List of argv tokens (empty for a blank command)

    Examples:
        split_command("fd -t d . ~/src")        # ["fd", "-t", "d", ".", "~/src"]
        split_command("sh -c 'ls -d ~/*/'")     # ["sh", "-c", "ls -d ~/*/"]
        split_command("ls a\\\\ b")              # ["ls", "a\\\\ b"], escaped space joins
    """
    tokens: list[str] = []
    buffer: list[str] = []
    quote = ""
    in_token = False  # True once a token has started, even if still empty ("")
    escaped = False

    for char in command:
        if escaped:
            escaped = False
            buffer.append(ESCAPE + char)
            in_token = True
            continue

        if char == ESCAPE:
            escaped = True
            continue

        if quote:
            if char == quote:
                quote = ""
            else:
                buffer.append(char)
            continue

        if char in QUOTES:
            quote = char
            in_token = True
            continue

        if char.isspace():
            if in_token:
                tokens.append("".join(buffer))
                buffer = []
                in_token = False
            continue

        buffer.append(char)
        in_token = True

    if escaped:
        buffer.append(ESCAPE)
        in_token = True

    # An unterminated quote only yields a token when it collected text
    if in_token and (buffer or not quote):
        tokens.append("".join(buffer))

    return tokens
