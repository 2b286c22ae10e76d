import os
import re
from typing import Any, Callable, Iterable, Mapping
from .types import Token, validate_parameter_names
from .types.exceptions import UnresolvedParameterError

# braced references are found anywhere; a bare colon glued to a word or to
# another colon is literal text (xc:black, a::b)
TOKEN_PATTERN = re.compile(r":\{(\w+)\}|(?<![\w:]):(\w+)")

Quoter = Callable[[str], str]

def tokenize(template: str) -> list[Token]:
    tokens: list[Token] = []
    position = 0
    for match in TOKEN_PATTERN.finditer(template):
        if match.start() > position:
            tokens.append(Token(template[position:match.start()]))
        name = match.group(1) or match.group(2)
        tokens.append(Token(match.group(0), name=name))
        position = match.end()
    if position < len(template):
        tokens.append(Token(template[position:]))
    return tokens

def parameter_names(tokens: Iterable[Token]) -> list[str]:
    return [token.name for token in tokens if token.is_parameter]

def validate(tokens: list[Token], parameters: Mapping[str, Any]) -> None:
    """
    Check every reference before anything is substituted.
    Reserved names fail even when the option itself was never passed.
    """
    names = parameter_names(tokens)
    validate_parameter_names(names)
    for name in names:
        if name not in parameters:
            raise UnresolvedParameterError(name)

def _as_text(value: Any) -> str:
    if isinstance(value, (bytes, bytearray)):
        return os.fsdecode(bytes(value))
    return str(value)

def render_value(value: Any, quote: Quoter) -> str:
    if isinstance(value, (list, tuple)):
        return " ".join(quote(_as_text(item)) for item in value)
    return quote(_as_text(value))

def interpolate(template: str, parameters: Mapping[str, Any], quote: Quoter) -> str:
    tokens = tokenize(template)
    validate(tokens, parameters)
    return "".join(
        render_value(parameters[token.name], quote) if token.is_parameter else token.text
        for token in tokens)
