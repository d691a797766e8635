"""
Properties file loading.

Reads the line-oriented ``key=value`` files that Android and Flutter builds keep
next to the project (``key.properties``, ``local.properties``). The syntax
follows the JVM properties format: ``#``/``!`` comments, ``=``/``:``/whitespace
separators, backslash line continuations and ``\\uXXXX`` escapes.
"""
import logging
import re
import string
from pathlib import Path
from typing import Dict, Iterator, Tuple, Union

from .exceptions import MalformedPropertiesException
from .models import PropertyFile

logger = logging.getLogger(__name__)

DEFAULT_ENCODING = 'iso-8859-1'
SIGNING_HINT = "Release builds may fail to sign."

_NEWLINE = re.compile(r'\r\n|\r|\n')
_WHITESPACE = ' \t\f'
_SEPARATORS = '=:'
_COMMENTS = '#!'
_ESCAPES = {'t': '\t', 'n': '\n', 'r': '\r', 'f': '\f'}


def _continues(line: str) -> bool:
    """A line continues when it ends with an odd number of backslashes."""
    trailing = len(line) - len(line.rstrip('\\'))
    return trailing % 2 == 1


def _logical_lines(text: str) -> Iterator[Tuple[int, str]]:
    """Yield (line number, logical line) pairs with comments and blanks removed."""
    pending = None
    start = 0
    for number, line in enumerate(_NEWLINE.split(text), start=1):
        line = line.lstrip(_WHITESPACE)
        if pending is None:
            if not line or line[0] in _COMMENTS:
                continue
            start = number
            pending = ''
        if _continues(line):
            pending += line[:-1]
            continue
        yield start, pending + line
        pending = None
    if pending is not None:
        yield start, pending


def _split_entry(line: str) -> Tuple[str, str]:
    """Split a logical line into raw (still escaped) key and value."""
    index = 0
    while index < len(line):
        char = line[index]
        if char == '\\':
            index += 2
            continue
        if char in _SEPARATORS or char in _WHITESPACE:
            break
        index += 1

    key = line[:index]
    rest = line[index:].lstrip(_WHITESPACE)
    if rest and rest[0] in _SEPARATORS:
        rest = rest[1:].lstrip(_WHITESPACE)
    return key, rest


def _unescape(raw: str, line_number: int) -> str:
    chars = []
    index = 0
    while index < len(raw):
        char = raw[index]
        index += 1
        if char != '\\':
            chars.append(char)
            continue
        if index >= len(raw):
            break
        char = raw[index]
        index += 1
        if char == 'u':
            digits = raw[index:index + 4]
            if len(digits) != 4 or any(c not in string.hexdigits for c in digits):
                raise MalformedPropertiesException(
                    f"Malformed \\uxxxx encoding: \\u{digits}", line_number=line_number
                )
            chars.append(chr(int(digits, 16)))
            index += 4
        else:
            chars.append(_ESCAPES.get(char, char))
    return ''.join(chars)


def parse_properties(text: str) -> Dict[str, str]:
    """Parse properties text into an ordered dictionary.

    Later duplicates overwrite the value but keep the key's first position.

    Raises:
        MalformedPropertiesException: If a ``\\u`` escape is not followed by four hex digits
    """
    entries = {}
    for line_number, line in _logical_lines(text):
        raw_key, raw_value = _split_entry(line)
        entries[_unescape(raw_key, line_number)] = _unescape(raw_value, line_number)
    return entries


def load_properties(root_dir: Union[str, Path], file_name: str,
                    encoding: str = DEFAULT_ENCODING,
                    missing_hint: str = SIGNING_HINT) -> Tuple[PropertyFile, bool]:
    """Load ``root_dir/file_name`` as a properties file.

    A missing file is an expected state for non-release builds: it is reported
    with a single warning and an empty PropertyFile is returned.

    Args:
        root_dir: Directory the file name is relative to
        file_name: Name of the properties file (e.g. 'key.properties')
        encoding: Text encoding of the file, ISO-8859-1 like the JVM reader
        missing_hint: Extra sentence appended to the missing-file warning

    Returns:
        Tuple of (PropertyFile, found)
    """
    path = Path(root_dir) / file_name
    if not path.is_file():
        logger.warning(f"{file_name} not found. {missing_hint}".rstrip())
        return PropertyFile(), False

    with open(path, 'r', encoding=encoding, newline='') as f:
        text = f.read()

    try:
        entries = parse_properties(text)
    except MalformedPropertiesException as e:
        raise MalformedPropertiesException(str(e), line_number=e.line_number, file_name=file_name) from e

    logger.debug(f"Loaded {len(entries)} properties from {path}")
    return PropertyFile(path=path, entries=entries), True
