"""Text helpers shared by the git, message and stack modules."""

import re
import unicodedata
from typing import List, Optional, TypeVar

T = TypeVar('T')

# Unicode White_Space. str.isspace() also accepts the \x1c-\x1f separators, which
# must be dropped by slugify rather than turned into hyphens.
WHITESPACE = (
    '\t\n\x0b\x0c\r \x85\xa0\u1680'
    '\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a'
    '\u2028\u2029\u202f\u205f\u3000'
)

MAX_PR_NUMBER = 2 ** 64 - 1

_PARENS_GROUP_RE = re.compile(r'\(.*?\)')
_PARENS_CHAR_RE = re.compile(r'[()]')
_PR_NUMBER_RE = re.compile(r'\+?[0-9]+')
_TOKEN_RE = re.compile(f'[^{re.escape(WHITESPACE)}]+')


def ensure(value: Optional[T]) -> T:
    """Ensure a value is not None, raising RuntimeError if it is.

    Args:
        value: The value to check

    Returns:
        The value if it is not None

    Raises:
        RuntimeError: If the value is None
    """
    if value is None:
        raise RuntimeError("Value is None")
    return value


def slugify(text: str) -> str:
    """Turn free text into a lowercase, hyphen-separated identifier.

    Accented letters are decomposed (NFD) so that the base letter survives
    the ASCII filter, e.g. "ĥêlļō ŵöřľď" becomes "hello-world".

    Args:
        text: Arbitrary text, typically a commit or PR title

    Returns:
        A string made only of [a-z0-9_-] with no repeated hyphens
    """
    chars: List[str] = []
    for c in unicodedata.normalize('NFD', text.strip(WHITESPACE)):
        if c in WHITESPACE:
            c = '-'
        if not (c.isascii() and (c.isalnum() or c in '_-')):
            continue
        c = c.lower()
        if c == '-' and chars and chars[-1] == '-':
            continue
        chars.append(c)
    return ''.join(chars)


def parse_name_list(text: str) -> List[str]:
    """Parse a comma separated list of names, dropping "(...)" annotations.

    "foo (Mr Foo), bar (Ms Bar)" gives ["foo", "bar"]. Parentheses are not
    matched recursively, so nested groups leave stray characters behind.
    """
    names = _PARENS_GROUP_RE.sub(',', text).split(',')
    return [name.strip(WHITESPACE) for name in names if name.strip(WHITESPACE)]


def parse_pr_stack_list(text: str) -> List[int]:
    """Parse PR numbers out of a PR stack block.

    Given a PR stack string that looks like:

        https://github.com/owner/repo/pull/1 <-- (current PR)
        https://github.com/owner/repo/pull/2
        https://github.com/owner/repo/pull/3

    returns [1, 2, 3]. Only the first whitespace separated token of each line
    is looked at; lines where it does not end in a number are skipped.
    """
    numbers: List[int] = []
    for line in text.split('\n'):
        if line.endswith('\r'):
            line = line[:-1]
        token = _TOKEN_RE.search(line)
        if not token:
            continue
        last = token.group().split('/')[-1]
        if _PR_NUMBER_RE.fullmatch(last) and int(last) <= MAX_PR_NUMBER:
            numbers.append(int(last))
    return numbers


def remove_all_parens(text: str) -> str:
    """Delete every "(" and ")" character from text."""
    return _PARENS_CHAR_RE.sub('', text)
