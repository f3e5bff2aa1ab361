"""
Compiles user format templates into regular expressions with named groups.

A template mixes literal regex with placeholders, e.g. ``"\\d+\\. %t %o"``.
Each placeholder of the template's category becomes a named capture group;
everything else, including regex metacharacters, is passed through untouched.
"""

import re
from enum import Enum
from typing import NamedTuple

from ytdl_album.exceptions import TemplateError


class Placeholder(NamedTuple):
    group: str
    pattern: str
    description: str


class TemplateKind(str, Enum):
    TRACK = "track"
    TITLE = "title"


PLACEHOLDERS: dict[TemplateKind, dict[str, Placeholder]] = {
    TemplateKind.TRACK: {
        "%t": Placeholder("title", r".*", "track title"),
        "%o": Placeholder("offset", r"(\d{1,2}:)?\d{1,2}:\d{1,2}", "track offset"),
    },
    TemplateKind.TITLE: {
        "%p": Placeholder("performer", r".*", "album performer/artist"),
        "%a": Placeholder("album", r".*", "album title"),
    },
}


def expand_template(template: str, kind: TemplateKind) -> str:
    """
    Replaces the placeholders of ``kind`` with named capture groups.

    Only the first occurrence of a placeholder is expanded, since a pattern
    cannot hold two groups with the same name. Unknown tokens stay literal.
    """
    table = PLACEHOLDERS[kind]
    token_re = re.compile("|".join(re.escape(token) for token in table))
    seen: set[str] = set()

    def replacer(match: re.Match) -> str:
        token = match.group(0)
        if token in seen:
            return token
        seen.add(token)
        placeholder = table[token]
        return f"(?P<{placeholder.group}>{placeholder.pattern})"

    return token_re.sub(replacer, template)


def compile_template(template: str, kind: TemplateKind) -> re.Pattern:
    """
    Builds the matching pattern for a track or title template.

    Raises:
        TemplateError: If the regex fragments of the template are invalid.
    """
    expanded = expand_template(template, kind)
    try:
        return re.compile(expanded)
    except re.error as e:
        raise TemplateError(
            f"Invalid {kind.value} format '{template}' (expanded to '{expanded}'): {e}"
        ) from e


def template_groups(kind: TemplateKind) -> list[str]:
    """Returns the capture group names a template of ``kind`` can yield."""
    return [placeholder.group for placeholder in PLACEHOLDERS[kind].values()]
