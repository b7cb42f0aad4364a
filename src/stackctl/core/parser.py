"""Token interpretation — turns command-line words into an ActionSet.

Pure function of its input: no printing, no exiting.  The CLI layer
decides what to render for a :class:`ParseOutcome` or a
:class:`~stackctl.exceptions.UsageError`.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import replace

from stackctl.core.models import ActionSet, ParseOutcome
from stackctl.exceptions import UnknownTokenError


USAGE_TOKENS: frozenset[str] = frozenset({"usage", "u"})

TOKEN_FIELDS: Mapping[str, str] = {
    "build": "build",
    "b": "build",
    "start": "start",
    "s": "start",
    "detached": "detached",
    "d": "detached",
    "halt": "halt",
    "stop": "halt",
    "h": "halt",
    "tidy": "tidy",
    "t": "tidy",
    "clean": "clean",
    "c": "clean",
    "armageddon": "armageddon",
    "a": "armageddon",
}
"""Every recognised action keyword mapped to its :class:`ActionSet` field."""


def parse_tokens(tokens: Iterable[str]) -> ParseOutcome:
    """Interpret *tokens* as a set of lifecycle actions.

    ``usage`` (or ``u``) anywhere in the input short-circuits everything
    else, unknown tokens included.  Otherwise each token sets its field;
    repeating a token is harmless.

    Raises
    ------
    UnknownTokenError
        On the first token outside the vocabulary.
    """
    words = list(tokens)
    if any(word in USAGE_TOKENS for word in words):
        return ParseOutcome(actions=ActionSet(), show_usage=True)

    actions = ActionSet()
    for word in words:
        field_name = TOKEN_FIELDS.get(word)
        if field_name is None:
            raise UnknownTokenError(word, hint="Run 'stackctl usage' to list valid options.")
        actions = replace(actions, **{field_name: True})
    return ParseOutcome(actions=actions)
