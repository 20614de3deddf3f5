"""Pure-function CSP (Content-Security-Policy) serialization."""

from __future__ import annotations

from collections.abc import Iterable

from cspheader.directives import DIRECTIVES, Directives
from cspheader.keywords import SOURCE_NONE, SOURCE_SELF, is_keyword_source

_CLAUSE = "{} {}; "


def canon(token: str) -> str:
    """Return token trimmed of surrounding whitespace.

    If the trimmed token names a keyword source it is also lowered and
    enclosed in single quotes, so "self", "  Self " and "'self'" all become
    "'self'".
    """
    stripped = token.strip()
    # Keywords are ASCII; str.lower() would fold e.g. KELVIN SIGN into "k".
    if not stripped.isascii():
        return stripped
    keyword = f"'{stripped.lower()}'"
    if is_keyword_source(keyword):
        return keyword
    return stripped


def canons(tokens: Iterable[str]) -> list[str]:
    """Apply canon to every token, keeping order and length."""
    return [canon(t) for t in tokens]


def policy(directives: Directives) -> str:
    """Build the Content-Security-Policy header value for directives.

    Clauses follow the order of DIRECTIVES. Empty slots are omitted. Blank
    tokens within list slots are dropped too, so default_src=["  "] leaves
    default-src out entirely rather than emitting a bare "default-src ;".

    Example:
        >>> policy(Directives(default_src=["self"], report_to="jd@example.com"))
        "default-src 'self'; report-to jd@example.com;"
    """
    parts = []
    for directive in DIRECTIVES:
        value = getattr(directives, directive.field)
        if directive.scalar:
            value = canon(value)
        else:
            value = " ".join(t for t in canons(value) if t)
        if value:
            parts.append(_CLAUSE.format(directive.name, value))
    return "".join(parts).rstrip()


def basic() -> str:
    """Return a simple, non-strict policy.

    'self' is set on default-src, form-action and frame-ancestors.
    """
    self_only = (SOURCE_SELF,)
    return policy(Directives(
        default_src=self_only,
        form_action=self_only,
        frame_ancestors=self_only,
    ))


def basic_tight() -> str:
    """Return a tightened form of basic().

    default-src is 'none'; connect-src, form-action, frame-ancestors,
    img-src, script-src and style-src are 'self'.
    """
    self_only = (SOURCE_SELF,)
    return policy(Directives(
        default_src=(SOURCE_NONE,),
        connect_src=self_only,
        form_action=self_only,
        frame_ancestors=self_only,
        img_src=self_only,
        script_src=self_only,
        style_src=self_only,
    ))
