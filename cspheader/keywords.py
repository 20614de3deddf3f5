"""Header key and keyword-source constants for Content-Security-Policy."""

from __future__ import annotations

HEADER_KEY = "Content-Security-Policy"

# Acceptable webrtc values
WEBRTC_ALLOW = "'allow'"
WEBRTC_BLOCK = "'block'"

# Keyword sources used in directive values (CSP Level 3)
SOURCE_NONE = "'none'"
SOURCE_SELF = "'self'"
SOURCE_UNSAFE_INLINE = "'unsafe-inline'"
SOURCE_UNSAFE_EVAL = "'unsafe-eval'"
SOURCE_STRICT_DYNAMIC = "'strict-dynamic'"
SOURCE_UNSAFE_HASHES = "'unsafe-hashes'"
SOURCE_REPORT_SAMPLE = "'report-sample'"
SOURCE_UNSAFE_ALLOW_REDIRECTS = "'unsafe-allow-redirects'"
SOURCE_WASM_UNSAFE_EVAL = "'wasm-unsafe-eval'"

KEYWORD_SOURCES: frozenset[str] = frozenset({
    SOURCE_NONE,
    SOURCE_SELF,
    SOURCE_UNSAFE_INLINE,
    SOURCE_UNSAFE_EVAL,
    SOURCE_STRICT_DYNAMIC,
    SOURCE_UNSAFE_HASHES,
    SOURCE_REPORT_SAMPLE,
    SOURCE_UNSAFE_ALLOW_REDIRECTS,
    SOURCE_WASM_UNSAFE_EVAL,
    WEBRTC_ALLOW,
    WEBRTC_BLOCK,
})


def is_keyword_source(token: str) -> bool:
    """Return True if token is a keyword source.

    Keyword sources must already be enclosed in single quotes; the comparison
    is case-sensitive.
    """
    return token in KEYWORD_SOURCES
