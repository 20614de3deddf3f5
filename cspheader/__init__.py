"""
cspheader - Content-Security-Policy header value builder
"""

__version__ = "0.1.0"

from cspheader.directives import CNAME, DIRECTIVES, Directive, Directives
from cspheader.keywords import (
    HEADER_KEY,
    KEYWORD_SOURCES,
    SOURCE_NONE,
    SOURCE_REPORT_SAMPLE,
    SOURCE_SELF,
    SOURCE_STRICT_DYNAMIC,
    SOURCE_UNSAFE_ALLOW_REDIRECTS,
    SOURCE_UNSAFE_EVAL,
    SOURCE_UNSAFE_HASHES,
    SOURCE_UNSAFE_INLINE,
    SOURCE_WASM_UNSAFE_EVAL,
    WEBRTC_ALLOW,
    WEBRTC_BLOCK,
    is_keyword_source,
)
from cspheader.policy import basic, basic_tight, canon, canons, policy
from cspheader.presets import PresetNotFoundError, get_preset, preset_policy

__all__ = [
    "CNAME",
    "DIRECTIVES",
    "Directive",
    "Directives",
    "HEADER_KEY",
    "KEYWORD_SOURCES",
    "PresetNotFoundError",
    "SOURCE_NONE",
    "SOURCE_REPORT_SAMPLE",
    "SOURCE_SELF",
    "SOURCE_STRICT_DYNAMIC",
    "SOURCE_UNSAFE_ALLOW_REDIRECTS",
    "SOURCE_UNSAFE_EVAL",
    "SOURCE_UNSAFE_HASHES",
    "SOURCE_UNSAFE_INLINE",
    "SOURCE_WASM_UNSAFE_EVAL",
    "WEBRTC_ALLOW",
    "WEBRTC_BLOCK",
    "basic",
    "basic_tight",
    "canon",
    "canons",
    "get_preset",
    "is_keyword_source",
    "policy",
    "preset_policy",
]
