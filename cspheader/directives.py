"""Directive set model and the directive name table."""

from __future__ import annotations

import types
from typing import NamedTuple

from pydantic import BaseModel, ConfigDict

Sources = tuple[str, ...]


class Directives(BaseModel):
    """Possible Content-Security-Policy rules.

    List-valued slots hold source tokens in the order they should be emitted.
    report_to, sandbox and webrtc take a single token.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    base_uri: Sources = ()
    child_src: Sources = ()
    connect_src: Sources = ()
    default_src: Sources = ()
    font_src: Sources = ()
    form_action: Sources = ()
    frame_ancestors: Sources = ()
    frame_src: Sources = ()
    img_src: Sources = ()
    manifest_src: Sources = ()
    media_src: Sources = ()
    object_src: Sources = ()
    report_to: str = ""
    sandbox: str = ""
    script_src: Sources = ()
    script_src_attr: Sources = ()
    script_src_elem: Sources = ()
    style_src: Sources = ()
    style_src_attr: Sources = ()
    style_src_elem: Sources = ()
    webrtc: str = ""
    worker_src: Sources = ()


class Directive(NamedTuple):
    field: str
    name: str
    scalar: bool = False


# Serialization order. Names follow Content Security Policy Level 3.
DIRECTIVES: tuple[Directive, ...] = (
    Directive("base_uri", "base-uri"),
    Directive("child_src", "child-src"),
    Directive("connect_src", "connect-src"),
    Directive("default_src", "default-src"),
    Directive("font_src", "font-src"),
    Directive("form_action", "form-action"),
    Directive("frame_ancestors", "frame-ancestors"),
    Directive("frame_src", "frame-src"),
    Directive("img_src", "img-src"),
    Directive("manifest_src", "manifest-src"),
    Directive("media_src", "media-src"),
    Directive("object_src", "object-src"),
    Directive("report_to", "report-to", scalar=True),
    Directive("sandbox", "sandbox", scalar=True),
    Directive("script_src", "script-src"),
    Directive("script_src_attr", "script-src-attr"),
    Directive("script_src_elem", "script-src-elem"),
    Directive("style_src", "style-src"),
    Directive("style_src_attr", "style-src-attr"),
    Directive("style_src_elem", "style-src-elem"),
    Directive("webrtc", "webrtc", scalar=True),
    Directive("worker_src", "worker-src"),
)

# Field name -> directive name
CNAME: types.MappingProxyType = types.MappingProxyType({d.field: d.name for d in DIRECTIVES})
