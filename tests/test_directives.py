"""Tests for the directive model and name table."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from cspheader.directives import CNAME, DIRECTIVES, Directives


class TestDirectiveTable:
    def test_twenty_two_directives(self):
        assert len(DIRECTIVES) == 22

    def test_table_matches_model_fields_in_order(self):
        assert [d.field for d in DIRECTIVES] == list(Directives.model_fields)

    def test_scalar_directives(self):
        scalars = {d.name for d in DIRECTIVES if d.scalar}
        assert scalars == {"report-to", "sandbox", "webrtc"}

    def test_scalar_fields_are_strings(self):
        empty = Directives()
        for d in DIRECTIVES:
            value = getattr(empty, d.field)
            if d.scalar:
                assert value == ""
            else:
                assert value == ()

    def test_wire_names_are_unique(self):
        names = [d.name for d in DIRECTIVES]
        assert len(set(names)) == len(names)

    def test_cname_lookup(self):
        assert CNAME["base_uri"] == "base-uri"
        assert CNAME["default_src"] == "default-src"
        assert CNAME["script_src_elem"] == "script-src-elem"
        assert CNAME["webrtc"] == "webrtc"

    def test_cname_is_read_only(self):
        with pytest.raises(TypeError):
            CNAME["default_src"] = "default"


class TestDirectivesModel:
    def test_accepts_lists(self):
        ds = Directives(default_src=["'self'", "example.com"])
        assert ds.default_src == ("'self'", "example.com")

    def test_preserves_order_and_duplicates(self):
        ds = Directives(img_src=["b.com", "a.com", "b.com"])
        assert ds.img_src == ("b.com", "a.com", "b.com")

    def test_unknown_directive_rejected(self):
        with pytest.raises(ValidationError):
            Directives(upgrade_insecure_requests=["x"])

    def test_bare_string_for_list_directive_rejected(self):
        with pytest.raises(ValidationError):
            Directives(default_src="'self'")

    def test_frozen(self):
        ds = Directives(default_src=["'self'"])
        with pytest.raises(ValidationError):
            ds.default_src = ("'none'",)

    def test_input_list_mutation_does_not_leak(self):
        sources = ["'self'"]
        ds = Directives(script_src=sources)
        sources.append("evil.example")
        assert ds.script_src == ("'self'",)
