from __future__ import annotations

import logging

import pytest

from forgefoundry.rendering.engine import (
    BLADE,
    MUSTACHE,
    TWIG,
    EngineRegistry,
    default_registry,
    render,
)


class UpperRenderer:
    def render(self, body, placeholders):
        return body.upper()


@pytest.mark.parametrize("engine", [MUSTACHE, TWIG, BLADE, "unknown"])
def test_none_placeholders_pass_body_through(engine: str):
    body = "{{ untouched }} ${raw} <% x %>\n"
    assert render(None, body, engine) == body


def test_mustache():
    assert render({"entity": "User"}, "class {{entity}}Dto {}", MUSTACHE) == "class UserDto {}"


def test_mustache_sections():
    body = "{{#fields}}- {{.}}\n{{/fields}}"
    assert render({"fields": ["id", "name"]}, body, MUSTACHE) == "- id\n- name\n"


def test_twig():
    body = "{% for f in fields %}{{ f|upper }};{% endfor %}\n"
    assert render({"fields": ["id", "name"]}, body, TWIG) == "ID;NAME;\n"


def test_blade():
    assert render({"entity": "User"}, "class ${entity}Controller", BLADE) == "class UserController"


def test_unknown_engine_returns_none(caplog):
    with caplog.at_level(logging.ERROR):
        assert render({"a": 1}, "body", "unknown") is None
    assert "Unsupported template engine: 'unknown'" in caplog.text


def test_render_failure_returns_none(caplog):
    with caplog.at_level(logging.ERROR):
        assert render({"a": 1}, "{{ missing.attr }}", TWIG) is None
    assert "failed to render" in caplog.text


def test_registered_engine_is_used():
    registry = EngineRegistry()
    registry.register("shout", UpperRenderer())
    assert "shout" in registry
    assert render({}, "hello", "shout", registry) == "HELLO"


def test_default_registry_engines():
    assert list(default_registry()) == [MUSTACHE, TWIG, BLADE]


def test_blade_attribute_error_returns_none(caplog):
    with caplog.at_level(logging.ERROR):
        assert render({"entity": "User"}, "${entity.nope}", BLADE) is None
    assert "Template engine 'blade.php' failed to render" in caplog.text


def test_twig_runtime_error_returns_none():
    assert render({"n": 0}, "{{ 1 / n }}", TWIG) is None
