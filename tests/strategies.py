"""Hypothesis strategies for combparse tests.

Provides generators for identifiers, literals, whitespace runs and
well-formed JSON/XML documents together with their expected values, plus
deeply nested bracket and tag soup for nesting-limit checks.
"""

from __future__ import annotations

import string

from hypothesis import strategies as st
from hypothesis.strategies import composite

from combparse.grammars import json as json_grammar
from combparse.grammars import xml as xml_grammar

# Any text, kept short for speed.
any_text = st.text(max_size=60)

# Literal candidates, non-empty so they always consume.
literals = st.text(alphabet=string.ascii_letters + string.digits + "<>/{}[]:,\"", min_size=1, max_size=8)

whitespace_runs = st.text(alphabet=" \t\r\n", max_size=5)

json_keys = st.text(alphabet=string.ascii_letters + string.digits + " _-", max_size=10)


@composite
def identifiers(draw: st.DrawFn) -> str:
    """Generate identifiers: a letter followed by letters, digits or hyphens."""
    first = draw(st.sampled_from(string.ascii_letters))
    rest = draw(st.text(alphabet=string.ascii_letters + string.digits + "-", max_size=12))
    return first + rest


@composite
def json_documents(draw: st.DrawFn, max_depth: int = 3) -> tuple[str, json_grammar.Element]:
    """Generate (source, expected element) pairs for the JSON grammar."""
    ws = draw(whitespace_runs)
    if max_depth <= 0:
        kind = draw(st.sampled_from(["null", "bool", "number", "string"]))
    else:
        kind = draw(st.sampled_from(["null", "bool", "number", "string", "array", "object"]))

    match kind:
        case "null":
            return "null", json_grammar.JsonNull()
        case "bool":
            flag = draw(st.booleans())
            return ("true" if flag else "false"), json_grammar.JsonBool(flag)
        case "number":
            n = draw(st.integers(min_value=0, max_value=10**12))
            return str(n), json_grammar.JsonNumber(n)
        case "string":
            s = draw(json_keys)
            return f'"{s}"', json_grammar.JsonString(s)
        case "array":
            items = draw(st.lists(json_documents(max_depth - 1), max_size=4))
            body = f",{ws}".join(src for src, _ in items)
            return f"[{ws}{body}{ws}]", json_grammar.JsonArray(tuple(v for _, v in items))
        case _:
            keys = draw(st.lists(json_keys, max_size=4, unique=True))
            values = [draw(json_documents(max_depth - 1)) for _ in keys]
            body = f"{ws},{ws}".join(
                f'"{k}"{ws}:{ws}{src}' for k, (src, _) in zip(keys, values, strict=True)
            )
            members = {k: v for k, (_, v) in zip(keys, values, strict=True)}
            return f"{{{ws}{body}{ws}}}", json_grammar.JsonObject(members)


@composite
def xml_documents(draw: st.DrawFn, max_depth: int = 3) -> tuple[str, xml_grammar.Element]:
    """Generate (source, expected element) pairs for the XML grammar."""
    name = draw(identifiers())
    attr_names = draw(st.lists(identifiers(), max_size=3))
    attrs = tuple(
        (attr, draw(st.text(alphabet=string.ascii_letters + " ", max_size=8)))
        for attr in attr_names
    )
    attr_src = "".join(f' {k}="{v}"' for k, v in attrs)

    if max_depth <= 0 or draw(st.booleans()):
        return f"<{name}{attr_src}/>", xml_grammar.Element(name, attrs)

    children = draw(st.lists(xml_documents(max_depth - 1), max_size=3))
    # An empty parent must close immediately: whitespace is only skipped around children.
    ws = draw(whitespace_runs) if children else ""
    inner = ws.join(src for src, _ in children)
    source = f"<{name}{attr_src}>{ws}{inner}{ws}</{name}>"
    return source, xml_grammar.Element(name, attrs, tuple(child for _, child in children))


@composite
def json_soup(draw: st.DrawFn) -> str:
    """Generate bracket-heavy text, valid or not, that can nest far past MAX_DEPTH."""
    json_openers = st.sampled_from(["[", "[ ", "[1,", '{"k":', '{ "k" : '])
    openers = draw(st.lists(json_openers, max_size=300))
    tail = draw(st.text(alphabet='[]{}":, 0null', max_size=30))
    closers = draw(st.text(alphabet="]} ", max_size=300))
    return "".join(openers) + tail + closers


@composite
def xml_soup(draw: st.DrawFn) -> str:
    """Generate tag-heavy text, valid or not, that can nest far past MAX_DEPTH."""
    xml_openers = st.sampled_from(["<a>", '<b x="1">', "<c/>", " "])
    openers = draw(st.lists(xml_openers, max_size=300))
    tail = draw(st.text(alphabet='<>/ab="', max_size=30))
    closers = draw(st.lists(st.sampled_from(["</a>", "</b>", " "]), max_size=300))
    return "".join(openers) + tail + "".join(closers)
