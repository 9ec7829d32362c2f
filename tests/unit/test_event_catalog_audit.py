from __future__ import annotations

import re
import string
from pathlib import Path

from consolation.logs.event_catalog import EVENT_TEMPLATES

_PACKAGE = Path(__file__).parents[2] / "consolation"
_LOG_EVENT = re.compile(r'log_event\(\s*"(\w+)",\s*"(\w+)"')


def _emitted_events() -> set[tuple[str, str]]:
    events: set[tuple[str, str]] = set()
    for path in _PACKAGE.rglob("*.py"):
        events.update(_LOG_EVENT.findall(path.read_text(encoding="utf-8")))
    return events


def test_every_emitted_event_has_a_template() -> None:
    missing = _emitted_events() - set(EVENT_TEMPLATES)
    assert not missing, f"Events without template: {sorted(missing)}"


def test_every_template_is_emitted() -> None:
    unused = set(EVENT_TEMPLATES) - _emitted_events()
    assert not unused, f"Templates never emitted: {sorted(unused)}"


def test_templates_render_with_their_fields() -> None:
    for (domain, action), template in EVENT_TEMPLATES.items():
        fields = {name for _, name, _, _ in string.Formatter().parse(template) if name}
        template.format(**dict.fromkeys(fields, "x"))
