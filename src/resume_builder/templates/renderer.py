import re
from collections.abc import Mapping

PLACEHOLDER_RE = re.compile(r"\{\{(\w+)\}\}")


def render_template(template: str, values: Mapping[str, str]) -> str:
    """Replace every literal ``{{key}}`` in template with its value.

    Placeholders without a value are left as-is and unused keys are ignored.
    """
    for key, value in values.items():
        template = template.replace("{{" + key + "}}", value)
    return template


def find_placeholders(template: str) -> list[str]:
    """Return placeholder names in order of first appearance."""
    seen: list[str] = []
    for name in PLACEHOLDER_RE.findall(template):
        if name not in seen:
            seen.append(name)
    return seen
