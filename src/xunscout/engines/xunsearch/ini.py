"""Project INI builder.

A Xunsearch session is created from a project definition in INI format::

    project.name = posts
    server.index = 127.0.0.1:8383
    server.search = 127.0.0.1:8384

    [id]
    type = id

    [title]
    type = title

Global keys come first, then one section per schema field in declaration
order. Nothing is validated here; the backend reports malformed projects
when it loads them.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from xunscout.config.settings import HostSettings, XunsearchSettings

_NEEDS_QUOTING = re.compile(r'[\s=;"{}|&~!\[\]()^$]')


def build_ini(project: str, hosts: HostSettings, schema: Mapping[str, str]) -> str:
    """Serialize a project definition to INI text.

    Args:
        project: Project (index) name.
        hosts: Index and search server addresses.
        schema: Field name to Xunsearch field type.

    Returns:
        The INI document, newline terminated.
    """
    config: dict[str, Any] = {
        "project.name": project,
        "server.index": hosts.index,
        "server.search": hosts.search,
    }
    for field, field_type in schema.items():
        config[field] = {"type": field_type}
    return generate(config)


def build_model_ini(settings: XunsearchSettings, model: Any) -> str:
    """Build the project INI for a searchable model type."""
    return build_ini(model.searchable_as(), settings.hosts, model.searchable_schema())


def generate(config: Mapping[str, Any]) -> str:
    """Render a mapping as INI, scalars first and nested mappings as sections."""
    lines: list[str] = []
    sections: list[tuple[str, Mapping[str, Any]]] = []

    for key, value in config.items():
        if isinstance(value, Mapping):
            sections.append((key, value))
        else:
            lines.append(f"{key} = {format_value(value)}")

    for name, body in sections:
        if lines:
            lines.append("")
        lines.append(f"[{name}]")
        for key, value in body.items():
            lines.append(f"{key} = {format_value(value)}")

    return "\n".join(lines) + "\n"


def format_value(value: Any) -> str:
    """Render one INI value, quoting strings the INI parser would misread."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return '""'
    if isinstance(value, (int, float)):
        return str(value)
    text = str(value)
    if text == "" or _NEEDS_QUOTING.search(text):
        return '"' + text.replace('"', '\\"') + '"'
    return text
