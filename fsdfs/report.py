#!/usr/bin/env python3
"""Text report of a classified FSD root using Jinja2.

The report lists layers in dependency order, their slices and segments,
and the index files that form each public API:

    src
    shared (unsliced) [index.ts]
      ui
      lib
    entities
      user [index.ts]
        model

A custom Jinja2 template can be passed; it receives `root` (the root path)
and `layers` (see build_report_context()).

Example:
    >>> print(render_structure(root))
"""

from typing import Any, Dict, Iterable, List, Optional

import jinja2

from fsdfs.classifier import get_indexes, get_layer_order, get_layers, get_segments, get_slices, is_sliced
from fsdfs.core.tree import Folder

DEFAULT_TEMPLATE = """\
{{ root }}
{% for layer in layers %}
{{ layer.name }}{% if not layer.sliced %} (unsliced){% endif %}{% if layer.indexes %} [{{ layer.indexes | join(", ") }}]{% endif %}

{% for segment in layer.segments %}
  {{ segment }}
{% endfor %}
{% for slice in layer.slices %}
  {{ slice.name }}{% if slice.indexes %} [{{ slice.indexes | join(", ") }}]{% endif %}

{% for segment in slice.segments %}
    {{ segment }}
{% endfor %}
{% endfor %}
{% endfor %}
"""


class ReportError(Exception):
    """Error while rendering a report."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


def build_report_context(
    root: Folder, additional_segment_names: Iterable[str] = ()
) -> Dict[str, Any]:
    """Collect the template context for a report.

    Returns:
        Dictionary with `root` and `layers`. Each layer has `name`, `sliced`,
        `indexes`, `segments` (unsliced layers only) and `slices` (each with
        `name`, `indexes` and `segments`).
    """
    extra = tuple(additional_segment_names)
    layers: List[Dict[str, Any]] = []

    ordered = sorted(get_layers(root).items(), key=lambda item: get_layer_order(item[0]))
    for layer_name, layer in ordered:
        sliced = is_sliced(layer)
        entry: Dict[str, Any] = {
            "name": layer_name,
            "sliced": sliced,
            "indexes": [index.name for index in get_indexes(layer)],
            "segments": [] if sliced else list(get_segments(layer)),
            "slices": [],
        }

        if sliced:
            for slice_name, folder in get_slices(layer, extra).items():
                entry["slices"].append(
                    {
                        "name": slice_name,
                        "indexes": [index.name for index in get_indexes(folder)],
                        "segments": list(get_segments(folder)),
                    }
                )

        layers.append(entry)

    return {"root": root.path, "layers": layers}


def render_structure(
    root: Folder,
    additional_segment_names: Iterable[str] = (),
    template: Optional[str] = None,
) -> str:
    """Render a text report of an FSD root.

    Args:
        root: FSD root folder
        additional_segment_names: Extra names that count as segments
        template: Optional Jinja2 template source

    Returns:
        Rendered report

    Raises:
        ReportError: If the template cannot be rendered
    """
    env = jinja2.Environment(trim_blocks=True, lstrip_blocks=True, undefined=jinja2.StrictUndefined)
    context = build_report_context(root, additional_segment_names)

    try:
        return env.from_string(template or DEFAULT_TEMPLATE).render(**context)
    except jinja2.TemplateError as e:
        raise ReportError(f"Template error: {e}")
