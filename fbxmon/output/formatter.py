"""Collector output — sample lines and graph metadata blocks."""

from __future__ import annotations

from typing import Iterable

from fbxmon.metrics import MetricFamily
from fbxmon.metrics.base import MetricSample
from fbxmon.output.describe import GRAPH_CATEGORY, graph_for


def format_samples(samples: Iterable[MetricSample]) -> list[str]:
    """One ``name.value N`` line per sample, in order."""
    return [f"{sample.name}.value {sample.value}" for sample in samples]


def describe(family: MetricFamily) -> list[str]:
    """Static metadata block for *family*; needs no page."""
    graph = graph_for(family)
    lines = [
        f"graph_title {graph.title}",
        f"graph_args {graph.args}",
        f"graph_vlabel {graph.vlabel}",
        f"graph_category {GRAPH_CATEGORY}",
        f"graph_info {graph.info}",
    ]
    for spec in graph.fields:
        lines.append(f"{spec.name}.label {spec.label}")
        if spec.info:
            lines.append(f"{spec.name}.info {spec.info}")
        if spec.min:
            lines.append(f"{spec.name}.min {spec.min}")
        if spec.draw:
            lines.append(f"{spec.name}.draw {spec.draw}")
    return lines


def render(lines: list[str]) -> str:
    if not lines:
        return ""
    return "\n".join(lines) + "\n"
