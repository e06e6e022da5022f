# tests/arch/test_layering.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Layering guardrail using grimp import graph.

This test builds an import graph for the `bsonjson` package and enforces
a strict layering policy:

    domain         → may depend only on domain
    adapters       → may depend on {domain, adapters, infrastructure}
    infrastructure → may depend on {domain, infrastructure}

Modules outside the layer matrix (config, tasks, types) are ignored.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Final

import grimp
from grimp import ImportGraph

ROOT_PACKAGE: Final[str] = "bsonjson"

# Map from top-level "layer" to the set of layers it is allowed to import.
ALLOWED_DEPENDENCIES: Mapping[str, set[str]] = {
    # Domain is the inner core: it only depends on itself.
    "domain": {"domain"},
    # Mappers sit on top of the codec wrappers.
    "adapters": {"domain", "adapters", "infrastructure"},
    # Codec wrappers, streams and logging never reach back into mappers.
    "infrastructure": {"domain", "infrastructure"},
}


def _build_graph() -> ImportGraph:
    """Build the import graph for the root package using grimp."""
    return grimp.build_graph(ROOT_PACKAGE)


def _layer_for_module(module_name: str) -> str | None:
    """Infer the logical layer for a module from its first sub-package.

        bsonjson.domain.*          → "domain"
        bsonjson.adapters.*        → "adapters"
        bsonjson.infrastructure.*  → "infrastructure"
    """
    if not module_name.startswith(f"{ROOT_PACKAGE}."):
        return None

    rest = module_name[len(ROOT_PACKAGE) + 1 :]
    top = rest.split(".", 1)[0]

    if top in ALLOWED_DEPENDENCIES:
        return top
    return None


def _find_layering_violations(graph: ImportGraph) -> list[str]:
    """Scan the graph and return human-readable layering violations."""
    violations: set[str] = set()

    for importer in sorted(graph.modules):
        importer_layer = _layer_for_module(importer)
        if importer_layer is None:
            continue

        allowed_targets = ALLOWED_DEPENDENCIES[importer_layer]

        for imported in graph.find_modules_directly_imported_by(importer):
            imported_layer = _layer_for_module(imported)
            if imported_layer is None:
                continue

            if imported_layer not in allowed_targets:
                violations.add(
                    f"{importer} ({importer_layer}) -> {imported} ({imported_layer}) "
                    "is not allowed by ALLOWED_DEPENDENCIES"
                )

    return sorted(violations)


def test_layering_graph_covers_all_layers() -> None:
    graph = _build_graph()
    layers = {_layer_for_module(m) for m in graph.modules}
    assert set(ALLOWED_DEPENDENCIES) <= layers


def test_layering_respects_dependency_rules() -> None:
    """Ensure that high-level layering rules are respected."""
    graph = _build_graph()
    violations = _find_layering_violations(graph)

    if violations:
        message = "Layering violations detected:\n" + "\n".join(violations)
        raise AssertionError(message)
