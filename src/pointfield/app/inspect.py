"""
Component Inspection
Read-only field views of inspectable components, used by the inspector UI.
"""
from __future__ import annotations

from dataclasses import fields, is_dataclass
from typing import Any, Dict, Iterator, List, Tuple
import logging

from pointfield.app.application import Application

logger = logging.getLogger(__name__)


def inspect_component(component: Any) -> Dict[str, Any]:
    """Field name -> value. Uses the component's own `inspect()` when it has one."""
    if hasattr(component, "inspect"):
        return component.inspect()
    if is_dataclass(component):
        return {f.name: getattr(component, f.name) for f in fields(component)}
    return dict(vars(component))


def inspectable_components(app: Application) -> Iterator[Tuple[int, str, Dict[str, Any]]]:
    """
    Walks the scene for components of registered inspectable types.

    Yields:
        (entity id, component type name, field view)
    """
    types: List[type] = app.inspectables()
    for entity in app.scene:
        for component_type in types:
            component = entity.get(component_type)
            if component is not None:
                yield entity.id, component_type.__name__, inspect_component(component)
