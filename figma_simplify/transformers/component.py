"""
Component metadata.

Works on the plain ``components`` / ``componentSets`` maps of a file response
and on instance nodes. Variant members of a set are linked through their
``componentSetId``; their variant values come from ``variantProperties`` when
present, otherwise from the ``Prop=Value, Prop=Value`` naming convention.
"""

from collections.abc import Mapping
from typing import Any

from figma_simplify.models.figma import InstanceNode
from figma_simplify.models.simplified import (
    ComponentDefinition,
    ComponentProperty,
    ComponentSetDefinition,
)


def _stringify(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return str(value).lower()
    return str(value)


def extract_component_properties(raw: Any) -> list[ComponentProperty]:
    """Instance property values and component property definitions, in that order."""
    if isinstance(raw, InstanceNode):
        return [
            ComponentProperty(name=name, value=_stringify(prop.value), type=prop.type)
            for name, prop in raw.component_properties.items()
        ]
    if not isinstance(raw, Mapping):
        return []

    properties = []
    for name, definition in (raw.get("componentPropertyDefinitions") or {}).items():
        if isinstance(definition, Mapping):
            properties.append(ComponentProperty(
                name=name,
                value=_stringify(definition.get("defaultValue")),
                type=definition.get("type") or "TEXT",
            ))
    for name, prop in (raw.get("componentProperties") or {}).items():
        if isinstance(prop, Mapping):
            properties.append(ComponentProperty(
                name=name,
                value=_stringify(prop.get("value")),
                type=prop.get("type") or "TEXT",
            ))
    return properties


def extract_variants(raw: Mapping) -> list[ComponentProperty]:
    variant_properties = raw.get("variantProperties")
    if isinstance(variant_properties, Mapping):
        return [
            ComponentProperty(name=name, value=_stringify(value), type="VARIANT")
            for name, value in variant_properties.items()
        ]

    if not raw.get("componentSetId"):
        return []
    variants = []
    for part in (raw.get("name") or "").split(","):
        name, sep, value = part.partition("=")
        if sep and name.strip():
            variants.append(ComponentProperty(name=name.strip(), value=value.strip(), type="VARIANT"))
    return variants


def _component(component_id: str, raw: Mapping) -> ComponentDefinition:
    return ComponentDefinition(
        id=component_id,
        key=raw.get("key") or component_id,
        name=raw.get("name") or "Unnamed Component",
        description=raw.get("description") or "",
        component_set_id=raw.get("componentSetId"),
        properties=extract_component_properties(raw),
        variants=extract_variants(raw),
    )


def simplify_components(components: Mapping[str, Any]) -> dict[str, ComponentDefinition]:
    return {
        component_id: _component(component_id, raw)
        for component_id, raw in components.items()
        if isinstance(raw, Mapping)
    }


def simplify_component_sets(
    component_sets: Mapping[str, Any],
    components: Mapping[str, Any] = None,
) -> dict[str, ComponentSetDefinition]:
    simplified_components = simplify_components(components or {})

    result = {}
    for set_id, raw in component_sets.items():
        if not isinstance(raw, Mapping):
            continue
        members = {
            cid: c for cid, c in simplified_components.items() if c.component_set_id == set_id
        }

        variant_properties = list((raw.get("componentPropertyDefinitions") or {}).keys())
        for member in members.values():
            for variant in member.variants:
                if variant.name not in variant_properties:
                    variant_properties.append(variant.name)

        result[set_id] = ComponentSetDefinition(
            id=set_id,
            key=raw.get("key") or set_id,
            name=raw.get("name") or "Unnamed Component Set",
            description=raw.get("description") or "",
            components=members,
            variant_properties=variant_properties,
        )
    return result
