"""Build a live Registry from a RegistrySchema."""

import logging
from enum import Enum

from paramregistry.core import Registry

from .models import RegistrySchema

logger = logging.getLogger(__name__)


def build_registry(schema: RegistrySchema) -> Registry[Enum]:
    """
    Create a key enum from the schema and declare every parameter.

    The returned registry is INITIALIZED; its ``key_type`` is the generated
    enum, whose members are named after ``ParameterSpec.key``.

    Raises:
        StructuralError: If the schema repeats a source flag
        DeclarationError: If a declaration is rejected (duplicate external
            name, default of the wrong type or out of range...)
    """
    keys = Enum(schema.name, [spec.key for spec in schema.parameters])
    registry: Registry[Enum] = Registry(keys, *schema.sources)

    for spec in schema.parameters:
        registry.declare(
            keys[spec.key],
            spec.name,
            spec.type,
            spec.default,
            spec.make_validator(),
            spec.settable,
            spec.importance,
        )

    logger.info(f"Built registry {schema.name} with {len(registry)} parameter(s)")
    return registry
