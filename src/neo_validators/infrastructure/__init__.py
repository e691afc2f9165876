"""Infrastructure layer: concrete collaborators of the validators.

Sniffers are not imported here so that libmagic is only loaded when a
validator actually needs it.
"""

from .messages import CatalogMessageResolver, create_catalog_message_resolver
from .sinks import ViolationCollector

__all__ = [
    "CatalogMessageResolver",
    "create_catalog_message_resolver",
    "ViolationCollector",
]
