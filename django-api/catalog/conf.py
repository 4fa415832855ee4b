"""Catalog settings resolved from Django settings."""

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.utils.module_loading import import_string

from catalog.domain.value_objects import IdFactory
from catalog.services.entity_factory import EntityFactory

DEFAULT_ID_FACTORY = "uuid.uuid4"


def get_id_factory() -> IdFactory:
    """Return the callable named by the TICKETEER_ID_FACTORY setting."""
    path = getattr(settings, "TICKETEER_ID_FACTORY", DEFAULT_ID_FACTORY)
    try:
        factory = import_string(path)
    except ImportError as exc:
        raise ImproperlyConfigured(
            f"TICKETEER_ID_FACTORY {path!r} could not be imported"
        ) from exc
    if not callable(factory):
        raise ImproperlyConfigured(f"TICKETEER_ID_FACTORY {path!r} is not callable")
    return factory


def get_entity_factory() -> EntityFactory:
    return EntityFactory(id_factory=get_id_factory())
