from catalog.services.entity_factory import EntityFactory

__all__ = ["EntityFactory"]
