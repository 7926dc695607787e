from .catalog_service import CatalogService, page_count, page_offset, resolve_book

__all__ = ["CatalogService", "page_count", "page_offset", "resolve_book"]
