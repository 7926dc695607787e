"""Catalog listing endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query

from src.lms.api.http.deps import get_catalog_service
from src.lms.core.models import BookMetaData
from src.lms.core.services import CatalogService
from src.lms.entities.service.catalog import Category, Location

router = APIRouter(tags=["catalog"])


@router.get("/books/pages")
def get_books_pages(catalog: CatalogService = Depends(get_catalog_service)) -> dict[str, int]:
    return {"pages": catalog.get_books_pages()}


@router.get("/books", response_model=list[BookMetaData])
def get_books_by_page(
    page: int = Query(default=1, description="1-based page number"),
    catalog: CatalogService = Depends(get_catalog_service),
) -> list[BookMetaData]:
    return catalog.get_books_by_page(page)


@router.get("/books/{book_id}", response_model=BookMetaData)
def get_book(
    book_id: int,
    catalog: CatalogService = Depends(get_catalog_service),
) -> BookMetaData:
    book = catalog.get_book(book_id)
    if book is None:
        raise HTTPException(status_code=404, detail="Book not found")
    return book


@router.get("/categories", response_model=list[Category])
def get_categories(catalog: CatalogService = Depends(get_catalog_service)) -> list[Category]:
    return catalog.get_categories()


@router.get("/categories/{category_id}/books/pages")
def get_books_pages_by_category(
    category_id: int,
    catalog: CatalogService = Depends(get_catalog_service),
) -> dict[str, int]:
    return {"pages": catalog.get_books_pages_by_category(category_id)}


@router.get("/categories/{category_id}/books", response_model=list[BookMetaData])
def get_books_by_category(
    category_id: int,
    page: int = Query(default=1),
    catalog: CatalogService = Depends(get_catalog_service),
) -> list[BookMetaData]:
    return catalog.get_books_by_category(page, category_id)


@router.get("/locations", response_model=list[Location])
def get_locations(catalog: CatalogService = Depends(get_catalog_service)) -> list[Location]:
    return catalog.get_locations()


@router.get("/locations/{location_id}/books/pages")
def get_books_pages_by_location(
    location_id: int,
    catalog: CatalogService = Depends(get_catalog_service),
) -> dict[str, int]:
    return {"pages": catalog.get_books_pages_by_location(location_id)}


@router.get("/locations/{location_id}/books", response_model=list[BookMetaData])
def get_books_by_location(
    location_id: int,
    page: int = Query(default=1),
    catalog: CatalogService = Depends(get_catalog_service),
) -> list[BookMetaData]:
    return catalog.get_books_by_location(page, location_id)
