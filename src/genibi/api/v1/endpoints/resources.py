"""
Resource Endpoints

Read-only access to the mental-health resource directory.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import BaseModel

from genibi.api.dependencies import get_resource_directory
from genibi.services.safety.emergency_resources import DEFAULT_PAGE_SIZE, ResourceDirectory

router = APIRouter()


class ResourcePageData(BaseModel):
    resources: list[dict]
    total: int
    limit: int
    offset: int
    hasMore: bool


class ResourcePageResponse(BaseModel):
    success: bool = True
    data: ResourcePageData


class ResourceListResponse(BaseModel):
    success: bool = True
    data: list[dict]
    count: int


class ResourceResponse(BaseModel):
    success: bool = True
    data: dict


class CategorySummary(BaseModel):
    id: str
    label: str
    count: int


class CategoriesResponse(BaseModel):
    success: bool = True
    data: list[CategorySummary]


class SuggestionsResponse(BaseModel):
    success: bool = True
    data: list[str]


@router.get(
    "",
    response_model=ResourcePageResponse,
    summary="List mental-health resources",
)
async def list_resources(
    category: Optional[str] = Query(None, description="Restrict to one category, or 'all'"),
    resource_type: Optional[str] = Query(None, alias="type", description="Restrict to one resource type"),
    emergency: bool = Query(False, description="Only emergency lines"),
    search: Optional[str] = Query(None, min_length=1, max_length=100),
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=100),
    offset: int = Query(0, ge=0),
    directory: ResourceDirectory = Depends(get_resource_directory),
) -> ResourcePageResponse:
    """Filtered, paginated resources in directory order."""
    page = directory.page(
        limit=limit,
        offset=offset,
        category=category,
        resource_type=resource_type,
        emergency_only=emergency,
        search=search,
    )
    return ResourcePageResponse(data=ResourcePageData(**page.to_dict()))


@router.get(
    "/categories",
    response_model=CategoriesResponse,
    summary="List resource categories with entry counts",
)
async def list_categories(
    directory: ResourceDirectory = Depends(get_resource_directory),
) -> CategoriesResponse:
    return CategoriesResponse(
        data=[CategorySummary(**c) for c in directory.category_summaries()]
    )


@router.get(
    "/emergency",
    response_model=ResourceListResponse,
    summary="List emergency contacts",
)
async def emergency_contacts(
    directory: ResourceDirectory = Depends(get_resource_directory),
) -> ResourceListResponse:
    """Dialable emergency lines, most urgent first."""
    resources = directory.emergency_contacts()
    return ResourceListResponse(
        data=[r.to_dict() for r in resources],
        count=len(resources),
    )


@router.get(
    "/search/suggestions",
    response_model=SuggestionsResponse,
    summary="Get suggested search terms",
)
async def search_suggestions() -> SuggestionsResponse:
    return SuggestionsResponse(data=ResourceDirectory.search_suggestions())


@router.get(
    "/{resource_id}",
    response_model=ResourceResponse,
    summary="Get a single resource",
)
async def get_resource(
    resource_id: str,
    directory: ResourceDirectory = Depends(get_resource_directory),
) -> ResourceResponse:
    resource = directory.get(resource_id)
    if resource is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Resource {resource_id} not found",
        )
    return ResourceResponse(data=resource.to_dict())
