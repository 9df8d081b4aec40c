"""Project API endpoints."""

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, HTTPException, status

from portfolio.api.dependencies import get_storage
from portfolio.api.errors import parse_id, unexpected_errors
from portfolio.schemas import ProjectCreate, ProjectRecord, ProjectUpdate, parse_payload
from portfolio.storage import Storage

router = APIRouter(prefix="/api", tags=["projects"])


def get_project_or_404(storage: Storage, raw_id: str) -> ProjectRecord:
    """Look up a project by its raw path id."""
    project_id = parse_id(raw_id, "Invalid project ID")
    with unexpected_errors("Failed to fetch project"):
        project = storage.get_project_by_id(project_id)
    if project is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Project not found")
    return project


@router.get("/projects", response_model=list[ProjectRecord])
def get_projects(
    storage: Annotated[Storage, Depends(get_storage)],
    featured: str | None = None,
    category: str | None = None,
):
    """Get projects sorted by display order.

    ``featured=true`` keeps only featured projects; ``category`` keeps
    projects tagged with that category. Anything else means no filter.
    """
    with unexpected_errors("Failed to fetch projects"):
        if category:
            projects = storage.get_projects_by_category(category)
            if featured == "true":
                projects = [project for project in projects if project.featured]
        elif featured == "true":
            projects = storage.get_featured_projects()
        else:
            projects = storage.get_all_projects()

    return projects


@router.get("/projects/{project_id}", response_model=ProjectRecord)
def get_project(
    project_id: str,
    storage: Annotated[Storage, Depends(get_storage)],
):
    """Get a single project."""
    return get_project_or_404(storage, project_id)


@router.post("/projects", response_model=ProjectRecord, status_code=status.HTTP_201_CREATED)
def create_project(
    payload: Annotated[Any, Body()],
    storage: Annotated[Storage, Depends(get_storage)],
):
    """Create a new project."""
    project_data = parse_payload(ProjectCreate, payload, "Invalid project data")

    with unexpected_errors("Failed to create project"):
        return storage.create_project(project_data)


@router.patch("/projects/{project_id}", response_model=ProjectRecord)
def update_project(
    project_id: str,
    payload: Annotated[Any, Body()],
    storage: Annotated[Storage, Depends(get_storage)],
):
    """Update the given fields of a project."""
    parsed_id = parse_id(project_id, "Invalid project ID")
    changes = parse_payload(ProjectUpdate, payload, "Invalid project data")

    with unexpected_errors("Failed to update project"):
        project = storage.update_project(parsed_id, changes.model_dump(exclude_unset=True))

    if project is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Project not found")
    return project


@router.delete("/projects/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_project(
    project_id: str,
    storage: Annotated[Storage, Depends(get_storage)],
):
    """Permanently delete a project."""
    parsed_id = parse_id(project_id, "Invalid project ID")

    with unexpected_errors("Failed to delete project"):
        deleted = storage.delete_project(parsed_id)

    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Project not found")
