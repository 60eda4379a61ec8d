import logging
from typing import List

from fastapi import APIRouter, Depends, Path
from typing_extensions import Annotated

from projectbadge_api.src.error_handling import endpoint_error_handling
from projectbadge_api.src.exceptions import ProjectNotFoundError, ReleaseNotFoundError
from projectbadge_api.src.models import Project, ProjectRelease
from projectbadge_api.src.projects.project_metadata import (
    get_metadata_service,
    ProjectMetadataService,
)
from projectbadge_api.src.projects.release_selector import ReleaseSelector

log = logging.getLogger()
router = APIRouter()
MetadataService = Annotated[ProjectMetadataService, Depends(get_metadata_service)]
ProjectKey = Annotated[
    str,
    Path(
        ...,
        description="Identifier of the project, e.g. 'spring-data-redis'",
    ),
]


@router.get(
    "/projects",
    summary="Get all projects",
    response_description="List of projects and their releases",
    tags=["Projects"],
)
@endpoint_error_handling
def get_projects(metadata_service: MetadataService) -> List[Project]:
    projects = metadata_service.get_projects()
    log.debug("Returning %d projects", len(projects))
    return projects


@router.get(
    "/projects/{project_key}",
    summary="Get a project by its key",
    response_description="A single project and its releases",
    tags=["Projects"],
)
@endpoint_error_handling
def get_project(
    project_key: ProjectKey,
    metadata_service: MetadataService,
) -> Project:
    project = metadata_service.get_project(project_key)
    if project is None:
        raise ProjectNotFoundError(f"No project found with key '{project_key}'")
    return project


@router.get(
    "/projects/{project_key}/releases/current",
    summary="Get the release of a project that is currently advertised",
    response_description="The release shown on the project's version badge",
    tags=["Projects"],
)
@endpoint_error_handling
def get_current_release(
    project_key: ProjectKey,
    metadata_service: MetadataService,
) -> ProjectRelease:
    """
    Returns the release flagged as current. Where no release has been flagged, the
    same fallback as the version badge is used
    """
    project = metadata_service.get_project(project_key)
    if project is None:
        raise ProjectNotFoundError(f"No project found with key '{project_key}'")

    release = ReleaseSelector.select(project.releases)
    if release is None:
        raise ReleaseNotFoundError(f"Project '{project_key}' has no releases")
    return release
