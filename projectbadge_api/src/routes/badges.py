import logging

from fastapi import APIRouter, Depends, Path, Response
from typing_extensions import Annotated

from projectbadge_api.src.badges.version_badge import VersionBadge
from projectbadge_api.src.error_handling import endpoint_error_handling
from projectbadge_api.src.exceptions import ProjectNotFoundError, ReleaseNotFoundError
from projectbadge_api.src.projects.project_metadata import (
    get_metadata_service,
    ProjectMetadataService,
)
from projectbadge_api.src.projects.release_selector import ReleaseSelector

log = logging.getLogger()
router = APIRouter()
MetadataService = Annotated[ProjectMetadataService, Depends(get_metadata_service)]


@router.get(
    "/badge/{project_key}",
    summary="Get a version badge for a project",
    response_description="Badge in .svg format",
    response_class=Response,
    responses={
        200: {"content": {"image/svg+xml": {}}},
        404: {"description": "Project not found or project has no releases"},
    },
    tags=["Badges"],
)
@endpoint_error_handling
def get_release_badge(
    project_key: Annotated[
        str,
        Path(
            ...,
            description="Identifier of the project, e.g. 'spring-data-redis'",
        ),
    ],
    metadata_service: MetadataService,
):
    """
    This endpoint returns an SVG badge showing the name of the project and the version
    of its current release. If no release is flagged as current, the highest numbered
    release is shown, or the first one added where releases use symbolic names.

    The version is sent as the ETag and the badge can be cached by clients for the
    configured max-age.
    """
    project = metadata_service.get_project(project_key)
    if project is None:
        raise ProjectNotFoundError(f"No project found with key '{project_key}'")

    release = ReleaseSelector.select(project.releases)
    if release is None:
        raise ReleaseNotFoundError(f"Project '{project_key}' has no releases")

    log.debug("Rendering badge for '%s' using %s", project_key, release.version_name)
    badge = VersionBadge().render(project.name, release)
    return Response(
        badge.svg,
        headers={
            "ETag": badge.etag,
            "Cache-Control": f"max-age={badge.max_age}",
        },
        media_type="image/svg+xml",
    )
