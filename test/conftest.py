from typing import List, Tuple

from fastapi.testclient import TestClient
import pytest

from projectbadge_api.src.main import app
from projectbadge_api.src.models import Project, ProjectRelease, ReleaseStatus
from projectbadge_api.src.projects.project_metadata import (
    get_metadata_service,
    InMemoryProjectMetadata,
    load_projects_file,
)


@pytest.fixture()
def test_app():
    return TestClient(app)


@pytest.fixture(autouse=True)
def clear_metadata_cache():
    """Make sure parsed metadata files don't leak between tests"""
    load_projects_file.cache_clear()
    yield
    load_projects_file.cache_clear()


@pytest.fixture()
def use_projects():
    """
    Serve the given projects from memory instead of the configured YAML file. Returns
    a function so each test can supply its own projects
    """

    def _use_projects(*projects: Project) -> InMemoryProjectMetadata:
        metadata_service = InMemoryProjectMetadata(projects)
        app.dependency_overrides[get_metadata_service] = lambda: metadata_service
        return metadata_service

    yield _use_projects

    app.dependency_overrides.pop(get_metadata_service, None)


@pytest.fixture()
def redis_project():
    """
    Returns a function building the "Spring Data Redis" project from a list of
    `(version_name, is_current)` pairs, keeping the order they're given in
    """

    def _redis_project(releases: List[Tuple[str, bool]]) -> Project:
        return Project(
            id="spring-data-redis",
            name="Spring Data Redis",
            repo_url="http",
            site_url="http",
            releases=[
                ProjectRelease(
                    version_name=version_name,
                    release_status=ReleaseStatus.GENERAL_AVAILABILITY,
                    is_current=is_current,
                )
                for version_name, is_current in releases
            ],
            category="data",
        )

    return _redis_project
