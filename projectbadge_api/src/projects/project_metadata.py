from abc import ABC, abstractmethod
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from cachetools.func import ttl_cache
from pydantic import ValidationError
import yaml

from projectbadge_api.src.config import Config
from projectbadge_api.src.exceptions import MetadataError
from projectbadge_api.src.models import Project

log = logging.getLogger()


class ProjectMetadataService(ABC):
    """
    Source of project metadata. The badge and project endpoints only depend on this
    interface so the storage behind it can be swapped (or replaced in tests)
    """

    @abstractmethod
    def get_project(self, project_key: str) -> Optional[Project]:
        """
        Return the project identified by `project_key`, or `None` if there isn't one
        """

    @abstractmethod
    def get_projects(self) -> List[Project]:
        """
        Return every known project
        """


class InMemoryProjectMetadata(ProjectMetadataService):
    def __init__(self, projects: Iterable[Project] = ()) -> None:
        self.projects: Dict[str, Project] = {project.id: project for project in projects}

    def get_project(self, project_key: str) -> Optional[Project]:
        return self.projects.get(project_key)

    def get_projects(self) -> List[Project]:
        return list(self.projects.values())


class YamlProjectMetadata(ProjectMetadataService):
    """
    Reads projects from a YAML file of the form:

    projects:
      - id: spring-data-redis
        name: Spring Data Redis
        releases:
          - version_name: 1.0.RELEASE
            is_current: true

    Parsed contents are cached for `metadata.cache_ttl_seconds` so the file isn't read
    on every request
    """

    def __init__(self, projects_file: Path) -> None:
        self.projects_file = Path(projects_file)

    def get_project(self, project_key: str) -> Optional[Project]:
        project = self._load().get(project_key)
        if project is None:
            log.debug("Project '%s' not found in %s", project_key, self.projects_file)
        return project

    def get_projects(self) -> List[Project]:
        return list(self._load().values())

    def _load(self) -> Dict[str, Project]:
        return load_projects_file(str(self.projects_file))


@ttl_cache(ttl=Config.config.metadata.cache_ttl_seconds)
def load_projects_file(path: str) -> Dict[str, Project]:
    log.info("Loading project metadata from %s", path)
    try:
        with open(path, encoding="utf-8") as projects_file:
            contents = yaml.safe_load(projects_file) or {}
    except (IOError, yaml.YAMLError) as exc:
        log.error("Could not read project metadata file %s: %s", path, exc)
        raise MetadataError("Project metadata could not be read") from exc

    if not isinstance(contents, dict):
        raise MetadataError("Project metadata file must contain a mapping")

    try:
        projects = [Project(**entry) for entry in contents.get("projects") or []]
    except (TypeError, ValidationError) as exc:
        log.error("Invalid project metadata in %s: %s", path, exc)
        raise MetadataError("Project metadata is invalid") from exc

    log.debug("Loaded %d projects from %s", len(projects), path)
    return {project.id: project for project in projects}


def get_metadata_service() -> ProjectMetadataService:
    """
    FastAPI dependency providing the configured metadata source
    """
    return YamlProjectMetadata(Config.config.metadata.projects_file)
