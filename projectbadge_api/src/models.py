from dataclasses import dataclass
from enum import StrEnum
from typing import Tuple

from pydantic import BaseModel, ConfigDict, StringConstraints
from typing_extensions import Annotated


NonEmptyString = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class ReleaseStatus(StrEnum):
    GENERAL_AVAILABILITY = "GENERAL_AVAILABILITY"
    PRERELEASE = "PRERELEASE"
    SNAPSHOT = "SNAPSHOT"


class ProjectRelease(BaseModel):
    """A published version of a project"""

    model_config = ConfigDict(frozen=True)

    version_name: NonEmptyString
    release_status: ReleaseStatus = ReleaseStatus.GENERAL_AVAILABILITY
    is_current: bool = False
    # Reference URLs and coordinates are shown on the project page, not on badges
    ref_doc_url: str = ""
    api_doc_url: str = ""
    group_id: str = ""
    artifact_id: str = ""

    @property
    def is_general_availability(self) -> bool:
        return self.release_status == ReleaseStatus.GENERAL_AVAILABILITY

    @property
    def is_prerelease(self) -> bool:
        return self.release_status == ReleaseStatus.PRERELEASE

    @property
    def is_snapshot(self) -> bool:
        return self.release_status == ReleaseStatus.SNAPSHOT


class Project(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: NonEmptyString
    name: NonEmptyString
    repo_url: str = ""
    site_url: str = ""
    # Kept in the order the releases were added, which is not necessarily version order
    releases: Tuple[ProjectRelease, ...] = ()
    is_aggregator: bool = False
    category: str = ""


@dataclass(frozen=True)
class RenderedBadge:
    svg: bytes
    etag: str
    max_age: int
