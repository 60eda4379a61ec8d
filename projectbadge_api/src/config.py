from pathlib import Path
import sys
from typing import Optional

from pydantic import (
    BaseModel,
    Field,
    field_validator,
    NonNegativeInt,
    PositiveFloat,
    PositiveInt,
    SecretStr,
    StrictBool,
    StrictInt,
    StrictStr,
    ValidationError,
)
import yaml

PACKAGE_DIRECTORY = Path(__file__).parent.parent


class App(BaseModel):
    """Configuration model class to store configuration regarding the FastAPI app"""

    # Some options aren't mandatory when running the API in the production
    host: Optional[StrictStr] = None
    port: Optional[StrictInt] = None
    reload: Optional[StrictBool] = None
    url_prefix: StrictStr = ""


class BadgeColours(BaseModel):
    general_availability: StrictStr = "#6db33f"
    prerelease: StrictStr = "#dfb317"
    snapshot: StrictStr = "#9f9f9f"


class BadgesConfig(BaseModel):
    """Configuration model class to store details of how version badges are drawn"""

    max_age_seconds: NonNegativeInt = Field(
        default=3600,
        description="Value of max-age sent in the Cache-Control header of a badge",
    )
    # Approximate width of a character of 11px Verdana, as used by shields.io
    char_width: PositiveFloat = 6.8
    padding: NonNegativeInt = 10
    label_colour: StrictStr = "#555"
    colours: BadgeColours = BadgeColours()


class MetadataConfig(BaseModel):
    """Configuration model class to store where project metadata is read from"""

    projects_file: Path = Field(
        description=(
            "YAML file containing the projects and their releases. Relative paths are "
            "resolved against the package directory"
        ),
        examples=["projects.yml", "/srv/badge-api/projects.yml"],
    )
    cache_ttl_seconds: PositiveInt = 300

    @field_validator("projects_file")
    @classmethod
    def resolve_projects_file(cls, value):  # noqa: B902, N805
        if not value.is_absolute():
            value = PACKAGE_DIRECTORY / value
        if not value.is_file():
            sys.exit(f"projects_file does not exist: {value}")
        return value


class ObservabilityConfig(BaseModel):
    """Configuration model class to store export observability details"""

    environment: StrictStr
    secret_key: SecretStr  # apm key


class APIConfig(BaseModel):
    """
    Class to store the API's configuration settings
    """

    app: App = App()
    badges: BadgesConfig = BadgesConfig()
    metadata: MetadataConfig
    observability: ObservabilityConfig | None = None

    @classmethod
    def load(cls, path=PACKAGE_DIRECTORY / "config.yml"):
        """
        Load the config data from the .yml file and store it as a dict
        """

        try:
            with open(path, encoding="utf-8") as config_file:
                config = yaml.safe_load(config_file)
                return cls(**config)
        except (IOError, ValidationError, yaml.YAMLError) as e:
            sys.exit(f"An error occurred while loading the config data: {e}")


class Config:
    """Class containing config as a class variable so it can mocked during testing"""

    config = APIConfig.load()
