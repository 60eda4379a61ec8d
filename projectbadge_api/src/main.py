import logging
import logging.config

from elasticapm.contrib.starlette import ElasticAPM, make_apm_client
from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import orjson
import uvicorn

from projectbadge_api.src.config import Config
from projectbadge_api.src.constants import LIBRARIES_INFO_LOGGING, LOG_CONFIG_LOCATION
from projectbadge_api.src.routes import badges, projects


class ORJSONResponse(JSONResponse):
    media_type = "application/json"

    def render(self, content) -> bytes:
        return orjson.dumps(content)


api_description = """
This API is the backend of a project metadata website that allows users to:
- Get SVG badges showing the current release of a project, for embedding in READMEs
- Get the projects known to the site along with their releases
"""


app = FastAPI(
    title="Project Badge API",
    description=api_description,
    default_response_class=ORJSONResponse,
    root_path=Config.config.app.url_prefix,
)

if Config.config.observability is not None:
    apm_config = {
        "ENVIRONMENT": Config.config.observability.environment,
        "SECRET_TOKEN": Config.config.observability.secret_key.get_secret_value(),
        "SERVER_URL": "http://localhost:8200",  # this should already be localhost
        "SERVICE_NAME": "projectbadge",
        "ENABLED": True,
    }
    apm = make_apm_client(apm_config)
    app.add_middleware(ElasticAPM, client=apm)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["ETag"],
)


def setup_logger():
    for name in LIBRARIES_INFO_LOGGING:
        logging.getLogger(name).setLevel(logging.INFO)
    logging.config.fileConfig(LOG_CONFIG_LOCATION, disable_existing_loggers=False)


setup_logger()
log = logging.getLogger()
log.info("Logging now setup")


def add_router_to_app(api_router: APIRouter):
    app.include_router(api_router)
    for route in api_router.routes:
        log.debug("Route registered: %s %s", route.path, sorted(route.methods))


# Adding endpoints to FastAPI app
add_router_to_app(badges.router)
add_router_to_app(projects.router)


if __name__ == "__main__":
    uvicorn.run(
        "projectbadge_api.src.main:app",
        host=Config.config.app.host,
        port=Config.config.app.port,
        reload=Config.config.app.reload,
        log_config=LOG_CONFIG_LOCATION,
    )
