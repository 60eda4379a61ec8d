from pathlib import Path

LOG_CONFIG_LOCATION = str(Path(__file__).parent.parent / "logging.ini")

# Libraries whose DEBUG output drowns out the API's own logging
LIBRARIES_INFO_LOGGING = [
    "elasticapm",
    "multipart",
    "urllib3",
]
