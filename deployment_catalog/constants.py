"""Global constants for deployment-catalog"""

APP_NAME = "deployment-catalog"
LOG_FORMAT = "%(message)s"

# Project identification
PROJECT_CONFIG_FILE = ".deployment-catalog.yaml"

# Directory structure
DEFAULT_PUBLIC_DIR = "public"
DEFAULT_DEPLOYMENTS_DIR = "deployments"

# Deployment layout
MANIFEST_FILE = "manifest.json"
FILE_KIND_OSM = "osm"
FILE_KIND_MBTILES = "mbtiles"
FILE_KINDS = (FILE_KIND_OSM, FILE_KIND_MBTILES)

# Locator defaults
DEFAULT_URL_SCHEME = "http"
DEFAULT_URL_HOST = "localhost:3000"
API_PATH_SEGMENT = "api"


# Error codes
class ErrorCode:
    CONFIG_FORMAT_ERROR = "DC001"
    VALIDATION_FAILED = "DC002"
    DEPLOYMENT_NOT_FOUND = "DC003"
    INVALID_DEPLOYMENT_NAME = "DC004"


# Environment variables
ENV_CONFIG_PATH = "DEPLOYMENT_CATALOG_CONFIG"
ENV_LOG_LEVEL = "DEPLOYMENT_CATALOG_LOG_LEVEL"
ENV_PUBLIC_DIR = "DEPLOYMENT_CATALOG_PUBLIC_DIR"
ENV_DEPLOYMENTS_DIR = "DEPLOYMENT_CATALOG_DEPLOYMENTS_DIR"

# Messages
MSG_MANIFEST_MISSING = "Unable to find manifest file."

# Display constants
EMOJI_SUCCESS = "✓"
EMOJI_ERROR = "✗"
