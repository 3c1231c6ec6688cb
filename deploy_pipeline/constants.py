"""Global constants for deploy-pipeline"""

import re

APP_NAME = "deploy-pipeline"
LOG_FORMAT = "%(message)s"

# Project identification
PROJECT_CONFIG_FILE = ".deploy-pipeline.yaml"

# Local record store layout
DEFAULT_STATE_DIR = "~/.deploy-pipeline"
DEPLOYMENTS_DIR = "deployments"
DEPLOYMENT_MANIFEST_FILE = "manifest.yml"
DEPLOYMENT_STATE_FILE = "state.json"
RELEASES_INDEX_FILE = "releases.json"

# Environment variables
ENV_CONFIG_PATH = "DEPLOY_PIPELINE_CONFIG"
ENV_STATE_DIR = "DEPLOY_PIPELINE_STATE_DIR"
ENV_NON_INTERACTIVE = "DEPLOY_PIPELINE_NON_INTERACTIVE"
ENV_LOG_LEVEL = "DEPLOY_PIPELINE_LOG_LEVEL"

# Diff rendering prefixes
DIFF_PREFIX_UNCHANGED = "  "
DIFF_PREFIX_ADDED = "+ "
DIFF_PREFIX_REMOVED = "- "

# Placeholders look like ((name)); the name may carry dots, dashes and slashes
PLACEHOLDER_PATTERN = re.compile(r"\(\(([-\w./:]+)\)\)")

VERSION_QUALIFIER_SEPARATOR = "+"
VERSION_SEGMENT_SEPARATOR = "."
VERSION_FORMAT = "<base>[+<qualifier>]"

# Keep long scalars on a single line when re-serializing manifests
YAML_DUMP_WIDTH = 2 ** 31 - 1

# Manifest structure accepted by the validator
MANIFEST_SCHEMA = {
    "type": "object",
    "required": ["name"],
    "properties": {
        "name": {"type": "string", "minLength": 1},
        "releases": {
            "type": ["array", "null"],
            "items": {
                "type": "object",
                "required": ["name", "version"],
                "properties": {
                    "name": {"type": "string", "minLength": 1},
                    "version": {"type": "string"},
                    "url": {"type": ["string", "null"]},
                    "sha1": {"type": ["string", "null"]},
                },
            },
        },
    },
}


# Error codes
class ErrorCode:
    CONFIG_FORMAT_ERROR = "DP001"
    MISSING_VARIABLE = "DP002"
    INTERPOLATION_FAILED = "DP003"
    VARIABLE_SOURCE_FAILED = "DP004"
    MANIFEST_VALIDATION_FAILED = "DP005"
    NAME_MISMATCH = "DP006"
    VERSION_FORMAT_ERROR = "DP007"
    DIFF_FETCH_FAILED = "DP008"
    CONFIRMATION_REJECTED = "DP009"
    UPLOAD_FAILED = "DP010"
    UPDATE_FAILED = "DP011"
    CANCELLED = "DP012"
    RECORD_STORE_FAILED = "DP013"
