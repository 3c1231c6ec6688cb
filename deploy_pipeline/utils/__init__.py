"""Utility functions for deploy-pipeline"""

from .file_utils import atomic_write, ensure_parent_dir, read_json, write_json
from .version_utils import compare_versions, is_valid_version, parse_version, sort_versions
from .yaml_utils import VerbatimScalar, dump_yaml, load_yaml

__all__ = [
    "atomic_write",
    "ensure_parent_dir",
    "read_json",
    "write_json",
    "compare_versions",
    "is_valid_version",
    "parse_version",
    "sort_versions",
    "VerbatimScalar",
    "dump_yaml",
    "load_yaml",
]
