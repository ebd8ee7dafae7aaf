# inout/yaml_matrix.py
"""
Load square matrices from YAML files for the command-line driver.
"""
import yaml
from typing import Dict, Any, List
from cerberus import Validator

import numpy as np

from core.exceptions import MatrixConfigError
from utils.logging_config import get_logger

logger = get_logger(__name__)

_ROWS_RULE: Dict[str, Any] = {
    'type': 'list',
    'minlength': 1,
    'schema': {
        'type': 'list',
        'minlength': 1,
        'schema': {'type': 'number'},
    },
}

MATRIX_SCHEMA: Dict[str, Any] = {
    'matrix': {**_ROWS_RULE, 'required': True},
    'replacements': {
        'type': 'list',
        'required': False,
        'default': [],
        'schema': _ROWS_RULE,
    },
}

def validate_schema(data: Any, schema: Dict[str, Any]) -> Dict[str, Any]:
    """
    Validate parsed YAML against a Cerberus schema.

    Raises:
        MatrixConfigError: If *data* is not a mapping or fails validation.
    """
    if not isinstance(data, dict):
        raise MatrixConfigError(
            f"Matrix file must contain a mapping, got {type(data).__name__}"
        )
    validator = Validator(schema)
    if not validator.validate(data):
        logger.error("Matrix file validation errors: %s", validator.errors)
        raise MatrixConfigError("Matrix file validation failed: " + str(validator.errors))
    return validator.document

def _to_array(rows: List[List[float]], label: str) -> np.ndarray:
    widths = {len(r) for r in rows}
    if len(widths) != 1:
        raise MatrixConfigError(f"'{label}' has rows of unequal length {sorted(widths)}")
    return np.array(rows, dtype=float)

def load_matrix_config(yaml_file: str) -> Dict[str, Any]:
    """
    Read a matrix file.

    Returns:
        ``{"matrix": ndarray, "replacements": [ndarray, ...]}``. Shapes are
        not checked for squareness; the inversion step reports that.

    Raises:
        MatrixConfigError: On a missing file, malformed YAML or invalid content.
    """
    try:
        with open(yaml_file, 'r') as f:
            data = yaml.safe_load(f)
    except OSError as exc:
        raise MatrixConfigError(f"Cannot read matrix file '{yaml_file}': {exc}") from exc
    except yaml.YAMLError as exc:
        raise MatrixConfigError(f"Malformed YAML in '{yaml_file}': {exc}") from exc

    doc = validate_schema(data, MATRIX_SCHEMA)
    matrix = _to_array(doc['matrix'], 'matrix')
    replacements = [
        _to_array(rows, f"replacements[{i}]")
        for i, rows in enumerate(doc.get('replacements', []))
    ]
    logger.debug("Loaded %s matrix with %d replacement(s) from %s",
                 matrix.shape, len(replacements), yaml_file)
    return {'matrix': matrix, 'replacements': replacements}
