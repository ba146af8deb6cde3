# transaction_query/config.py
import copy
import logging
import os

import yaml

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = "TXNQUERY_LOG_LEVEL"

# Arguments the demonstration report passes to each query.
DEFAULT_QUERY_PARAMS = {
    'year': 2019,
    'month': 1,
    'day': 3,
    'type': 'debit',
    'start_date': '2019-01-01',
    'end_date': '2019-01-02',
    'merchant': 'SuperMart',
    'min_amount': -100.0,
    'max_amount': 200.0,
    'before_date': '2024-02-04',
    'transaction_id': '2',
}

DEFAULT_CONFIG = {
    'output_modules': {
        'console': 'transaction_query.outputs.console_output.ConsoleOutput',
        'json': 'transaction_query.outputs.json_output.JSONOutput',
    },
    'queries': DEFAULT_QUERY_PARAMS,
}

# Sections merged key by key instead of replaced wholesale.
_MERGED_SECTIONS = ('output_modules', 'queries')


def default_log_level():
    return os.getenv(LOG_LEVEL_ENV, "WARNING").upper()


def load_config(path=None):
    """
    Return the default configuration overlaid with the YAML file at *path*.
    """
    cfg = copy.deepcopy(DEFAULT_CONFIG)
    if path is None:
        return cfg

    if not os.path.isfile(path):
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path) as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Could not parse config file {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping at the top level")

    for key, value in data.items():
        if key in _MERGED_SECTIONS:
            if not isinstance(value, dict):
                raise ValueError(f"'{key}' in {path} must be a mapping")
            cfg[key].update(value)
        else:
            cfg[key] = value
    logger.debug("Loaded config from %s: %s", path, cfg)
    return cfg
