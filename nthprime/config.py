"""
Run configuration loaded from YAML.
"""

import copy
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .sieves import DEFAULT_SIEVE, SIEVES

DEFAULT_CONFIG_PATH = Path('config/default.yaml')

DEFAULT_CONFIG: Dict[str, Any] = {
    'sieve': DEFAULT_SIEVE,
    'indices': [0, 19, 99, 500, 986, 2000],
    'repeats': 3,
    'output_dir': 'data/results',
}


def load_config(path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """
    Load a config file on top of DEFAULT_CONFIG.

    Parameters
    ----------
    path : str or Path, optional
        YAML file. If None, the defaults are returned unchanged.

    Returns
    -------
    dict
        Merged configuration.

    Raises
    ------
    FileNotFoundError
        If path does not exist.
    ValueError
        On a non-mapping file, an unknown key or an unknown sieve name.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path is None:
        return config

    with open(path) as f:
        loaded = yaml.safe_load(f)

    if loaded is None:
        loaded = {}
    if not isinstance(loaded, dict):
        raise ValueError(f"{path}: top level must be a mapping, got {type(loaded).__name__}")

    unknown = set(loaded) - set(DEFAULT_CONFIG)
    if unknown:
        raise ValueError(f"{path}: unknown config keys {sorted(unknown)}")

    config.update(loaded)

    if config['sieve'] not in SIEVES:
        raise ValueError(f"{path}: unknown sieve {config['sieve']!r} (available: {', '.join(sorted(SIEVES))})")
    if not isinstance(config['indices'], list):
        raise ValueError(f"{path}: 'indices' must be a list")

    return config
