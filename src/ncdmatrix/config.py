# -*- coding: utf-8 -*-
"""
    NCDMatrix
    Engine Configuration
"""
import os
import tomllib
from dataclasses import dataclass, fields, asdict
from typing import Any, Dict, Union


@dataclass
class EngineConfig:
    compressor: str = 'gzip'
    compression_level: str = 'default'
    n_jobs: int = -1
    join_string: str = ''
    dtype: str = 'float64'

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def load_config(path: Union[str, os.PathLike], section: str = 'ncd') -> EngineConfig:
    """Read engine settings from the ``[ncd]`` table of a TOML file."""
    with open(path, "rb") as f:
        config = tomllib.load(f)

    values = config.get(section, {})
    if not isinstance(values, dict):
        raise ValueError(f"[{section}] must be a table in {path}")

    valid_keys = {f.name for f in fields(EngineConfig)}
    unknown_keys = sorted(set(values) - valid_keys)
    if unknown_keys:
        raise ValueError(
            f"Invalid setting(s) in [{section}]: {', '.join(unknown_keys)}. "
            f"Valid options are: {', '.join(sorted(valid_keys))}"
        )

    return EngineConfig(**values)
