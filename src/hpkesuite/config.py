from __future__ import annotations

import logging
import os
from typing import Literal, Mapping, Optional

from pydantic import BaseModel, ConfigDict

_LOGGER = logging.getLogger(__name__)

ENV_PREFIX = "HPKESUITE_"

BackendName = Literal["native", "portable"]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class SuiteConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", strict=True)

    i2osp_backend: BackendName = "native"
    log_level: LogLevel = "WARNING"


def load_config(environ: Optional[Mapping[str, str]] = None) -> SuiteConfig:
    """Build a SuiteConfig from ``HPKESUITE_*`` variables; unset or empty keeps the default."""
    env = os.environ if environ is None else environ
    payload: dict[str, str] = {}
    for field_name in SuiteConfig.model_fields:
        raw = env.get(ENV_PREFIX + field_name.upper())
        if raw:
            payload[field_name] = raw.strip()
    if "log_level" in payload:
        payload["log_level"] = payload["log_level"].upper()
    config = SuiteConfig.model_validate(payload)
    _LOGGER.debug("loaded config %s", config.model_dump())
    return config
