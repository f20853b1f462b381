"""Interchangeable I2OSP implementations, one of which is active per process.

``native`` defers to ``int.to_bytes``; ``portable`` places each byte
explicitly. Both run the same parameter checks and produce identical output.
The active backend is chosen from configuration at import time and may be
replaced with :func:`configure`.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Tuple

from hpkesuite.common.encoding import i2osp_native, i2osp_portable
from hpkesuite.config import SuiteConfig, load_config

_LOGGER = logging.getLogger(__name__)

Encoder = Callable[[int, int], bytes]

BACKENDS: Dict[str, Encoder] = {
    "native": i2osp_native,
    "portable": i2osp_portable,
}


def get_backend(name: str) -> Encoder:
    try:
        return BACKENDS[name]
    except KeyError:
        raise ValueError(f"unknown i2osp backend: {name!r}") from None


_active: Tuple[str, Encoder] = ("native", i2osp_native)


def configure(config: SuiteConfig) -> None:
    global _active
    _active = (config.i2osp_backend, get_backend(config.i2osp_backend))
    _LOGGER.debug("i2osp backend set to %s", config.i2osp_backend)


def active_backend_name() -> str:
    return _active[0]


def i2osp(value: int, output_byte_count: int) -> bytes:
    """Encode ``value`` as exactly ``output_byte_count`` big-endian bytes.

    Raises ``I2OSPError`` if the width is not positive, the value is negative,
    or the value does not fit. The result is never truncated.
    """
    return _active[1](value, output_byte_count)


configure(load_config())
