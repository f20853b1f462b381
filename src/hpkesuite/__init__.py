__all__ = [
    "I2OSPError", "i2osp", "os2ip", "required_bytes",
    "SuiteConfig", "load_config", "configure", "active_backend_name",
]

from .backend import active_backend_name, configure, i2osp
from .common.encoding import I2OSPError, os2ip, required_bytes
from .config import SuiteConfig, load_config

__version__ = "0.1.0"
