from .encoding import I2OSPError, i2osp_native, i2osp_portable, os2ip, required_bytes
from .schema_validate import validate_json
