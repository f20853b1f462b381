import pytest
from pydantic import ValidationError

from hpkesuite.config import SuiteConfig, load_config


def test_defaults_without_environment() -> None:
    config = load_config({})
    assert config.i2osp_backend == "native"
    assert config.log_level == "WARNING"


def test_environment_overrides() -> None:
    config = load_config(
        {"HPKESUITE_I2OSP_BACKEND": "portable", "HPKESUITE_LOG_LEVEL": "debug"}
    )
    assert config.i2osp_backend == "portable"
    assert config.log_level == "DEBUG"


def test_empty_values_keep_defaults() -> None:
    config = load_config({"HPKESUITE_I2OSP_BACKEND": ""})
    assert config.i2osp_backend == "native"


def test_invalid_backend_rejected() -> None:
    with pytest.raises(ValidationError):
        load_config({"HPKESUITE_I2OSP_BACKEND": "openssl"})


def test_unknown_fields_rejected() -> None:
    with pytest.raises(ValidationError):
        SuiteConfig.model_validate({"backend": "native"})
