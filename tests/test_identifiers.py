import pytest
from cryptography.hazmat.primitives import hashes

from hpkesuite import I2OSPError
from hpkesuite.ciphersuite import (
    AEADId,
    CipherSuite,
    KDFId,
    KEMId,
    kdf_hash,
    kdf_hash_length,
    kem_suite_id,
)


def test_suite_id_x25519_sha256_aes128gcm() -> None:
    suite = CipherSuite(KEMId.DHKEM_X25519_HKDF_SHA256, KDFId.HKDF_SHA256, AEADId.AES_128_GCM)
    assert suite.suite_id() == b"HPKE\x00\x20\x00\x01\x00\x01"


def test_suite_id_export_only() -> None:
    suite = CipherSuite(KEMId.DHKEM_P521_HKDF_SHA512, KDFId.HKDF_SHA512, AEADId.EXPORT_ONLY)
    assert suite.suite_id() == b"HPKE\x00\x12\x00\x03\xff\xff"
    with pytest.raises(ValueError):
        suite.nonce_length


def test_kem_suite_id() -> None:
    assert kem_suite_id(KEMId.DHKEM_P256_HKDF_SHA256) == b"KEM\x00\x10"


def test_kem_suite_id_rejects_out_of_range_identifier() -> None:
    with pytest.raises(I2OSPError):
        kem_suite_id(0x10000)


def test_from_ids_rejects_unknown_identifier() -> None:
    with pytest.raises(ValueError):
        CipherSuite.from_ids(0x20, 0x01, 0x09)


def test_sizes() -> None:
    suite = CipherSuite.from_ids(0x20, 0x02, 0x03)
    assert suite.hash_length == 48
    assert suite.key_length == 32
    assert suite.nonce_length == 12
    assert isinstance(kdf_hash(suite.kdf), hashes.SHA384)


def test_kem_suite_id_does_not_truncate_floats() -> None:
    with pytest.raises(TypeError):
        kem_suite_id(16.9)
    with pytest.raises(TypeError):
        kem_suite_id(True)


def test_suite_id_rejects_non_int_fields() -> None:
    suite = CipherSuite(KEMId.DHKEM_X25519_HKDF_SHA256, 1.0, AEADId.AES_128_GCM)
    with pytest.raises(TypeError):
        suite.suite_id()


def test_kdf_hash_length_unsupported() -> None:
    assert kdf_hash_length(KDFId.HKDF_SHA512) == 64
    with pytest.raises(ValueError, match="unsupported kdf"):
        kdf_hash_length(0x0009)
