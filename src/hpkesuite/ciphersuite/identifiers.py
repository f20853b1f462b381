"""RFC 9180 algorithm registries (§7) and suite identifiers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict

from cryptography.hazmat.primitives import hashes

from hpkesuite.backend import i2osp


class KEMId(IntEnum):
    DHKEM_P256_HKDF_SHA256 = 0x0010
    DHKEM_P384_HKDF_SHA384 = 0x0011
    DHKEM_P521_HKDF_SHA512 = 0x0012
    DHKEM_X25519_HKDF_SHA256 = 0x0020
    DHKEM_X448_HKDF_SHA512 = 0x0021


class KDFId(IntEnum):
    HKDF_SHA256 = 0x0001
    HKDF_SHA384 = 0x0002
    HKDF_SHA512 = 0x0003


class AEADId(IntEnum):
    AES_128_GCM = 0x0001
    AES_256_GCM = 0x0002
    CHACHA20_POLY1305 = 0x0003
    EXPORT_ONLY = 0xFFFF


class Mode(IntEnum):
    BASE = 0x00
    PSK = 0x01
    AUTH = 0x02
    AUTH_PSK = 0x03


# Nh
KDF_HASH_LENGTH: Dict[KDFId, int] = {
    KDFId.HKDF_SHA256: 32,
    KDFId.HKDF_SHA384: 48,
    KDFId.HKDF_SHA512: 64,
}

# Nk, Nn
AEAD_KEY_LENGTH: Dict[AEADId, int] = {
    AEADId.AES_128_GCM: 16,
    AEADId.AES_256_GCM: 32,
    AEADId.CHACHA20_POLY1305: 32,
}
AEAD_NONCE_LENGTH: Dict[AEADId, int] = {
    AEADId.AES_128_GCM: 12,
    AEADId.AES_256_GCM: 12,
    AEADId.CHACHA20_POLY1305: 12,
}


def kdf_hash_length(kdf: KDFId) -> int:
    try:
        return KDF_HASH_LENGTH[kdf]
    except KeyError:
        raise ValueError(f"unsupported kdf: {kdf!r}") from None


def kdf_hash(kdf: KDFId) -> hashes.HashAlgorithm:
    if kdf == KDFId.HKDF_SHA256:
        return hashes.SHA256()
    if kdf == KDFId.HKDF_SHA384:
        return hashes.SHA384()
    if kdf == KDFId.HKDF_SHA512:
        return hashes.SHA512()
    raise ValueError(f"unsupported kdf: {kdf!r}")


def kem_suite_id(kem: int) -> bytes:
    return b"KEM" + i2osp(kem, 2)


@dataclass(frozen=True)
class CipherSuite:
    kem: KEMId
    kdf: KDFId
    aead: AEADId

    @staticmethod
    def from_ids(kem: int, kdf: int, aead: int) -> "CipherSuite":
        return CipherSuite(kem=KEMId(kem), kdf=KDFId(kdf), aead=AEADId(aead))

    @property
    def hash_length(self) -> int:
        return kdf_hash_length(self.kdf)

    @property
    def nonce_length(self) -> int:
        if self.aead == AEADId.EXPORT_ONLY:
            raise ValueError("export-only suite has no nonce")
        return AEAD_NONCE_LENGTH[self.aead]

    @property
    def key_length(self) -> int:
        if self.aead == AEADId.EXPORT_ONLY:
            raise ValueError("export-only suite has no key")
        return AEAD_KEY_LENGTH[self.aead]

    def suite_id(self) -> bytes:
        return (
            b"HPKE"
            + i2osp(self.kem, 2)
            + i2osp(self.kdf, 2)
            + i2osp(self.aead, 2)
        )
