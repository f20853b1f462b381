"""Labeled HKDF helpers and key-schedule inputs (RFC 9180 §4, §5.1, §5.2)."""

from __future__ import annotations

from typing import Union

from cryptography.hazmat.primitives import hmac
from cryptography.hazmat.primitives.kdf.hkdf import HKDFExpand

from hpkesuite.backend import i2osp
from hpkesuite.ciphersuite.identifiers import (
    CipherSuite,
    KDFId,
    Mode,
    kdf_hash,
    kdf_hash_length,
)

BytesLike = Union[bytes, bytearray, memoryview]

HPKE_VERSION_LABEL = b"HPKE-v1"


class MessageLimitReachedError(RuntimeError):
    pass


def labeled_extract(
    suite_id: BytesLike,
    kdf: KDFId,
    salt: BytesLike,
    label: BytesLike,
    ikm: BytesLike,
) -> bytes:
    labeled_ikm = HPKE_VERSION_LABEL + bytes(suite_id) + bytes(label) + bytes(ikm)
    # HKDF-Extract treats an empty salt as Nh zero bytes
    key = bytes(salt) or bytes(kdf_hash_length(kdf))
    h = hmac.HMAC(key, kdf_hash(kdf))
    h.update(labeled_ikm)
    return h.finalize()


def labeled_expand(
    suite_id: BytesLike,
    kdf: KDFId,
    prk: BytesLike,
    label: BytesLike,
    info: BytesLike,
    length: int,
) -> bytes:
    max_length = 255 * kdf_hash_length(kdf)
    if not 0 < length <= max_length:
        raise ValueError(f"length must be in 1..{max_length}")
    labeled_info = (
        i2osp(length, 2)
        + HPKE_VERSION_LABEL
        + bytes(suite_id)
        + bytes(label)
        + bytes(info)
    )
    return HKDFExpand(algorithm=kdf_hash(kdf), length=length, info=labeled_info).derive(bytes(prk))


def key_schedule_context(
    suite: CipherSuite,
    mode: Mode,
    psk_id: BytesLike = b"",
    info: BytesLike = b"",
) -> bytes:
    """``mode || psk_id_hash || info_hash`` as fed to the HPKE key schedule."""
    suite_id = suite.suite_id()
    psk_id_hash = labeled_extract(suite_id, suite.kdf, b"", b"psk_id_hash", psk_id)
    info_hash = labeled_extract(suite_id, suite.kdf, b"", b"info_hash", info)
    return i2osp(mode, 1) + psk_id_hash + info_hash


def compute_nonce(base_nonce: BytesLike, seq: int) -> bytes:
    """XOR the sequence number, encoded to the nonce width, into ``base_nonce``."""
    base = bytes(base_nonce)
    if not base:
        raise ValueError("base_nonce must not be empty")
    if seq >= (1 << (8 * len(base))) - 1:
        raise MessageLimitReachedError("message limit reached")
    seq_bytes = i2osp(seq, len(base))
    return bytes(a ^ b for a, b in zip(base, seq_bytes))
