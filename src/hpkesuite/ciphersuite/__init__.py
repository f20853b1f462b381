from .identifiers import (
    AEAD_KEY_LENGTH,
    AEAD_NONCE_LENGTH,
    KDF_HASH_LENGTH,
    AEADId,
    CipherSuite,
    KDFId,
    KEMId,
    Mode,
    kdf_hash,
    kdf_hash_length,
    kem_suite_id,
)
from .labels import (
    MessageLimitReachedError,
    compute_nonce,
    key_schedule_context,
    labeled_expand,
    labeled_extract,
)
