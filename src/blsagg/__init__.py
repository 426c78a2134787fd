"""BLS aggregate signatures over a generic pairing group."""

from .core import (
    aggregate,
    hash_message,
    keygen,
    keygen_from_seed,
    messages_distinct,
    prove_possession,
    public_key,
    sign,
    verify,
    verify_distinct_messages,
    verify_messages,
    verify_possession,
    verify_single,
)
from .errors import (
    BLSError,
    BindingError,
    DecodeError,
    EmptyInputError,
    HashToGroupError,
    InvalidPointError,
    MalformedEncodingError,
)
from .interfaces import (
    Codec,
    GroupOps,
    PairingCurve,
    RandomSource,
    ScalarField,
    TargetOps,
)
from .keys import PrivateKey, PublicKey, Signature
from .params import Params

__all__ = [
    "BLSError",
    "BindingError",
    "Codec",
    "DecodeError",
    "EmptyInputError",
    "GroupOps",
    "HashToGroupError",
    "InvalidPointError",
    "MalformedEncodingError",
    "PairingCurve",
    "Params",
    "PrivateKey",
    "PublicKey",
    "RandomSource",
    "ScalarField",
    "Signature",
    "TargetOps",
    "aggregate",
    "hash_message",
    "keygen",
    "keygen_from_seed",
    "messages_distinct",
    "prove_possession",
    "public_key",
    "sign",
    "verify",
    "verify_distinct_messages",
    "verify_messages",
    "verify_possession",
    "verify_single",
]
