# xeddsa

Curve25519/Ed25519 keys under one roof, in pure Python with no dependencies:

- sign messages with a Curve25519/Ed25519 private key (XEdDSA-style) or with a seed,
- verify Ed25519 signatures,
- convert public keys between the Curve25519 and Ed25519 forms,
- derive public keys from private keys and seeds,
- perform X25519 key agreement.

## Installation

```
pip install xeddsa
```

## Usage

All keys and signatures are `bytes`: private keys, seeds and public keys are
32 bytes long, signatures 64 bytes. The nonce for `priv_sign` is 64 bytes of
secure random data.

```python
from xeddsa.conversion import (
    priv_force_sign,
    priv_to_curve25519_pub,
    priv_to_ed25519_pub,
    curve25519_pub_to_ed25519_pub,
    seed_to_priv,
    x25519,
)
from xeddsa.ed25519 import priv_sign, seed_sign, verify, BadSignatureError
from xeddsa.entropy import random_bytes

seed = random_bytes(32)
priv = seed_to_priv(seed)

# Sign with the private key; force the sign bit so that the Ed25519 public
# key can be recovered from the Curve25519 public key alone.
priv = priv_force_sign(priv, False)
curve_pub = priv_to_curve25519_pub(priv)
ed_pub = curve25519_pub_to_ed25519_pub(curve_pub, False)
assert ed_pub == priv_to_ed25519_pub(priv)

sig = priv_sign(priv, b"hello", random_bytes(64))
verify(sig, ed_pub, b"hello")          # raises BadSignatureError on failure

# Sign with the seed directly.
sig = seed_sign(seed, b"hello")

# X25519 key agreement.
other = seed_to_priv(random_bytes(32))
shared = x25519(priv, priv_to_curve25519_pub(other))
assert shared == x25519(other, curve_pub)
```

Rejected public keys and all-zero shared secrets raise
`xeddsa.conversion.InvalidKeyError`; failed verification raises
`xeddsa.ed25519.BadSignatureError`.

The module `xeddsa.ed25519` also offers plain Ed25519 through
`generate_keypair`, `sign` and `open_signed`, and `xeddsa.version.version_string()`
reports the library version.

## Running the tests

```
pip install -e ".[test]"
pytest
```