"""XEdDSA signatures and Curve25519/Ed25519 key utilities."""

__version__ = "2.0.0"