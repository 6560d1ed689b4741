"""
Transforms Package - Key Renaming.

Components:
    - KeyTransformer: Prefix/suffix removal and addition, case conversion
    - RenamedKey: Final key with the steps that produced it
"""

from secrets_to_env.transforms.key_transformer import KeyTransformer, RenamedKey

__all__ = ["KeyTransformer", "RenamedKey"]
