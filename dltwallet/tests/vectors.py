"""Published BIP-39 vectors (all-zero entropy) used across the wallet tests."""

ART_PHRASE = " ".join(["abandon"] * 23 + ["art"])
ART_TREZOR_SEED = (
    "bda85446c68413707090a52022edd26a1c9462295029f2e60cd7c4f2bbd30971"
    "70af7a4d73245cafa9c3cca8d561a7c3de6f5d4a10be8ed2a5e608d68f92fcc8"
)

ABOUT_PHRASE = " ".join(["abandon"] * 11 + ["about"])
ABOUT_SEED = (
    "5eb00bbddcf069084889a8ab9155568165f5c453ccb85e70811aaed6f6da5fc1"
    "9a5ac40b389cd370d086206dec8aa6c43daea6690f20ad3d8d48b2d2ce9e38e4"
)

# Recorded wallet output for ART_PHRASE (empty passphrase). The raw address is
# sha256(pk)[:20], so matching it pins the public key bytes.
ART_ADDRESS = "65027f76c4074c3ee92fe2ab8ae3057f4ee1e6bc"
