# tests/test_security.py
from edustack.security import hash_password, verify_password


def test_hash_is_salted_and_verifies():
    a, b = hash_password("s3cret"), hash_password("s3cret")
    assert a != b
    assert verify_password("s3cret", a)
    assert not verify_password("S3cret", a)


def test_missing_or_plaintext_hash_never_verifies():
    assert not verify_password("s3cret", None)
    assert not verify_password("s3cret", "s3cret")
