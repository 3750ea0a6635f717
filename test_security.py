import pytest

from securechat.core.security import (
    create_access_token,
    hash_password,
    user_id_from_token,
    verify_password,
)
from securechat.security.password_strength import validate_password_strength
from securechat.security.rate_limit import RateLimiter
from securechat.security.sanitizer import InputSanitizer


def test_password_hash_roundtrip():
    h = hash_password("SecurePass123!")
    assert h != "SecurePass123!"
    assert verify_password("SecurePass123!", h)
    assert not verify_password("SecurePass124!", h)


def test_verify_password_with_corrupt_hash():
    assert verify_password("whatever", "not-an-argon2-hash") is False


def test_token_subject():
    assert user_id_from_token(create_access_token(subject="42")) == 42
    assert user_id_from_token("garbage") is None


@pytest.mark.parametrize("password, ok", [
    ("SecurePass123!", True),
    ("Short1!", False),
    ("alllowercase123!", False),
    ("ALLUPPERCASE123!", False),
    ("NoDigitsHere!!", False),
    ("NoSpecials1234", False),
])
def test_password_strength(password, ok):
    assert validate_password_strength(password)[0] is ok


def test_filename_sanitizer():
    assert InputSanitizer.sanitize_filename("my report (1).pdf") == "my report (1).pdf"
    assert InputSanitizer.sanitize_filename("C:\\Users\\x\\photo.png") == "photo.png"
    assert InputSanitizer.sanitize_filename("we!rd$name.txt") == "werdname.txt"
    with pytest.raises(ValueError):
        InputSanitizer.sanitize_filename("../secret")
    with pytest.raises(ValueError):
        InputSanitizer.sanitize_filename("")
    with pytest.raises(ValueError):
        InputSanitizer.sanitize_filename("$$$")


def test_content_is_kept_verbatim():
    text = "  line one  \n\tline two  "
    assert InputSanitizer.sanitize_content(text) == text


def test_content_limits():
    with pytest.raises(ValueError):
        InputSanitizer.sanitize_content("x" * 5001)
    with pytest.raises(ValueError):
        InputSanitizer.sanitize_content("bell\x07")


def test_username_rules():
    assert InputSanitizer.sanitize_username("alice_01") == "alice_01"
    with pytest.raises(ValueError):
        InputSanitizer.sanitize_username("al")
    with pytest.raises(ValueError):
        InputSanitizer.sanitize_username("alice smith")


def test_rate_limiter_backoff_and_reset():
    limiter = RateLimiter(max_attempts=3, base_delay=60.0)
    for _ in range(3):
        assert limiter.is_allowed("k")
        limiter.record_attempt("k")

    assert not limiter.is_allowed("k")
    assert limiter.get_retry_after("k") > 0

    limiter.record_attempt("k", success=True)
    assert limiter.is_allowed("k")
    assert limiter.get_retry_after("k") == 0.0


class FakeClock:
    def __init__(self, start: float = 1_000_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock(monkeypatch):
    fake = FakeClock()
    monkeypatch.setattr("securechat.security.rate_limit.time.time", fake)
    return fake


def test_rate_limiter_delay_doubles_on_each_lockout(clock):
    limiter = RateLimiter(max_attempts=2, base_delay=10.0, max_delay=300.0)

    delays = []
    for _ in range(3):
        while limiter.is_allowed("k") and limiter.get_retry_after("k") == 0.0:
            limiter.record_attempt("k")
        delays.append(limiter.get_retry_after("k"))
        clock.now += delays[-1]
        assert limiter.is_allowed("k")

    assert delays == [10.0, 20.0, 40.0]


def test_rate_limiter_expired_lockout_allows_single_retry(clock):
    limiter = RateLimiter(max_attempts=3, base_delay=5.0)
    for _ in range(3):
        limiter.record_attempt("k")

    clock.now += 5.0
    assert limiter.is_allowed("k")
    limiter.record_attempt("k")
    assert not limiter.is_allowed("k")


def test_rate_limiter_forgets_stale_and_successful_keys(clock):
    limiter = RateLimiter(max_attempts=5, max_delay=10.0)
    limiter.record_attempt("a@test.com")
    limiter.record_attempt("b@test.com")
    limiter.record_attempt("c@test.com", success=True)
    assert limiter.tracked_keys() == 2

    # probing unknown keys does not create entries
    assert limiter.is_allowed("nobody@test.com")
    assert limiter.tracked_keys() == 2

    clock.now += 21.0
    assert limiter.is_allowed("a@test.com")
    assert limiter.tracked_keys() == 1

    limiter.record_attempt("d@test.com")
    assert limiter.tracked_keys() == 1
