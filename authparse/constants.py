ANONYMOUS = "anonymous"

SCHEME_BASIC = "Basic"
SCHEME_SIGNATURE = "Signature"

SIGNATURE_ALGORITHMS = (
    "rsa-sha1",
    "rsa-sha256",
    "rsa-sha512",
    "dsa-sha1",
    "hmac-sha1",
    "hmac-sha256",
    "hmac-sha512",
)

DEFAULT_CLOCK_SKEW = 300
