import sys
import os
import unittest
from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

# 프로젝트 루트 디렉토리를 path에 추가
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import jwt
from jwt import PyJWKClientError
from app.core.exceptions import AuthenticationError, InvalidTokenError, TokenExpiredError
from app.core.security import TokenVerifier
from app.middleware.auth_middleware import extract_bearer_token, is_public_path

ISSUER = "https://dev-123456.okta.com/oauth2/default"
SECRET = "test-signing-secret-with-at-least-32-bytes"


def make_token(issuer=ISSUER, expires_in=timedelta(minutes=5), **claims):
    payload = {
        "sub": "user@example.com",
        "iss": issuer,
        "exp": datetime.now(timezone.utc) + expires_in,
    }
    payload.update(claims)
    return jwt.encode(payload, SECRET, algorithm="HS256")


class TestTokenVerifier(unittest.TestCase):
    def setUp(self):
        self.verifier = self.make_verifier()

    def make_verifier(self, audience=None):
        verifier = TokenVerifier(
            issuer=ISSUER,
            jwks_url=f"{ISSUER}/v1/keys",
            audience=audience,
            algorithms=["HS256"],
        )
        # JWKS 조회 대신 고정 키 반환
        verifier._jwk_client = MagicMock()
        verifier._jwk_client.get_signing_key_from_jwt.return_value = MagicMock(key=SECRET)
        return verifier

    def test_valid_token_returns_claims(self):
        claims = self.verifier.verify_token(make_token())

        self.assertEqual(claims["sub"], "user@example.com")
        self.assertEqual(claims["iss"], ISSUER)

    def test_expired_token(self):
        with self.assertRaises(TokenExpiredError):
            self.verifier.verify_token(make_token(expires_in=timedelta(minutes=-5)))

    def test_wrong_issuer(self):
        with self.assertRaises(InvalidTokenError):
            self.verifier.verify_token(make_token(issuer="https://other.example.com"))

    def test_wrong_signature(self):
        forged = jwt.encode(
            {"iss": ISSUER, "exp": datetime.now(timezone.utc) + timedelta(minutes=5)},
            "another-secret-that-is-also-32-bytes-long",
            algorithm="HS256",
        )

        with self.assertRaises(InvalidTokenError):
            self.verifier.verify_token(forged)

    def test_audience_checked_when_configured(self):
        verifier = self.make_verifier(audience="api://default")

        claims = verifier.verify_token(make_token(aud="api://default"))
        self.assertEqual(claims["aud"], "api://default")

        with self.assertRaises(InvalidTokenError):
            verifier.verify_token(make_token(aud="api://other"))
        with self.assertRaises(InvalidTokenError):
            verifier.verify_token(make_token())

    def test_jwks_failure_is_invalid_token(self):
        self.verifier._jwk_client.get_signing_key_from_jwt.side_effect = PyJWKClientError("unreachable")

        with self.assertRaises(InvalidTokenError):
            self.verifier.verify_token(make_token())

    def test_unconfigured_verifier_rejects(self):
        verifier = TokenVerifier(issuer=None, jwks_url=None)

        self.assertFalse(verifier.is_configured)
        with self.assertRaises(AuthenticationError):
            verifier.verify_token(make_token())

    def test_errors_share_base_class(self):
        self.assertTrue(issubclass(TokenExpiredError, AuthenticationError))
        self.assertTrue(issubclass(InvalidTokenError, AuthenticationError))


class TestAuthHelpers(unittest.TestCase):
    def test_extract_bearer_token(self):
        self.assertEqual(extract_bearer_token("Bearer abc.def"), "abc.def")
        self.assertEqual(extract_bearer_token("bearer abc"), "abc")
        self.assertIsNone(extract_bearer_token(None))
        self.assertIsNone(extract_bearer_token(""))
        self.assertIsNone(extract_bearer_token("Bearer "))
        self.assertIsNone(extract_bearer_token("Basic dXNlcjpwYXNz"))

    def test_is_public_path(self):
        self.assertTrue(is_public_path("/api/basic"))
        self.assertTrue(is_public_path("/api/basic/hello"))
        self.assertTrue(is_public_path("/health"))
        self.assertTrue(is_public_path("/docs"))
        self.assertTrue(is_public_path("/openapi.json"))
        self.assertFalse(is_public_path("/api/basicx"))
        self.assertFalse(is_public_path("/api/stocks"))
        self.assertFalse(is_public_path("/api/stocks/AAPL"))
        self.assertFalse(is_public_path("/"))


if __name__ == '__main__':
    unittest.main()
