import pytest
from ordertally.domain.errors import EmailVerificationError, InvalidEmailError, InvalidQuantityError
from ordertally.domain.result import Err, Ok
from ordertally.domain.values import EmailVerifier, Quantity, UnverifiedEmail, VerifiedEmail


class TestQuantity:
    @pytest.mark.parametrize("value", [1, 42, 1000])
    def test_create_within_bounds(self, value):
        result = Quantity.create(value)
        assert isinstance(result, Ok)
        assert result.value.value == value
        assert int(result.value) == value

    @pytest.mark.parametrize("value", [0, -1, 1001, True, "5", 2.0])
    def test_create_out_of_bounds_or_wrong_type(self, value):
        result = Quantity.create(value)
        assert isinstance(result, Err)
        assert isinstance(result.error, InvalidQuantityError)

    def test_direct_construction_is_refused(self):
        with pytest.raises(TypeError):
            Quantity(5)

    def test_equality_ignores_token(self):
        assert Quantity.create(3).unwrap() == Quantity.create(3).unwrap()


def _codes(valid: dict[str, str]) -> EmailVerifier:
    return EmailVerifier(lambda address, code: valid.get(address) == code)


class TestEmail:
    def test_create_unverified(self):
        email = UnverifiedEmail.create("  ada@example.com ").unwrap()
        assert email.address == "ada@example.com"

    @pytest.mark.parametrize("text", ["", "ada", "ada@", "@example.com", "ada @example.com", None])
    def test_create_rejects_malformed(self, text):
        result = UnverifiedEmail.create(text)
        assert isinstance(result, Err)
        assert isinstance(result.error, InvalidEmailError)

    def test_verifier_produces_verified_email(self):
        email = UnverifiedEmail.create("ada@example.com").unwrap()

        result = _codes({"ada@example.com": "1234"}).verify(email, "1234")

        assert isinstance(result, Ok)
        assert isinstance(result.value, VerifiedEmail)
        assert result.value.address == "ada@example.com"

    def test_verifier_rejects_wrong_code(self):
        email = UnverifiedEmail.create("ada@example.com").unwrap()

        result = _codes({"ada@example.com": "1234"}).verify(email, "0000")

        assert result == Err(EmailVerificationError(address="ada@example.com"))

    def test_verified_email_cannot_be_forged(self):
        with pytest.raises(TypeError):
            VerifiedEmail("ada@example.com")
        with pytest.raises(TypeError):
            VerifiedEmail("ada@example.com", object())

    def test_unverified_email_requires_factory(self):
        with pytest.raises(TypeError):
            UnverifiedEmail("ada@example.com")
