class OAuthSignError(RuntimeError):
    """Base class of everything raised by oauthsign."""
    def __init__(self, what: str):
        super(OAuthSignError, self).__init__(what)


class UsageError(OAuthSignError):
    """Invalid invocation of the oauth_sign command."""
    pass


class SigningError(OAuthSignError):
    """The signing pipeline could not produce a result."""
    pass


class MissingFieldError(SigningError):
    def __init__(self, field_name: str):
        super(MissingFieldError, self).__init__(f"Required field `{field_name}` is not set!")
        self.field_name = field_name


class ModeConflictError(SigningError):
    def __init__(self, n_params: int):
        super(ModeConflictError, self).__init__(
            f"Query mode does not work with extra POST parameters ({n_params} given)!")
        self.n_params = n_params


class RandomSourceError(SigningError):
    """The random source could not supply bytes for the nonce."""
    pass


class CryptoPrimitiveError(SigningError):
    """HMAC or Base64 step failed."""
    pass
