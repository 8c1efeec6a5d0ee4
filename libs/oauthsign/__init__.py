from .errors import \
    OAuthSignError, \
    UsageError, \
    SigningError, \
    MissingFieldError, \
    ModeConflictError, \
    RandomSourceError, \
    CryptoPrimitiveError
from .encoding import percent_encode, url_decode
from .params import Parameter, canonicalize
from .signer import \
    Signer, \
    create_signer, \
    get_authorization_header, \
    get_query_suffix, \
    get_signature_base, \
    get_curl_command, \
    get_cURL_command, \
    destroy
from .verify import validate_oauth1_signature, validate_oauth1_query_signature, parse_authorization_header
from .config import Settings, Credentials, SettingsError
from .auth import OAuth1Auth
