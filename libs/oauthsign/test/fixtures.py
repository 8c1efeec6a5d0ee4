"""Example request from Twitter's guide to signing requests."""

from oauthsign import Signer

CONSUMER_KEY = "xvz1evFS4wEEPTGEFPHBog"
CONSUMER_SECRET = "kAcSOqF21Fu85e7zjz7ZN2U4ZRhfV3WpwPAoE3Z7kBw"
TOKEN = "370773112-GmHxMAgYyLbNEtIKZeRNFsMKPR9EyMZeS9weJAEb"
TOKEN_SECRET = "LswwdoUaIvS8ltyTt5jkRh4J50vUPVVHtR2YPi5kE"
METHOD = "POST"
URL = "https://api.twitter.com/1/statuses/update.json"
BODY_PARAMS = ["include_entities=true", "status=Hello Ladies + Gentlemen, a signed OAuth request!"]
NONCE = "kYjzVBB8Y0ZFabxSWbWovY3uYSQ2pTgmZeNu2VS4cg"
TIMESTAMP = "1318622958"

EXPECTED_BASE = (
    "POST&https%3A%2F%2Fapi.twitter.com%2F1%2Fstatuses%2Fupdate.json&"
    "include_entities%3Dtrue%26oauth_consumer_key%3Dxvz1evFS4wEEPTGEFPHBog%26"
    "oauth_nonce%3DkYjzVBB8Y0ZFabxSWbWovY3uYSQ2pTgmZeNu2VS4cg%26"
    "oauth_signature_method%3DHMAC-SHA1%26oauth_timestamp%3D1318622958%26"
    "oauth_token%3D370773112-GmHxMAgYyLbNEtIKZeRNFsMKPR9EyMZeS9weJAEb%26"
    "oauth_version%3D1.0%26status%3DHello%2520Ladies%2520%252B%2520Gentlemen"
    "%252C%2520a%2520signed%2520OAuth%2520request%2521")

EXPECTED_SIGNATURE = "tnnArxj06cWHq44gCs1OSKk/jLY="

EXPECTED_HEADER = (
    'OAuth oauth_consumer_key="xvz1evFS4wEEPTGEFPHBog", '
    'oauth_nonce="kYjzVBB8Y0ZFabxSWbWovY3uYSQ2pTgmZeNu2VS4cg", '
    'oauth_signature="tnnArxj06cWHq44gCs1OSKk%2FjLY%3D", '
    'oauth_signature_method="HMAC-SHA1", '
    'oauth_timestamp="1318622958", '
    'oauth_token="370773112-GmHxMAgYyLbNEtIKZeRNFsMKPR9EyMZeS9weJAEb", '
    'oauth_version="1.0"')


def fill_signer(signer: Signer) -> Signer:
    signer.set_consumer_key(CONSUMER_KEY)
    signer.set_consumer_secret(CONSUMER_SECRET)
    signer.set_token(TOKEN)
    signer.set_token_secret(TOKEN_SECRET)
    signer.set_http_method(METHOD)
    signer.set_base_url(URL)
    signer.set_request_params(BODY_PARAMS)
    return signer
