import re

import pytest

from oauthsign.cli import main, EX_OK, EX_USAGE, EX_SOFTWARE
from oauthsign.errors import RandomSourceError
from oauthsign.verify import validate_oauth1_signature

from .fixtures import CONSUMER_KEY, CONSUMER_SECRET, TOKEN, TOKEN_SECRET, URL, BODY_PARAMS

CREDENTIALS = [CONSUMER_KEY, CONSUMER_SECRET, TOKEN, TOKEN_SECRET]


def test_prints_authorization_header(capsys):
    assert main(CREDENTIALS + ["POST", URL] + BODY_PARAMS) == EX_OK
    captured = capsys.readouterr()
    header = captured.out.strip()
    assert re.fullmatch(
        r'OAuth oauth_consumer_key="xvz1evFS4wEEPTGEFPHBog", oauth_nonce="[A-Za-z0-9]+", '
        r'oauth_signature="[A-Za-z0-9%]+", oauth_signature_method="HMAC-SHA1", '
        r'oauth_timestamp="\d+", oauth_token="370773112-GmHxMAgYyLbNEtIKZeRNFsMKPR9EyMZeS9weJAEb", '
        r'oauth_version="1.0"', header)
    assert captured.err == ""
    body = "include_entities=true&status=Hello%20Ladies%20%2B%20Gentlemen%2C%20a%20signed%20OAuth%20request%21"
    assert validate_oauth1_signature("POST", URL, header, body, CONSUMER_SECRET, TOKEN_SECRET) == CONSUMER_KEY


def test_method_is_case_insensitive(capsys):
    assert main(CREDENTIALS + ["get", URL]) == EX_OK
    header = capsys.readouterr().out.strip()
    assert validate_oauth1_signature("GET", URL, header, "", CONSUMER_SECRET, TOKEN_SECRET) == CONSUMER_KEY


def test_query_mode(capsys):
    assert main(["-q"] + CREDENTIALS + ["GET", URL + "?count=1"]) == EX_OK
    out = capsys.readouterr().out.strip()
    assert out.startswith("&oauth_consumer_key=xvz1evFS4wEEPTGEFPHBog&oauth_nonce=")


def test_query_mode_without_query_string(capsys):
    assert main(["-q"] + CREDENTIALS + ["GET", URL]) == EX_OK
    assert capsys.readouterr().out.startswith("?oauth_consumer_key=")


def test_query_mode_with_body_params_is_usage_error(capsys):
    assert main(["-q"] + CREDENTIALS + ["POST", URL, "a=1"]) == EX_USAGE
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "-q doesn't work with extra POST parameters" in captured.err


def test_show_signature_base_goes_to_stderr(capsys):
    assert main(["-b"] + CREDENTIALS + ["POST", URL] + BODY_PARAMS) == EX_OK
    captured = capsys.readouterr()
    assert captured.out.startswith("OAuth ")
    assert captured.err.startswith("POST&https%3A%2F%2Fapi.twitter.com%2F1%2Fstatuses%2Fupdate.json&")
    assert "status%3DHello%2520Ladies" in captured.err


def test_curl_command(capsys):
    assert main(["-cc"] + CREDENTIALS + ["POST", URL] + BODY_PARAMS) == EX_OK
    header, command = capsys.readouterr().out.strip().split("\n")
    assert command.startswith("curl --request POST --data ")
    assert header in command


def test_argument_outside_utf8_is_signed_as_byte(capsys):
    # Bytes which are not UTF-8 reach argv as surrogate escapes
    assert main(["-b"] + CREDENTIALS + ["POST", URL, "a=\udce9"]) == EX_OK
    captured = capsys.readouterr()
    assert "a%3D%25E9" in captured.err
    header = captured.out.strip()
    assert validate_oauth1_signature("POST", URL, header, "a=%E9", CONSUMER_SECRET, TOKEN_SECRET) == CONSUMER_KEY


@pytest.mark.parametrize("argv", [
    [],
    CREDENTIALS + ["GET"],
    ["-x"] + CREDENTIALS + ["GET", URL],
    CREDENTIALS + ["PATCH", URL],
    ["-q", "-cc"] + CREDENTIALS + ["GET", URL],
])
def test_usage_errors(argv, capsys):
    assert main(argv) == EX_USAGE
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("oauth_sign: ")


def test_signing_failure_exit_code(monkeypatch, capsys):
    def fail(random_source):
        raise RandomSourceError("no randomness")

    monkeypatch.setattr("oauthsign.signer.make_nonce", fail)
    assert main(CREDENTIALS + ["GET", URL]) == EX_SOFTWARE
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "signing failed" in captured.err
