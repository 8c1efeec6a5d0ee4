"""
Mock resource server which accepts OAuth 1.0 HMAC-SHA1 signed requests.
"""
