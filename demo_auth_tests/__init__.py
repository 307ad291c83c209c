"""
Tests for the demo_auth service: credential validators, the user store
gateway, the auth decision service and the HTTP routes.
"""
