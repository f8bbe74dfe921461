"""
Integration tests for the BFHL Classification API.

Exercise the full HTTP stack through TestClient.
"""
