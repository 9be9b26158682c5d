"""
Application layer.

Actions (use cases) validate untrusted input, enforce ownership and quota
rules through the repositories and report every outcome as a Result.
"""
