"""
The APP layer owns the scene for a running session and exposes it to the
presentation layer through Qt signals.
"""
