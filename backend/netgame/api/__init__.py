"""
HTTP surface for driving engine sessions.
"""
