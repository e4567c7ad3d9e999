"""
HTTP interface.
"""
