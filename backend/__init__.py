"""
HTTP service exposing the FAQ matcher to the internship portal.
"""
