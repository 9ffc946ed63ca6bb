"""
Entry points — command line and dashboard.
"""
