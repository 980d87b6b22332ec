"""Session Insights package.

This package is organized by feature modules (students, sessions) with a thin
Flask controller layer over pure service/classification layers.
"""
