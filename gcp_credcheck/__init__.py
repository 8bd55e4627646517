# gcp_credcheck/__init__.py
"""Smoke-test Google Cloud credentials against the Billing and Resource Manager APIs."""

__version__ = "0.1.0"
