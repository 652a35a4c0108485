"""
Engagement Billing.

Tiered billing of client engagements with invoice and summary output.
"""

__version__ = "1.0.0"
