"""
Command-line interface for Engagement Billing.
"""
