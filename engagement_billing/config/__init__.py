"""
Configuration loading for Engagement Billing.
"""
