"""
Core modules for Engagement Billing.

This package contains the billing domain: engagements, discount
calculators, billing rules, the billing service and report aggregation.
"""
