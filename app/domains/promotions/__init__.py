"""
Promotions Domain

Discount rule administration and automatic cart discount evaluation.
"""
