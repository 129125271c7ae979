"""
Promotions Infrastructure Layer
"""
