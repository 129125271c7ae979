"""
Promotions Application Layer

Ports and use cases for discount rule evaluation and administration.
"""
