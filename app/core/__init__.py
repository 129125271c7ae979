"""
Core architecture components: domain building blocks, tenancy, dependency
injection, logging and application assembly.
"""
