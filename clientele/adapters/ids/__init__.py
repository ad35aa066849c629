"""Id source adapters for the customer id pool.

Implementations:
- RandomIdSource (seedable uniform draws from a bounded range)
"""
