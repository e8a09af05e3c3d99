"""
Couche application: ports et use cases.
"""
