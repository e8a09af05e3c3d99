"""
Couche infrastructure: adapters concrets des ports.
"""
