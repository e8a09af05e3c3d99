"""
Couche presentation: ligne de commande.
"""
