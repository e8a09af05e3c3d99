"""
Couche domaine: entites, value objects, services et exceptions.

Independante de l'infrastructure (pas de GCS, pas de pg_dump).
"""
