"""
Couche domaine (core).

Contient les objets valeur partages par les deux clients.
Cette couche n'a AUCUNE dépendance vers l'infrastructure (httpx, parsing XML).
"""
