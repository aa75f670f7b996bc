"""
Couche domaine (core).

Contient les entités métier, ports (interfaces abstraites), objets valeur
et exceptions du catalogue. Cette couche n'a AUCUNE dépendance vers
l'infrastructure (adapters, frameworks, BDD).

Sous-packages :
- entities/ : Entités métier (Genre, Movie)
- ports/ : Interfaces abstraites définissant les contrats pour les adaptateurs
- value_objects/ : Objets valeur immutables (pagination, résultats de recherche, fichiers)
- exceptions : Hiérarchie d'erreurs du catalogue
"""
