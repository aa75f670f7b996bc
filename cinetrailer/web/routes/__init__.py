"""
Routes de l'application web.

- home : accueil, catalogue public, fiche film
- admin : listing et formulaires d'administration
- assets : service des affiches stockées
"""
