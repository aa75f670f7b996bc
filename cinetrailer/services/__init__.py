"""
Services applicatifs de CineTrailer.

- catalog : creation, modification et suppression des films (affiche comprise)
- listing : projections en lecture (accueil, catalogue public, administration)
- bootstrap : insertion des genres par defaut au demarrage
"""
