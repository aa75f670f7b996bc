"""
CineTrailer - catalogue de bandes-annonces de films.

Application web (FastAPI) et CLI (Typer) permettant aux administrateurs
de publier des films avec affiche et bande-annonce YouTube, et aux
visiteurs de parcourir le catalogue.
"""

__version__ = "0.1.0"
