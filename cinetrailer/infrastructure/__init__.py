"""
Couche infrastructure : persistance SQLModel des films et des genres.
"""
