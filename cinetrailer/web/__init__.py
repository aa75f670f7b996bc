"""
Interface web de CineTrailer (FastAPI + Jinja2).
"""
