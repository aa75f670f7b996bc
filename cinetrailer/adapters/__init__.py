"""
Adaptateurs implementant les ports du domaine.

- file_storage : stockage local des affiches (IStorageService)
"""
