"""
Core record model, catalogs and deserializers.
"""
