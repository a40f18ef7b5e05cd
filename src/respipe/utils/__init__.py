"""src/respipe/utils/__init__.py"""
