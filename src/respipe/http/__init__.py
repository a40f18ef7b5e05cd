"""src/respipe/http/__init__.py"""
