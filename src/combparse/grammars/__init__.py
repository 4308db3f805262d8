"""Example grammars built on the combparse engine.

- json: JSON values (null, booleans, integers, strings, arrays, objects)
- xml: XML elements with attributes and nested children
"""
