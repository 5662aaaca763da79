"""
Lumen: a tree-walking evaluator for a small dynamically-typed expression language.
"""
