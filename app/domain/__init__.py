"""
Domain layer package.

Contains pure business logic: the calculator operations and the
closed set of error kinds they can fail with.
No framework imports, no IO, no side effects.
"""
