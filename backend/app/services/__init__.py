"""Services Layer — use-case orchestration for accounts, products and categories.

Invariants:
    - Services depend on repository Protocols, never on AsyncSession directly
    - Services never commit; the request session owns the unit of work

Design Decisions:
    - One service per aggregate (auth, product, category) plus a shared
      entity mapper
"""
