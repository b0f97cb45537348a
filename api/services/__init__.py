"""Service layer for business logic.

Services encapsulate all business logic, keeping routes thin and focused
on HTTP handling.

Layer hierarchy:
    Routes (HTTP) -> Services (Business Logic) -> Repositories (Database)

Services should:
- Apply domain validation before any write reaches the repository
- Return domain dataclasses (not ORM models or Pydantic schemas)

Services should NOT:
- Directly execute SQL queries (use repositories)
- Know about HTTP request/response details
"""
