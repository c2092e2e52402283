# Services package init
"""
StaffDesk Backend — Services Layer
====================================

What:  Business logic between the routes (HTTP) and the store (persistence).

Service Inventory:
    - CategoryService: list and create categories
    - EmployeeService: create, list, partial update, delete employees
    - SummaryService:  employee count and salary total
    - FileService:     writes uploaded photos to the static upload directory
    - PasswordHasher:  bcrypt hashing of employee passwords

Services receive the AsyncSession per call and hold no per-request state.
"""
