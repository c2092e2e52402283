# Routes package init
"""
StaffDesk Backend — API Routes Package
========================================

Route Inventory:
    - categories.py:  GET  /category
                      POST /add-category
    - employees.py:   POST   /add_employee
                      GET    /auth/employee
                      PUT    /employee/{id}
                      DELETE /employee/{id}
    - summary.py:     GET  /auth/employee-count
                      GET  /auth/total-salary
    - auth.py:        GET  /auth/logout
    - health.py:      GET  /health

Routes stay thin: extract form/body values, call a service, wrap the result.
"""
