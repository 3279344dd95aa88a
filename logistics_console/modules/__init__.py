"""
Feature modules for the logistics console.

Each module is self-contained with its own:
- interfaces.py: Protocol definitions for the module's public API
- models.py: Pydantic models mapping backend DTOs onto client entities
- service.py: Calls to the backend and normalization of its responses
- exceptions.py: Module-specific exceptions

Modules communicate through interfaces, not concrete implementations.
The screens module orchestrates the entity services for the console.
"""
