"""
DOMAIN LAYER - Events, reviews and the contracts around them

This layer contains:
- Entities: Business objects with identity (Event, Review)
- Value Objects: Immutable types (EventId, ReviewId, UserEmail, PhoneNumber)
- Ports: Interfaces that infrastructure implements (repositories, notifiers)
- Exceptions: Domain-specific errors

RULES:
1. NO framework imports (no FastAPI, Prisma, Pydantic, etc.)
2. NO I/O operations (no database, no HTTP, no file system)
3. Only depends on Python stdlib
4. This is where business rules live
"""
