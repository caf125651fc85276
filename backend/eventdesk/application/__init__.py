"""
APPLICATION LAYER - Use Cases & Orchestration

This layer contains:
- commands/  → Write operations (CQRS)
- queries/   → Read operations (CQRS)
- dto/       → Data Transfer Objects returned to callers
- common/    → Shared interfaces, validation, errors, post-commit hooks
- registry.py / dispatcher.py / behaviors.py / notification_dispatcher.py
             → The request pipeline

Rules:
- Depends on Domain layer only
- No HTTP/framework code here
- Coordinates entities, repositories, notifiers
"""
