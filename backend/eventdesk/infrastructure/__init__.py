"""
INFRASTRUCTURE LAYER - Implementations of domain ports.

- persistence/   → EventRepository / ReviewRepository (in-memory, Prisma)
- notifications/ → NotificationPort per channel (email, sms, slack)
"""
