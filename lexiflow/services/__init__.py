"""서비스 패키지 — 비즈니스 로직 계층.

Service package — business logic layer. Each module exposes a singleton
service instance used by the API routers.
"""
