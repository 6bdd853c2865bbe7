"""레포지토리 패키지 — 엔티티별 데이터 접근 계층.

Repository package — per-entity data access layer built on BaseRepository.
"""
