"""레포지토리 패키지 — 데이터베이스 쿼리 계층.

Repository package — Database query layer.
Generic repositories extend BaseRepository for CRUD and paging; the
``*_session_repository`` modules write the same operations by hand against
the session for comparison.
"""
